"""Document upload endpoints for contact extraction and PDF rendering.

Handles file upload, validation, extraction, and PDF generation.
"""

import logging

from fastapi import APIRouter, HTTPException, Response, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from contact_extractor.config import get_config
from contact_extractor.models.schemas import (
    Document,
    DocumentFormat,
    ExtractionResponse,
    RenderRequest,
)
from contact_extractor.parsing.errors import DecodeError, DocumentValidationError
from contact_extractor.pipeline import (
    NOT_FOUND_MESSAGE,
    ExtractionContext,
    resolve_format,
    run_extraction_async,
)
from contact_extractor.rendering.pdf_renderer import (
    RenderError,
    output_filename,
    render_numbers_pdf,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["extraction"])

PDF_MEDIA_TYPE = DocumentFormat.PDF.mime_type


def _validate_upload(file: UploadFile) -> tuple[str, DocumentFormat]:
    """Check the filename and declared format of an upload.

    Args:
        file: The uploaded file.

    Returns:
        The filename and resolved document format.

    Raises:
        HTTPException: 400 if the filename is missing or the format unsupported.
    """
    if not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    try:
        fmt = resolve_format(file.content_type, file.filename)
    except DocumentValidationError as e:
        logger.warning(f"Rejected {file.filename} ({file.content_type}): {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return file.filename, fmt


async def _read_and_validate_size(file: UploadFile) -> bytes:
    """Read file content and validate size.

    Args:
        file: The uploaded file.

    Returns:
        File content as bytes.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    config = get_config()
    content = await file.read()

    if len(content) > config.max_file_size:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=(
                f"File size ({size_mb:.1f}MB) exceeds maximum allowed "
                f"({config.max_file_size_mb}MB)"
            ),
        )

    return content


async def _extract_upload(file: UploadFile) -> ExtractionContext:
    filename, fmt = _validate_upload(file)
    content = await _read_and_validate_size(file)

    try:
        return await run_extraction_async(
            Document(content=content, format=fmt, filename=filename)
        )
    except DocumentValidationError as e:
        logger.warning(f"Validation error for {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except DecodeError as e:
        logger.warning(f"Decode error for {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail=str(e),
        ) from e


async def _render_response(numbers: list[str]) -> Response:
    try:
        pdf_bytes = await run_in_threadpool(render_numbers_pdf, numbers)
    except RenderError as e:
        logger.error(f"Failed to render contacts PDF: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        ) from e

    return Response(
        content=pdf_bytes,
        media_type=PDF_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{output_filename()}"'},
    )


@router.post("/extract", response_model=ExtractionResponse)
async def extract_contacts(file: UploadFile) -> ExtractionResponse:
    """Extract contact numbers from a PDF or Word document.

    Args:
        file: The uploaded document (multipart/form-data).

    Returns:
        ExtractionResponse with the sorted numbers. Finding nothing is
        reported with status ``not_found``, not as an error.

    Raises:
        400: Missing filename, unsupported format, or empty file.
        413: File exceeds the size limit.
        422: Document could not be decoded.
    """
    context = await _extract_upload(file)
    return context.to_response()


@router.post(
    "/extract/pdf",
    response_class=Response,
    responses={200: {"content": {PDF_MEDIA_TYPE: {}}}},
)
async def extract_contacts_pdf(file: UploadFile) -> Response:
    """Extract contact numbers and return them as a generated PDF.

    Raises:
        400, 413, 422: As for ``POST /extract``.
        404: The document contains no contact numbers.
        500: PDF generation failed.
    """
    context = await _extract_upload(file)

    if not context.numbers:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NOT_FOUND_MESSAGE,
        )

    return await _render_response(context.numbers)


@router.post(
    "/render",
    response_class=Response,
    responses={200: {"content": {PDF_MEDIA_TYPE: {}}}},
)
async def render_contacts(request: RenderRequest) -> Response:
    """Render an already extracted list of numbers into a PDF.

    Raises:
        422: Empty list or non-canonical numbers.
        500: PDF generation failed.
    """
    return await _render_response(request.numbers)
