"""Extraction pipeline: document bytes to sorted contact numbers.

Each request gets its own ExtractionContext, filled in as the document
moves through text extraction and number recognition.
"""

import logging
from dataclasses import dataclass, field

from fastapi.concurrency import run_in_threadpool

from contact_extractor.models.schemas import (
    Document,
    DocumentFormat,
    ExtractionResponse,
    ExtractionStatus,
)
from contact_extractor.parsing.document_parser import extract_text
from contact_extractor.parsing.errors import DocumentValidationError
from contact_extractor.recognition.number_recognizer import recognize_numbers

logger = logging.getLogger(__name__)

GENERIC_MIME_TYPES = frozenset({"", "application/octet-stream", "binary/octet-stream"})
UNSUPPORTED_FORMAT_MESSAGE = "Please select a valid PDF or Word file (.pdf, .doc, .docx)"
NOT_FOUND_MESSAGE = "No contact numbers found in the file"


@dataclass
class ExtractionContext:
    """State for one document moving through the pipeline."""

    filename: str
    format: DocumentFormat
    text: str = ""
    pages: int | None = None
    numbers: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of unique numbers found."""
        return len(self.numbers)

    @property
    def status(self) -> ExtractionStatus:
        """``found`` when at least one number was recognized."""
        return ExtractionStatus.FOUND if self.numbers else ExtractionStatus.NOT_FOUND

    @property
    def message(self) -> str:
        """User-facing summary of the result."""
        if self.numbers:
            return f"Found {self.count} contact numbers!"
        return NOT_FOUND_MESSAGE

    def to_response(self) -> ExtractionResponse:
        """Build the API response body for this extraction."""
        return ExtractionResponse(
            filename=self.filename,
            format=self.format,
            pages=self.pages,
            count=self.count,
            numbers=self.numbers,
            status=self.status,
            message=self.message,
        )


def resolve_format(content_type: str | None, filename: str | None) -> DocumentFormat:
    """Determine the document format of an upload.

    The declared MIME type wins. Generic or missing MIME types fall back
    to the file extension.

    Raises:
        DocumentValidationError: If neither identifies a supported format.
    """
    fmt = DocumentFormat.from_mime_type(content_type)
    if fmt is not None:
        return fmt

    base = (content_type or "").split(";", 1)[0].strip().lower()
    if base in GENERIC_MIME_TYPES:
        fmt = DocumentFormat.from_filename(filename)
        if fmt is not None:
            return fmt

    raise DocumentValidationError(UNSUPPORTED_FORMAT_MESSAGE)


def run_extraction(document: Document, max_size: int | None = None) -> ExtractionContext:
    """Extract text from a document and recognize the numbers in it.

    Args:
        document: Uploaded bytes with their declared format.
        max_size: Size limit in bytes. Defaults to the configured limit.

    Returns:
        The populated context. An empty ``numbers`` list is a normal outcome.

    Raises:
        DocumentValidationError: If the input is empty or too large.
        DecodeError: If the document cannot be decoded.
    """
    context = ExtractionContext(
        filename=document.filename or f"document{document.format.extension}",
        format=document.format,
    )

    extracted = extract_text(document.content, document.format, max_size=max_size)
    context.text = extracted.text
    context.pages = extracted.pages

    context.numbers = recognize_numbers(context.text)

    logger.info(
        f"Extracted {context.count} numbers from {context.filename} "
        f"({len(context.text)} characters of text)"
    )
    return context


async def run_extraction_async(
    document: Document, max_size: int | None = None
) -> ExtractionContext:
    """Run the pipeline in a worker thread so the event loop stays free."""
    return await run_in_threadpool(run_extraction, document, max_size)
