"""Document text extraction using pypdf and mammoth.

Flattens PDF and Word documents into a single text string in document order.
"""

import io
import logging
import zipfile
from typing import Any

import mammoth
from pydantic import BaseModel, Field
from pypdf import PageObject, PdfReader
from pypdf.errors import FileNotDecryptedError, PdfReadError

from contact_extractor.config import get_config
from contact_extractor.models.schemas import DocumentFormat
from contact_extractor.parsing.errors import DecodeError, DocumentValidationError

logger = logging.getLogger(__name__)

# Constants
PDF_MAGIC_BYTES = b"%PDF"
ZIP_MAGIC_BYTES = b"PK\x03\x04"
OLE2_MAGIC_BYTES = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"


class DocumentText(BaseModel):
    """Flat text extracted from a document.

    Attributes:
        text: Text runs from the whole document, concatenated in order.
        pages: Page count for PDFs; None for Word documents.
    """

    text: str
    pages: int | None = Field(default=None, ge=0)


def _validate_bytes(file_content: bytes, max_size: int) -> None:
    """Reject input that should never reach a decoder.

    Raises:
        DocumentValidationError: If the buffer is empty or too large.
    """
    if not file_content:
        raise DocumentValidationError("Empty file provided")

    if len(file_content) > max_size:
        size_mb = len(file_content) / (1024 * 1024)
        limit_mb = max_size / (1024 * 1024)
        raise DocumentValidationError(
            f"File size ({size_mb:.1f}MB) exceeds maximum allowed ({limit_mb:.0f}MB)"
        )


def _open_pdf(file_content: bytes) -> PdfReader:
    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise DecodeError("Invalid PDF: file does not start with PDF header")

    try:
        reader = PdfReader(io.BytesIO(file_content))
    except PdfReadError as e:
        raise DecodeError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise DecodeError(f"Failed to read PDF: {e}") from e

    if reader.is_encrypted:
        # Owner-password-only PDFs open with an empty user password
        try:
            decrypted = reader.decrypt("")
        except Exception as e:
            raise DecodeError(f"Failed to decrypt PDF: {e}") from e
        if not decrypted:
            raise DecodeError("PDF is password-protected")

    return reader


def _page_text(page: PageObject) -> str:
    """Join the text runs of one page with single spaces."""
    runs: list[str] = []

    def visitor(text: str, cm: Any, tm: Any, font_dict: Any, font_size: Any) -> None:
        run = text.strip()
        if run:
            runs.append(run)

    page.extract_text(visitor_text=visitor)
    return " ".join(runs)


def _extract_pdf(file_content: bytes) -> DocumentText:
    reader = _open_pdf(file_content)

    try:
        pages = len(reader.pages)
    except Exception as e:
        raise DecodeError(f"Failed to read PDF page tree: {e}") from e

    if pages == 0:
        raise DecodeError("PDF contains no pages")

    page_texts: list[str] = []
    for i, page in enumerate(reader.pages):
        try:
            page_texts.append(_page_text(page))
        except FileNotDecryptedError as e:
            raise DecodeError("PDF is password-protected") from e
        except Exception as e:
            raise DecodeError(f"Failed to extract text from page {i + 1}: {e}") from e

    return DocumentText(text=" ".join(page_texts), pages=pages)


def _extract_word(file_content: bytes) -> DocumentText:
    if file_content.startswith(OLE2_MAGIC_BYTES):
        raise DecodeError(
            "Legacy binary Word documents (.doc) cannot be decoded; "
            "save the file as .docx and upload it again"
        )

    if not file_content.startswith(ZIP_MAGIC_BYTES):
        raise DecodeError("Invalid Word document: file is not an OOXML container")

    try:
        result = mammoth.extract_raw_text(io.BytesIO(file_content))
    except (zipfile.BadZipFile, KeyError, ValueError) as e:
        raise DecodeError(f"Corrupt or invalid Word document: {e}") from e
    except Exception as e:
        raise DecodeError(f"Failed to read Word document: {e}") from e

    for message in result.messages:
        logger.debug(f"Word decoder {message.type}: {message.message}")

    return DocumentText(text=result.value)


def extract_text(
    file_content: bytes,
    fmt: DocumentFormat,
    max_size: int | None = None,
) -> DocumentText:
    """Extract the flat text of a PDF or Word document.

    Args:
        file_content: Raw bytes of the document.
        fmt: Declared document format.
        max_size: Size limit in bytes. Defaults to the configured limit.

    Returns:
        DocumentText with the concatenated text and, for PDFs, the page count.

    Raises:
        DocumentValidationError: If the buffer is empty or too large.
        DecodeError: If the document cannot be decoded.
    """
    if max_size is None:
        max_size = get_config().max_file_size
    _validate_bytes(file_content, max_size)

    if fmt is DocumentFormat.PDF:
        result = _extract_pdf(file_content)
    else:
        result = _extract_word(file_content)

    if not result.text.strip():
        logger.warning(
            f"{fmt.value} document contains no extractable text (may be scanned/image-based)"
        )

    return result
