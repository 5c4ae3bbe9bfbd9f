"""Document parsing utilities for contact extraction.

Transforms uploaded documents into flat text for number recognition.

Responsibilities:
    - PDF text extraction with pypdf, page by page in order
    - Word (.docx) raw text extraction with mammoth, including tables
      and content controls
    - Rejection of empty, oversized, corrupt and encrypted inputs

Output is a single string with no layout guarantees; multi-column pages
and tables may come out in decoder order rather than reading order.
"""

from contact_extractor.parsing.document_parser import DocumentText, extract_text
from contact_extractor.parsing.errors import (
    DecodeError,
    DocumentValidationError,
    ExtractionError,
)

__all__ = [
    "DecodeError",
    "DocumentText",
    "DocumentValidationError",
    "ExtractionError",
    "extract_text",
]
