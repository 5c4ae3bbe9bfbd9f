import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

CANONICAL_NUMBER_PATTERN = re.compile(r"^[6-9]\d{9}$", re.ASCII)


class DocumentFormat(str, Enum):
    """Supported upload formats."""

    PDF = "pdf"
    LEGACY_WORD = "legacy_word"
    MODERN_WORD = "modern_word"

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self]

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @classmethod
    def from_mime_type(cls, mime_type: str | None) -> "DocumentFormat | None":
        """Look up a format by MIME type, ignoring parameters like charset."""
        if not mime_type:
            return None
        base = mime_type.split(";", 1)[0].strip().lower()
        for fmt, value in _MIME_TYPES.items():
            if value == base:
                return fmt
        return None

    @classmethod
    def from_filename(cls, filename: str | None) -> "DocumentFormat | None":
        """Look up a format by file extension."""
        if not filename:
            return None
        lowered = filename.lower()
        for fmt in (cls.MODERN_WORD, cls.LEGACY_WORD, cls.PDF):
            if lowered.endswith(_EXTENSIONS[fmt]):
                return fmt
        return None


_MIME_TYPES = {
    DocumentFormat.PDF: "application/pdf",
    DocumentFormat.LEGACY_WORD: "application/msword",
    DocumentFormat.MODERN_WORD: (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    ),
}

_EXTENSIONS = {
    DocumentFormat.PDF: ".pdf",
    DocumentFormat.LEGACY_WORD: ".doc",
    DocumentFormat.MODERN_WORD: ".docx",
}


class ExtractionStatus(str, Enum):
    """Outcome of a completed extraction."""

    FOUND = "found"
    NOT_FOUND = "not_found"


class Document(BaseModel):
    """An uploaded document awaiting extraction.

    Attributes:
        content: Raw bytes of the file.
        format: Declared document format.
        filename: Original file name, if known.
    """

    model_config = ConfigDict(frozen=True)

    content: bytes
    format: DocumentFormat
    filename: str | None = None


class ExtractionResponse(BaseModel):
    """Response after extracting contact numbers from a document.

    Attributes:
        filename: Name of the uploaded file.
        format: Format the document was decoded as.
        pages: Number of pages (PDF only).
        count: Number of unique contact numbers found.
        numbers: Canonical numbers in ascending order.
        status: Whether any numbers were found.
        message: Human-readable summary for display.
    """

    filename: str
    format: DocumentFormat
    pages: int | None = None
    count: int = Field(ge=0)
    numbers: list[str]
    status: ExtractionStatus
    message: str


class RenderRequest(BaseModel):
    """Request payload for rendering numbers into a PDF.

    Attributes:
        numbers: Canonical 10-digit numbers to list.
    """

    numbers: list[str] = Field(..., min_length=1)

    @field_validator("numbers")
    @classmethod
    def validate_numbers(cls, v: list[str]) -> list[str]:
        """Reject anything that is not a canonical 10-digit number."""
        invalid = [n for n in v if not CANONICAL_NUMBER_PATTERN.match(n)]
        if invalid:
            raise ValueError(f"Not canonical 10-digit numbers: {', '.join(invalid)}")
        return v
