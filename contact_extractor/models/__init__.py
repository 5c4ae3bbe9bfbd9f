"""Pydantic models for documents, API requests and responses.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - DocumentFormat: Supported upload formats with MIME types and extensions
    - Document: Uploaded bytes with their declared format
    - ExtractionResponse: Numbers found in an uploaded document
    - RenderRequest: Numbers to render into a new PDF
"""

from contact_extractor.models.schemas import (
    CANONICAL_NUMBER_PATTERN,
    Document,
    DocumentFormat,
    ExtractionResponse,
    ExtractionStatus,
    RenderRequest,
)

__all__ = [
    "CANONICAL_NUMBER_PATTERN",
    "Document",
    "DocumentFormat",
    "ExtractionResponse",
    "ExtractionStatus",
    "RenderRequest",
]
