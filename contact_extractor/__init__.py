"""Contact Extractor - phone number extraction from PDF and Word documents.

Combines FastAPI for HTTP uploads, pypdf and mammoth for text extraction,
reportlab for PDF generation, NiceGUI for the browser interface, and Pydantic
for data validation.

Components:
    - api: HTTP endpoints for extraction and rendering
    - parsing: PDF and Word text extraction
    - recognition: Phone number pattern matching and normalization
    - rendering: PDF generation for extracted numbers
    - ui: Web interface for uploads and downloads
    - models: Request/response schemas
"""

__version__ = "0.1.0"
