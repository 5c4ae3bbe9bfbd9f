"""FastAPI endpoints for the contact extractor.

Upload routes with async request handling. Extraction runs in a worker
thread so large documents do not block the event loop.

Endpoints:
    - GET /health: Service health status
    - POST /extract: Numbers found in an uploaded document
    - POST /extract/pdf: Numbers found in an upload, rendered as a PDF
    - POST /render: Already extracted numbers rendered as a PDF
"""

from contact_extractor.api.app import app, create_app

__all__ = ["app", "create_app"]
