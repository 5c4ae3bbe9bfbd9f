"""Integration tests for components working together as a system.

No mocks for core functionality - tests real interactions.

Coverage:
    - API endpoints with real HTTP requests over ASGI transport
    - Extraction from generated PDF and Word documents
    - PDF rendering of extracted numbers
"""
