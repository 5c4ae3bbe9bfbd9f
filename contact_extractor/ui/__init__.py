"""NiceGUI interface - thin visualization layer for uploads and downloads.

Responsibilities:
    - File upload for PDF and Word documents
    - Result preview with the first few extracted numbers
    - Download of the regenerated contacts PDF

Contains no extraction logic. Delegates all operations to the API.
"""
