"""Test package for Contact Extractor.

Structure:
    - unit/: Individual function and class tests
    - integration/: End-to-end workflow tests through the HTTP API

Test documents are generated in memory with reportlab and python-docx.
Leverages pytest with pytest-check for soft assertions.
"""
