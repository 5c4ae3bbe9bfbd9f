"""Unit tests for individual components in isolation.

Coverage:
    - recognition/: Pattern rules, normalization, dedupe and ordering
    - parsing/: PDF and Word text extraction and rejection
    - rendering/: PDF layout and pagination
    - pipeline, config, models, ui session helpers

Uses in-memory documents built by conftest factories. Leverages pytest-check
for multiple assertions per test.
"""
