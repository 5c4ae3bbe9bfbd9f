"""PDF output for extracted contact numbers."""

from contact_extractor.rendering.pdf_renderer import (
    RenderError,
    output_filename,
    render_numbers_pdf,
)

__all__ = ["RenderError", "output_filename", "render_numbers_pdf"]
