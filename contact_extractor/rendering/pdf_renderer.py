"""PDF generation for extracted contact numbers using reportlab.

Lists one number per line under a total-count header, starting a new page
whenever the cursor reaches the bottom margin.
"""

import io
import logging
import time
from collections.abc import Sequence

from reportlab.pdfgen import canvas

logger = logging.getLogger(__name__)

# Layout in PDF points
PAGE_SIZE = (595, 842)
MARGIN_X = 50
BOTTOM_MARGIN = 50
HEADER_OFFSET = 110
FIRST_LINE_OFFSET = 150
CONTINUATION_OFFSET = 50
LINE_HEIGHT = 25

HEADER_FONT = ("Helvetica-Bold", 14)
BODY_FONT = ("Helvetica", 12)


class RenderError(Exception):
    """Raised when the contact PDF cannot be produced."""

    pass


def output_filename() -> str:
    """Download name for a freshly rendered PDF."""
    return f"extracted-contacts-{int(time.time() * 1000)}.pdf"


def render_numbers_pdf(numbers: Sequence[str], total: int | None = None) -> bytes:
    """Render contact numbers into a paginated PDF.

    Args:
        numbers: Canonical numbers in display order.
        total: Count shown in the header. Defaults to ``len(numbers)``.

    Returns:
        The PDF file as bytes.

    Raises:
        RenderError: If there is nothing to render or reportlab fails.
    """
    if not numbers:
        raise RenderError("No contacts to generate PDF")

    if total is None:
        total = len(numbers)

    buffer = io.BytesIO()
    try:
        pdf = canvas.Canvas(buffer, pagesize=PAGE_SIZE)
        pdf.setTitle("Extracted Contact Numbers")
        _, height = PAGE_SIZE

        pdf.setFont(*HEADER_FONT)
        pdf.drawString(MARGIN_X, height - HEADER_OFFSET, f"Total Numbers Found: {total}")

        pdf.setFont(*BODY_FONT)
        y = height - FIRST_LINE_OFFSET
        pages = 1
        for number in numbers:
            if y < BOTTOM_MARGIN:
                pdf.showPage()
                pdf.setFont(*BODY_FONT)
                y = height - CONTINUATION_OFFSET
                pages += 1
            pdf.drawString(MARGIN_X, y, number)
            y -= LINE_HEIGHT

        pdf.showPage()
        pdf.save()
    except Exception as e:
        raise RenderError(f"Error generating PDF: {e}") from e

    logger.info(f"Rendered {len(numbers)} numbers onto {pages} page(s)")
    return buffer.getvalue()
