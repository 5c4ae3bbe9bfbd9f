"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - make_pdf: Builds PDF bytes with reportlab, one list of lines per page
    - make_docx: Builds DOCX bytes with python-docx from paragraphs, tables
      and content controls
    - contacts_pdf / contacts_docx: Ready-made documents with known numbers
    - async_client: HTTPX client for API testing

Documents are generated in memory so tests never depend on binary fixtures.
"""

import io
from collections.abc import AsyncGenerator, Callable
from xml.sax.saxutils import escape

import pytest
from docx import Document
from docx.oxml import parse_xml
from docx.oxml.ns import nsdecls, qn
from httpx import ASGITransport, AsyncClient
from reportlab.pdfgen import canvas

from contact_extractor.api import app

CONTACT_LINES = [
    "Sales team directory",
    "Contact: +91-9876543210",
    "Office 022-555-1234 (landline, leading 0)",
    "Support desk 812.345.6789",
    "Fax 5123456789",
]
CONTACT_NUMBERS = ["8123456789", "9876543210"]


def build_pdf(pages: list[list[str]]) -> bytes:
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=(595, 842))
    for lines in pages:
        pdf.setFont("Helvetica", 12)
        y = 780
        for line in lines:
            pdf.drawString(50, y, line)
            y -= 20
        pdf.showPage()
    pdf.save()
    return buffer.getvalue()


def build_docx(
    paragraphs: list[str],
    table_rows: list[list[str]] | None = None,
    content_controls: list[str] | None = None,
    inline_content_controls: list[str] | None = None,
) -> bytes:
    document = Document()
    for text in paragraphs:
        document.add_paragraph(text)
    if table_rows:
        table = document.add_table(rows=len(table_rows), cols=len(table_rows[0]))
        for row, values in zip(table.rows, table_rows):
            for cell, value in zip(row.cells, values):
                cell.text = value
    body = document.element.body
    for text in content_controls or []:
        block = parse_xml(
            f"<w:sdt {nsdecls('w')}><w:sdtPr/><w:sdtContent><w:p><w:r>"
            f'<w:t xml:space="preserve">{escape(text)}</w:t>'
            "</w:r></w:p></w:sdtContent></w:sdt>"
        )
        sect_pr = body.find(qn("w:sectPr"))
        if sect_pr is not None:
            sect_pr.addprevious(block)
        else:
            body.append(block)
    for text in inline_content_controls or []:
        paragraph = document.add_paragraph()
        paragraph._p.append(
            parse_xml(
                f"<w:sdt {nsdecls('w')}><w:sdtContent><w:r>"
                f'<w:t xml:space="preserve">{escape(text)}</w:t>'
                "</w:r></w:sdtContent></w:sdt>"
            )
        )
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def make_pdf() -> Callable[[list[list[str]]], bytes]:
    """Return a factory for multi-page PDFs."""
    return build_pdf


@pytest.fixture
def make_docx() -> Callable[..., bytes]:
    """Return a factory for DOCX documents."""
    return build_docx


@pytest.fixture
def contacts_pdf() -> bytes:
    """Two-page PDF whose numbers normalize to CONTACT_NUMBERS."""
    return build_pdf([CONTACT_LINES[:3], CONTACT_LINES[3:]])


@pytest.fixture
def contacts_docx() -> bytes:
    """DOCX with numbers split between paragraphs and a table."""
    return build_docx(
        CONTACT_LINES[:3],
        table_rows=[["Desk", "Number"], ["Support", "812.345.6789"]],
    )


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
