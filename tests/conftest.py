import io

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.setTitle("Site Plan Notes")
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a DOCX with two paragraphs and a title property."""
    document = docx.Document()
    document.core_properties.title = "Specification"
    document.core_properties.author = "Site Office"
    document.add_paragraph("First paragraph")
    document.add_paragraph("Second paragraph")
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def sample_dxf_bytes() -> bytes:
    return (
        b"  0\nSECTION\n  2\nHEADER\n  9\n$ACADVER\n  1\nAC1027\n"
        b"  0\nENDSEC\n  0\nEOF\n"
    )


@pytest.fixture()
def sample_ifc_bytes() -> bytes:
    return (
        b"ISO-10303-21;\nHEADER;\n"
        b"FILE_DESCRIPTION(('ViewDefinition [CoordinationView]'),'2;1');\n"
        b"FILE_NAME('model.ifc','2024-01-01T00:00:00',(''),(''),'','','');\n"
        b"FILE_SCHEMA(('IFC4'));\nENDSEC;\nDATA;\nENDSEC;\nEND-ISO-10303-21;\n"
    )


@pytest.fixture()
def sample_dwg_bytes() -> bytes:
    return b"AC1032" + b"\x00" * 122
