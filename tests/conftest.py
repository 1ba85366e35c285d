import io

import pytest
from docx import Document

from resume_analyzer.core import Settings


def make_pdf(text: str) -> bytes:
    """Build a one-page PDF that draws ``text`` in Helvetica."""
    stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"
    xref_pos = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (
        len(objects) + 1,
        xref_pos,
    )
    return bytes(out)


def make_docx(paragraphs, table_cells=None) -> bytes:
    """Build a DOCX with the given paragraphs and an optional one-row table."""
    document = Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    if table_cells:
        table = document.add_table(rows=1, cols=len(table_cells))
        for cell, value in zip(table.rows[0].cells, table_cells):
            cell.text = value
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the developer's .env and environment key."""
    return Settings(
        _env_file=None,
        LLM_PROVIDER="gemini",
        LL_MODEL="gemini-1.5-flash-latest",
        LLM_API_KEY="test-key",
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def sample_pdf() -> bytes:
    return make_pdf("Senior Python engineer with AWS and Docker experience")


@pytest.fixture
def sample_docx() -> bytes:
    return make_docx(
        ["Jane Doe", "Backend developer building Python services"],
        table_cells=["Skills", "Kubernetes Terraform"],
    )


@pytest.fixture
def pdf_factory():
    return make_pdf


@pytest.fixture
def docx_factory():
    return make_docx
