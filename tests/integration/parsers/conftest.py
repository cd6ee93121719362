from pathlib import Path
from unittest.mock import MagicMock

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from pdf_chunk_extractor.parsers.models import ParsedDocument
from pdf_chunk_extractor.parsers.pdf_parser import PdfParser

PAGE_ONE = [
    "STANDAR OPERASIONAL PROSEDUR",
    "SOP/HR/01",
    "",
    "BAB 1",
    "Ketentuan Umum",
    "Pasal 1",
    "Karyawan berhak atas cuti tahunan.",
    "- cuti tahunan",
    "- cuti sakit",
]

PAGE_TWO = [
    "BAB 2",
    "Prosedur",
    "1. Ajukan permohonan cuti.",
    "2. Tunggu persetujuan atasan.",
]

SCANNED_TEXT = "Halaman hasil pindaian\n"


def _write_lines(c: canvas.Canvas, lines: list[str]) -> None:
    _, height = A4
    text = c.beginText(40, height - 50)
    for line in lines:
        text.textLine(line)
    c.drawText(text)
    c.showPage()


def _create_policy_pdf(path: Path) -> None:
    """Two text pages with a blank (image-only style) page between them."""
    c = canvas.Canvas(str(path), pagesize=A4)
    _write_lines(c, PAGE_ONE)
    c.showPage()  # Page 2 has no text layer
    _write_lines(c, PAGE_TWO)
    c.save()


@pytest.fixture(scope="module")
def pdf_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test PDFs once per module."""
    dir_path: Path = tmp_path_factory.mktemp("pdfs")
    _create_policy_pdf(dir_path / "policy.pdf")
    return dir_path


@pytest.fixture(scope="module")
def ocr() -> MagicMock:
    ocr = MagicMock()
    ocr.run.return_value = SCANNED_TEXT
    return ocr


@pytest.fixture(scope="module")
def parsed_policy(pdf_dir: Path, ocr: MagicMock) -> ParsedDocument:
    """Parse the policy PDF once, reuse across tests."""
    parser = PdfParser(ocr=ocr, ocr_resolution=72)
    with open(pdf_dir / "policy.pdf", "rb") as f:
        return parser.parse(f)
