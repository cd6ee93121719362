from pathlib import Path
from unittest.mock import MagicMock

import pytest

from pdf_chunk_extractor.config import ChunkerConfig
from pdf_chunk_extractor.models import InputType
from pdf_chunk_extractor.parsers.models import ParsedDocument
from pdf_chunk_extractor.parsers.pdf_parser import PdfParser
from pdf_chunk_extractor.pipeline import Chunker

pytestmark = pytest.mark.integration

# --- Extraction tests ---


def test_pages_in_order(parsed_policy: ParsedDocument) -> None:
    """Pages are numbered in document order."""
    assert [p.page_number for p in parsed_policy.pages] == [1, 2, 3]


def test_text_layer_is_extracted(parsed_policy: ParsedDocument) -> None:
    """Pages with a text layer are read directly."""
    first = parsed_policy.pages[0]

    assert first.ocr_used is False
    assert "STANDAR OPERASIONAL PROSEDUR" in first.text
    assert "Karyawan berhak atas cuti tahunan." in first.text
    assert "2. Tunggu persetujuan atasan." in parsed_policy.pages[2].text


def test_blank_page_goes_through_ocr(
    parsed_policy: ParsedDocument, ocr: MagicMock
) -> None:
    """The image-only page is sent to OCR."""
    assert parsed_policy.pages[1].ocr_used is True
    assert parsed_policy.pages[1].text == ocr.run.return_value
    assert parsed_policy.ocr_page_count == 1
    ocr.run.assert_called_once()


def test_document_text_has_markers(
    parsed_policy: ParsedDocument, ocr: MagicMock
) -> None:
    """OCR text lands between the right page markers."""
    text = parsed_policy.text
    scanned = ocr.run.return_value

    assert text.startswith("\n\n--- Page 1 ---\n\n")
    assert text.index("--- Page 2 ---") < text.index(scanned)
    assert text.index(scanned) < text.index("--- Page 3 ---")


def test_parsing_is_deterministic(pdf_dir: Path) -> None:
    """Parsing the same file twice gives the same text."""
    parser = PdfParser(ocr=MagicMock(**{"run.return_value": ""}), ocr_resolution=72)
    path = pdf_dir / "policy.pdf"

    assert parser.parse(path).text == parser.parse(path).text


# --- End-to-end chunking ---


@pytest.mark.asyncio
async def test_pdf_to_chunk_records(pdf_dir: Path) -> None:
    """A real PDF is parsed, chunked and formatted."""
    ocr = MagicMock(**{"run.return_value": "Halaman pindaian"})
    chunker = Chunker(
        config=ChunkerConfig(local_chunk_size=120),
        parser=PdfParser(ocr=ocr, ocr_resolution=72),
    )

    result = await chunker.chunk_input(InputType.PDF, pdf_dir / "policy.pdf")

    chunks = result.chunks
    assert len(chunks) >= 2
    assert [c.chunk_index for c in chunks] == list(range(1, len(chunks) + 1))
    assert all(c.filename == "policy.pdf" for c in chunks)
    assert chunks[0].page_range.startswith("Page 1")
    assert "- **Document Code**: SOP/HR/01" in chunks[0].text
    assert "### BAB 1" in chunks[0].text
    assert "- cuti tahunan" in "".join(c.text for c in chunks)
