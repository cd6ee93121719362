# parsers/pdf_parser.py

import logging
import tempfile
from pathlib import Path
from typing import Any, BinaryIO, cast

import pdfplumber

from pdf_chunk_extractor.errors import OcrError
from pdf_chunk_extractor.observability import names
from pdf_chunk_extractor.observability.base import (
    MetricsHook,
    NoOpMetricsHook,
    timed,
)

from .base import DocumentParser
from .models import ParsedDocument, ParsedPage
from .ocr import TesseractOcr

logger = logging.getLogger(__name__)


class PdfParser(DocumentParser):
    """
    PDF text extractor with OCR fallback.
    - Uses page order
    - Reads the embedded text layer first
    - Pages without text are rendered and passed to the OCR engine
    """

    def __init__(
        self,
        ocr: TesseractOcr | None = None,
        ocr_resolution: int = 300,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.ocr = ocr if ocr is not None else TesseractOcr()
        self.ocr_resolution = ocr_resolution
        self.metrics_hook = metrics_hook

    def parse(self, source: str | Path | BinaryIO) -> ParsedDocument:
        pages: list[ParsedPage] = []

        with timed(self.metrics_hook, names.PDF_EXTRACTION_DURATION):
            # pdfplumber.open accepts path-like or buffer objects; cast to Any
            with pdfplumber.open(cast(Any, source)) as pdf:
                total = len(pdf.pages)
                logger.info("Extracting text from %d pages", total)

                for page_number, page in enumerate(pdf.pages, start=1):
                    pages.append(self._parse_page(page, page_number))

        document = ParsedDocument(pages=pages)
        self.metrics_hook.increment(names.PDF_PAGES_TOTAL, len(pages))
        self.metrics_hook.increment(names.PDF_OCR_PAGES_TOTAL, document.ocr_page_count)
        logger.info(
            "Extracted %d pages (%d via OCR)", len(pages), document.ocr_page_count
        )
        return document

    def _parse_page(self, page: Any, page_number: int) -> ParsedPage:
        try:
            text = page.extract_text() or ""
        except Exception as error:  # pdfminer raises assorted errors on bad streams
            logger.warning(
                "Failed to extract text from page %d: %s", page_number, error
            )
            text = ""

        if text.strip():
            logger.debug(
                "Page %d: extracted %d characters", page_number, len(text.strip())
            )
            return ParsedPage(page_number=page_number, text=text)

        logger.info("Page %d: no text found, using OCR", page_number)
        return ParsedPage(
            page_number=page_number,
            text=self._ocr_page(page, page_number),
            ocr_used=True,
        )

    def _ocr_page(self, page: Any, page_number: int) -> str:
        with tempfile.TemporaryDirectory(prefix="pdf_chunk_ocr_") as tmp:
            image_path = Path(tmp) / f"page_{page_number}.png"
            try:
                page.to_image(resolution=self.ocr_resolution).save(
                    image_path, format="PNG"
                )
            except Exception as error:  # rendering depends on pypdfium2 internals
                logger.warning(
                    "Failed to render page %d as image: %s", page_number, error
                )
                self.metrics_hook.increment(names.PDF_OCR_ERRORS_TOTAL)
                return ""

            try:
                text = self.ocr.run(image_path)
            except OcrError as error:
                logger.warning("OCR failed for page %d: %s", page_number, error)
                self.metrics_hook.increment(names.PDF_OCR_ERRORS_TOTAL)
                return ""

        logger.debug(
            "Page %d: OCR extracted %d characters", page_number, len(text.strip())
        )
        return text
