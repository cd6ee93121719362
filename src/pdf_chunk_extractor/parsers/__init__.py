from .base import DocumentParser
from .models import ParsedDocument, ParsedPage
from .ocr import TesseractOcr
from .pdf_parser import PdfParser

__all__ = [
    "DocumentParser",
    "ParsedDocument",
    "ParsedPage",
    "PdfParser",
    "TesseractOcr",
]
