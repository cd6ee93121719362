# parsers/models.py

from dataclasses import dataclass, field

from pdf_chunk_extractor.chunking.pages import page_marker


@dataclass(frozen=True)
class ParsedPage:
    page_number: int  # 1-indexed
    text: str
    ocr_used: bool = False


@dataclass(frozen=True)
class ParsedDocument:
    pages: list[ParsedPage] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Full document text with a page marker in front of every page."""
        return "".join(page_marker(p.page_number) + p.text for p in self.pages)

    @property
    def ocr_page_count(self) -> int:
        return sum(1 for p in self.pages if p.ocr_used)
