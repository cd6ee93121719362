# parsers/base.py

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

from .models import ParsedDocument


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, source: str | Path | BinaryIO) -> ParsedDocument:
        """
        Parse a document into its pages, in page order.

        Requirements:
        - Deterministic output for same input
        - One ParsedPage per source page, numbered from 1
        - Unreadable pages yield empty text, not an error
        """
        raise NotImplementedError
