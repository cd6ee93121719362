# src/pdf_chunk_extractor/errors.py

"""Exceptions raised by pdf-chunk-extractor.

No-match conditions in metadata and page-range extraction are not errors;
they produce empty results.
"""


class ChunkExtractorError(Exception):
    """Base class for all pdf-chunk-extractor errors."""


class EmptyDocumentError(ChunkExtractorError, ValueError):
    """The input had no content to chunk (empty or whitespace only)."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"input text is empty: {filename}")
        self.filename = filename


class UnsupportedInputError(ChunkExtractorError, TypeError):
    """The input type or source object cannot be loaded."""


class ChunkProviderError(ChunkExtractorError):
    """The AI chunk provider returned no usable text."""


class OcrError(ChunkExtractorError):
    """The OCR engine could not produce text for a page image."""
