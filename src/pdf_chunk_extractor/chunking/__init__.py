from .formatter import format_chunk, format_single_chunk, structure_content
from .metadata import DocumentMetadata, extract_metadata
from .pages import extract_page_range, page_marker
from .patterns import LINE_RULES, LineKind, LineRule, classify_line, is_natural_break
from .providers import ChunkProvider, LLMChunkProvider, ProviderChunk
from .segmenter import segment, split_text_into_chunks

__all__ = [
    # Classification
    "LINE_RULES",
    "LineKind",
    "LineRule",
    "classify_line",
    "is_natural_break",
    # Segmentation
    "segment",
    "split_text_into_chunks",
    # Extraction
    "DocumentMetadata",
    "extract_metadata",
    "extract_page_range",
    "page_marker",
    # Formatting
    "format_chunk",
    "format_single_chunk",
    "structure_content",
    # AI providers
    "ChunkProvider",
    "LLMChunkProvider",
    "ProviderChunk",
]
