# Chunking
from .chunking import (
    ChunkProvider,
    DocumentMetadata,
    LLMChunkProvider,
    classify_line,
    extract_metadata,
    extract_page_range,
    format_chunk,
    format_single_chunk,
    is_natural_break,
    segment,
    split_text_into_chunks,
)

# Configuration
from .config import ChunkerConfig

# Errors
from .errors import (
    ChunkExtractorError,
    ChunkProviderError,
    EmptyDocumentError,
    OcrError,
    UnsupportedInputError,
)

# Records
from .models import ChunkRecord, ChunkResult, InputType, OutputType, TokenUsage

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Parsing
from .parsers import PdfParser, TesseractOcr

# Pipeline
from .pipeline import Chunker
from .storage import ChunkWriter

__all__ = [
    # Chunking
    "ChunkProvider",
    "DocumentMetadata",
    "LLMChunkProvider",
    "classify_line",
    "extract_metadata",
    "extract_page_range",
    "format_chunk",
    "format_single_chunk",
    "is_natural_break",
    "segment",
    "split_text_into_chunks",
    # Configuration
    "ChunkerConfig",
    # Errors
    "ChunkExtractorError",
    "ChunkProviderError",
    "EmptyDocumentError",
    "OcrError",
    "UnsupportedInputError",
    # Records
    "ChunkRecord",
    "ChunkResult",
    "InputType",
    "OutputType",
    "TokenUsage",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsing
    "PdfParser",
    "TesseractOcr",
    # Pipeline
    "Chunker",
    "ChunkWriter",
]
