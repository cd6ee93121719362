# src/pdf_chunk_extractor/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ChunkerConfig:
    """Configuration for a chunking run.

    Immutable. Explicit. Threaded into the segmenter and the pipeline,
    never read from module globals.
    """

    max_chunk_size: int = 4000  # Bound for blocks sent to the AI provider
    local_chunk_size: int = 3000  # Local segmenter threshold
    output_dir: str = "output"
    chunk_dir: str = "chunk"
    json_dir: str = "json"
    ai_concurrency: int = 4

    def __post_init__(self) -> None:
        if self.max_chunk_size <= 0:
            raise ValueError("max_chunk_size must be > 0")
        if self.local_chunk_size <= 0:
            raise ValueError("local_chunk_size must be > 0")
        if self.ai_concurrency <= 0:
            raise ValueError("ai_concurrency must be > 0")
