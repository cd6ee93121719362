# src/pdf_chunk_extractor/chunking/segmenter.py

import logging

from .patterns import is_natural_break

logger = logging.getLogger(__name__)


def segment(text: str, size_threshold: int) -> list[str]:
    """Split text into chunks at natural breaks.

    Lines accumulate into a buffer. A natural break ends the chunk before the
    breaking line once the buffer is over ``size_threshold``; any line that
    pushes the buffer over the threshold ends the chunk after it. The
    threshold is therefore soft: a chunk may overshoot it by one line.

    Chunks are stripped; chunks that strip to nothing are dropped.
    """
    if size_threshold <= 0:
        raise ValueError("size_threshold must be > 0")

    chunks: list[str] = []
    lines = text.split("\n")
    buffer: list[str] = []
    size = 0

    def flush() -> None:
        nonlocal size
        chunk = "".join(buffer).strip()
        if chunk:
            chunks.append(chunk)
        buffer.clear()
        size = 0

    for i, line in enumerate(lines):
        if size > size_threshold and is_natural_break(line, i, lines):
            flush()

        buffer.append(line + "\n")
        size += len(line) + 1

        if size > size_threshold:
            flush()

    if buffer:
        flush()

    logger.debug(
        "Segmented %d lines into %d chunks (threshold=%d)",
        len(lines),
        len(chunks),
        size_threshold,
    )
    return chunks


def split_text_into_chunks(text: str, max_chunk_size: int) -> list[str]:
    """Split text into blocks by size alone, ignoring structure.

    Bounds the blocks sent to an AI provider. Blocks are not stripped and
    may be whitespace only; callers skip those.
    """
    if max_chunk_size <= 0:
        raise ValueError("max_chunk_size must be > 0")

    blocks: list[str] = []
    buffer: list[str] = []
    size = 0

    for line in text.split("\n"):
        buffer.append(line + "\n")
        size += len(line) + 1
        if size > max_chunk_size:
            blocks.append("".join(buffer))
            buffer = []
            size = 0

    if buffer:
        blocks.append("".join(buffer))

    return blocks
