# src/pdf_chunk_extractor/chunking/formatter.py

"""Render raw chunks as markdown documents ready for embedding."""

from .metadata import extract_metadata
from .pages import PAGE_MARKER_RE, extract_page_range
from .patterns import LineKind, classify_line

_HEADING_KINDS = (LineKind.HEADING, LineKind.ISOLATED_HEADING)


def format_chunk(chunk: str, index: int, total: int) -> str:
    """Format a chunk with a metadata header and a structured content body.

    Args:
        chunk: Raw chunk text, page markers included.
        index: 1-based position of the chunk.
        total: Number of chunks the document was split into.
    """
    header = [
        "# Document Chunk",
        "",
        "## Metadata",
        f"- **Chunk Number**: {index} of {total}",
    ]

    page_range = extract_page_range(chunk)
    if page_range:
        header.append(f"- **Page Range**: {page_range}")

    header.extend(extract_metadata(chunk).lines())
    header.extend(["", "## Content", "", ""])

    return "\n".join(header) + structure_content(chunk)


def format_single_chunk(text: str) -> str:
    """Format a whole block as chunk 1 of 1.

    Used when the AI provider fails on a block.
    """
    chunk = text.strip()
    if not chunk:
        return text
    return format_chunk(chunk, 1, 1)


def structure_content(chunk: str) -> str:
    """Clean up chunk text for embedding.

    Page markers and headings become ``###`` sub-headings and bullets are
    normalized to ``- ``. Numbered items and plain lines pass through;
    inner blank lines are kept.
    """
    lines = chunk.split("\n")
    last = len(lines) - 1
    out: list[str] = []

    for i, line in enumerate(lines):
        stripped = line.strip()

        if not stripped:
            if i not in (0, last):
                out.append("\n")
            continue

        kind = classify_line(line, i, lines)

        if kind is LineKind.PAGE_MARKER:
            marker = PAGE_MARKER_RE.search(stripped)
            if marker:
                out.append(f"\n### Page {marker.group(1)}\n\n")
            else:
                out.append(stripped + "\n")
        elif kind in _HEADING_KINDS:
            out.append(f"\n### {stripped}\n\n")
        elif kind is LineKind.BULLET:
            out.append(f"- {stripped[1:].strip()}".rstrip() + "\n")
        else:
            out.append(stripped + "\n")

    return "".join(out).strip()
