# src/pdf_chunk_extractor/chunking/pages.py

import re

PAGE_MARKER_RE = re.compile(r"--- Page (\d+) ---", re.ASCII)


def page_marker(page_number: int) -> str:
    """Marker block written in front of each page's text."""
    return f"\n\n--- Page {page_number} ---\n\n"


def extract_page_range(text: str) -> str:
    """Describe the pages spanned by ``text`` from its embedded page markers.

    Uses the first and last marker in order of appearance. Returns "" when
    the text holds no marker, "Page N" for a single page and "Page N–M"
    otherwise.
    """
    pages = [int(m.group(1)) for m in PAGE_MARKER_RE.finditer(text)]
    if not pages:
        return ""

    first, last = pages[0], pages[-1]
    if first == last:
        return f"Page {first}"
    return f"Page {first}–{last}"
