# src/pdf_chunk_extractor/chunking/metadata.py

"""Best-effort document metadata found in chunk text.

Every extractor here is total: no match means an empty result, never an
error.
"""

import re
from dataclasses import dataclass

# Administrative and regulatory document prefixes (SOP/KEP-001, UU-12/2020).
DOCUMENT_CODE_RE = re.compile(
    r"(?:SOP|KCN|AGR|KEP|PER|UU|PP|PMK)[/-][A-Z0-9/]+", re.ASCII
)

# "12 - Januari - 2024", hyphen or en-dash separated.
DATE_RE = re.compile(r"\d{1,2}\s+[-–]\s+[A-Za-z]+\s+[-–]\s+\d{4}", re.ASCII)

TITLE_RE = re.compile(r"^[A-Z][A-Za-z \t\r]{3,50}$", re.ASCII | re.MULTILINE)

TITLE_MIN_LEN = 5
TITLE_MAX_LEN = 100
TITLE_STOPWORDS = ("Page", "---")


@dataclass(frozen=True)
class DocumentMetadata:
    document_codes: tuple[str, ...] = ()
    dates: tuple[str, ...] = ()
    title: str | None = None

    def is_empty(self) -> bool:
        return not (self.document_codes or self.dates or self.title)

    def lines(self) -> list[str]:
        """Render as markdown list items for the chunk metadata section."""
        result = []
        if self.document_codes:
            result.append(f"- **Document Code**: {', '.join(self.document_codes)}")
        if self.dates:
            result.append(f"- **Date**: {', '.join(self.dates)}")
        if self.title:
            result.append(f"- **Document Title**: {self.title}")
        return result


def extract_metadata(text: str) -> DocumentMetadata:
    return DocumentMetadata(
        document_codes=tuple(DOCUMENT_CODE_RE.findall(text)),
        dates=tuple(DATE_RE.findall(text)),
        title=_find_title(text),
    )


def _find_title(text: str) -> str | None:
    # Only the first plausible title line is kept.
    for match in TITLE_RE.finditer(text):
        candidate = match.group(0).strip()
        if any(word in candidate for word in TITLE_STOPWORDS):
            continue
        if TITLE_MIN_LEN < len(candidate) < TITLE_MAX_LEN:
            return candidate
    return None
