# src/pdf_chunk_extractor/chunking/patterns.py

"""Line classification for natural chunk breaks.

A small ordered rule table, evaluated top to bottom against the stripped
line; the first matching rule decides the line's kind. A line is a natural
break when any rule matches. The same table drives heading detection in the
chunk formatter.
"""

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

PAGE_MARKER_PREFIX = "--- Page"

BULLET_GLYPHS = ("•", "-", "*")

# Structural headings in Indonesian, English and Dutch legal documents.
HEADING_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, re.ASCII)
    for p in (
        r"^Bab\s+\d+",
        r"^Pasal\s+\d+",
        r"^Chapter\s+\d+",
        r"^Section\s+\d+",
        r"^Artikel\s+\d+",
        r"^BAB\s+\d+",
        r"^PASAL\s+\d+",
        r"^\d+\.\s+[A-Z]",  # 1. Title
        r"^[A-Z][A-Z\s]{3,}$",  # ALL CAPS HEADING
        r"^[A-Z][a-z\s]{3,}$",  # Title case heading
    )
)

NUMBERED_RE = re.compile(r"^\d+\.", re.ASCII)

ISOLATED_HEADING_MAX_LEN = 100


class LineKind(str, Enum):
    BLANK = "blank"
    PAGE_MARKER = "page_marker"
    HEADING = "heading"
    BULLET = "bullet"
    NUMBERED = "numbered"
    ISOLATED_HEADING = "isolated_heading"


@dataclass(frozen=True)
class LineContext:
    """A stripped line together with its position in the line sequence."""

    line: str
    index: int
    lines: Sequence[str]

    @property
    def previous_is_blank(self) -> bool:
        return self.index > 0 and not self.lines[self.index - 1].strip()


@dataclass(frozen=True)
class LineRule:
    name: str
    kind: LineKind
    matches: Callable[[LineContext], bool]


def _is_heading(ctx: LineContext) -> bool:
    return any(pattern.search(ctx.line) for pattern in HEADING_PATTERNS)


def _is_isolated_heading(ctx: LineContext) -> bool:
    # Short line right after a blank line that looks like a title.
    if not ctx.previous_is_blank or len(ctx.line) >= ISOLATED_HEADING_MAX_LEN:
        return False
    return ctx.line.upper() == ctx.line or ctx.line.endswith((":", "."))


LINE_RULES: tuple[LineRule, ...] = (
    LineRule("blank", LineKind.BLANK, lambda ctx: ctx.line == ""),
    LineRule(
        "page_marker",
        LineKind.PAGE_MARKER,
        lambda ctx: PAGE_MARKER_PREFIX in ctx.line,
    ),
    LineRule("heading", LineKind.HEADING, _is_heading),
    LineRule(
        "bullet",
        LineKind.BULLET,
        lambda ctx: ctx.line.startswith(BULLET_GLYPHS),
    ),
    LineRule(
        "numbered",
        LineKind.NUMBERED,
        lambda ctx: NUMBERED_RE.match(ctx.line) is not None,
    ),
    LineRule("isolated_heading", LineKind.ISOLATED_HEADING, _is_isolated_heading),
)


def classify_line(
    line: str, line_index: int, all_lines: Sequence[str]
) -> LineKind | None:
    """Return the kind of the first rule matching ``line``, or None.

    Args:
        line: The line to classify; surrounding whitespace is ignored.
        line_index: Position of the line within ``all_lines``.
        all_lines: The full line sequence, used for the previous-line check.
    """
    ctx = LineContext(line=line.strip(), index=line_index, lines=all_lines)
    for rule in LINE_RULES:
        if rule.matches(ctx):
            return rule.kind
    return None


def is_natural_break(line: str, line_index: int, all_lines: Sequence[str]) -> bool:
    """True if ``line`` is a preferred point to end a chunk."""
    return classify_line(line, line_index, all_lines) is not None
