# src/pdf_chunk_extractor/sources.py

"""Turn the supported input shapes into document text plus a filename."""

import io
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import UnsupportedInputError
from .models import InputType
from .parsers.base import DocumentParser

logger = logging.getLogger(__name__)

DEFAULT_PDF_NAME = "input.pdf"
DEFAULT_TXT_NAME = "input.txt"

_NEWLINE_RE = re.compile(r"\r\n?")


@dataclass(frozen=True)
class SourceDocument:
    text: str
    filename: str


def load_source(
    input_type: InputType, source: Any, parser: DocumentParser
) -> SourceDocument:
    """Load ``source`` according to ``input_type``.

    PDF sources may be a path, raw bytes or a binary stream. TXT sources may
    be a path to an existing file, inline text, bytes or a stream. STRING
    sources are inline text or bytes. Line endings are normalized to LF.

    Raises:
        UnsupportedInputError: If the source object does not fit the type.
    """
    if input_type is InputType.PDF:
        document = _load_pdf(source, parser)
    elif input_type is InputType.TXT:
        document = _load_txt(source)
    elif input_type is InputType.STRING:
        document = _load_string(source)
    else:
        raise UnsupportedInputError(f"unsupported input type: {input_type!r}")
    return SourceDocument(
        text=_NEWLINE_RE.sub("\n", document.text), filename=document.filename
    )


def _load_pdf(source: Any, parser: DocumentParser) -> SourceDocument:
    if isinstance(source, (str, Path)):
        path = Path(source)
        logger.info("Parsing PDF file %s", path)
        return SourceDocument(text=parser.parse(path).text, filename=path.name)
    if isinstance(source, (bytes, bytearray)):
        return SourceDocument(
            text=parser.parse(io.BytesIO(source)).text, filename=DEFAULT_PDF_NAME
        )
    if isinstance(source, io.IOBase):
        return SourceDocument(text=parser.parse(source).text, filename=DEFAULT_PDF_NAME)
    raise UnsupportedInputError(
        f"cannot read PDF from {type(source).__name__}"
    )


def _load_txt(source: Any) -> SourceDocument:
    if isinstance(source, Path) or (isinstance(source, str) and _is_file(source)):
        path = Path(source)
        logger.info("Reading text file %s", path)
        return SourceDocument(text=path.read_text(encoding="utf-8"), filename=path.name)
    if isinstance(source, str):
        return SourceDocument(text=source, filename=DEFAULT_TXT_NAME)
    if isinstance(source, (bytes, bytearray)):
        return SourceDocument(text=_decode(source), filename=DEFAULT_TXT_NAME)
    if isinstance(source, io.IOBase):
        content = source.read()
        if isinstance(content, bytes):
            content = _decode(content)
        return SourceDocument(text=content, filename=DEFAULT_TXT_NAME)
    raise UnsupportedInputError(
        f"cannot read text from {type(source).__name__}"
    )


def _load_string(source: Any) -> SourceDocument:
    if isinstance(source, str):
        return SourceDocument(text=source, filename=DEFAULT_TXT_NAME)
    if isinstance(source, (bytes, bytearray)):
        return SourceDocument(text=_decode(source), filename=DEFAULT_TXT_NAME)
    raise UnsupportedInputError(
        f"cannot use {type(source).__name__} as string input"
    )


def _is_file(candidate: str) -> bool:
    # Inline text can be too long or contain characters no path may hold
    try:
        return Path(candidate).is_file()
    except (OSError, ValueError):
        return False


def _decode(data: bytes | bytearray) -> str:
    return bytes(data).decode("utf-8", errors="replace")
