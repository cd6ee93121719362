# src/pdf_chunk_extractor/storage.py

import logging
from collections.abc import Sequence
from pathlib import Path

from .models import ChunkRecord

logger = logging.getLogger(__name__)


class ChunkWriter:
    """Persist chunk records for downstream indexing.

    Layout, per source file ``<stem>.<ext>``:
    - ``<chunk_dir>/<stem>/chunk_<i>.txt``: formatted chunk text
    - ``<json_dir>/<stem>/chunk_<i>.json``: the chunk record as JSON
    """

    def __init__(self, chunk_dir: str | Path, json_dir: str | Path) -> None:
        self.chunk_dir = Path(chunk_dir)
        self.json_dir = Path(json_dir)

    def save(self, records: Sequence[ChunkRecord], filename: str) -> None:
        stem = Path(filename).stem
        text_dir = self.chunk_dir / stem
        record_dir = self.json_dir / stem
        text_dir.mkdir(parents=True, exist_ok=True)
        record_dir.mkdir(parents=True, exist_ok=True)

        for record in records:
            name = f"chunk_{record.chunk_index}"
            (text_dir / f"{name}.txt").write_text(record.text, encoding="utf-8")
            (record_dir / f"{name}.json").write_text(
                record.model_dump_json(), encoding="utf-8"
            )
            logger.debug(
                "Saved %s for %s (%d chars)", name, filename, len(record.text)
            )

        logger.info(
            "Saved %d chunks for %s to %s and %s",
            len(records),
            filename,
            text_dir,
            record_dir,
        )

    @staticmethod
    def save_text(text: str, filename: str, output_dir: str | Path) -> Path:
        """Write extracted document text to ``<output_dir>/<stem>.txt``."""
        directory = Path(output_dir)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{Path(filename).stem}.txt"
        path.write_text(text, encoding="utf-8")
        logger.info("Saved extracted text for %s to %s", filename, path)
        return path
