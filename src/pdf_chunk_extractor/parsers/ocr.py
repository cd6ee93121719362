# parsers/ocr.py

import logging
import subprocess
from pathlib import Path

from pdf_chunk_extractor.errors import OcrError

logger = logging.getLogger(__name__)


class TesseractOcr:
    """Run the tesseract binary on a page image.

    Languages use tesseract's ``-l`` syntax; the default reads English and
    Indonesian.
    """

    def __init__(
        self,
        languages: str = "eng+ind",
        binary: str = "tesseract",
        timeout: float | None = 120.0,
    ) -> None:
        self.languages = languages
        self.binary = binary
        self.timeout = timeout

    def run(self, image_path: str | Path) -> str:
        cmd = [self.binary, str(image_path), "stdout", "-l", self.languages]
        logger.debug("Running OCR command: %s", " ".join(cmd))
        try:
            completed = subprocess.run(
                cmd,
                check=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise OcrError(f"{self.binary} is not installed") from exc
        except subprocess.CalledProcessError as exc:
            stderr = exc.stderr.decode(errors="ignore") if exc.stderr else ""
            raise OcrError(f"{self.binary} failed: {stderr.strip()}") from exc
        except subprocess.TimeoutExpired as exc:
            raise OcrError(f"{self.binary} timed out after {self.timeout}s") from exc

        return completed.stdout.decode("utf-8", errors="replace")
