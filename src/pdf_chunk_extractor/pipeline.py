# src/pdf_chunk_extractor/pipeline.py

import asyncio
import logging
from typing import Any

from .chunking.formatter import format_chunk, format_single_chunk
from .chunking.pages import extract_page_range
from .chunking.providers import ChunkProvider
from .chunking.segmenter import segment, split_text_into_chunks
from .config import ChunkerConfig
from .errors import EmptyDocumentError
from .models import ChunkRecord, ChunkResult, InputType, OutputType, TokenUsage
from .observability import names
from .observability.base import MetricsHook, NoOpMetricsHook, timed
from .parsers.base import DocumentParser
from .parsers.pdf_parser import PdfParser
from .sources import SourceDocument, load_source
from .storage import ChunkWriter

logger = logging.getLogger(__name__)


class Chunker:
    """Turns documents into ordered, embedding-ready chunk records.

    Without a provider every chunk comes from the local engine. With a
    provider the text is cut into size-bounded blocks and each block is sent
    to the provider; a block whose call fails is formatted locally instead,
    so every block still yields exactly one record.
    """

    def __init__(
        self,
        config: ChunkerConfig | None = None,
        provider: ChunkProvider | None = None,
        parser: DocumentParser | None = None,
        writer: ChunkWriter | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config or ChunkerConfig()
        self.provider = provider
        self.parser = parser or PdfParser(metrics_hook=metrics_hook)
        self.writer = writer or ChunkWriter(self.config.chunk_dir, self.config.json_dir)
        self.metrics_hook = metrics_hook

    def load(self, input_type: InputType, source: Any) -> SourceDocument:
        return load_source(input_type, source, self.parser)

    async def chunk_input(
        self,
        input_type: InputType,
        source: Any,
        output_type: OutputType = OutputType.JSON,
    ) -> ChunkResult:
        """Load, chunk and optionally save one document.

        Raises:
            EmptyDocumentError: If the loaded text is empty or whitespace.
            UnsupportedInputError: If the source does not fit ``input_type``.
        """
        document = self.load(input_type, source)
        result = await self.chunk_text(document.text, document.filename)

        if output_type in (OutputType.FILE, OutputType.BOTH):
            self.writer.save(result.chunks, document.filename)

        return result

    async def chunk_text(self, text: str, filename: str) -> ChunkResult:
        _ensure_content(text, filename)

        if self.provider is None:
            return ChunkResult(chunks=self.chunk_local(text, filename))

        with timed(self.metrics_hook, names.CHUNKING_DURATION, {"mode": "ai"}):
            result = await self._chunk_with_provider(text, filename, self.provider)

        self.metrics_hook.increment(names.CHUNKING_CHUNKS_CREATED, len(result.chunks))
        return result

    def chunk_local(self, text: str, filename: str) -> list[ChunkRecord]:
        """Chunk with the local engine only.

        Raises:
            EmptyDocumentError: If ``text`` is empty or whitespace.
        """
        _ensure_content(text, filename)

        with timed(self.metrics_hook, names.CHUNKING_DURATION, {"mode": "local"}):
            chunks = segment(text, self.config.local_chunk_size)
            total = len(chunks)
            records = [
                ChunkRecord(
                    filename=filename,
                    chunk_index=index,
                    page_range=extract_page_range(chunk),
                    text=format_chunk(chunk, index, total),
                )
                for index, chunk in enumerate(chunks, start=1)
            ]

        self.metrics_hook.increment(names.CHUNKING_CHUNKS_CREATED, len(records))
        logger.info("Created %d local chunks for %s", len(records), filename)
        return records

    async def _chunk_with_provider(
        self, text: str, filename: str, provider: ChunkProvider
    ) -> ChunkResult:
        blocks = [
            block
            for block in split_text_into_chunks(text, self.config.max_chunk_size)
            if block.strip()
        ]
        logger.info(
            "Sending %d blocks of %s to %s", len(blocks), filename, provider.name
        )

        semaphore = asyncio.Semaphore(self.config.ai_concurrency)
        outcomes = await asyncio.gather(
            *[
                self._chunk_block(provider, block, number, len(blocks), semaphore)
                for number, block in enumerate(blocks, start=1)
            ]
        )

        records = []
        usage = TokenUsage()
        for index, (block, (chunk_text, block_usage)) in enumerate(
            zip(blocks, outcomes, strict=True), start=1
        ):
            records.append(
                ChunkRecord(
                    filename=filename,
                    chunk_index=index,
                    page_range=extract_page_range(block),
                    text=chunk_text,
                )
            )
            if block_usage is not None:
                usage = usage.add(block_usage)

        logger.info(
            "Created %d AI chunks for %s (%d tokens)",
            len(records),
            filename,
            usage.total_tokens,
        )
        return ChunkResult(chunks=records, token_usage=usage)

    async def _chunk_block(
        self,
        provider: ChunkProvider,
        block: str,
        number: int,
        total: int,
        semaphore: asyncio.Semaphore,
    ) -> tuple[str, TokenUsage | None]:
        async with semaphore:
            logger.debug("Processing block %d/%d (%d chars)", number, total, len(block))
            try:
                chunk = await provider.chunk_text(block)
            except Exception as error:  # any provider failure falls back per block
                logger.warning(
                    "AI chunking failed for block %d/%d, using local chunking: %s",
                    number,
                    total,
                    error,
                )
                self.metrics_hook.increment(
                    names.CHUNKING_AI_FALLBACKS_TOTAL, labels={"provider": provider.name}
                )
                return format_single_chunk(block), None

        return chunk.text, chunk.usage


def _ensure_content(text: str, filename: str) -> None:
    if not text.strip():
        raise EmptyDocumentError(filename)
