# src/pdf_chunk_extractor/cli.py

"""Batch command line: extract every PDF in a directory and chunk it."""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from .chunking.providers import ChunkProvider, LLMChunkProvider
from .config import ChunkerConfig
from .llms import API_KEY_ENV_VARS, DEFAULT_MODELS, LLMConfig, create_llm_client
from .logging_config import configure_logging
from .models import InputType
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook, names
from .parsers import PdfParser, TesseractOcr
from .pipeline import Chunker
from .storage import ChunkWriter

logger = logging.getLogger(__name__)

PROVIDER_CHOICES = ("openai", "anthropic", "none")


def build_parser() -> argparse.ArgumentParser:
    defaults = ChunkerConfig()
    parser = argparse.ArgumentParser(
        prog="pdf-chunk-extractor",
        description=(
            "Extract text from PDFs (OCR for pages without a text layer) and "
            "split it into embedding-ready chunks."
        ),
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        type=Path,
        help="PDF or .txt files to process (default: every PDF in --data-dir)",
    )
    parser.add_argument("--data-dir", type=Path, default=Path("data"))
    parser.add_argument("--output-dir", default=defaults.output_dir)
    parser.add_argument("--chunk-dir", default=defaults.chunk_dir)
    parser.add_argument("--json-dir", default=defaults.json_dir)
    parser.add_argument("--max-chunk-size", type=int, default=defaults.max_chunk_size)
    parser.add_argument(
        "--local-chunk-size", type=int, default=defaults.local_chunk_size
    )
    parser.add_argument(
        "--provider",
        choices=PROVIDER_CHOICES,
        default="openai",
        help="AI provider for chunking; local chunking when 'none' or no API key",
    )
    parser.add_argument("--model", default=None, help="Model name for the provider")
    parser.add_argument("--ocr-languages", default="eng+ind")
    parser.add_argument("--log-level", default="INFO")
    return parser


def build_provider(
    provider: str,
    model: str | None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ChunkProvider | None:
    if provider == "none":
        logger.info("AI provider disabled. Using local intelligent chunking.")
        return None

    env_var = API_KEY_ENV_VARS[provider]
    if not os.environ.get(env_var):
        logger.warning("%s not set. Using local intelligent chunking.", env_var)
        return None

    client = create_llm_client(
        LLMConfig(provider=provider, model=model or DEFAULT_MODELS[provider]),  # type: ignore[arg-type]
        metrics_hook,
    )
    return LLMChunkProvider(client)


def find_inputs(inputs: list[Path], data_dir: Path) -> list[Path]:
    if inputs:
        return inputs
    if not data_dir.is_dir():
        logger.warning("Data directory %s does not exist", data_dir)
        return []
    return sorted(
        p for p in data_dir.iterdir() if p.is_file() and p.suffix.lower() == ".pdf"
    )


async def process_file(chunker: Chunker, path: Path) -> int:
    """Extract, chunk and save one file. Returns the number of chunks."""
    input_type = InputType.PDF if path.suffix.lower() == ".pdf" else InputType.TXT
    document = chunker.load(input_type, path)

    if input_type is InputType.PDF:
        ChunkWriter.save_text(document.text, document.filename, chunker.config.output_dir)

    result = await chunker.chunk_text(document.text, document.filename)
    chunker.writer.save(result.chunks, document.filename)

    if result.token_usage.total_tokens:
        logger.info(
            "%s used %d tokens (%d prompt, %d completion)",
            document.filename,
            result.token_usage.total_tokens,
            result.token_usage.prompt_tokens,
            result.token_usage.completion_tokens,
        )
    return len(result.chunks)


async def run(args: argparse.Namespace) -> int:
    config = ChunkerConfig(
        max_chunk_size=args.max_chunk_size,
        local_chunk_size=args.local_chunk_size,
        output_dir=args.output_dir,
        chunk_dir=args.chunk_dir,
        json_dir=args.json_dir,
    )
    metrics = InMemoryMetricsHook()
    chunker = Chunker(
        config=config,
        provider=build_provider(args.provider, args.model, metrics),
        parser=PdfParser(
            ocr=TesseractOcr(languages=args.ocr_languages), metrics_hook=metrics
        ),
        metrics_hook=metrics,
    )

    paths = find_inputs(args.inputs, args.data_dir)
    processed = 0
    for path in paths:
        logger.info("Processing %s", path)
        try:
            count = await process_file(chunker, path)
        except Exception:  # one bad file must not stop the batch
            logger.exception("Error processing %s", path.name)
            continue
        processed += 1
        logger.info("Processed %s into %d chunks", path.name, count)

    logger.info("Processing complete: %d of %d files processed", processed, len(paths))
    log_summary(metrics)
    if paths and processed == 0:
        return 1
    return 0


def log_summary(metrics: InMemoryMetricsHook) -> None:
    logger.info(
        "Pages: %d (%d via OCR, %d OCR failures); chunks: %d; AI fallbacks: %d; "
        "tokens: %d",
        metrics.count(names.PDF_PAGES_TOTAL),
        metrics.count(names.PDF_OCR_PAGES_TOTAL),
        metrics.count(names.PDF_OCR_ERRORS_TOTAL),
        metrics.count(names.CHUNKING_CHUNKS_CREATED),
        metrics.count(names.CHUNKING_AI_FALLBACKS_TOTAL),
        metrics.count(names.LLM_TOKENS_TOTAL),
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    try:
        return asyncio.run(run(args))
    except ValueError as error:
        # Invalid configuration values
        logger.error("%s", error)
        return 2


if __name__ == "__main__":
    sys.exit(main())
