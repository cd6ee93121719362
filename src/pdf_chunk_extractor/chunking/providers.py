# src/pdf_chunk_extractor/chunking/providers.py

import logging
from dataclasses import dataclass
from typing import Protocol

from pdf_chunk_extractor.errors import ChunkProviderError
from pdf_chunk_extractor.llms.base import LLMClient, Message, Role
from pdf_chunk_extractor.models import TokenUsage
from pdf_chunk_extractor.prompts import CHUNKING_PROMPT, Prompt, default_prompts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderChunk:
    """Chunk text produced by an AI provider for one block."""

    text: str
    usage: TokenUsage


class ChunkProvider(Protocol):
    """Turns one bounded block of document text into a formatted chunk.

    Implementations may fail per block; callers fall back to local
    formatting for that block only.
    """

    @property
    def name(self) -> str: ...

    async def chunk_text(self, text: str) -> ProviderChunk: ...


class LLMChunkProvider:
    """Chunk provider backed by a chat completion model."""

    def __init__(
        self,
        client: LLMClient,
        prompt: Prompt | None = None,
        max_tokens: int = 2000,
        temperature: float = 0.0,
    ) -> None:
        self._client = client
        self._prompt = prompt or default_prompts().get(*CHUNKING_PROMPT)
        self._max_tokens = max_tokens
        self._temperature = temperature

    @property
    def name(self) -> str:
        return f"llm:{self._client.model}"

    async def chunk_text(self, text: str) -> ProviderChunk:
        messages = []
        if self._prompt.system:
            messages.append(Message(role=Role.SYSTEM, content=self._prompt.system))
        messages.append(Message(role=Role.USER, content=self._prompt.render(text=text)))

        response = await self._client.complete(
            messages=messages,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )

        if not response.content or not response.content.strip():
            raise ChunkProviderError(
                f"{self.name} returned no content (finish={response.finish_reason})"
            )

        logger.debug(
            "%s chunked %d chars into %d chars",
            self.name,
            len(text),
            len(response.content),
        )
        return ProviderChunk(
            text=response.content,
            usage=TokenUsage(
                prompt_tokens=response.usage.prompt_tokens,
                completion_tokens=response.usage.completion_tokens,
                total_tokens=response.usage.total_tokens,
            ),
        )
