# src/pdf_chunk_extractor/llms/openai.py

import logging
from typing import Any

from openai import NOT_GIVEN, AsyncOpenAI, OpenAIError

from pdf_chunk_extractor.observability.base import MetricsHook, NoOpMetricsHook

from .base import FinishReason, LLMResponse, Message, Usage
from .client import RetryingChatClient

logger = logging.getLogger(__name__)

_FINISH_REASONS: dict[str, FinishReason] = {"stop": "stop", "length": "length"}


class OpenAILLMClient(RetryingChatClient):
    """Chat completions over the OpenAI API or any compatible endpoint."""

    provider = "openai"
    retry_on = OpenAIError

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-3.5-turbo",
        base_url: str | None = None,
        timeout: float = 30.0,
        max_retries: int = 3,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        super().__init__(model, max_retries=max_retries, metrics_hook=metrics_hook)
        self._client = AsyncOpenAI(api_key=api_key, base_url=base_url, timeout=timeout)
        logger.info("OpenAI client ready (model=%s, base_url=%s)", model, base_url)

    async def _send(
        self, messages: list[Message], temperature: float, max_tokens: int | None
    ) -> Any:
        return await self._client.chat.completions.create(
            model=self._model,
            messages=[m.as_dict() for m in messages],  # type: ignore[misc]
            temperature=temperature,
            max_tokens=max_tokens or NOT_GIVEN,
        )

    def _normalize(self, raw: Any, latency_ms: float) -> LLMResponse:
        usage = Usage()
        if raw.usage is not None:
            usage = Usage(
                prompt_tokens=raw.usage.prompt_tokens,
                completion_tokens=raw.usage.completion_tokens,
                total_tokens=raw.usage.total_tokens,
            )

        if not raw.choices:
            logger.warning("OpenAI returned no choices for model %s", self._model)
            return LLMResponse(None, "error", usage, latency_ms)

        choice = raw.choices[0]
        return LLMResponse(
            content=choice.message.content,
            finish_reason=_FINISH_REASONS.get(choice.finish_reason, "error"),
            usage=usage,
            latency_ms=latency_ms,
        )
