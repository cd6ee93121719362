# src/pdf_chunk_extractor/llms/anthropic.py

import logging
from typing import Any

from anthropic import NOT_GIVEN, APIError, AsyncAnthropic

from pdf_chunk_extractor.observability.base import MetricsHook, NoOpMetricsHook

from .base import FinishReason, LLMResponse, Message, Role, Usage
from .client import RetryingChatClient

logger = logging.getLogger(__name__)

# The messages API rejects requests without max_tokens
DEFAULT_MAX_TOKENS = 4096

_FINISH_REASONS: dict[str, FinishReason] = {
    "end_turn": "stop",
    "stop_sequence": "stop",
    "max_tokens": "length",
}


class AnthropicLLMClient(RetryingChatClient):
    """Claude models over the Anthropic messages API."""

    provider = "anthropic"
    retry_on = APIError

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "claude-sonnet-4-20250514",
        base_url: str | None = None,
        timeout: float = 30.0,
        max_retries: int = 3,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        super().__init__(model, max_retries=max_retries, metrics_hook=metrics_hook)
        self._client = AsyncAnthropic(api_key=api_key, base_url=base_url, timeout=timeout)
        logger.info("Anthropic client ready (model=%s)", model)

    async def _send(
        self, messages: list[Message], temperature: float, max_tokens: int | None
    ) -> Any:
        # System text travels as a top-level parameter, not as a message
        system = "\n\n".join(m.content for m in messages if m.role is Role.SYSTEM)
        return await self._client.messages.create(
            model=self._model,
            system=system or NOT_GIVEN,
            messages=[m.as_dict() for m in messages if m.role is not Role.SYSTEM],  # type: ignore[misc]
            temperature=temperature,
            max_tokens=max_tokens or DEFAULT_MAX_TOKENS,
        )

    def _normalize(self, raw: Any, latency_ms: float) -> LLMResponse:
        text = "".join(block.text for block in raw.content if block.type == "text")
        return LLMResponse(
            content=text or None,
            finish_reason=_FINISH_REASONS.get(raw.stop_reason, "error"),
            usage=Usage.from_counts(raw.usage.input_tokens, raw.usage.output_tokens),
            latency_ms=latency_ms,
        )
