# src/pdf_chunk_extractor/llms/client.py

import logging
from abc import ABC, abstractmethod
from time import monotonic
from typing import Any

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from pdf_chunk_extractor.observability import names
from pdf_chunk_extractor.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMResponse, Message

logger = logging.getLogger(__name__)


class RetryingChatClient(ABC):
    """Shared request cycle for the provider adapters.

    Subclasses translate messages to their wire format in ``_send`` and
    translate the reply back in ``_normalize``. Retries cover transport and
    API errors only; an empty reply is returned as-is for the caller to judge.
    """

    provider: str
    retry_on: type[BaseException]

    def __init__(
        self,
        model: str,
        max_retries: int = 3,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if max_retries < 1:
            raise ValueError("max_retries must be >= 1")
        self._model = model
        self._max_retries = max_retries
        self.metrics_hook = metrics_hook

    @property
    def model(self) -> str:
        return self._model

    async def complete(
        self,
        *,
        messages: list[Message],
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        logger.debug(
            "Sending %d messages to %s model %s",
            len(messages),
            self.provider,
            self._model,
        )
        start = monotonic()

        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_retries),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
            retry=retry_if_exception_type(self.retry_on),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                raw = await self._send(messages, temperature, max_tokens)

        response = self._normalize(raw, 1000 * (monotonic() - start))
        self._record(response)
        return response

    @abstractmethod
    async def _send(
        self, messages: list[Message], temperature: float, max_tokens: int | None
    ) -> Any: ...

    @abstractmethod
    def _normalize(self, raw: Any, latency_ms: float) -> LLMResponse: ...

    def _record(self, response: LLMResponse) -> None:
        labels = {"provider": self.provider, "model": self._model}
        self.metrics_hook.record_latency(
            names.LLM_COMPLETION_DURATION, response.latency_ms, labels
        )
        self.metrics_hook.increment(names.LLM_REQUESTS_TOTAL, labels=labels)
        self.metrics_hook.increment(names.LLM_TOKENS_PROMPT, response.usage.prompt_tokens)
        self.metrics_hook.increment(
            names.LLM_TOKENS_COMPLETION, response.usage.completion_tokens
        )
        self.metrics_hook.increment(names.LLM_TOKENS_TOTAL, response.usage.total_tokens)

        logger.info(
            "%s %s finished with %s after %.0fms (%d tokens)",
            self.provider,
            self._model,
            response.finish_reason,
            response.latency_ms,
            response.usage.total_tokens,
        )
