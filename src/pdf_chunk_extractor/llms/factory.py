# src/pdf_chunk_extractor/llms/factory.py

from pdf_chunk_extractor.observability.base import MetricsHook, NoOpMetricsHook

from .client import RetryingChatClient
from .config import LLMConfig


def create_llm_client(
    config: LLMConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> RetryingChatClient:
    """Build the client for ``config.provider``.

    Provider SDKs are imported on demand, so only the SDK in use has to be
    importable.

    Raises:
        ValueError: If the provider is unknown.
    """
    client_class = _client_class(config.provider)
    return client_class(
        api_key=config.api_key,
        model=config.model,
        base_url=config.base_url,
        timeout=config.timeout,
        max_retries=config.max_retries,
        metrics_hook=metrics_hook,
    )


def _client_class(provider: str) -> type:
    if provider == "openai":
        from .openai import OpenAILLMClient

        return OpenAILLMClient
    if provider == "anthropic":
        from .anthropic import AnthropicLLMClient

        return AnthropicLLMClient
    raise ValueError(f"Unknown LLM provider: {provider}")
