# src/pdf_chunk_extractor/llms/__init__.py

"""Chat model clients behind the AI-assisted chunking path.

Only the OpenAI and Anthropic adapters exist; both normalize replies into
``LLMResponse`` and retry transport errors with tenacity.
"""

from .base import LLMClient, LLMResponse, Message, Role, Usage
from .client import RetryingChatClient
from .config import API_KEY_ENV_VARS, DEFAULT_MODELS, LLMConfig, Provider
from .factory import create_llm_client

__all__ = [
    "API_KEY_ENV_VARS",
    "DEFAULT_MODELS",
    "LLMClient",
    "LLMConfig",
    "LLMResponse",
    "Message",
    "Provider",
    "RetryingChatClient",
    "Role",
    "Usage",
    "create_llm_client",
]
