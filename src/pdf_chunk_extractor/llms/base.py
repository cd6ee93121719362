# src/pdf_chunk_extractor/llms/base.py

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Protocol

FinishReason = Literal["stop", "length", "error"]


class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    role: Role
    content: str

    def as_dict(self) -> dict[str, str]:
        return {"role": self.role.value, "content": self.content}


@dataclass(frozen=True)
class Usage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    @classmethod
    def from_counts(cls, prompt_tokens: int, completion_tokens: int) -> "Usage":
        return cls(
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=prompt_tokens + completion_tokens,
        )


@dataclass(frozen=True)
class LLMResponse:
    """One completion, normalized across providers.

    ``content`` is None when the provider returned no text at all.
    """

    content: str | None
    finish_reason: FinishReason
    usage: Usage
    latency_ms: float


class LLMClient(Protocol):
    """What the chunk provider needs from a chat model.

    Each call carries the full message list; clients keep no conversation
    state between calls.
    """

    @property
    def model(self) -> str: ...

    async def complete(
        self,
        *,
        messages: list[Message],
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        """Run one completion.

        Raises:
            The provider SDK's error once transport retries are exhausted.
        """
        ...
