# src/pdf_chunk_extractor/models.py

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class InputType(str, Enum):
    """Kind of source handed to the chunker."""

    PDF = "pdf"
    TXT = "txt"
    STRING = "string"


class OutputType(str, Enum):
    """What the chunker does with the records it produces."""

    JSON = "json"  # Return only
    FILE = "file"  # Save to disk, then return
    BOTH = "both"


class ChunkRecord(BaseModel):
    """One embedding-ready chunk.

    Field names are part of the contract with downstream vector indexers.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    filename: str
    chunk_index: int = Field(ge=1)
    page_range: str
    text: str


class TokenUsage(BaseModel):
    """Token usage accumulated over the AI calls of one run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    def add(self, other: "TokenUsage") -> "TokenUsage":
        return TokenUsage(
            prompt_tokens=self.prompt_tokens + other.prompt_tokens,
            completion_tokens=self.completion_tokens + other.completion_tokens,
            total_tokens=self.total_tokens + other.total_tokens,
        )


class ChunkResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    chunks: list[ChunkRecord]
    token_usage: TokenUsage = Field(default_factory=TokenUsage)
