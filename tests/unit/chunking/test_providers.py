from unittest.mock import AsyncMock, MagicMock

import pytest

from pdf_chunk_extractor.chunking.providers import LLMChunkProvider
from pdf_chunk_extractor.errors import ChunkProviderError
from pdf_chunk_extractor.llms.base import LLMResponse, Role, Usage
from pdf_chunk_extractor.models import TokenUsage
from pdf_chunk_extractor.prompts.prompt import Prompt


def _response(content: str | None, finish: str = "stop") -> LLMResponse:
    return LLMResponse(
        content=content,
        finish_reason=finish,  # type: ignore[arg-type]
        usage=Usage(prompt_tokens=100, completion_tokens=40, total_tokens=140),
        latency_ms=12.0,
    )


@pytest.fixture
def client() -> MagicMock:
    client = MagicMock()
    client.model = "gpt-test"
    client.complete = AsyncMock(return_value=_response("# Chunk\n\nstructured"))
    return client


class TestLLMChunkProvider:
    @pytest.mark.asyncio
    async def test_returns_text_and_usage(self, client: MagicMock) -> None:
        """The reply text and token usage are returned."""
        provider = LLMChunkProvider(client)

        result = await provider.chunk_text("raw block")

        assert result.text == "# Chunk\n\nstructured"
        assert result.usage == TokenUsage(
            prompt_tokens=100, completion_tokens=40, total_tokens=140
        )

    @pytest.mark.asyncio
    async def test_sends_system_and_rendered_user_prompt(
        self, client: MagicMock
    ) -> None:
        """The bundled prompt is sent as system and user messages."""
        provider = LLMChunkProvider(client, max_tokens=1500)

        await provider.chunk_text("PASAL 7 content")

        kwargs = client.complete.call_args.kwargs
        messages = kwargs["messages"]
        assert [m.role for m in messages] == [Role.SYSTEM, Role.USER]
        assert "intelligent chunking" in messages[0].content
        assert "Text to chunk:\nPASAL 7 content\n" in messages[1].content
        assert kwargs["max_tokens"] == 1500
        assert kwargs["temperature"] == 0.0

    @pytest.mark.asyncio
    async def test_custom_prompt_without_system(self, client: MagicMock) -> None:
        """A prompt without a system part sends one user message."""
        prompt = Prompt(
            name="terse",
            version="1",
            description="test prompt",
            inputs={"text": "block"},
            template="Chunk: {{ text }}",
        )
        provider = LLMChunkProvider(client, prompt=prompt)

        await provider.chunk_text("abc")

        messages = client.complete.call_args.kwargs["messages"]
        assert len(messages) == 1
        assert messages[0].content == "Chunk: abc"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, "", "   \n"])
    async def test_empty_content_raises(
        self, client: MagicMock, content: str | None
    ) -> None:
        """An empty reply is a provider error."""
        client.complete.return_value = _response(content, finish="error")
        provider = LLMChunkProvider(client)

        with pytest.raises(ChunkProviderError, match="returned no content"):
            await provider.chunk_text("raw block")

    @pytest.mark.asyncio
    async def test_client_errors_propagate(self, client: MagicMock) -> None:
        """Client failures are not swallowed."""
        client.complete.side_effect = RuntimeError("boom")
        provider = LLMChunkProvider(client)

        with pytest.raises(RuntimeError, match="boom"):
            await provider.chunk_text("raw block")

    def test_name_includes_model(self, client: MagicMock) -> None:
        """The provider name carries the model."""
        assert LLMChunkProvider(client).name == "llm:gpt-test"
