import pytest
from openai import OpenAIError

from backend.config import Settings
from backend.errors import (
    EmptyCompletionError,
    EmptyContentError,
    EmptyInstructionError,
    ProviderError,
)
from backend.services.completion_client import CompletionClient


@pytest.mark.asyncio
async def test_generate_summary_uses_provider_response(settings, make_provider):
    provider = make_provider(content="- Shipped v2")
    result = await CompletionClient(settings, client=provider).generate_summary("notes", "summarize")

    assert result.summary == "- Shipped v2"
    call = provider.completions.calls[0]
    assert call["model"] == "llama-3.1-8b-instant"
    assert call["temperature"] == 0.3
    assert call["max_tokens"] == 2000
    assert call["top_p"] == 1
    assert call["stream"] is False
    assert call["messages"][0]["role"] == "system"
    assert "notes" in call["messages"][1]["content"]


@pytest.mark.asyncio
async def test_generate_summary_validates_before_calling(settings, make_provider):
    provider = make_provider()
    completion_client = CompletionClient(settings, client=provider)

    with pytest.raises(EmptyContentError):
        await completion_client.generate_summary("", "summarize")
    with pytest.raises(EmptyInstructionError):
        await completion_client.generate_summary("notes", "")
    assert provider.completions.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [None, "", "   "])
async def test_generate_summary_rejects_empty_completion(settings, make_provider, content):
    provider = make_provider(content=content)
    with pytest.raises(EmptyCompletionError):
        await CompletionClient(settings, client=provider).generate_summary("notes", "summarize")


@pytest.mark.asyncio
async def test_generate_summary_wraps_provider_errors(settings, make_provider):
    provider = make_provider(error=OpenAIError("rate limited"))
    with pytest.raises(ProviderError) as exc_info:
        await CompletionClient(settings, client=provider).generate_summary("notes", "summarize")
    assert exc_info.value.detail == "rate limited"
    assert exc_info.value.message == "Error generating summary: rate limited"
    assert len(provider.completions.calls) == 1


@pytest.mark.asyncio
async def test_generate_summary_without_api_key_fails_at_call_time():
    settings = Settings(_env_file=None, groq_api_key=None)
    with pytest.raises(ProviderError):
        await CompletionClient(settings).generate_summary("notes", "summarize")
