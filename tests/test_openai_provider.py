import asyncio
from types import SimpleNamespace

import pytest
from openai import OpenAIError

from stylist.core.config import Settings
from stylist.core.errors import ConfigurationError, TransportError
from stylist.services.llm import OpenAIProvider, build_provider


class FakeCompletions:
    def __init__(self, content="{}", error=None, delay=0.0, choices=True):
        self.content = content
        self.error = error
        self.delay = delay
        self.choices = choices
        self.kwargs = None

    async def create(self, **kwargs):
        self.kwargs = kwargs
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(
            choices=[SimpleNamespace(message=message)] if self.choices else [],
            usage=SimpleNamespace(prompt_tokens=12, completion_tokens=34),
        )


def _client(completions: FakeCompletions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


MESSAGES = [{"role": "user", "content": "hi"}]


@pytest.mark.asyncio
async def test_chat_json_mode_and_usage():
    completions = FakeCompletions(content='{"category": "generic"}')
    provider = OpenAIProvider("gpt-4o-mini", client=_client(completions), max_output_tokens=200)
    res = await provider.chat(MESSAGES, temperature=0.2, json_mode=True, timeout_ms=1000)
    assert res.content == '{"category": "generic"}'
    assert res.usage.model == "gpt-4o-mini"
    assert (res.usage.tokens_in, res.usage.tokens_out) == (12, 34)
    assert completions.kwargs["response_format"] == {"type": "json_object"}
    assert completions.kwargs["max_tokens"] == 200
    assert completions.kwargs["temperature"] == 0.2


@pytest.mark.asyncio
async def test_chat_plain_mode_omits_response_format():
    completions = FakeCompletions(content="[]")
    provider = OpenAIProvider("gpt-4o-mini", client=_client(completions))
    await provider.chat(MESSAGES, temperature=0.9, timeout_ms=1000)
    assert "response_format" not in completions.kwargs
    assert "max_tokens" not in completions.kwargs


@pytest.mark.asyncio
async def test_chat_without_choices_returns_empty_content():
    provider = OpenAIProvider("m", client=_client(FakeCompletions(choices=False)))
    res = await provider.chat(MESSAGES, temperature=0.2, timeout_ms=1000)
    assert res.content == ""


@pytest.mark.asyncio
async def test_api_errors_become_transport_errors():
    provider = OpenAIProvider("m", client=_client(FakeCompletions(error=OpenAIError("quota exceeded"))))
    with pytest.raises(TransportError):
        await provider.chat(MESSAGES, temperature=0.2, timeout_ms=1000)


@pytest.mark.asyncio
async def test_timeout_becomes_transport_error():
    provider = OpenAIProvider("m", client=_client(FakeCompletions(delay=1.0)))
    with pytest.raises(TransportError):
        await provider.chat(MESSAGES, temperature=0.2, timeout_ms=10)


def test_build_provider_requires_api_key():
    with pytest.raises(ConfigurationError):
        build_provider(Settings(OPENAI_API_KEY=None, _env_file=None))


def test_build_provider_uses_configured_model():
    provider = build_provider(Settings(OPENAI_API_KEY="sk-test", LLM_MODEL="gpt-4.1-mini", _env_file=None))
    assert isinstance(provider, OpenAIProvider)
    assert provider.model == "gpt-4.1-mini"
