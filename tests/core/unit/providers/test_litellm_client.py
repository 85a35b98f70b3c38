"""Tests for the LiteLLM client (provider selection and fallback)."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from cafeflow.core.configs import AppConfig
from cafeflow.core.exceptions import LLMNotConfiguredError
from cafeflow.core.providers.litellm import CompletionResponse, LiteLLMClient, Message, MessageRole, is_transient


def _config(**overrides) -> AppConfig:
    values = {'GEMINI_API_KEY': None, 'GROQ_API_KEY': None, 'LLM_DEFAULT_PROVIDER': 'gemini'}
    values.update(overrides)
    return AppConfig(_env_file=None, **values)


def _response(content: str, model: str, fallback_used: bool = False) -> CompletionResponse:
    return CompletionResponse(content=content, model=model, fallback_used=fallback_used)


@pytest.fixture(autouse=True)
def _isolate(isolated_env):
    yield


class TestProviderSelection:
    """Tests for picking the primary and fallback models."""

    def test_no_keys(self):
        client = LiteLLMClient(config=_config())

        assert client.primary_model is None
        assert not client.is_configured

    def test_default_provider_wins_when_configured(self):
        config = _config(GEMINI_API_KEY='g', GROQ_API_KEY='q', LLM_DEFAULT_PROVIDER='groq')

        client = LiteLLMClient(config=config)

        assert client.primary_model == config.GROQ_MODEL
        assert client._fallback_config.fallback_model == config.GEMINI_MODEL
        assert client._fallback_config.enabled

    def test_falls_back_to_any_configured_provider(self):
        config = _config(GROQ_API_KEY='q', LLM_DEFAULT_PROVIDER='gemini')

        client = LiteLLMClient(config=config)

        assert config.llm_provider == 'groq'
        assert client.primary_model == config.GROQ_MODEL
        assert not client._fallback_config.enabled

    def test_fallback_can_be_disabled(self):
        config = _config(GEMINI_API_KEY='g', GROQ_API_KEY='q', LLM_FALLBACK_ENABLED=False)

        assert not LiteLLMClient(config=config)._fallback_config.enabled

    def test_explicit_primary_model(self):
        client = LiteLLMClient(primary_model='groq/custom', config=_config())

        assert client.primary_model == 'groq/custom'

    def test_keys_are_exported_for_litellm(self, isolated_env):
        isolated_env.pop('GEMINI_API_KEY', None)

        LiteLLMClient(config=_config(GEMINI_API_KEY='g-key'))

        assert isolated_env['GEMINI_API_KEY'] == 'g-key'


class TestComplete:
    """Tests for complete() / send()."""

    async def test_not_configured_raises(self):
        client = LiteLLMClient(config=_config())

        with pytest.raises(LLMNotConfiguredError):
            await client.send('Hello')

    async def test_requires_messages_or_request(self):
        client = LiteLLMClient(config=_config(GEMINI_API_KEY='g'))

        with pytest.raises(ValueError, match='Either messages or request'):
            await client.complete()

    async def test_send_returns_content(self):
        config = _config(GEMINI_API_KEY='g')
        client = LiteLLMClient(config=config)

        with patch.object(client, '_complete_with_model', AsyncMock(return_value=_response('Hi!', 'm'))) as mock:
            assert await client.send('Hello', system_prompt='Be brief') == 'Hi!'

        request, model = mock.call_args.args[:2]
        assert model == config.GEMINI_MODEL
        assert request.messages == [
            Message(role=MessageRole.SYSTEM, content='Be brief'),
            Message(role=MessageRole.USER, content='Hello'),
        ]

    async def test_falls_back_on_transient_error(self):
        config = _config(GEMINI_API_KEY='g', GROQ_API_KEY='q')
        client = LiteLLMClient(config=config)
        side_effect = [Exception('429 rate limit exceeded'), _response('ok', config.GROQ_MODEL, True)]

        with patch.object(client, '_complete_with_model', AsyncMock(side_effect=side_effect)) as mock:
            response = await client.complete(messages=[Message(role=MessageRole.USER, content='Hi')])

        assert response.fallback_used
        assert [call.args[1] for call in mock.call_args_list] == [config.GEMINI_MODEL, config.GROQ_MODEL]

    async def test_no_fallback_on_permanent_error(self):
        client = LiteLLMClient(config=_config(GEMINI_API_KEY='g', GROQ_API_KEY='q'))

        with (
            patch.object(client, '_complete_with_model', AsyncMock(side_effect=ValueError('invalid prompt'))) as mock,
            pytest.raises(ValueError),
        ):
            await client.send('Hi')

        assert mock.call_count == 1

    async def test_both_models_fail(self):
        client = LiteLLMClient(config=_config(GEMINI_API_KEY='g', GROQ_API_KEY='q'))
        side_effect = [Exception('503 unavailable'), Exception('timeout')]

        with (
            patch.object(client, '_complete_with_model', AsyncMock(side_effect=side_effect)),
            pytest.raises(RuntimeError, match='Both primary'),
        ):
            await client.send('Hi')

    async def test_calls_litellm(self):
        config = _config(GROQ_API_KEY='q')
        client = LiteLLMClient(config=config)
        litellm_response = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=None))])

        with patch('litellm.acompletion', AsyncMock(return_value=litellm_response)) as mock:
            response = await client.complete(
                messages=[Message(role=MessageRole.USER, content='Hello')],
                temperature=0.2,
            )

        kwargs = mock.call_args.kwargs
        assert kwargs['model'] == config.GROQ_MODEL
        assert kwargs['messages'] == [{'role': 'user', 'content': 'Hello'}]
        assert kwargs['temperature'] == 0.2
        assert kwargs['timeout'] == config.LLM_TIMEOUT
        assert kwargs['num_retries'] == config.LLM_MAX_RETRIES
        assert response.content == ''
        assert response.model == config.GROQ_MODEL
        assert not response.fallback_used


class RateLimitError(Exception):
    pass


@pytest.mark.parametrize(
    ('error', 'expected'),
    [
        (RateLimitError('slow down'), True),
        (Exception('Service Unavailable (503)'), True),
        (TimeoutError('request timeout'), True),
        (ValueError('invalid prompt'), False),
        (KeyError('model'), False),
    ],
)
def test_is_transient(error, expected):
    assert is_transient(error) is expected
