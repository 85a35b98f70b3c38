"""LiteLLM client for the Gemini and Groq providers.

The primary model follows `LLM_DEFAULT_PROVIDER` when its key is set,
otherwise whichever provider has a key. When both keys are set the other
provider is used as fallback on transient errors.

Example:
    client = LiteLLMClient()

    text = await client.send('Summarize: ...')

    response = await client.complete(
        messages=[Message(role=MessageRole.USER, content='Hello!')],
        temperature=0.2,
    )
"""

import logging
import os
from typing import Any

from cafeflow.core.configs import AppConfig, app_config
from cafeflow.core.exceptions import LLMNotConfiguredError
from cafeflow.core.providers.litellm.schemas import (
    CompletionRequest,
    CompletionResponse,
    FallbackConfig,
    Message,
    MessageRole,
)

logger = logging.getLogger(__name__)

# LiteLLM exception class names raised for provider-side, retryable failures
TRANSIENT_ERRORS = ('RateLimitError', 'APIConnectionError', 'Timeout', 'ServiceUnavailableError')
TRANSIENT_MARKERS = ('rate limit', 'timeout', 'connection', 'unavailable', 'overloaded', '429', '502', '503')


def _provider_models(config: AppConfig) -> dict[str, str]:
    """Models for every provider that has an API key, keyed by provider name."""
    models = {}
    if config.GEMINI_API_KEY:
        models['gemini'] = config.GEMINI_MODEL
    if config.GROQ_API_KEY:
        models['groq'] = config.GROQ_MODEL
    return models


def is_transient(error: Exception) -> bool:
    """Whether `error` looks like a rate limit, timeout or outage rather than a bad request."""
    if any(name in type(error).__name__ for name in TRANSIENT_ERRORS):
        return True
    message = str(error).lower()
    return any(marker in message for marker in TRANSIENT_MARKERS)


class LiteLLMClient:
    """Async LLM client with provider fallback.

    Construction never fails; a client without any configured provider raises
    `LLMNotConfiguredError` on first use, so helpers can be built (and reported
    on) before keys are set.
    """

    def __init__(
        self,
        primary_model: str | None = None,
        fallback_config: FallbackConfig | None = None,
        config: AppConfig | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            primary_model: Override the model picked from configuration
            fallback_config: Custom fallback configuration
            config: Settings to read keys and models from (defaults to app_config)
        """
        self._config = config or app_config
        models = _provider_models(self._config)
        provider = self._config.llm_provider

        self._primary_model = primary_model or models.get(provider)
        if fallback_config is None:
            fallback_model = next((m for p, m in models.items() if p != provider), None)
            fallback_config = FallbackConfig(
                enabled=self._config.LLM_FALLBACK_ENABLED and fallback_model is not None,
                fallback_model=fallback_model,
                max_retries=self._config.LLM_MAX_RETRIES,
            )
        self._fallback_config = fallback_config
        self._timeout = self._config.LLM_TIMEOUT

        self._export_api_keys()

    @property
    def primary_model(self) -> str | None:
        return self._primary_model

    @property
    def is_configured(self) -> bool:
        return self._primary_model is not None

    def _export_api_keys(self) -> None:
        """LiteLLM reads provider keys from the environment."""
        if self._config.GEMINI_API_KEY:
            os.environ.setdefault('GEMINI_API_KEY', self._config.GEMINI_API_KEY)
        if self._config.GROQ_API_KEY:
            os.environ.setdefault('GROQ_API_KEY', self._config.GROQ_API_KEY)

    async def complete(
        self,
        messages: list[Message] | None = None,
        request: CompletionRequest | None = None,
        **kwargs: Any,
    ) -> CompletionResponse:
        """Generate a completion, switching to the fallback model on transient errors.

        Args:
            messages: List of messages (alternative to request)
            request: Full completion request
            **kwargs: Additional arguments passed to CompletionRequest

        Raises:
            LLMNotConfiguredError: If no provider key is configured
        """
        if request is None:
            if messages is None:
                raise ValueError('Either messages or request must be provided')
            request = CompletionRequest(messages=messages, **kwargs)

        model = request.model or self._primary_model
        if model is None:
            raise LLMNotConfiguredError()

        try:
            return await self._complete_with_model(request, model, fallback_used=False)
        except Exception as primary_error:
            fallback_model = self._fallback_config.fallback_model
            if not (self._fallback_config.enabled and fallback_model and is_transient(primary_error)):
                raise

            logger.warning(f'Primary model {model} failed ({primary_error}), falling back to {fallback_model}')
            try:
                return await self._complete_with_model(request, fallback_model, fallback_used=True)
            except Exception as fallback_error:
                raise RuntimeError(
                    f'Both primary ({model}) and fallback ({fallback_model}) models failed. '
                    f'Primary error: {primary_error}. Fallback error: {fallback_error}'
                ) from fallback_error

    async def complete_text(self, prompt: str, system_prompt: str | None = None, **kwargs: Any) -> CompletionResponse:
        messages = []
        if system_prompt:
            messages.append(Message(role=MessageRole.SYSTEM, content=system_prompt))
        messages.append(Message(role=MessageRole.USER, content=prompt))

        return await self.complete(messages=messages, **kwargs)

    async def send(self, prompt: str, system_prompt: str | None = None, **kwargs: Any) -> str:
        """Send a single prompt and return the raw text of the reply."""
        response = await self.complete_text(prompt, system_prompt=system_prompt, **kwargs)
        return response.content

    async def _complete_with_model(
        self,
        request: CompletionRequest,
        model: str,
        fallback_used: bool,
    ) -> CompletionResponse:
        # Imported lazily: litellm is slow to import and not needed by workflows
        import litellm

        response = await litellm.acompletion(
            model=model,
            messages=[{'role': msg.role.value, 'content': msg.content} for msg in request.messages],
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            timeout=self._timeout,
            num_retries=self._fallback_config.max_retries,
        )

        return CompletionResponse(
            content=response.choices[0].message.content or '',
            model=model,
            fallback_used=fallback_used,
        )
