"""Shared provider clients for external AI services.

Helpers talk to LLMs through these clients rather than through provider SDKs
directly, so provider selection and fallback live in one place.
"""

from cafeflow.core.providers.litellm import (
    CompletionRequest,
    CompletionResponse,
    FallbackConfig,
    LiteLLMClient,
    Message,
    MessageRole,
)

__all__ = [
    'LiteLLMClient',
    'CompletionRequest',
    'CompletionResponse',
    'FallbackConfig',
    'Message',
    'MessageRole',
]
