"""LiteLLM provider with fallback support.

Provides a unified interface for LLM completions with automatic
fallback from primary to secondary model on failures.
"""

from cafeflow.core.providers.litellm.client import LiteLLMClient, is_transient
from cafeflow.core.providers.litellm.schemas import (
    CompletionRequest,
    CompletionResponse,
    FallbackConfig,
    Message,
    MessageRole,
)

__all__ = [
    'LiteLLMClient',
    'is_transient',
    'CompletionRequest',
    'CompletionResponse',
    'FallbackConfig',
    'Message',
    'MessageRole',
]
