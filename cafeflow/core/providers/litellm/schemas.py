"""Request and response models for the LLM client."""

from enum import Enum

from pydantic import BaseModel, Field


class MessageRole(str, Enum):
    SYSTEM = 'system'
    USER = 'user'


class Message(BaseModel):
    """One chat message sent to the provider."""

    role: MessageRole
    content: str


class FallbackConfig(BaseModel):
    """Which model to switch to when the primary provider has a transient failure."""

    enabled: bool = Field(True, description='Switch providers on transient errors')
    fallback_model: str | None = Field(None, description='Model of the other configured provider')
    max_retries: int = Field(2, ge=0, description='LiteLLM retries per model before switching')


class CompletionRequest(BaseModel):
    messages: list[Message] = Field(..., min_length=1, description='Prompt messages, system first')
    model: str | None = Field(None, description='Overrides the primary model')
    temperature: float = Field(0.7, ge=0.0, le=2.0)
    max_tokens: int = Field(2048, ge=1)


class CompletionResponse(BaseModel):
    content: str = Field(..., description='Reply text, empty when the provider returned none')
    model: str = Field(..., description='Model that produced the reply')
    fallback_used: bool = False
