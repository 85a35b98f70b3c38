from typing import Any

from pydantic import BaseModel, Field


class SentimentResult(BaseModel):
    """Sentiment of a text as judged by the LLM."""

    sentiment: str = Field(..., description='positive, negative, neutral (or unknown on parse failure)')
    confidence: float = Field(0.0, description='Confidence between 0.0 and 1.0')
    explanation: str = Field('', description='One-sentence reason')

    @classmethod
    def unknown(cls) -> 'SentimentResult':
        return cls(sentiment='unknown', confidence=0.0, explanation='Failed to parse LLM response')


class ClassificationResult(BaseModel):
    """Category chosen by the LLM for a text."""

    category: str = Field(..., description='One of the requested categories (or unknown)')
    confidence: float = Field(0.0, description='Confidence between 0.0 and 1.0')
    reasoning: str = Field('', description='One-sentence reason')

    @classmethod
    def unknown(cls) -> 'ClassificationResult':
        return cls(category='unknown', confidence=0.0, reasoning='Failed to parse LLM response')


class ExtractionResult(BaseModel):
    """Fields and entities extracted from unstructured text."""

    fields: dict[str, Any] = Field(default_factory=dict, description='Requested field values (empty if not found)')
    entities: list[str] = Field(default_factory=list, description='Named entities found in the text')
    confidence: float = Field(0.0, description='Confidence between 0.0 and 1.0')
