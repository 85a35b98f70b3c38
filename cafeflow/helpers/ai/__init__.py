"""LLM-powered helpers (Gemini / Groq through LiteLLM)."""

from cafeflow.helpers.ai.base import LLMHelper
from cafeflow.helpers.ai.classifier import TextClassifierHelper
from cafeflow.helpers.ai.content_generator import ContentGeneratorHelper
from cafeflow.helpers.ai.data_extractor import DataExtractorHelper
from cafeflow.helpers.ai.schemas import ClassificationResult, ExtractionResult, SentimentResult
from cafeflow.helpers.ai.sentiment import SentimentAnalyzerHelper
from cafeflow.helpers.ai.summarizer import TextSummarizerHelper
from cafeflow.helpers.ai.topic_extractor import TopicExtractorHelper
from cafeflow.helpers.ai.translator import TextTranslatorHelper

__all__ = [
    'ClassificationResult',
    'ContentGeneratorHelper',
    'DataExtractorHelper',
    'ExtractionResult',
    'LLMHelper',
    'SentimentAnalyzerHelper',
    'SentimentResult',
    'TextClassifierHelper',
    'TextSummarizerHelper',
    'TextTranslatorHelper',
    'TopicExtractorHelper',
]
