"""AI activities backed by the LLM helpers.

Thin wrappers so workflows can run text analysis as retryable activities:
- summarize_text
- analyze_sentiment
- classify_text
- translate_text
- extract_topics
"""

from temporalio import activity

from cafeflow.helpers import get_helpers
from cafeflow.helpers.ai import ClassificationResult, SentimentResult
from cafeflow.temporal.schemas import ClassifyTextInput, TextInput, TranslateTextInput


@activity.defn
async def summarize_text(input: TextInput) -> str:
    activity.logger.info(f'Summarizing text: "{input.text[:50]}..."')
    return await get_helpers().get_or_raise('text_summarizer').summarize(input.text)


@activity.defn
async def analyze_sentiment(input: TextInput) -> SentimentResult:
    activity.logger.info(f'Analyzing sentiment: "{input.text[:50]}..."')
    return await get_helpers().get_or_raise('sentiment_analyzer').analyze(input.text)


@activity.defn
async def classify_text(input: ClassifyTextInput) -> ClassificationResult:
    activity.logger.info(f'Classifying text into {input.categories}')
    return await get_helpers().get_or_raise('text_classifier').classify(input.text, input.categories)


@activity.defn
async def translate_text(input: TranslateTextInput) -> str:
    activity.logger.info(f'Translating text to {input.target_language}')
    translator = get_helpers().get_or_raise('text_translator')
    return await translator.translate(input.text, input.target_language, input.source_language)


@activity.defn
async def extract_topics(input: TextInput) -> list[str]:
    activity.logger.info(f'Extracting topics: "{input.text[:50]}..."')
    return await get_helpers().get_or_raise('topic_extractor').extract_topics(input.text)
