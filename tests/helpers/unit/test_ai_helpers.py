"""Tests for the LLM-backed helpers.

The LLM client is replaced by an AsyncMock whose `send` returns canned replies.
"""

from unittest.mock import AsyncMock, patch

import pytest

from cafeflow.core.exceptions import HelperError
from cafeflow.helpers.ai import (
    ClassificationResult,
    ContentGeneratorHelper,
    DataExtractorHelper,
    ExtractionResult,
    SentimentAnalyzerHelper,
    TextClassifierHelper,
    TextSummarizerHelper,
    TextTranslatorHelper,
    TopicExtractorHelper,
)


def _prompt(llm: AsyncMock, call: int = -1) -> str:
    return llm.send.call_args_list[call].args[0]


class TestTextSummarizer:
    """Tests for TextSummarizerHelper."""

    @pytest.fixture
    def summarizer(self, llm):
        return TextSummarizerHelper(llm_client=llm, rate_limit_seconds=0)

    async def test_summarize(self, summarizer, llm, faker):
        text = faker.paragraph()
        llm.send.return_value = 'Short summary.'

        assert await summarizer.summarize(text) == 'Short summary.'
        assert '2-3 concise sentences' in _prompt(llm)
        assert text in _prompt(llm)

    async def test_summarize_with_sentence_count(self, summarizer, llm):
        await summarizer.summarize('text', max_sentences=4)

        assert 'exactly 4 sentences' in _prompt(llm)

    async def test_summarize_batch_keeps_order(self, summarizer, llm):
        llm.send.side_effect = ['one', 'two', 'three']

        assert await summarizer.summarize_batch(['a', 'b', 'c']) == ['one', 'two', 'three']
        assert llm.send.call_count == 3

    async def test_summarize_batch_empty(self, summarizer, llm):
        assert await summarizer.summarize_batch([]) == []
        llm.send.assert_not_called()

    async def test_summarize_to_language(self, summarizer, llm):
        await summarizer.summarize_to_language('text', 'Portuguese')

        assert 'Write the summary in Portuguese' in _prompt(llm)

    async def test_failure_names_operation(self, summarizer, llm):
        llm.send.side_effect = ConnectionError('down')

        with pytest.raises(HelperError) as exc_info:
            await summarizer.summarize('text', max_sentences=2)

        assert exc_info.value.service_name == 'text_summarizer'
        assert exc_info.value.operation == 'summarize(2)'

    async def test_rate_limit_sleeps_before_each_call(self, llm):
        summarizer = TextSummarizerHelper(llm_client=llm, rate_limit_seconds=1.5)

        with patch('cafeflow.helpers.ai.base.asyncio.sleep', new_callable=AsyncMock) as sleep:
            await summarizer.summarize_batch(['a', 'b'])

        assert sleep.await_count == 2
        sleep.assert_awaited_with(1.5)


class TestSentimentAnalyzer:
    """Tests for SentimentAnalyzerHelper."""

    async def test_analyze(self, llm):
        llm.send.return_value = '```json\n{"sentiment": "negative", "confidence": 0.8, "explanation": "Angry"}\n```'

        result = await SentimentAnalyzerHelper(llm_client=llm).analyze('This is awful')

        assert result.sentiment == 'negative'
        assert result.confidence == 0.8
        assert 'This is awful' in _prompt(llm)

    async def test_unparseable_reply_is_unknown(self, llm):
        llm.send.return_value = 'Hmm, hard to say.'

        result = await SentimentAnalyzerHelper(llm_client=llm).analyze('text')

        assert result.sentiment == 'unknown'
        assert result.confidence == 0.0

    async def test_analyze_batch(self, llm):
        llm.send.side_effect = ['{"sentiment": "positive", "confidence": 1}', 'garbage']

        results = await SentimentAnalyzerHelper(llm_client=llm).analyze_batch(['good', '???'])

        assert [r.sentiment for r in results] == ['positive', 'unknown']

    async def test_classify_simple(self, llm):
        llm.send.return_value = '{"sentiment": "neutral", "confidence": 0.5, "explanation": ""}'

        assert await SentimentAnalyzerHelper(llm_client=llm).classify_simple('ok') == 'neutral'

    async def test_failure_is_wrapped_once(self, llm):
        llm.send.side_effect = TimeoutError()

        with pytest.raises(HelperError) as exc_info:
            await SentimentAnalyzerHelper(llm_client=llm).classify_simple('ok')

        assert exc_info.value.operation == 'classify_simple'
        assert isinstance(exc_info.value.cause, TimeoutError)


class TestTextClassifier:
    """Tests for TextClassifierHelper."""

    async def test_classify(self, llm):
        llm.send.return_value = '{"category": "bug", "confidence": 0.9, "reasoning": "Crash report"}'

        result = await TextClassifierHelper(llm_client=llm).classify('App crashes', ['bug', 'feature'])

        assert result == ClassificationResult(category='bug', confidence=0.9, reasoning='Crash report')
        assert '"bug", "feature"' in _prompt(llm)

    async def test_classify_unparseable(self, llm):
        llm.send.return_value = 'bug'

        result = await TextClassifierHelper(llm_client=llm).classify('App crashes', ['bug'])

        assert result == ClassificationResult.unknown()

    async def test_classify_batch_and_simple(self, llm):
        llm.send.return_value = '{"category": "feature", "confidence": 0.7, "reasoning": ""}'
        helper = TextClassifierHelper(llm_client=llm)

        batch = await helper.classify_batch(['a', 'b'], ['bug', 'feature'])
        label = await helper.classify_simple('c', ['bug', 'feature'])

        assert [r.category for r in batch] == ['feature', 'feature']
        assert label == 'feature'

    @pytest.mark.parametrize(
        ('reply', 'expected'),
        [('yes', True), ('  Yes.', True), ('YES, it does', True), ('no', False), ('Nope', False), ('', False)],
    )
    async def test_classify_boolean(self, llm, reply, expected):
        llm.send.return_value = reply

        assert await TextClassifierHelper(llm_client=llm).classify_boolean('text', 'Is it spam?') is expected

    async def test_matches_criteria(self, llm):
        llm.send.return_value = 'yes'

        assert await TextClassifierHelper(llm_client=llm).matches_criteria('Python 3.13 released', 'about Python')
        assert 'Criteria: about Python' in _prompt(llm)


class TestTextTranslator:
    """Tests for TextTranslatorHelper."""

    async def test_translate(self, llm):
        llm.send.return_value = 'Olá'

        assert await TextTranslatorHelper(llm_client=llm).translate('Hello', 'Portuguese') == 'Olá'
        assert 'to Portuguese' in _prompt(llm)

    async def test_translate_with_source_names_operation(self, llm):
        llm.send.side_effect = RuntimeError('boom')

        with pytest.raises(HelperError) as exc_info:
            await TextTranslatorHelper(llm_client=llm).translate('Hello', 'French', source_language='English')

        assert exc_info.value.operation == 'translate(English->French)'

    async def test_translate_batch(self, llm):
        llm.send.side_effect = ['Hola', 'Adiós']

        assert await TextTranslatorHelper(llm_client=llm).translate_batch(['Hi', 'Bye'], 'Spanish') == [
            'Hola',
            'Adiós',
        ]

    async def test_detect_language_strips_quotes(self, llm):
        llm.send.return_value = ' "Portuguese"\n'

        assert await TextTranslatorHelper(llm_client=llm).detect_language('Bom dia') == 'Portuguese'


class TestContentGenerator:
    """Tests for ContentGeneratorHelper."""

    async def test_generate_passes_instruction_verbatim(self, llm):
        llm.send.return_value = 'Done'

        assert await ContentGeneratorHelper(llm_client=llm).generate('Write a haiku') == 'Done'
        assert _prompt(llm) == 'Write a haiku'

    async def test_generate_email_lists_key_points(self, llm):
        await ContentGeneratorHelper(llm_client=llm).generate_email('Launch', 'Customers', ['Date', 'Pricing'])

        assert '- Date\n- Pricing' in _prompt(llm)

    async def test_long_tweet_is_truncated(self, llm):
        llm.send.return_value = 'x' * 300

        tweet = await ContentGeneratorHelper(llm_client=llm).generate_tweet('news')

        assert len(tweet) == 280
        assert tweet.endswith('...')

    async def test_short_tweet_is_kept(self, llm):
        llm.send.return_value = 'x' * 280

        assert await ContentGeneratorHelper(llm_client=llm).generate_tweet('news') == 'x' * 280

    async def test_social_post_operation_names_platform(self, llm):
        llm.send.side_effect = RuntimeError('boom')

        with pytest.raises(HelperError) as exc_info:
            await ContentGeneratorHelper(llm_client=llm).generate_social_post('LinkedIn', 'AI', 'formal')

        assert exc_info.value.operation == 'generate_social_post(LinkedIn)'

    async def test_report_and_tone(self, llm):
        helper = ContentGeneratorHelper(llm_client=llm)

        await helper.generate_report('Q3', ['Revenue up'])
        assert 'Report title: Q3' in _prompt(llm)

        await helper.rewrite_in_tone('hey', 'formal')
        assert 'formal tone' in _prompt(llm)


class TestDataExtractor:
    """Tests for DataExtractorHelper."""

    async def test_extract_fields(self, llm):
        llm.send.return_value = '{"fields": {"name": "Ana", "amount": "$5"}, "entities": ["Ana"], "confidence": 0.9}'

        result = await DataExtractorHelper(llm_client=llm).extract_fields('Ana paid $5', ['name', 'amount'])

        assert result.fields == {'name': 'Ana', 'amount': '$5'}
        assert result.entities == ['Ana']
        assert '"name": "extracted value or empty string"' in _prompt(llm)

    async def test_extract_fields_unparseable(self, llm):
        llm.send.return_value = 'sorry'

        assert await DataExtractorHelper(llm_client=llm).extract_fields('text', ['a']) == ExtractionResult()

    async def test_extract_entities(self, llm):
        llm.send.return_value = 'Entities: ["Google", "New York"]'

        assert await DataExtractorHelper(llm_client=llm).extract_entities('text') == ['Google', 'New York']

    async def test_extract_key_values(self, llm):
        llm.send.return_value = '{"invoice": "A-1", "total": 10}'

        assert await DataExtractorHelper(llm_client=llm).extract_key_values('text') == {'invoice': 'A-1', 'total': 10}

    async def test_extract_action_items_unparseable(self, llm):
        llm.send.return_value = 'None found.'

        assert await DataExtractorHelper(llm_client=llm).extract_action_items('text') == []


class TestTopicExtractor:
    """Tests for TopicExtractorHelper."""

    async def test_extract_topics(self, llm):
        llm.send.return_value = '["machine learning", "privacy"]'

        assert await TopicExtractorHelper(llm_client=llm).extract_topics('text') == ['machine learning', 'privacy']

    async def test_extract_topics_batch(self, llm):
        llm.send.side_effect = ['["a"]', 'oops']

        assert await TopicExtractorHelper(llm_client=llm).extract_topics_batch(['x', 'y']) == [['a'], []]

    async def test_hashtags_and_keywords_limits(self, llm):
        llm.send.return_value = '["#AI"]'
        helper = TopicExtractorHelper(llm_client=llm)

        assert await helper.generate_hashtags('text', max_hashtags=3) == ['#AI']
        assert 'up to 3 relevant hashtags' in _prompt(llm)

        await helper.extract_keywords('text')
        assert 'up to 10 important keywords' in _prompt(llm)

    async def test_generate_topic_label(self, llm):
        llm.send.return_value = '"Cloud Costs"\n'

        assert await TopicExtractorHelper(llm_client=llm).generate_topic_label('text') == 'Cloud Costs'
