from cafeflow.helpers.ai.base import LLMHelper
from cafeflow.helpers.ai.parsing import parse_llm_json
from cafeflow.helpers.ai.schemas import SentimentResult

SENTIMENT_PROMPT = """Analyze the sentiment of the following text.
Respond ONLY with a valid JSON object in this exact format, nothing else:
{{"sentiment": "positive", "confidence": 0.95, "explanation": "Brief reason"}}

The "sentiment" field must be one of: "positive", "negative", or "neutral".
The "confidence" field must be a number between 0.0 and 1.0.
The "explanation" field must be a brief one-sentence explanation.

Text to analyze:
{text}"""


class SentimentAnalyzerHelper(LLMHelper):
    """Classifies text as positive, negative or neutral.

    Unparseable replies degrade to `SentimentResult.unknown()` instead of failing.
    """

    service_name = 'sentiment_analyzer'

    async def _analyze(self, text: str) -> SentimentResult:
        response = await self._send(SENTIMENT_PROMPT.format(text=text))
        return parse_llm_json(response, SentimentResult, SentimentResult.unknown())

    async def analyze(self, text: str) -> SentimentResult:
        return await self._aexecute('analyze', lambda: self._analyze(text))

    async def analyze_batch(self, texts: list[str]) -> list[SentimentResult]:
        async def work() -> list[SentimentResult]:
            return [await self._analyze(text) for text in texts]

        return await self._aexecute('analyze_batch', work)

    async def classify_simple(self, text: str) -> str:
        """Return only the sentiment label."""

        async def work() -> str:
            return (await self._analyze(text)).sentiment

        return await self._aexecute('classify_simple', work)
