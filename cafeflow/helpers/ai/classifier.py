from cafeflow.helpers.ai.base import LLMHelper
from cafeflow.helpers.ai.parsing import parse_llm_json
from cafeflow.helpers.ai.schemas import ClassificationResult

CLASSIFY_PROMPT = """Classify the following text into exactly ONE of these categories: [{categories}]
Respond ONLY with a valid JSON object in this exact format, nothing else:
{{"category": "chosen_category", "confidence": 0.95, "reasoning": "Brief explanation"}}

The "category" MUST be one of the provided categories exactly as written.
The "confidence" must be a number between 0.0 and 1.0.
The "reasoning" must be a brief one-sentence explanation.

Text:
{text}"""

YES_NO_PROMPT = """Based on the following text, answer this question with ONLY "yes" or "no":
{question}

Text:
{text}"""

CRITERIA_PROMPT = """Does the following text match this criteria? Answer ONLY "yes" or "no".
Criteria: {criteria}

Text:
{text}"""


def _format_categories(categories: list[str]) -> str:
    return ', '.join(f'"{category}"' for category in categories)


def _is_yes(response: str) -> bool:
    return 'yes' in response.strip().lower()


class TextClassifierHelper(LLMHelper):
    """Classifies text into caller-provided categories and answers yes/no questions."""

    service_name = 'text_classifier'

    async def _classify(self, text: str, categories: list[str]) -> ClassificationResult:
        prompt = CLASSIFY_PROMPT.format(categories=_format_categories(categories), text=text)
        response = await self._send(prompt)
        return parse_llm_json(response, ClassificationResult, ClassificationResult.unknown())

    async def classify(self, text: str, categories: list[str]) -> ClassificationResult:
        """Pick exactly one of `categories` for `text`."""
        return await self._aexecute('classify', lambda: self._classify(text, categories))

    async def classify_batch(self, texts: list[str], categories: list[str]) -> list[ClassificationResult]:
        async def work() -> list[ClassificationResult]:
            return [await self._classify(text, categories) for text in texts]

        return await self._aexecute('classify_batch', work)

    async def classify_simple(self, text: str, categories: list[str]) -> str:
        """Return only the category label."""

        async def work() -> str:
            return (await self._classify(text, categories)).category

        return await self._aexecute('classify_simple', work)

    async def classify_boolean(self, text: str, question: str) -> bool:
        """Answer a yes/no `question` about `text`."""

        async def work() -> bool:
            return _is_yes(await self._send(YES_NO_PROMPT.format(question=question, text=text)))

        return await self._aexecute('classify_boolean', work)

    async def matches_criteria(self, text: str, criteria: str) -> bool:
        """Whether `text` matches a filter condition, e.g. for filtering content in workflows."""

        async def work() -> bool:
            return _is_yes(await self._send(CRITERIA_PROMPT.format(criteria=criteria, text=text)))

        return await self._aexecute('matches_criteria', work)
