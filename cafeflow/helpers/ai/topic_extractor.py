from cafeflow.helpers.ai.base import LLMHelper
from cafeflow.helpers.ai.parsing import parse_llm_json

TOPICS_PROMPT = """Extract the main topics and themes from the following text.
Return ONLY a JSON array of short topic strings (2-4 words each), nothing else.
Return at most 5 topics, ordered by relevance.
Example: ["machine learning", "data privacy", "cloud computing"]

Text:
{text}"""

HASHTAGS_PROMPT = """Generate up to {limit} relevant hashtags for the following text.
Return ONLY a JSON array of hashtag strings (with # prefix), nothing else.
Example: ["#AI", "#MachineLearning", "#Tech"]

Text:
{text}"""

KEYWORDS_PROMPT = """Extract up to {limit} important keywords from the following text.
Keywords should be relevant for search and categorization.
Return ONLY a JSON array of keyword strings, nothing else.
Example: ["artificial intelligence", "neural network", "deep learning"]

Text:
{text}"""

LABEL_PROMPT = """Generate a single short topic label (2-5 words) that best describes the following text.
Return ONLY the label, nothing else.

Text:
{text}"""


class TopicExtractorHelper(LLMHelper):
    """Extracts topics, hashtags, keywords and labels."""

    service_name = 'topic_extractor'

    async def _string_list(self, prompt: str) -> list[str]:
        return parse_llm_json(await self._send(prompt), list[str], [], array=True)

    async def extract_topics(self, text: str) -> list[str]:
        """At most 5 topics, most relevant first."""
        return await self._aexecute('extract_topics', lambda: self._string_list(TOPICS_PROMPT.format(text=text)))

    async def extract_topics_batch(self, texts: list[str]) -> list[list[str]]:
        async def work() -> list[list[str]]:
            return [await self._string_list(TOPICS_PROMPT.format(text=text)) for text in texts]

        return await self._aexecute('extract_topics_batch', work)

    async def generate_hashtags(self, text: str, max_hashtags: int = 5) -> list[str]:
        prompt = HASHTAGS_PROMPT.format(limit=max_hashtags, text=text)
        return await self._aexecute('generate_hashtags', lambda: self._string_list(prompt))

    async def extract_keywords(self, text: str, max_keywords: int = 10) -> list[str]:
        """Plain keywords (no `#`) for search and categorization."""
        prompt = KEYWORDS_PROMPT.format(limit=max_keywords, text=text)
        return await self._aexecute('extract_keywords', lambda: self._string_list(prompt))

    async def generate_topic_label(self, text: str) -> str:
        async def work() -> str:
            return (await self._send(LABEL_PROMPT.format(text=text))).strip().replace('"', '')

        return await self._aexecute('generate_topic_label', work)
