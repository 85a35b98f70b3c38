from cafeflow.core.configs import app_config
from cafeflow.core.providers.litellm import LiteLLMClient
from cafeflow.helpers.ai.base import LLMHelper


class TextSummarizerHelper(LLMHelper):
    """Summarizes text with an LLM, throttled by `LLM_RATE_LIMIT_SECONDS` per call."""

    service_name = 'text_summarizer'

    def __init__(self, llm_client: LiteLLMClient | None = None, rate_limit_seconds: float | None = None) -> None:
        if rate_limit_seconds is None:
            rate_limit_seconds = app_config.LLM_RATE_LIMIT_SECONDS
        super().__init__(llm_client, rate_limit_seconds)

    async def summarize(self, text: str, max_sentences: int | None = None) -> str:
        """Summarize `text` in 2-3 sentences, or in exactly `max_sentences` sentences."""
        if max_sentences is None:
            operation = 'summarize'
            prompt = f'Summarize the following text in 2-3 concise sentences:\n\n{text}'
        else:
            operation = f'summarize({max_sentences})'
            prompt = f'Summarize the following text in exactly {max_sentences} sentences:\n\n{text}'

        return await self._aexecute(operation, lambda: self._send(prompt))

    async def summarize_batch(self, texts: list[str]) -> list[str]:
        """Summarize each text individually; results keep the input order."""

        async def work() -> list[str]:
            summaries = []
            for text in texts:
                summaries.append(await self._send(f'Summarize the following text in 2-3 concise sentences:\n\n{text}'))
            return summaries

        return await self._aexecute('summarize_batch', work)

    async def summarize_to_language(self, text: str, target_language: str) -> str:
        """Summarize `text` and write the summary in `target_language`."""
        prompt = f'Summarize the following text in 2-3 sentences. Write the summary in {target_language}:\n\n{text}'
        return await self._aexecute(f'summarize_to_language({target_language})', lambda: self._send(prompt))
