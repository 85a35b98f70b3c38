import asyncio
import logging

from cafeflow.core.base import BaseHelper
from cafeflow.core.providers.litellm import LiteLLMClient

logger = logging.getLogger(__name__)


class LLMHelper(BaseHelper):
    """Base for helpers that prompt an LLM.

    `rate_limit_seconds` adds a fixed delay before each call; it is a plain
    throttle for providers with tight free-tier limits, not a scheduler.
    """

    def __init__(self, llm_client: LiteLLMClient | None = None, rate_limit_seconds: float = 0.0) -> None:
        self._llm = llm_client or LiteLLMClient()
        self._rate_limit_seconds = rate_limit_seconds

    async def _send(self, prompt: str) -> str:
        if self._rate_limit_seconds > 0:
            logger.debug(f'Applying {self._rate_limit_seconds}s delay for rate limiting...')
            await asyncio.sleep(self._rate_limit_seconds)
        return await self._llm.send(prompt)
