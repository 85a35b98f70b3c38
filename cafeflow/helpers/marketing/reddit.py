import httpx

from cafeflow.core.base import BaseHelper
from cafeflow.core.configs import app_config
from cafeflow.helpers.marketing.schemas import RedditPost


class RedditHelper(BaseHelper):
    """Reads subreddit listings from Reddit's public JSON endpoints (no credentials)."""

    service_name = 'reddit'

    BASE_URL = 'https://www.reddit.com'

    def __init__(self, user_agent: str | None = None) -> None:
        self._user_agent = user_agent or app_config.REDDIT_USER_AGENT
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.BASE_URL,
                headers={'User-Agent': self._user_agent},
                timeout=30.0,
                follow_redirects=True,
            )
        return self._client

    async def fetch_top_posts(self, subreddit: str, limit: int = 5, time_filter: str = 'day') -> list[RedditPost]:
        """Fetch the top posts of a subreddit.

        Args:
            subreddit: Subreddit name without the `r/` prefix
            limit: Maximum number of posts
            time_filter: Reddit's `t` parameter (hour, day, week, month, year, all)

        Returns:
            Posts in listing order
        """

        async def work() -> list[RedditPost]:
            client = await self._get_client()
            response = await client.get(f'/r/{subreddit}/top/.json', params={'limit': limit, 't': time_filter})

            if response.status_code != 200:
                raise Exception(f'Reddit API returned status {response.status_code}')

            children = response.json().get('data', {}).get('children', [])
            return [RedditPost.model_validate(child.get('data', {})) for child in children]

        return await self._aexecute('fetch_top_posts', work)

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
