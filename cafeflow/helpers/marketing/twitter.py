from typing import Any

import httpx

from cafeflow.core.base import BaseHelper
from cafeflow.core.configs import app_config


class TwitterHelper(BaseHelper):
    """X/Twitter API v2 with bearer-token auth.

    Posting normally requires a user-context token; an app-only bearer token
    is enough for lookups.
    """

    service_name = 'twitter'

    def __init__(self, bearer_token: str | None = None, base_url: str | None = None) -> None:
        self._bearer_token = bearer_token or app_config.X_BEARER_TOKEN
        self._base_url = base_url or app_config.X_API_URL
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={'Authorization': f'Bearer {self._bearer_token or ""}'},
                timeout=30.0,
            )
        return self._client

    async def get_user_by_username(self, username: str) -> dict[str, Any]:
        """GET /2/users/by/username/:username"""

        async def work() -> dict[str, Any]:
            client = await self._get_client()
            response = await client.get(f'/users/by/username/{username}')
            if response.status_code != 200:
                raise Exception(f'X API error: {response.status_code} - {response.text}')
            return response.json()

        return await self._aexecute('get_user_by_username', work)

    async def post_tweet(self, text: str) -> dict[str, Any]:
        """POST /2/tweets"""

        async def work() -> dict[str, Any]:
            client = await self._get_client()
            response = await client.post('/tweets', json={'text': text})
            if response.status_code != 201:
                raise Exception(f'X API error: {response.status_code} - {response.text}')
            return response.json()

        return await self._aexecute('post_tweet', work)

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
