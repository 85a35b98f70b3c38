from abc import ABC
from collections.abc import Awaitable, Callable
from typing import ClassVar, TypeVar

from cafeflow.core.base.executor import arun_value, run_value

T = TypeVar('T')


class BaseHelper(ABC):
    """Base class for helpers wrapping a single external service.

    Subclasses set `service_name` and route every external call through
    `_execute` / `_aexecute`, giving each call a per-method operation name.

    Example:
        class RedditHelper(BaseHelper):
            service_name = 'reddit'

            async def fetch_top_posts(self, subreddit: str) -> list[RedditPost]:
                return await self._aexecute('fetch_top_posts', lambda: self._fetch(subreddit))
    """

    service_name: ClassVar[str]

    def _execute(self, operation: str, work: Callable[[], T]) -> T:
        return run_value(self.service_name, operation, work)

    async def _aexecute(self, operation: str, work: Callable[[], Awaitable[T]]) -> T:
        return await arun_value(self.service_name, operation, work)

    async def close(self) -> None:  # noqa: B027
        """Close any resources held by the helper.

        Override in helpers that keep clients open.
        """

    def __repr__(self) -> str:
        return f'{type(self).__name__}(service_name={self.service_name!r})'
