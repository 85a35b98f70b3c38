"""Registry of constructed helpers.

The registry is the explicit list of helpers that are active in this process.
Its `is_present()` is the presence check used by the configuration report:
helpers that were not built are reported as inactive.

Example:
    helpers = get_helpers()
    reddit = helpers.get_or_raise('reddit')
    report_configuration(helpers.is_present)
"""

import logging
from collections.abc import Callable, Iterable

from cafeflow.core.base import BaseHelper
from cafeflow.core.configs import AppConfig, app_config

logger = logging.getLogger(__name__)


class HelperRegistry:
    """Insertion-ordered map of service name -> helper."""

    def __init__(self) -> None:
        self._helpers: dict[str, BaseHelper] = {}

    def register(self, helper: BaseHelper) -> None:
        """Register a helper under its service name.

        Raises:
            ValueError: If a helper with the same service name is already registered
        """
        name = helper.service_name
        if name in self._helpers:
            raise ValueError(f'Helper "{name}" is already registered')
        self._helpers[name] = helper
        logger.debug(f'Registered helper: {name}')

    def get(self, name: str) -> BaseHelper | None:
        return self._helpers.get(name)

    def get_or_raise(self, name: str) -> BaseHelper:
        """Get a helper by service name.

        Raises:
            ValueError: If the helper is not registered
        """
        helper = self._helpers.get(name)
        if helper is None:
            available = ', '.join(self._helpers) or '(none)'
            raise ValueError(f'Helper "{name}" not found. Available helpers: {available}')
        return helper

    def is_present(self, name: str) -> bool:
        return name in self._helpers

    def list_names(self) -> list[str]:
        return list(self._helpers)

    async def close_all(self) -> None:
        for helper in self._helpers.values():
            await helper.close()

    def __contains__(self, name: str) -> bool:
        return name in self._helpers

    def __len__(self) -> int:
        return len(self._helpers)


def _factories() -> dict[str, Callable[[], BaseHelper]]:
    # Imported here so that importing the registry stays cheap (no litellm / google clients)
    from cafeflow.helpers.ai import (
        ContentGeneratorHelper,
        DataExtractorHelper,
        SentimentAnalyzerHelper,
        TextClassifierHelper,
        TextSummarizerHelper,
        TextTranslatorHelper,
        TopicExtractorHelper,
    )
    from cafeflow.helpers.communication import EmailHelper, TelegramHelper
    from cafeflow.helpers.marketing import RedditHelper, TwitterHelper
    from cafeflow.helpers.office import GoogleDriveHelper

    return {
        'reddit': RedditHelper,
        'email': EmailHelper,
        'telegram': TelegramHelper,
        'twitter': TwitterHelper,
        'google_drive': GoogleDriveHelper,
        'text_summarizer': TextSummarizerHelper,
        'sentiment_analyzer': SentimentAnalyzerHelper,
        'text_translator': TextTranslatorHelper,
        'content_generator': ContentGeneratorHelper,
        'data_extractor': DataExtractorHelper,
        'text_classifier': TextClassifierHelper,
        'topic_extractor': TopicExtractorHelper,
    }


def build_helpers(enabled: Iterable[str] | None = None, config: AppConfig | None = None) -> HelperRegistry:
    """Construct the enabled helpers.

    Args:
        enabled: Service names to build (defaults to `HELPERS_ENABLED`)
        config: Settings to read `HELPERS_ENABLED` from (defaults to app_config)

    Returns:
        Registry with the built helpers, in `enabled` order

    Raises:
        ValueError: If a name does not match any known helper
    """
    config = config or app_config
    names = list(enabled if enabled is not None else config.HELPERS_ENABLED)
    factories = _factories()

    unknown = [name for name in names if name not in factories]
    if unknown:
        raise ValueError(f'Unknown helpers in HELPERS_ENABLED: {unknown}. Known helpers: {list(factories)}')

    registry = HelperRegistry()
    for name in names:
        registry.register(factories[name]())

    logger.info(f'Built {len(registry)} helpers: {registry.list_names()}')
    return registry


class _HelperRegistryHolder:
    """Holder for the process-wide helper registry."""

    instance: HelperRegistry | None = None


def get_helpers() -> HelperRegistry:
    """Get the process-wide helper registry, building it on first use."""
    if _HelperRegistryHolder.instance is None:
        _HelperRegistryHolder.instance = build_helpers()
    return _HelperRegistryHolder.instance
