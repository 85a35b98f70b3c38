from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base settings class.

    Values are read from the process environment first, then from `.env`.
    """

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=True,
    )

    @staticmethod
    def _parse_list(value: Any) -> Any:
        """Allow comma-separated strings for list settings (e.g. `stream,file`)."""
        if isinstance(value, str):
            return [item.strip() for item in value.split(',') if item.strip()]
        return value
