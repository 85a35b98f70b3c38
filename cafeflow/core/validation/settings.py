import os
from typing import Any


def lookup_setting(key: str, config: Any | None = None) -> str | None:
    """Resolve a setting by name.

    Checks the process environment first, then the loaded settings object
    (which also covers `.env`). Blank values count as not set.

    Args:
        key: Setting name, e.g. `SMTP_USERNAME`
        config: Settings object to fall back to (defaults to `app_config`)

    Returns:
        The value as a string, or None if unset
    """
    value = os.environ.get(key)
    if value is not None and value.strip():
        return value

    if config is None:
        from cafeflow.core.configs import app_config

        config = app_config

    attr = getattr(config, key, None)
    if attr is None:
        return None
    attr = str(attr)
    return attr if attr.strip() else None
