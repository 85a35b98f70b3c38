#!/usr/bin/env python
"""Print the CafeFlow configuration report without starting the worker.

Builds the helpers listed in HELPERS_ENABLED and reports which of them have
the settings they need. Exits with status 1 when something is missing, so it
can gate a deploy.

Usage:
    uv run python scripts/check_config.py

    # Only check the helpers a workflow needs
    HELPERS_ENABLED=reddit,text_summarizer,email uv run python scripts/check_config.py
"""

import asyncio
import sys
from pathlib import Path

# Add app to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


async def check_config() -> bool:
    """Log the report and return True when every enabled helper is ready."""
    from cafeflow.core.configs import app_config
    from cafeflow.core.services.log import configure_logging, get_log_service
    from cafeflow.core.validation import ComponentState, report_configuration
    from cafeflow.helpers import build_helpers

    configure_logging()
    logger = get_log_service()

    helpers = build_helpers()
    try:
        statuses = report_configuration(helpers.is_present)
    finally:
        await helpers.close_all()

    missing = {s.name: list(s.missing_keys) for s in statuses if s.state == ComponentState.MISSING_CONFIG}
    logger.info(
        'configuration checked',
        environment=app_config.ENVIRONMENT,
        llm_provider=app_config.llm_provider,
        enabled=helpers.list_names(),
        missing=missing,
    )
    return not missing


def main() -> None:
    sys.exit(0 if asyncio.run(check_config()) else 1)


if __name__ == '__main__':
    main()
