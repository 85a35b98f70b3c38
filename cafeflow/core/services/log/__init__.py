"""Application logging.

Importing the structlog provider configures the stdlib `logging` tree and
structlog once per process.
"""

from typing import Any


def get_log_service() -> Any:
    """Return the configured application logger."""
    from cafeflow.core.services.log.providers.structlog.setup import logger

    return logger


def configure_logging() -> None:
    """Make sure logging is configured (idempotent)."""
    from cafeflow.core.services.log.providers.structlog import setup  # noqa: F401
