"""Pytest configuration and fixtures.

Test Markers:
    - Default: Unit tests run automatically
    - @pytest.mark.manual: Integration tests against real services
    - @pytest.mark.slow: Tests that take more than a few seconds

Run commands:
    pytest                          # Run unit tests only (default)
    pytest -m manual                # Run manual/integration tests
    pytest -m "not slow"            # Skip slow tests
    pytest -m ""                    # Run ALL tests (no filter)
"""

import os
from unittest.mock import AsyncMock, patch

import pytest
from faker import Faker

from cafeflow.core.providers.litellm import LiteLLMClient


@pytest.fixture(scope='session')
def faker() -> Faker:
    return Faker()


@pytest.fixture
def isolated_env():
    """Restore os.environ after the test (LiteLLMClient exports provider keys)."""
    with patch.dict(os.environ):
        yield os.environ


@pytest.fixture
def llm() -> AsyncMock:
    """Stand-in LLM client; set `llm.send.return_value` to script the reply."""
    client = AsyncMock(spec=LiteLLMClient)
    client.send.return_value = ''
    return client


# =============================================================================
# Temporal Fixtures for Manual Tests
# =============================================================================


@pytest.fixture
async def temporal_client():
    """Get a Temporal client connected to the real server.

    Only used for manual tests.
    """
    from temporalio.client import Client
    from temporalio.contrib.pydantic import pydantic_data_converter

    from cafeflow.core.configs import app_config

    return await Client.connect(
        app_config.TEMPORAL_HOST,
        namespace=app_config.TEMPORAL_NAMESPACE,
        data_converter=pydantic_data_converter,
    )


@pytest.fixture(scope='session')
def task_queue():
    """Get the configured task queue."""
    from cafeflow.core.configs import app_config

    return app_config.TEMPORAL_TASK_QUEUE
