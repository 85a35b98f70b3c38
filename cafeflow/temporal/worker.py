"""Temporal Worker - runs workflows and activities.

On startup the worker builds the enabled helpers (`HELPERS_ENABLED`), logs the
configuration report, then discovers and registers workflows and activities.

Usage:
    python -m cafeflow.temporal.worker
"""

import asyncio
import logging
import signal
import sys
from typing import Any

from temporalio.client import Client
from temporalio.contrib.pydantic import pydantic_data_converter
from temporalio.worker import Worker

from cafeflow.core.configs import app_config
from cafeflow.core.services.log import configure_logging
from cafeflow.core.validation import ComponentState, report_configuration
from cafeflow.helpers import get_helpers
from cafeflow.temporal.registry import discover_activities, discover_workflows

logger = logging.getLogger('temporal.worker')


async def run_worker() -> None:
    """Run the Temporal worker."""
    helpers = get_helpers()
    statuses = report_configuration(helpers.is_present)
    ready = [s.name for s in statuses if s.state == ComponentState.READY]
    logger.info(f'Helpers ready: {ready}')

    workflows = discover_workflows()
    activities = discover_activities()

    activity_names = [a.__name__ for a in activities]
    logger.info(f'Discovered workflows: {[w.__name__ for w in workflows]}')
    logger.info(f'Discovered activities: {activity_names}')

    if not workflows:
        logger.warning('No workflows discovered!')

    if not activities:
        logger.warning('No activities discovered!')

    if app_config.WORKFLOW_SECRET_ENABLED:
        if not app_config.WORKFLOW_SECRET_KEY:
            raise ValueError('WORKFLOW_SECRET_ENABLED=True but WORKFLOW_SECRET_KEY is not set!')
        logger.info('Workflow secret authentication ENABLED')
    else:
        logger.info('Workflow secret authentication DISABLED')

    logger.info(f'Connecting to Temporal at {app_config.TEMPORAL_HOST}...')

    client = await Client.connect(
        app_config.TEMPORAL_HOST,
        namespace=app_config.TEMPORAL_NAMESPACE,
        data_converter=pydantic_data_converter,
    )

    logger.info(f'Connected! Task queue: {app_config.TEMPORAL_TASK_QUEUE}')

    worker = Worker(
        client,
        task_queue=app_config.TEMPORAL_TASK_QUEUE,
        workflows=workflows,
        activities=activities,
    )

    shutdown_event = asyncio.Event()

    def signal_handler(_sig: int, _frame: Any) -> None:
        logger.info('Shutting down...')
        shutdown_event.set()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    logger.info('Starting worker...')

    try:
        async with worker:
            logger.info(f'Worker started! Registered {len(activities)} activities: {activity_names}')
            await shutdown_event.wait()
    finally:
        await helpers.close_all()


def main() -> None:
    configure_logging()
    try:
        asyncio.run(run_worker())
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == '__main__':
    main()
