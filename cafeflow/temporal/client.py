"""Temporal Client - for starting, querying and scheduling workflows.

Example usage:
    from cafeflow.temporal.client import execute_workflow, schedule_workflow
    from cafeflow.temporal.workflows import RedditDigestInput, RedditDigestWorkflow

    # Start and wait for result
    result = await execute_workflow(
        RedditDigestWorkflow.run,
        RedditDigestInput(subreddit='python', target_email='team@example.com'),
    )

    # Or start and get handle for async tracking
    handle = await start_workflow(
        RedditDigestWorkflow.run,
        RedditDigestInput(subreddit='python', target_email='team@example.com'),
    )
    status = await handle.query(RedditDigestWorkflow.get_status)
    result = await handle.result()

    # Or run it every day
    await schedule_workflow(
        'reddit-digest-schedule',
        RedditDigestWorkflow.run,
        RedditDigestInput(subreddit='python', target_email='team@example.com'),
        every=timedelta(hours=24),
    )

Authentication:
    When WORKFLOW_SECRET_ENABLED=True (production), include secret_key in workflow input:
    result = await execute_workflow(
        MyWorkflow.run,
        MyInput(secret_key='your-secret-key', ...),
    )
"""

import logging
import uuid
from datetime import timedelta
from typing import Any

from temporalio.client import (
    Client,
    Schedule,
    ScheduleActionStartWorkflow,
    ScheduleAlreadyRunningError,
    ScheduleIntervalSpec,
    ScheduleOverlapPolicy,
    SchedulePolicy,
    ScheduleSpec,
    WorkflowHandle,
)
from temporalio.contrib.pydantic import pydantic_data_converter

from cafeflow.core.configs import app_config

logger = logging.getLogger('temporal.client')


class _ClientHolder:
    """Holder for singleton Temporal client instance."""

    instance: Client | None = None


async def get_temporal_client() -> Client:
    """Get or create the Temporal client.

    Uses a singleton pattern to reuse connections.
    """
    if _ClientHolder.instance is None:
        logger.info('Connecting to Temporal at %s...', app_config.TEMPORAL_HOST)

        try:
            _ClientHolder.instance = await Client.connect(
                app_config.TEMPORAL_HOST,
                namespace=app_config.TEMPORAL_NAMESPACE,
                data_converter=pydantic_data_converter,
            )

            logger.info('Connected to Temporal successfully (namespace: %s)', app_config.TEMPORAL_NAMESPACE)
        except Exception:
            logger.exception('Failed to connect to Temporal at %s', app_config.TEMPORAL_HOST)
            raise

    return _ClientHolder.instance


async def start_workflow(
    workflow: Any,
    arg: Any,
    *,
    id: str | None = None,
    task_queue: str | None = None,
) -> WorkflowHandle:
    """Start a workflow and return a handle.

    Args:
        workflow: The workflow run method (e.g., RedditDigestWorkflow.run)
        arg: The workflow input (must include secret_key when auth enabled)
        id: Optional workflow ID (auto-generated if not provided)
        task_queue: Optional task queue (uses default if not provided)

    Returns:
        WorkflowHandle to query/wait for the workflow

    Example:
        handle = await start_workflow(
            HelloWorldWorkflow.run,
            HelloWorldInput(name="World"),
        )
        result = await handle.result()
    """
    client = await get_temporal_client()

    workflow_id = id or f'workflow-{uuid.uuid4().hex[:12]}'
    queue = task_queue or app_config.TEMPORAL_TASK_QUEUE

    handle = await client.start_workflow(
        workflow,
        arg,
        id=workflow_id,
        task_queue=queue,
    )

    return handle


async def execute_workflow(
    workflow: Any,
    arg: Any,
    *,
    id: str | None = None,
    task_queue: str | None = None,
) -> Any:
    """Start a workflow and wait for its result.

    This is a convenience method that combines start + wait.

    Args:
        workflow: The workflow run method
        arg: The workflow input (must include secret_key when auth enabled)
        id: Optional workflow ID
        task_queue: Optional task queue

    Returns:
        The workflow result
    """
    handle = await start_workflow(workflow, arg, id=id, task_queue=task_queue)
    return await handle.result()


async def get_workflow_handle(workflow_id: str) -> WorkflowHandle:
    """Get a handle to an existing workflow by ID.

    Useful for querying status or waiting for completion of
    a previously started workflow.

    Args:
        workflow_id: The workflow ID

    Returns:
        WorkflowHandle
    """
    client = await get_temporal_client()
    return client.get_workflow_handle(workflow_id)


async def cancel_workflow(workflow_id: str) -> None:
    """Cancel a running workflow.

    Args:
        workflow_id: The workflow ID to cancel
    """
    handle = await get_workflow_handle(workflow_id)
    await handle.cancel()


async def query_workflow(workflow_id: str, query_name: str) -> Any:
    """Query a workflow for its current state.

    Args:
        workflow_id: The workflow ID
        query_name: Name of the query (e.g., 'get_status', 'get_current_step')

    Returns:
        The query result
    """
    handle = await get_workflow_handle(workflow_id)
    return await handle.query(query_name)


async def schedule_workflow(
    schedule_id: str,
    workflow: Any,
    arg: Any,
    *,
    every: timedelta,
    workflow_id: str | None = None,
    task_queue: str | None = None,
) -> bool:
    """Run a workflow on a fixed interval using a Temporal schedule.

    Overlapping runs are skipped. Creating a schedule that already exists is a
    no-op, so this is safe to call on every deploy.

    Args:
        schedule_id: Schedule ID (e.g., 'reddit-digest-schedule')
        workflow: The workflow run method
        arg: The workflow input
        every: Interval between runs
        workflow_id: Workflow ID used for each run (defaults to '<schedule_id>-run')
        task_queue: Optional task queue (uses default if not provided)

    Returns:
        True if the schedule was created, False if it already existed
    """
    client = await get_temporal_client()

    schedule = Schedule(
        action=ScheduleActionStartWorkflow(
            workflow,
            arg,
            id=workflow_id or f'{schedule_id}-run',
            task_queue=task_queue or app_config.TEMPORAL_TASK_QUEUE,
        ),
        spec=ScheduleSpec(intervals=[ScheduleIntervalSpec(every=every)]),
        policy=SchedulePolicy(overlap=ScheduleOverlapPolicy.SKIP),
    )

    try:
        await client.create_schedule(schedule_id, schedule)
    except ScheduleAlreadyRunningError:
        logger.info('Schedule already exists: %s', schedule_id)
        return False

    logger.info('Schedule created: %s (every %s)', schedule_id, every)
    return True
