"""Shared workflow plumbing: step tracking, secret check and activity defaults."""

from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Any

from temporalio import workflow
from temporalio.common import RetryPolicy
from temporalio.exceptions import ApplicationError

from cafeflow.temporal.schemas import StepProgress, WorkflowInput, WorkflowStatus

# Helper failures surface as HelperError; three attempts, one second apart at first
FAST_RETRY = RetryPolicy(
    initial_interval=timedelta(seconds=1),
    maximum_attempts=3,
)

ACTIVITY_TIMEOUT = timedelta(minutes=5)


def check_secret(input: WorkflowInput) -> None:
    """Reject the run when secret authentication is on and `input.secret_key` does not match.

    Raises:
        ApplicationError: Non-retryable, so a wrong key is never retried.
    """
    with workflow.unsafe.imports_passed_through():
        from cafeflow.core.configs import app_config

    if not app_config.WORKFLOW_SECRET_ENABLED:
        return
    if not app_config.WORKFLOW_SECRET_KEY:
        raise ApplicationError('WORKFLOW_SECRET_KEY not configured on server', non_retryable=True)
    if input.secret_key != app_config.WORKFLOW_SECRET_KEY:
        raise ApplicationError('Authentication failed: invalid secret_key', non_retryable=True)


class WorkflowContext:
    """Status and current step of a running workflow, exposed through queries.

    Usage:
        self._ctx.start(input)

        async with self._ctx.step('fetch', 'Fetch Top Posts', 10):
            posts = await run_activity(fetch_top_posts, FetchPostsInput(...))

        self._ctx.complete()
    """

    def __init__(self) -> None:
        self.status = WorkflowStatus.PENDING
        self.current_step: StepProgress | None = None

    def start(self, input: WorkflowInput) -> None:
        check_secret(input)
        self.status = WorkflowStatus.RUNNING

    def complete(self, message: str = 'Done!') -> None:
        self.status = WorkflowStatus.COMPLETED
        self.current_step = StepProgress('complete', 'Complete', WorkflowStatus.COMPLETED, 100, message)

    @asynccontextmanager
    async def step(self, step_id: str, step_name: str, progress_pct: int) -> AsyncGenerator[None, None]:
        """Mark a step running; a raised exception marks it and the workflow failed."""
        step = StepProgress(step_id, step_name, WorkflowStatus.RUNNING, progress_pct, f'{step_name}...')
        self.current_step = step
        try:
            yield
        except Exception as e:
            step.status = WorkflowStatus.FAILED
            step.message = str(e)
            self.status = WorkflowStatus.FAILED
            raise
        step.status = WorkflowStatus.COMPLETED


async def run_activity(activity: Callable | str, arg: Any) -> Any:
    """Execute one activity with the shared timeout and retry policy.

    Example:
        posts = await run_activity(fetch_top_posts, FetchPostsInput(subreddit='python'))
    """
    return await workflow.execute_activity(
        activity,
        arg,
        start_to_close_timeout=ACTIVITY_TIMEOUT,
        retry_policy=FAST_RETRY,
    )
