"""Temporal workflow orchestration for CafeFlow.

This package contains:
- activities: Individual tasks that call helpers (Reddit, email, LLM, ...)
- workflows: Orchestration logic (Reddit digest, hello world)
- worker: Worker process that executes workflows
- client: Client for starting/querying/scheduling workflows
- schemas: Shared data types

Quick Start:
    # Start Temporal (dev mode)
    temporal server start-dev

    # Start the worker
    python -m cafeflow.temporal.worker

    # Start a workflow
    from cafeflow.temporal.client import execute_workflow
    from cafeflow.temporal.workflows import RedditDigestInput, RedditDigestWorkflow

    result = await execute_workflow(
        RedditDigestWorkflow.run,
        RedditDigestInput(subreddit='python', target_email='team@example.com'),
    )
"""

from cafeflow.temporal.schemas import StepProgress, WorkflowInput, WorkflowStatus

__all__ = [
    'StepProgress',
    'WorkflowInput',
    'WorkflowStatus',
]


# Lazy imports for client utilities (avoid circular imports)
def get_temporal_client():
    """Get or create the Temporal client."""
    from cafeflow.temporal.client import get_temporal_client as _get_client

    return _get_client()


def start_workflow(*args, **kwargs):
    """Start a workflow and return a handle."""
    from cafeflow.temporal.client import start_workflow as _start

    return _start(*args, **kwargs)
