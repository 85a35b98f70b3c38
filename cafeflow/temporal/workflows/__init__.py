"""Temporal workflows - orchestration logic composed from helper activities.

Workflows define the sequence of activities and their dependencies.
They use the base utilities for common patterns like:
- Status tracking with step() context manager
- Secret key validation on start
- The shared activity retry policy
"""

from cafeflow.temporal.workflows.base import (
    FAST_RETRY,
    WorkflowContext,
    run_activity,
)
from cafeflow.temporal.workflows.hello_world import (
    HelloWorldInput,
    HelloWorldOutput,
    HelloWorldWorkflow,
)
from cafeflow.temporal.workflows.reddit_digest import (
    RedditDigestInput,
    RedditDigestOutput,
    RedditDigestWorkflow,
)

__all__ = [
    # Test workflow
    'HelloWorldWorkflow',
    'HelloWorldInput',
    'HelloWorldOutput',
    # Sample workflows
    'RedditDigestWorkflow',
    'RedditDigestInput',
    'RedditDigestOutput',
    # Base utilities
    'WorkflowContext',
    'run_activity',
    # Retry policies
    'FAST_RETRY',
]
