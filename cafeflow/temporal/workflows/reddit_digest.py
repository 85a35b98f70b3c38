"""Reddit Digest Workflow.

Fetches the top posts of a subreddit, summarizes them with the LLM and emails
the resulting markdown digest.

Example:
    result = await client.execute_workflow(
        RedditDigestWorkflow.run,
        RedditDigestInput(subreddit='python', target_email='team@example.com'),
        id='reddit-digest-python',
        task_queue='cafeflow-queue',
    )
    print(result.posts_count)
"""

from pydantic import BaseModel, Field
from temporalio import workflow

from cafeflow.temporal.schemas import (
    FetchPostsInput,
    SendEmailInput,
    StepProgress,
    SummarizePostsInput,
    WorkflowInput,
    WorkflowStatus,
)
from cafeflow.temporal.workflows.base import WorkflowContext, run_activity

with workflow.unsafe.imports_passed_through():
    from cafeflow.temporal.activities import fetch_top_posts, send_digest_email, summarize_posts

DIGEST_SUBJECT = 'Reddit Digest'


class RedditDigestInput(WorkflowInput):
    """Input for RedditDigest workflow."""

    subreddit: str = Field(..., description='Subreddit name without r/')
    target_email: str = Field(..., description='Digest recipient')
    limit: int = Field(5, ge=1, le=100, description='Number of top posts to include')
    time_filter: str = Field('day', description='hour, day, week, month, year or all')


class RedditDigestOutput(BaseModel):
    """Output from RedditDigest workflow."""

    posts_count: int = Field(0, description='Number of posts in the digest')
    sent: bool = Field(False, description='Whether an email was sent')
    digest: str | None = Field(None, description='Markdown digest that was sent')


@workflow.defn
class RedditDigestWorkflow:
    """Subreddit -> LLM summaries -> email.

    An empty subreddit ends the workflow early without sending anything.
    """

    def __init__(self) -> None:
        self._ctx = WorkflowContext()

    @workflow.query
    def get_status(self) -> WorkflowStatus:
        return self._ctx.status

    @workflow.query
    def get_current_step(self) -> StepProgress | None:
        return self._ctx.current_step

    @workflow.run
    async def run(self, input: RedditDigestInput) -> RedditDigestOutput:
        self._ctx.start(input)
        workflow.logger.info(f'Starting Reddit digest for r/{input.subreddit}')

        async with self._ctx.step('fetch', 'Fetch Top Posts', 10):
            posts = await run_activity(
                fetch_top_posts,
                FetchPostsInput(subreddit=input.subreddit, limit=input.limit, time_filter=input.time_filter),
            )

        if not posts:
            workflow.logger.warning(f'No posts found for r/{input.subreddit}')
            self._ctx.complete('No posts found')
            return RedditDigestOutput()

        async with self._ctx.step('summarize', 'Summarize Posts', 40):
            digest = await run_activity(summarize_posts, SummarizePostsInput(posts=posts))

        async with self._ctx.step('email', 'Send Digest Email', 80):
            await run_activity(
                send_digest_email,
                SendEmailInput(to=input.target_email, subject=DIGEST_SUBJECT, body=digest),
            )

        workflow.logger.info(f'Reddit digest sent to {input.target_email}')
        self._ctx.complete()
        return RedditDigestOutput(posts_count=len(posts), sent=True, digest=digest)
