"""Activities for the Reddit digest pipeline.

fetch_top_posts -> summarize_posts -> send_digest_email

Each activity resolves its helper from the process-wide registry, so a helper
that was not enabled fails the activity with a clear message. HelperError is
left to propagate and Temporal's retry policy decides what happens next.
"""

from temporalio import activity

from cafeflow.helpers import get_helpers
from cafeflow.temporal.schemas import FetchPostsInput, SendEmailInput, SummarizePostsInput

NO_TEXT_CONTENT = 'No text content'


def _post_text(post: dict) -> str:
    return f'Title: {post.get("title", "")}\nContent: {post.get("self_text") or NO_TEXT_CONTENT}'


def build_digest(posts: list[dict], summaries: list[str], title: str = 'Reddit Digest') -> str:
    """Render posts and their summaries as a markdown digest.

    Example:
        # Reddit Digest

        ### Post title
        One-paragraph summary
        [Link](https://...)

        ---
    """
    parts = [f'# {title}\n\n']
    for post, summary in zip(posts, summaries, strict=True):
        parts.append(f'### {post.get("title", "")}\n{summary}\n[Link]({post.get("link", "")})\n\n---\n\n')
    return ''.join(parts)


@activity.defn
async def fetch_top_posts(input: FetchPostsInput) -> list[dict]:
    """Fetch the top posts of a subreddit as plain dicts."""
    activity.logger.info(f'Fetching top {input.limit} posts from r/{input.subreddit}')

    reddit = get_helpers().get_or_raise('reddit')
    posts = await reddit.fetch_top_posts(input.subreddit, limit=input.limit, time_filter=input.time_filter)

    activity.logger.info(f'Fetched {len(posts)} posts from r/{input.subreddit}')
    return [post.model_dump() for post in posts]


@activity.defn
async def summarize_posts(input: SummarizePostsInput) -> str:
    """Summarize each post and assemble the markdown digest."""
    activity.logger.info(f'Summarizing {len(input.posts)} posts')

    summarizer = get_helpers().get_or_raise('text_summarizer')
    summaries = await summarizer.summarize_batch([_post_text(post) for post in input.posts])

    return build_digest(input.posts, summaries, title=input.title)


@activity.defn
async def send_digest_email(input: SendEmailInput) -> None:
    """Send the digest as a plain-text email."""
    activity.logger.info(f'Sending digest email to {input.to}')

    email = get_helpers().get_or_raise('email')
    await email.send_text_email(input.to, input.subject, input.body)
