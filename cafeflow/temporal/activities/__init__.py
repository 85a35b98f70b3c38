"""Temporal activities - individual tasks that call CafeFlow helpers.

Activities are the building blocks of workflows. Each activity:
- Performs a single, focused task
- Can be retried independently
- Resolves its helper from the process-wide registry (`get_helpers()`)

## Auto-Discovery

Activities are AUTOMATICALLY discovered by the worker via `discover_activities()`.
Just decorate a function with `@activity.defn` and it will be registered.
No need to add anything to this file.

## Convenience Imports

The imports below are for workflow convenience only - they don't affect registration.
"""

from cafeflow.temporal.activities.ai import (
    analyze_sentiment,
    classify_text,
    extract_topics,
    summarize_text,
    translate_text,
)
from cafeflow.temporal.activities.notifications import send_telegram_message
from cafeflow.temporal.activities.reddit_digest import (
    build_digest,
    fetch_top_posts,
    send_digest_email,
    summarize_posts,
)

__all__ = [
    # Reddit digest
    'fetch_top_posts',
    'summarize_posts',
    'send_digest_email',
    'build_digest',
    # Notifications
    'send_telegram_message',
    # AI
    'summarize_text',
    'analyze_sentiment',
    'classify_text',
    'translate_text',
    'extract_topics',
]
