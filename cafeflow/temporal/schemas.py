"""Shared schemas for Temporal workflows and activities.

These are the data contracts between:
- Client -> Workflow (inputs)
- Workflow -> Activities (inputs)
- Activities -> Workflow (outputs)
- Workflow -> Client (outputs)
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field

# =============================================================================
# Workflow Status
# =============================================================================


class WorkflowStatus(str, Enum):
    """Status of a workflow execution."""

    PENDING = 'pending'
    RUNNING = 'running'
    COMPLETED = 'completed'
    FAILED = 'failed'
    CANCELLED = 'cancelled'


@dataclass
class StepProgress:
    """Progress information for a workflow step."""

    step_id: str
    step_name: str
    status: WorkflowStatus
    progress_pct: int = 0
    message: str | None = None


# =============================================================================
# Base Workflow Input
# =============================================================================


class WorkflowInput(BaseModel):
    """Base input model for all workflows.

    All workflow input models should inherit from this class.
    Provides automatic secret key validation when WORKFLOW_SECRET_ENABLED=True.

    Example:
        class MyWorkflowInput(WorkflowInput):
            subreddit: str = Field(..., description='Subreddit to watch')
    """

    secret_key: str | None = Field(
        None,
        description='Secret key for authentication (required when WORKFLOW_SECRET_ENABLED=True)',
    )


# =============================================================================
# Reddit / Digest Activities
# =============================================================================


class FetchPostsInput(BaseModel):
    """Input for fetching subreddit posts."""

    subreddit: str = Field(..., description='Subreddit name without r/')
    limit: int = Field(5, ge=1, le=100, description='Maximum number of posts')
    time_filter: str = Field('day', description='hour, day, week, month, year or all')


class SummarizePostsInput(BaseModel):
    """Input for turning posts into a markdown digest."""

    posts: list[dict] = Field(..., description='Posts as returned by fetch_top_posts')
    title: str = Field('Reddit Digest', description='Digest heading')


class SendEmailInput(BaseModel):
    """Input for sending a plain-text email."""

    to: str = Field(..., description='Recipient address')
    subject: str = Field(..., description='Subject line')
    body: str = Field(..., description='Plain-text body')


class TelegramMessageInput(BaseModel):
    """Input for sending a Telegram message."""

    chat_id: str = Field(..., description='Target chat id')
    text: str = Field(..., description='Message text')
    notification: bool = Field(False, description='Prefix the message with a bell')


# =============================================================================
# AI Activities
# =============================================================================


class TextInput(BaseModel):
    """Input carrying a single text."""

    text: str = Field(..., description='Text to process')


class ClassifyTextInput(BaseModel):
    """Input for text classification."""

    text: str = Field(..., description='Text to classify')
    categories: list[str] = Field(..., min_length=1, description='Allowed categories')


class TranslateTextInput(BaseModel):
    """Input for translation."""

    text: str = Field(..., description='Text to translate')
    target_language: str = Field(..., description='Language to translate into')
    source_language: str | None = Field(None, description='Source language if known')
