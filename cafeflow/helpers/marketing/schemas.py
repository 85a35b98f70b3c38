from pydantic import BaseModel, ConfigDict, Field


class RedditPost(BaseModel):
    """A post from a subreddit listing (`data.children[].data`)."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., description='Post title')
    self_text: str | None = Field(None, alias='selftext', description='Body of text posts')
    link: str | None = Field(None, alias='url', description='Linked URL (or the post URL for text posts)')
    permalink: str | None = Field(None, description='Path of the post on reddit.com')
    ups: int = Field(0, description='Upvotes')
    num_comments: int = Field(0, description='Number of comments')
    author: str | None = Field(None, description='Author username')
