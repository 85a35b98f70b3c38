from cafeflow.helpers.marketing.reddit import RedditHelper
from cafeflow.helpers.marketing.schemas import RedditPost
from cafeflow.helpers.marketing.twitter import TwitterHelper

__all__ = ['RedditHelper', 'RedditPost', 'TwitterHelper']
