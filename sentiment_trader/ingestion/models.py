from datetime import datetime, timezone

from pydantic import BaseModel, Field


class TweetAuthor(BaseModel):
    id: str = "0"
    username: str = "unknown"
    name: str = ""
    followers_count: int = 0


class TweetMetrics(BaseModel):
    """Public engagement counters. Scrapers that cannot see them leave zeros."""

    like_count: int = 0
    retweet_count: int = 0
    reply_count: int = 0
    quote_count: int = 0


class RawTweet(BaseModel):
    tweet_id: str
    text: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    author: TweetAuthor = Field(default_factory=TweetAuthor)
    metrics: TweetMetrics = Field(default_factory=TweetMetrics)
