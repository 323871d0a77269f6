import asyncio
import json
from datetime import datetime, timezone

import pytest

from sentiment_trader.config import Settings
from sentiment_trader.ingestion.base import BaseIngester
from sentiment_trader.ingestion.models import RawTweet, TweetAuthor, TweetMetrics
from sentiment_trader.sentiment.providers.base import SentimentProvider
from sentiment_trader.trading import safety


class FakeProvider(SentimentProvider):
    """Scripted oracle. ``message`` may be a string or a callable of the text."""

    def __init__(
        self,
        name="fake",
        message="0",
        tweet="",
        configured=True,
        exc=None,
        delay=0.0,
    ):
        self.name = name
        self._message = message
        self._tweet = tweet
        self._configured = configured
        self._exc = exc
        self._delay = delay
        self.calls = []

    def is_configured(self):
        return self._configured

    async def _answer(self, value, text):
        self.calls.append(text)
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._exc is not None:
            raise self._exc
        return value(text) if callable(value) else value

    async def message_sentiment(self, text, pair):
        return await self._answer(self._message, text)

    async def tweet_sentiment(self, text):
        return await self._answer(self._tweet, text)


class FakeIngester(BaseIngester):
    def __init__(self, tweets=None, exc=None):
        self._tweets = tweets or []
        self._exc = exc
        self.queries = []

    async def search(self, query, count=15):
        self.queries.append((query, count))
        if self._exc is not None:
            raise self._exc
        return list(self._tweets[:count])


def tweet_json(label="bullish", score=8, confidence=0.8, keywords=None):
    return json.dumps(
        {"sentiment": label, "score": score, "confidence": confidence, "keywords": keywords or []}
    )


def make_tweet(i, text="ETH whale accumulation", likes=0, retweets=0, replies=0, quotes=0):
    return RawTweet(
        tweet_id=str(i),
        text=text,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        author=TweetAuthor(id=str(100 + i), username=f"user{i}"),
        metrics=TweetMetrics(
            like_count=likes,
            retweet_count=retweets,
            reply_count=replies,
            quote_count=quotes,
        ),
    )


@pytest.fixture
def cfg():
    return Settings(
        _env_file=None,
        sentiment_providers="gemini,openai",
        oracle_timeout_seconds=0.05,
        trade_cooldown_seconds=30,
    )


@pytest.fixture(autouse=True)
def clear_cooldowns():
    safety.reset_cooldowns()
    yield
    safety.reset_cooldowns()
