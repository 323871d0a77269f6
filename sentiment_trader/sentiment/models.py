"""Sentiment results on the two scales used by the pipeline.

MessageSentiment is the -1..1 scale consumed by the trade decision engine.
TweetSentiment is the 1..10 bullishness scale consumed by alpha detection.
They are deliberately separate types and are never converted into each other.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SentimentLabel = Literal["bullish", "bearish", "neutral"]

MESSAGE_SCALE = (-1.0, 1.0)
TWEET_SCALE = (1.0, 10.0)


class MessageSentiment(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float = Field(ge=MESSAGE_SCALE[0], le=MESSAGE_SCALE[1])
    provider: str


class TweetSentiment(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: SentimentLabel = "neutral"
    score: float = Field(default=5.0, ge=TWEET_SCALE[0], le=TWEET_SCALE[1])
    confidence: float = Field(default=0.5, ge=0.0, le=1.0)
    keywords: list[str] = []
    provider: str = ""


# Returned when every provider fails on the 1..10 path
NEUTRAL_TWEET_SENTIMENT = TweetSentiment(label="neutral", score=5.0, confidence=0.3, keywords=[], provider="")
