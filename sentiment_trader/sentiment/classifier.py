"""Sentiment classification with ordered provider failover.

Two call sites, two scales:
  classify_message() -> -1..1, feeds the trade decision engine
  classify_tweet()   -> 1..10, feeds alpha detection

Each provider call is bounded by a timeout. A timeout, an exception or a
response that fails validation moves on to the next provider.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re

from pydantic import ValidationError

from sentiment_trader.config import Settings, settings as default_settings
from sentiment_trader.errors import ClassificationUnavailable, InvalidOracleResponse
from sentiment_trader.sentiment.models import (
    MESSAGE_SCALE,
    NEUTRAL_TWEET_SENTIMENT,
    TWEET_SCALE,
    MessageSentiment,
    TweetSentiment,
)
from sentiment_trader.sentiment.providers.base import SentimentProvider

logger = logging.getLogger(__name__)

# Leading numeric token, the way parseFloat reads "0.8 (bullish)"
_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")
_LABELS = {"bullish", "bearish", "neutral"}


def parse_message_score(raw: str) -> float:
    """Parse a bare -1..1 score. Raises InvalidOracleResponse."""
    text = (raw or "").strip() or "0"
    match = _NUMBER_RE.match(text)
    if not match:
        raise InvalidOracleResponse(f"non-numeric sentiment score: {text[:40]!r}", raw=raw)

    score = float(match.group(1))
    low, high = MESSAGE_SCALE
    if not low <= score <= high:
        raise InvalidOracleResponse(f"sentiment score {score} outside [{low}, {high}]", raw=raw)
    return score


def parse_tweet_analysis(raw: str) -> dict:
    """Extract and validate the first JSON object of a 1..10 tweet analysis."""
    match = _JSON_OBJECT_RE.search(raw or "")
    if not match:
        raise InvalidOracleResponse("no JSON object in response", raw=raw)

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise InvalidOracleResponse(f"malformed JSON: {exc}", raw=raw) from exc
    if not isinstance(data, dict):
        raise InvalidOracleResponse("JSON payload is not an object", raw=raw)

    # Falsy fields fall back to the template defaults
    label = str(data.get("sentiment") or "neutral").strip().lower()
    score = data.get("score") or 5
    confidence = data.get("confidence") or 0.5
    keywords = data.get("keywords") or []

    if label not in _LABELS:
        raise InvalidOracleResponse(f"unknown sentiment label {label!r}", raw=raw)
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise InvalidOracleResponse(f"non-numeric score {score!r}", raw=raw)
    if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
        raise InvalidOracleResponse(f"non-numeric confidence {confidence!r}", raw=raw)

    low, high = TWEET_SCALE
    if not low <= score <= high:
        raise InvalidOracleResponse(f"tweet score {score} outside [{low}, {high}]", raw=raw)
    if not 0.0 <= confidence <= 1.0:
        raise InvalidOracleResponse(f"confidence {confidence} outside [0, 1]", raw=raw)
    if not isinstance(keywords, list):
        keywords = []

    return {
        "label": label,
        "score": float(score),
        "confidence": float(confidence),
        "keywords": [str(k) for k in keywords],
    }


class SentimentClassifier:
    def __init__(self, providers: list[SentimentProvider], cfg: Settings | None = None) -> None:
        self._providers = list(providers)
        self._settings = cfg or default_settings

    @property
    def available_providers(self) -> list[str]:
        return [p.name for p in self._providers if p.is_configured()]

    async def _bounded(self, coro) -> str:
        return await asyncio.wait_for(coro, timeout=self._settings.oracle_timeout_seconds)

    async def classify_message(self, text: str) -> MessageSentiment:
        """Score a message on -1..1, failing over across providers.

        Raises ClassificationUnavailable when no provider yields a valid score.
        """
        attempts: list[str] = []
        for provider in self._providers:
            if not provider.is_configured():
                logger.debug("Provider %s not configured — skipping", provider.name)
                continue

            attempts.append(provider.name)
            try:
                raw = await self._bounded(provider.message_sentiment(text, self._settings.trade_pair))
                score = parse_message_score(raw)
            except asyncio.TimeoutError:
                logger.error(
                    "%s timed out after %.1fs",
                    provider.name,
                    self._settings.oracle_timeout_seconds,
                )
                continue
            except InvalidOracleResponse as exc:
                logger.warning("%s returned an invalid score: %s", provider.name, exc)
                continue
            except Exception as exc:
                logger.error("%s sentiment call failed: %s", provider.name, exc)
                continue

            logger.info("%s sentiment score: %.3f", provider.name, score)
            return MessageSentiment(score=score, provider=provider.name)

        if not attempts:
            raise ClassificationUnavailable("No sentiment provider configured")
        raise ClassificationUnavailable(
            f"All sentiment providers failed ({', '.join(attempts)})", attempts=attempts
        )

    async def classify_tweet(self, text: str) -> TweetSentiment:
        """Score a tweet on 1..10. Never raises: falls back to a neutral default."""
        for provider in self._providers:
            if not provider.is_configured():
                continue

            try:
                raw = await self._bounded(provider.tweet_sentiment(text))
                fields = parse_tweet_analysis(raw)
                return TweetSentiment(provider=provider.name, **fields)
            except asyncio.TimeoutError:
                logger.error("%s timed out analyzing tweet", provider.name)
            except (InvalidOracleResponse, ValidationError) as exc:
                logger.warning("%s returned an invalid tweet analysis: %s", provider.name, exc)
            except Exception as exc:
                logger.error("%s tweet analysis failed: %s", provider.name, exc)

        logger.info("Tweet sentiment unavailable — using neutral default")
        return NEUTRAL_TWEET_SENTIMENT

    async def classify(self, text: str) -> TweetSentiment:
        return await self.classify_tweet(text)
