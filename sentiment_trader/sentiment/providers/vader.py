"""Offline lexicon oracle using VADER. Needs no credentials, so it is opt-in only."""

import json

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from sentiment_trader.sentiment.providers.base import SentimentProvider

_analyzer = SentimentIntensityAnalyzer()

# Same cut-offs VADER's authors recommend for pos/neg/neutral
_BULLISH_AT = 0.05
_BEARISH_AT = -0.05


class VaderProvider(SentimentProvider):
    name = "vader"

    async def message_sentiment(self, text: str, pair: str) -> str:
        return f"{_analyzer.polarity_scores(text)['compound']:.4f}"

    async def tweet_sentiment(self, text: str) -> str:
        scores = _analyzer.polarity_scores(text)
        compound = scores["compound"]
        if compound >= _BULLISH_AT:
            label = "bullish"
        elif compound <= _BEARISH_AT:
            label = "bearish"
        else:
            label = "neutral"

        # Map -1..1 onto 1..10
        score = round(5.5 + compound * 4.5, 2)
        return json.dumps(
            {
                "sentiment": label,
                "score": score,
                "confidence": round(min(abs(compound) + 0.3, 1.0), 2),
                "keywords": [],
            }
        )
