from sentiment_trader.ingestion.models import RawTweet
from sentiment_trader.scoring.engagement import engagement_score
from sentiment_trader.scoring.models import ScoredItem
from sentiment_trader.sentiment.classifier import SentimentClassifier


class TweetScorer:
    """Turns a RawTweet into a ScoredItem on the 1..10 scale."""

    def __init__(self, classifier: SentimentClassifier) -> None:
        self._classifier = classifier

    async def score(self, tweet: RawTweet) -> ScoredItem:
        sentiment = await self._classifier.classify_tweet(tweet.text)
        return ScoredItem(
            id=tweet.tweet_id,
            text=tweet.text,
            sentiment_label=sentiment.label,
            score=sentiment.score,
            confidence=sentiment.confidence,
            keywords=sentiment.keywords,
            engagement_score=engagement_score(tweet.metrics),
            author=tweet.author.username,
            created_at=tweet.created_at,
            metrics=tweet.metrics,
        )

    async def score_all(self, tweets: list[RawTweet]) -> list[ScoredItem]:
        # One oracle request in flight at a time
        return [await self.score(t) for t in tweets]
