from sentiment_trader.ingestion.models import TweetMetrics

# Amplifying interactions (retweets, quotes) count double a like
RETWEET_WEIGHT = 2.0
REPLY_WEIGHT = 1.5
LIKE_WEIGHT = 1.0
QUOTE_WEIGHT = 2.0


def engagement_score(metrics: TweetMetrics | None) -> float:
    """Weighted interaction count, never negative. Missing metrics score 0."""
    if metrics is None:
        return 0.0
    return (
        max(metrics.retweet_count, 0) * RETWEET_WEIGHT
        + max(metrics.reply_count, 0) * REPLY_WEIGHT
        + max(metrics.like_count, 0) * LIKE_WEIGHT
        + max(metrics.quote_count, 0) * QUOTE_WEIGHT
    )
