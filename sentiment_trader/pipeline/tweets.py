"""Tweet analysis — fetch, score, detect alpha for one coin."""

import logging
from dataclasses import dataclass, field

from sentiment_trader.config import Settings, settings as default_settings
from sentiment_trader.ingestion.base import BaseIngester
from sentiment_trader.ingestion.factory import build_search_query
from sentiment_trader.scoring.alpha import detect_alpha
from sentiment_trader.scoring.models import AlphaResult, ScoredItem

logger = logging.getLogger(__name__)


@dataclass
class TweetAnalysis:
    coin: str
    items: list[ScoredItem] = field(default_factory=list)
    alpha: AlphaResult = field(default_factory=AlphaResult)
    fetched: int = 0
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error

    def to_dict(self) -> dict:
        return {
            "coin": self.coin,
            "fetched": self.fetched,
            "error": self.error,
            "tweets": [i.model_dump(mode="json") for i in self.items],
            "alpha": self.alpha.model_dump(mode="json"),
        }


async def analyze_tweets(
    coin: str,
    ingester: BaseIngester,
    scorer,
    limit: int,
    cfg: Settings | None = None,
) -> TweetAnalysis:
    """Fetch recent tweets for a coin, score the first ``limit`` and run alpha detection."""
    cfg = cfg or default_settings
    analysis = TweetAnalysis(coin=coin)
    logger.info("Fetching tweets for %s", coin)

    try:
        tweets = await ingester.search(build_search_query(coin), cfg.tweet_fetch_count)
    except Exception as exc:
        logger.error("Error fetching tweets for %s: %s", coin, exc)
        analysis.error = str(exc) or type(exc).__name__
        return analysis

    analysis.fetched = len(tweets)
    if not tweets:
        logger.info("No tweets found for %s", coin)
        return analysis

    analysis.items = await scorer.score_all(tweets[:limit])
    analysis.alpha = detect_alpha(analysis.items, cfg.alpha_min_score, cfg.alpha_top_n)

    logger.info(
        "Tweet analysis for %s: %d scored, %d alpha signals",
        coin,
        len(analysis.items),
        analysis.alpha.summary.total_alpha_signals,
    )
    return analysis
