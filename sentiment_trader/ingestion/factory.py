"""Factory for the tweet source."""

import logging

from sentiment_trader.config import Settings, settings as default_settings
from sentiment_trader.ingestion.base import BaseIngester

logger = logging.getLogger(__name__)


def create_ingester(cfg: Settings | None = None) -> BaseIngester:
    from sentiment_trader.ingestion.twikit_client import TwikitIngester

    logger.info("Using twikit (free scraper) for Twitter data")
    return TwikitIngester(cfg or default_settings)


def build_search_query(coin: str) -> str:
    return f"{coin} -is:retweet lang:en"
