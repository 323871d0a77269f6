"""Tweet source using twikit (free scraper, no API key)."""

import logging
import os
from datetime import datetime, timezone

from twikit import Capsolver, Client

from sentiment_trader.config import Settings, settings as default_settings
from sentiment_trader.errors import IngestionError
from sentiment_trader.ingestion.base import BaseIngester
from sentiment_trader.ingestion.models import RawTweet, TweetAuthor, TweetMetrics

logger = logging.getLogger(__name__)

_MAX_TEXT_LEN = 500


class TwikitIngester(BaseIngester):
    def __init__(self, cfg: Settings | None = None) -> None:
        self._settings = cfg or default_settings
        captcha_solver = None
        if self._settings.capsolver_api_key:
            captcha_solver = Capsolver(api_key=self._settings.capsolver_api_key)
        self._client = Client("en-US", captcha_solver=captcha_solver)
        self._logged_in = False

    async def _ensure_login(self) -> None:
        if self._logged_in:
            return

        cookies_path = self._settings.twikit_cookies_file

        # Saved cookies skip the login flow entirely
        if os.path.exists(cookies_path):
            try:
                self._client.load_cookies(cookies_path)
                self._logged_in = True
                logger.info("Twikit: loaded session from cookies")
                return
            except Exception:
                logger.debug("Twikit: saved cookies invalid, logging in fresh")

        if not self._settings.twitter_username or not self._settings.twitter_password:
            raise IngestionError(
                "Twitter credentials not configured. "
                "Set TWITTER_USERNAME and TWITTER_PASSWORD in .env"
            )

        await self._client.login(
            auth_info_1=self._settings.twitter_username,
            auth_info_2=self._settings.twitter_email or None,
            password=self._settings.twitter_password,
        )
        self._client.save_cookies(cookies_path)
        self._logged_in = True
        logger.info("Twikit: logged in as @%s", self._settings.twitter_username)

    async def search(self, query: str, count: int = 15) -> list[RawTweet]:
        await self._ensure_login()
        try:
            results = await self._client.search_tweet(query, "Latest", count=count)
        except Exception as exc:
            logger.error("Twikit search failed: %s", exc)
            self._logged_in = False  # force re-login next time
            raise IngestionError(str(exc) or type(exc).__name__) from exc

        # twikit pages may overshoot the requested count
        tweets = [_parse_tweet(t) for t in list(results)[:count]]
        logger.info("Twikit: %d tweets for %r", len(tweets), query)
        return tweets


_TWITTER_TIME_FORMAT = "%a %b %d %H:%M:%S %z %Y"


def _tweet_time(tweet) -> datetime:
    if tweet.created_at_datetime:
        return tweet.created_at_datetime
    if tweet.created_at:
        try:
            return datetime.strptime(tweet.created_at, _TWITTER_TIME_FORMAT)
        except (ValueError, TypeError):
            logger.debug("Twikit: unparseable created_at %r", tweet.created_at)
    return datetime.now(timezone.utc)


def _tweet_author(user) -> TweetAuthor:
    if user is None:
        return TweetAuthor()
    return TweetAuthor(
        id=str(user.id),
        username=user.screen_name or "unknown",
        name=user.name or "",
        followers_count=user.followers_count or 0,
    )


def _parse_tweet(tweet) -> RawTweet:
    return RawTweet(
        tweet_id=str(tweet.id),
        text=(tweet.text or "")[:_MAX_TEXT_LEN],
        created_at=_tweet_time(tweet),
        author=_tweet_author(tweet.user),
        metrics=TweetMetrics(
            like_count=tweet.favorite_count or 0,
            retweet_count=tweet.retweet_count or 0,
            reply_count=tweet.reply_count or 0,
            quote_count=tweet.quote_count or 0,
        ),
    )
