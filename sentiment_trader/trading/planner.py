"""Trade decision engine — sentiment score in, TradePlan (or nothing) out."""

import logging
from datetime import datetime, timezone

from sentiment_trader.config import Settings, settings as default_settings
from sentiment_trader.errors import ClassificationUnavailable
from sentiment_trader.sentiment.classifier import SentimentClassifier
from sentiment_trader.trading.models import Decision, TradePlan

logger = logging.getLogger(__name__)


class TradeDecisionEngine:
    def __init__(self, classifier: SentimentClassifier, cfg: Settings | None = None) -> None:
        self._classifier = classifier
        self._settings = cfg or default_settings

    @property
    def providers(self) -> list[str]:
        return self._classifier.available_providers

    def build_plan(
        self,
        score: float,
        source: str,
        provider: str,
        now: datetime | None = None,
    ) -> TradePlan | None:
        """Apply the static threshold policy to an already-validated -1..1 score."""
        if abs(score) < self._settings.signal_threshold:
            logger.info(
                "Sentiment %.3f below threshold %.2f — no trade plan",
                score,
                self._settings.signal_threshold,
            )
            return None

        action = "buy" if score > 0 else "sell"
        price = (
            self._settings.buy_price_threshold_usd
            if action == "buy"
            else self._settings.sell_price_threshold_usd
        )
        return TradePlan(
            action=action,
            pair=self._settings.trade_pair,
            amount=self._settings.trade_amount,
            price_threshold=price,
            sentiment_score=score,
            source=source or "unknown",
            timestamp=now or datetime.now(timezone.utc),
            provider_used=provider,
        )

    async def evaluate(self, text: str, source: str = "unknown") -> Decision:
        logger.info("Evaluating sentiment for: %r", text[:120])
        try:
            sentiment = await self._classifier.classify_message(text)
        except ClassificationUnavailable as exc:
            logger.error("No sentiment provider available: %s", exc)
            return Decision(unavailable=True, error=str(exc))

        plan = self.build_plan(sentiment.score, source, sentiment.provider)
        if plan is not None:
            logger.info(
                "Strong signal: %s %s (sentiment %.2f via %s)",
                plan.action.upper(),
                plan.pair,
                plan.sentiment_score,
                plan.provider_used,
            )
        return Decision(plan=plan, score=sentiment.score, provider=sentiment.provider)

    async def decide(self, text: str, source: str = "unknown") -> TradePlan | None:
        return (await self.evaluate(text, source)).plan
