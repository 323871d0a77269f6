"""Routes a free-text chat message to the right flow and renders the reply."""

import logging
from dataclasses import dataclass, field

from sentiment_trader.config import Settings, settings as default_settings
from sentiment_trader.delivery import formatting as fmt
from sentiment_trader.ingestion.base import BaseIngester
from sentiment_trader.pipeline.intents import (
    extract_coin,
    is_alpha_request,
    is_execute_request,
    is_trade_request,
    is_tweet_request,
)
from sentiment_trader.pipeline.tweets import analyze_tweets
from sentiment_trader.research.prices import get_price_usd
from sentiment_trader.scoring.scorer import TweetScorer
from sentiment_trader.trading.executor import execute_plan
from sentiment_trader.trading.gateway import ExecutionGateway
from sentiment_trader.trading.models import TradePlan
from sentiment_trader.trading.planner import TradeDecisionEngine

logger = logging.getLogger(__name__)


@dataclass
class Reply:
    text: str
    action: str
    data: dict = field(default_factory=dict)


class MessageRouter:
    def __init__(
        self,
        engine: TradeDecisionEngine,
        scorer: TweetScorer | None = None,
        ingester: BaseIngester | None = None,
        gateway: ExecutionGateway | None = None,
        cfg: Settings | None = None,
    ) -> None:
        self._engine = engine
        self._scorer = scorer
        self._ingester = ingester
        self._gateway = gateway
        self._settings = cfg or default_settings
        # source -> most recent plan, consumed by "execute trade"
        self._pending: dict[str, TradePlan] = {}

    @property
    def engine(self) -> TradeDecisionEngine:
        return self._engine

    @property
    def providers(self) -> list[str]:
        return self._engine.providers

    async def handle(self, text: str, source: str = "unknown") -> Reply | None:
        """Returns None when the message is not addressed to any flow."""
        if is_execute_request(text):
            return await self.execute(source)
        if is_alpha_request(text):
            return await self.alpha(extract_coin(text), source)
        if is_tweet_request(text):
            return await self.tweets(extract_coin(text), source)
        if is_trade_request(text, source):
            return await self.trade_plan(text, source)
        return None

    async def trade_plan(self, text: str, source: str = "unknown") -> Reply:
        decision = await self._engine.evaluate(text, source)
        if decision.unavailable:
            return Reply(fmt.format_unavailable(), "GENERATE_TRADE_PLAN", {"unavailable": True})
        if decision.plan is None:
            return Reply(fmt.format_no_signal(source), "GENERATE_TRADE_PLAN", {"score": decision.score})

        plan = decision.plan
        self._pending[source] = plan
        data = {"trade_plan": plan.model_dump(mode="json")}
        if self._settings.price_enrichment:
            data["price_usd"] = await get_price_usd(plan.base_asset, self._settings)
        return Reply(fmt.format_trade_plan(plan, source), "GENERATE_TRADE_PLAN", data)

    async def tweets(self, coin: str, source: str = "unknown") -> Reply:
        if self._ingester is None or self._scorer is None:
            return Reply(
                fmt.format_analysis_failed("Twitter Analysis Failed", "tweet source not configured"),
                "FETCH_TWEETS",
            )

        analysis = await analyze_tweets(coin, self._ingester, self._scorer, self._settings.tweet_report_limit, self._settings)
        if not analysis.ok:
            return Reply(fmt.format_analysis_failed("Twitter Analysis Failed", analysis.error), "FETCH_TWEETS")
        if not analysis.items:
            return Reply(fmt.format_no_tweets(coin), "FETCH_TWEETS", analysis.to_dict())

        text = fmt.format_tweet_analysis(coin, analysis.items, analysis.alpha.summary)
        return Reply(text, "FETCH_TWEETS", analysis.to_dict())

    async def alpha(self, coin: str, source: str = "unknown") -> Reply:
        if self._ingester is None or self._scorer is None:
            return Reply(
                fmt.format_analysis_failed("Alpha Analysis Failed", "tweet source not configured"),
                "ALPHA_ANALYSIS",
            )

        analysis = await analyze_tweets(coin, self._ingester, self._scorer, self._settings.alpha_tweet_limit, self._settings)
        if not analysis.ok or not analysis.items:
            return Reply(fmt.format_alpha_failed(coin), "ALPHA_ANALYSIS", analysis.to_dict())
        return Reply(fmt.format_alpha_analysis(coin, analysis.alpha.summary), "ALPHA_ANALYSIS", analysis.to_dict())

    async def execute(self, source: str = "unknown") -> Reply:
        if self._gateway is None:
            return Reply(
                "**Trade Execution Not Available**\n\nNo execution gateway is configured.",
                "EXECUTE_TRADE",
            )

        plan = self._pending.pop(source, None)
        if plan is None:
            return Reply("No trade plan to execute. Send a message with a strong signal first.", "EXECUTE_TRADE")

        result = await execute_plan(plan, self._gateway, self._settings)
        if result.success:
            logger.info("Executed %s %s: %s", plan.action, plan.pair, result.transaction_hash)
        return Reply(fmt.format_execution(result), "EXECUTE_TRADE", {"execution": result.model_dump(mode="json")})
