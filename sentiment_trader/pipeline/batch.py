"""Batch orchestrator — runs the decision engine over posts, in order, one at a time.

A failing post is recorded as an ``error`` result and the batch moves on.
Signals are pushed to the notify callback as soon as they are produced.
"""

import logging
from collections.abc import Awaitable, Callable, Iterable

from sentiment_trader.delivery.formatting import (
    format_batch_signal,
    format_batch_start,
    format_batch_summary,
)
from sentiment_trader.errors import ItemProcessingError
from sentiment_trader.pipeline.models import BatchItemResult, BatchReport, Post
from sentiment_trader.trading.planner import TradeDecisionEngine

logger = logging.getLogger(__name__)

NotifyFn = Callable[[str, dict | None], Awaitable[None]]


class BatchOrchestrator:
    def __init__(self, engine: TradeDecisionEngine, notify: NotifyFn | None = None) -> None:
        self._engine = engine
        self._notify_fn = notify

    async def _notify(self, text: str, data: dict | None = None) -> None:
        if self._notify_fn is None:
            return
        try:
            await self._notify_fn(text, data)
        except Exception as exc:
            logger.warning("Batch notify failed: %s", exc)

    async def _process(self, index: int, post: Post) -> BatchItemResult:
        try:
            decision = await self._engine.evaluate(post.text, post.source)
        except Exception as exc:
            err = ItemProcessingError(index, exc)
            logger.error("Error analyzing post %d: %s", index + 1, exc)
            return BatchItemResult(index=index, post=post, status="error", error=str(err))

        if decision.unavailable:
            logger.warning("Post %d not analyzed: %s", index + 1, decision.error)
            return BatchItemResult(index=index, post=post, status="no-signal", unavailable=True)
        if decision.plan is None:
            return BatchItemResult(index=index, post=post, status="no-signal")
        return BatchItemResult(index=index, post=post, status="signal", trade_plan=decision.plan)

    async def run_batch(self, posts: Iterable[Post], source: str = "batch_analysis") -> BatchReport:
        posts = list(posts)
        report = BatchReport(total_posts=len(posts))
        logger.info("Starting batch of %d posts (source=%s)", len(posts), source)
        await self._notify(format_batch_start(len(posts), source))

        for index, post in enumerate(posts):
            result = await self._process(index, post)
            report.results.append(result)

            if result.unavailable:
                report.unavailable += 1
            if result.has_signal:
                report.strong_signals += 1
                await self._notify(
                    format_batch_signal(report.strong_signals, result, source),
                    {"result": result.model_dump(mode="json")},
                )

        logger.info(
            "Batch complete: %d posts, %d signals, %d not analyzed, %d errors",
            report.total_posts,
            report.strong_signals,
            report.unavailable,
            sum(1 for r in report.results if r.status == "error"),
        )
        await self._notify(format_batch_summary(report, source), {"report": report.model_dump(mode="json")})
        return report
