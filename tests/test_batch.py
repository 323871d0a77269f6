import pytest

from sentiment_trader.delivery.formatting import format_batch_summary
from sentiment_trader.pipeline.batch import BatchOrchestrator
from sentiment_trader.pipeline.models import Post
from sentiment_trader.sentiment.classifier import SentimentClassifier
from sentiment_trader.trading.planner import TradeDecisionEngine

from conftest import FakeProvider

SCORES = {
    "ETH to the moon": "0.9",
    "meh": "0.1",
    "ETH is crashing hard": "-0.8",
}


def scripted_engine(cfg):
    provider = FakeProvider("gemini", message=lambda text: SCORES.get(text, "0"))
    return TradeDecisionEngine(SentimentClassifier([provider], cfg), cfg)


class ExplodingEngine:
    """Delegates to a real engine, but raises on one post."""

    def __init__(self, engine, bad_text, events=None):
        self._engine = engine
        self._bad_text = bad_text
        self.events = events if events is not None else []

    async def evaluate(self, text, source="unknown"):
        self.events.append(("evaluate", text))
        if text == self._bad_text:
            raise RuntimeError("kaboom")
        return await self._engine.evaluate(text, source)


def posts(*texts):
    return [Post(text=t, source="discord") for t in texts]


@pytest.mark.asyncio
async def test_results_follow_input_order(cfg):
    report = await BatchOrchestrator(scripted_engine(cfg)).run_batch(
        posts("ETH to the moon", "meh", "ETH is crashing hard")
    )

    assert report.total_posts == 3
    assert report.strong_signals == 2
    assert [r.index for r in report.results] == [0, 1, 2]
    assert [r.status for r in report.results] == ["signal", "no-signal", "signal"]
    assert report.results[0].trade_plan.action == "buy"
    assert report.results[2].trade_plan.action == "sell"
    assert report.results[1].trade_plan is None
    assert [r.post.text for r in report.results] == ["ETH to the moon", "meh", "ETH is crashing hard"]


@pytest.mark.asyncio
async def test_failing_post_does_not_stop_the_batch(cfg):
    engine = ExplodingEngine(scripted_engine(cfg), "boom")
    report = await BatchOrchestrator(engine).run_batch(posts("meh", "boom", "ETH to the moon"))

    assert [r.status for r in report.results] == ["no-signal", "error", "signal"]
    assert report.results[1].error == "item 1: kaboom"
    assert report.strong_signals == 1


@pytest.mark.asyncio
async def test_unavailable_oracle_is_no_signal(cfg):
    sent = []

    async def notify(text, data=None):
        sent.append(text)

    engine = TradeDecisionEngine(SentimentClassifier([], cfg), cfg)
    report = await BatchOrchestrator(engine, notify=notify).run_batch([Post(text="ETH to the moon")], source="api")

    assert report.results[0].status == "no-signal"
    assert report.results[0].unavailable is True
    assert report.strong_signals == 0
    assert report.unavailable == 1
    assert sent[-1] == (
        "Analysis complete! Processed 1 posts, found 0 strong signals. "
        "1 posts skipped: no sentiment provider available."
    )


@pytest.mark.asyncio
async def test_unavailable_count_in_discord_summary(cfg):
    engine = TradeDecisionEngine(SentimentClassifier([FakeProvider("gemini", configured=False)], cfg), cfg)
    report = await BatchOrchestrator(engine).run_batch(posts("ETH to the moon", "meh"), source="discord")

    assert report.unavailable == 2
    assert "**Not Analyzed:** 2" in format_batch_summary(report, "discord")


@pytest.mark.asyncio
async def test_scored_posts_are_not_counted_unavailable(cfg):
    report = await BatchOrchestrator(scripted_engine(cfg)).run_batch(posts("ETH to the moon", "meh"))

    assert report.unavailable == 0
    assert not any(r.unavailable for r in report.results)


@pytest.mark.asyncio
async def test_signals_are_pushed_as_they_happen(cfg):
    events = []

    async def notify(text, data=None):
        events.append(("notify", text))

    engine = ExplodingEngine(scripted_engine(cfg), "never", events)
    await BatchOrchestrator(engine, notify=notify).run_batch(
        [Post(text="ETH to the moon"), Post(text="meh")], source="api"
    )

    assert events == [
        ("notify", "Starting analysis of 2 posts..."),
        ("evaluate", "ETH to the moon"),
        ("notify", "Strong signal #1: BUY ETH/USDC (sentiment: 0.90)"),
        ("evaluate", "meh"),
        ("notify", "Analysis complete! Processed 2 posts, found 1 strong signals."),
    ]


@pytest.mark.asyncio
async def test_notify_payloads(cfg):
    received = []

    async def notify(text, data=None):
        received.append(data)

    report = await BatchOrchestrator(scripted_engine(cfg), notify=notify).run_batch(posts("ETH to the moon"))

    assert received[0] is None
    assert received[1]["result"]["trade_plan"]["action"] == "buy"
    assert received[2]["report"]["strong_signals"] == report.strong_signals == 1


@pytest.mark.asyncio
async def test_broken_notify_is_ignored(cfg):
    async def notify(text, data=None):
        raise ConnectionError("chat is down")

    report = await BatchOrchestrator(scripted_engine(cfg), notify=notify).run_batch(posts("ETH to the moon", "meh"))
    assert report.strong_signals == 1
    assert len(report.results) == 2


@pytest.mark.asyncio
async def test_empty_batch(cfg):
    sent = []

    async def notify(text, data=None):
        sent.append(text)

    report = await BatchOrchestrator(scripted_engine(cfg), notify=notify).run_batch([])

    assert report.total_posts == 0
    assert report.strong_signals == 0
    assert report.results == []
    assert sent == [
        "Starting analysis of 0 posts...",
        "Analysis complete! Processed 0 posts, found 0 strong signals.",
    ]


@pytest.mark.asyncio
async def test_error_count_in_summary(cfg):
    sent = []

    async def notify(text, data=None):
        sent.append(text)

    engine = ExplodingEngine(scripted_engine(cfg), "boom")
    await BatchOrchestrator(engine, notify=notify).run_batch([Post(text="boom")], source="api")

    assert sent[-1] == "Analysis complete! Processed 1 posts, found 0 strong signals. 1 posts could not be analyzed."
