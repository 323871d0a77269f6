import pytest

from sentiment_trader.errors import ClassificationUnavailable, InvalidOracleResponse
from sentiment_trader.sentiment.classifier import (
    SentimentClassifier,
    parse_message_score,
    parse_tweet_analysis,
)
from sentiment_trader.sentiment.models import NEUTRAL_TWEET_SENTIMENT

from conftest import FakeProvider, tweet_json


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0.8", 0.8),
        ("0.8 (bullish)", 0.8),
        ("  -0.3\n", -0.3),
        (".5", 0.5),
        ("1", 1.0),
        ("-1.0", -1.0),
        ("", 0.0),
    ],
)
def test_parse_message_score(raw, expected):
    assert parse_message_score(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["bullish", "1.7", "-2", "score: 0.4"])
def test_parse_message_score_rejects(raw):
    with pytest.raises(InvalidOracleResponse):
        parse_message_score(raw)


def test_parse_tweet_analysis_extracts_embedded_json():
    raw = 'Sure! {"sentiment": "Bullish", "score": 8, "confidence": 0.9, "keywords": ["eth"]} hope that helps'
    fields = parse_tweet_analysis(raw)
    assert fields == {"label": "bullish", "score": 8.0, "confidence": 0.9, "keywords": ["eth"]}


def test_parse_tweet_analysis_falsy_fields_take_defaults():
    fields = parse_tweet_analysis('{"sentiment": "", "score": 0, "confidence": 0, "keywords": null}')
    assert fields == {"label": "neutral", "score": 5.0, "confidence": 0.5, "keywords": []}


@pytest.mark.parametrize(
    "raw",
    [
        "no json here",
        "[1, 2, 3]",
        '{"sentiment": "moon", "score": 8}',
        '{"sentiment": "bullish", "score": 11}',
        '{"sentiment": "bullish", "score": 8, "confidence": 1.5}',
        '{"sentiment": "bullish", "score": "high"}',
        '{"sentiment": "bullish", "score": true}',
        '{"sentiment": "bullish", "score": 8,}',
    ],
)
def test_parse_tweet_analysis_rejects(raw):
    with pytest.raises(InvalidOracleResponse):
        parse_tweet_analysis(raw)


@pytest.mark.asyncio
async def test_primary_answers(cfg):
    primary = FakeProvider("gemini", message="0.75")
    fallback = FakeProvider("openai", message="-0.9")
    result = await SentimentClassifier([primary, fallback], cfg).classify_message("ETH to the moon")

    assert result.score == pytest.approx(0.75)
    assert result.provider == "gemini"
    assert fallback.calls == []


@pytest.mark.asyncio
async def test_fails_over_on_error(cfg):
    primary = FakeProvider("gemini", exc=RuntimeError("quota exceeded"))
    fallback = FakeProvider("openai", message="0.6")
    result = await SentimentClassifier([primary, fallback], cfg).classify_message("ETH")

    assert result.provider == "openai"
    assert result.score == pytest.approx(0.6)
    assert primary.calls == ["ETH"]


@pytest.mark.asyncio
@pytest.mark.parametrize("bad", ["1.7", "very bullish"])
async def test_fails_over_on_invalid_answer(cfg, bad):
    primary = FakeProvider("gemini", message=bad)
    fallback = FakeProvider("openai", message="-0.6")
    result = await SentimentClassifier([primary, fallback], cfg).classify_message("ETH")

    assert result.provider == "openai"
    assert result.score == pytest.approx(-0.6)


@pytest.mark.asyncio
async def test_fails_over_on_timeout(cfg):
    primary = FakeProvider("gemini", message="0.9", delay=1.0)
    fallback = FakeProvider("openai", message="0.7")
    result = await SentimentClassifier([primary, fallback], cfg).classify_message("ETH")

    assert result.provider == "openai"


@pytest.mark.asyncio
async def test_unconfigured_providers_are_skipped(cfg):
    primary = FakeProvider("gemini", message="0.9", configured=False)
    fallback = FakeProvider("openai", message="0.2")
    classifier = SentimentClassifier([primary, fallback], cfg)

    assert classifier.available_providers == ["openai"]
    result = await classifier.classify_message("ETH")
    assert result.provider == "openai"
    assert primary.calls == []


@pytest.mark.asyncio
async def test_all_providers_failing_is_unavailable(cfg):
    classifier = SentimentClassifier(
        [
            FakeProvider("gemini", exc=RuntimeError("down")),
            FakeProvider("openai", message="nope"),
        ],
        cfg,
    )
    with pytest.raises(ClassificationUnavailable) as excinfo:
        await classifier.classify_message("ETH")
    assert excinfo.value.attempts == ["gemini", "openai"]


@pytest.mark.asyncio
async def test_no_configured_provider_is_unavailable(cfg):
    classifier = SentimentClassifier([FakeProvider("gemini", configured=False)], cfg)
    with pytest.raises(ClassificationUnavailable) as excinfo:
        await classifier.classify_message("ETH")
    assert excinfo.value.attempts == []


@pytest.mark.asyncio
async def test_classify_tweet_fails_over(cfg):
    primary = FakeProvider("gemini", tweet="I think it's bullish")
    fallback = FakeProvider("openai", tweet=tweet_json("bearish", 3, 0.6, ["dump"]))
    result = await SentimentClassifier([primary, fallback], cfg).classify_tweet("ETH dumping")

    assert result.label == "bearish"
    assert result.score == 3.0
    assert result.confidence == pytest.approx(0.6)
    assert result.keywords == ["dump"]
    assert result.provider == "openai"


@pytest.mark.asyncio
async def test_classify_tweet_falls_back_to_neutral(cfg):
    classifier = SentimentClassifier(
        [
            FakeProvider("gemini", exc=RuntimeError("down")),
            FakeProvider("openai", tweet='{"sentiment": "bullish", "score": 42}'),
        ],
        cfg,
    )
    result = await classifier.classify_tweet("ETH")
    assert result == NEUTRAL_TWEET_SENTIMENT
    assert result.score == 5.0
    assert result.confidence == pytest.approx(0.3)


@pytest.mark.asyncio
async def test_classify_tweet_without_providers(cfg):
    assert await SentimentClassifier([], cfg).classify("anything") == NEUTRAL_TWEET_SENTIMENT
