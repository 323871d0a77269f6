import pytest
from pydantic import ValidationError

from sentiment_trader.ingestion.models import TweetMetrics
from sentiment_trader.scoring.engagement import engagement_score
from sentiment_trader.scoring.models import ScoredItem
from sentiment_trader.scoring.scorer import TweetScorer
from sentiment_trader.sentiment.classifier import SentimentClassifier

from conftest import FakeProvider, make_tweet, tweet_json


def test_engagement_weights():
    metrics = TweetMetrics(retweet_count=3, reply_count=2, like_count=10, quote_count=1)
    # 3*2 + 2*1.5 + 10 + 1*2
    assert engagement_score(metrics) == pytest.approx(21.0)


def test_engagement_without_metrics():
    assert engagement_score(None) == 0.0
    assert engagement_score(TweetMetrics()) == 0.0


def test_engagement_ignores_negative_counters():
    assert engagement_score(TweetMetrics(like_count=-5, retweet_count=1)) == pytest.approx(2.0)


@pytest.mark.asyncio
async def test_score_builds_scored_item(cfg):
    provider = FakeProvider("gemini", tweet=tweet_json("bullish", 8, 0.8, ["eth", "whale"]))
    scorer = TweetScorer(SentimentClassifier([provider], cfg))
    tweet = make_tweet(7, likes=10, retweets=2)

    scored = await scorer.score(tweet)

    assert scored.id == "7"
    assert scored.text == tweet.text
    assert scored.sentiment_label == "bullish"
    assert scored.score == 8.0
    assert scored.confidence == pytest.approx(0.8)
    assert scored.keywords == ["eth", "whale"]
    assert scored.engagement_score == pytest.approx(14.0)
    assert scored.author == "user7"
    assert scored.metrics == tweet.metrics


@pytest.mark.asyncio
async def test_score_all_keeps_order_and_survives_oracle_failure(cfg):
    provider = FakeProvider("gemini", exc=RuntimeError("down"))
    scorer = TweetScorer(SentimentClassifier([provider], cfg))
    tweets = [make_tweet(i) for i in range(3)]

    scored = await scorer.score_all(tweets)

    assert [s.id for s in scored] == ["0", "1", "2"]
    assert all(s.sentiment_label == "neutral" and s.score == 5.0 for s in scored)
    assert provider.calls == [t.text for t in tweets]


@pytest.mark.parametrize("score", [0.5, 11, -1])
def test_scored_item_rejects_out_of_scale_score(score):
    with pytest.raises(ValidationError):
        ScoredItem(id="x", text="", score=score)


def test_scored_item_accepts_scale_bounds():
    assert ScoredItem(id="lo", text="", score=1).score == 1.0
    assert ScoredItem(id="hi", text="", score=10).score == 10.0
