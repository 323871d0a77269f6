from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from sentiment_trader.ingestion.models import TweetMetrics
from sentiment_trader.sentiment.models import TWEET_SCALE, SentimentLabel

Level = Literal["low", "medium", "high"]


class ScoredItem(BaseModel):
    """One classified text unit on the 1..10 bullishness scale."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    sentiment_label: SentimentLabel = "neutral"
    score: float = Field(default=5.0, ge=TWEET_SCALE[0], le=TWEET_SCALE[1])
    confidence: float = Field(default=0.5, ge=0.0, le=1.0)
    keywords: list[str] = []
    engagement_score: float = Field(default=0.0, ge=0.0)
    author: str = ""
    created_at: datetime | None = None
    metrics: TweetMetrics | None = None


class AlphaItem(ScoredItem):
    alpha_score: float = Field(ge=0.0)
    alpha_signals: list[str] = []
    risk_level: Level = "medium"
    potential_impact: Level = "medium"


class SignalStat(BaseModel):
    signal: str
    count: int
    avg_score: float


class LevelDistribution(BaseModel):
    low: int = 0
    medium: int = 0
    high: int = 0


class AlphaSummary(BaseModel):
    total_alpha_signals: int = 0
    high_confidence_alphas: int = 0
    average_alpha_score: float = 0.0
    risk_distribution: LevelDistribution = Field(default_factory=LevelDistribution)
    impact_distribution: LevelDistribution = Field(default_factory=LevelDistribution)
    top_alpha_signals: list[SignalStat] = []
    top_alpha_items: list[AlphaItem] = []


class AlphaResult(BaseModel):
    alpha_items: list[AlphaItem] = []
    summary: AlphaSummary = Field(default_factory=AlphaSummary)
