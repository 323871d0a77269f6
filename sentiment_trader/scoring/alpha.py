"""Alpha signal detection — re-scores bullish items with the weighted lexicon.

Pure and synchronous: the same ScoredItems always give the same result.
"""

import logging
from collections.abc import Iterable, Mapping

from sentiment_trader.scoring.lexicon import ALPHA_SIGNALS, FRAUD_INDICATORS
from sentiment_trader.scoring.models import (
    AlphaItem,
    AlphaResult,
    AlphaSummary,
    Level,
    LevelDistribution,
    ScoredItem,
    SignalStat,
)

logger = logging.getLogger(__name__)

# Eligibility
MIN_SENTIMENT_SCORE = 2.0
MIN_CONFIDENCE = 0.3

# Bonuses
ENGAGEMENT_BONUS_FLOOR = 2.0
ENGAGEMENT_BONUS_RATE = 0.5
ENGAGEMENT_BONUS_CAP = 3.0
CONFIDENCE_BONUS_RATE = 2.0

# Classification
LOW_RISK_MIN_ALPHA = 8.0
LOW_RISK_MIN_CONFIDENCE = 0.7
HIGH_IMPACT_MIN_ALPHA = 10.0
HIGH_IMPACT_MIN_ENGAGEMENT = 3.0
LOW_IMPACT_MAX_ALPHA = 5.0
HIGH_CONFIDENCE = 0.7

DEFAULT_RETENTION = 5.0
DEFAULT_TOP_N = 10


def is_candidate(item: ScoredItem) -> bool:
    return (
        item.sentiment_label == "bullish"
        and item.score >= MIN_SENTIMENT_SCORE
        and item.confidence >= MIN_CONFIDENCE
    )


def match_signals(text: str, lexicon: Mapping[str, float] = ALPHA_SIGNALS) -> list[tuple[str, float]]:
    """Every lexicon phrase found in text, in lexicon order."""
    lowered = text.lower()
    return [(phrase, weight) for phrase, weight in lexicon.items() if phrase in lowered]


def classify_risk(text: str, alpha_score: float, confidence: float) -> Level:
    lowered = text.lower()
    if any(phrase in lowered for phrase in FRAUD_INDICATORS):
        return "high"
    if alpha_score > LOW_RISK_MIN_ALPHA and confidence > LOW_RISK_MIN_CONFIDENCE:
        return "low"
    return "medium"


def classify_impact(alpha_score: float, engagement_score: float) -> Level:
    if alpha_score > HIGH_IMPACT_MIN_ALPHA and engagement_score > HIGH_IMPACT_MIN_ENGAGEMENT:
        return "high"
    if alpha_score < LOW_IMPACT_MAX_ALPHA:
        return "low"
    return "medium"


def score_alpha(item: ScoredItem) -> AlphaItem:
    """Derive the AlphaItem for one eligible ScoredItem."""
    matches = match_signals(item.text)
    alpha = item.score + sum(weight for _, weight in matches)

    if item.engagement_score > ENGAGEMENT_BONUS_FLOOR:
        alpha += min(item.engagement_score * ENGAGEMENT_BONUS_RATE, ENGAGEMENT_BONUS_CAP)
    alpha += item.confidence * CONFIDENCE_BONUS_RATE
    alpha = max(0.0, alpha)

    return AlphaItem(
        **item.model_dump(),
        alpha_score=alpha,
        alpha_signals=[phrase for phrase, _ in matches],
        risk_level=classify_risk(item.text, alpha, item.confidence),
        potential_impact=classify_impact(alpha, item.engagement_score),
    )


def top_signals(items: Iterable[AlphaItem], limit: int = DEFAULT_TOP_N) -> list[SignalStat]:
    """Most frequent signals; ties go to the higher average alpha score."""
    counts: dict[str, int] = {}
    totals: dict[str, float] = {}
    for item in items:
        for signal in item.alpha_signals:
            counts[signal] = counts.get(signal, 0) + 1
            totals[signal] = totals.get(signal, 0.0) + item.alpha_score

    stats = [
        SignalStat(signal=s, count=counts[s], avg_score=totals[s] / counts[s])
        for s in counts
    ]
    # sorted() is stable, so equal (count, avg) keep first-seen order
    stats = sorted(stats, key=lambda s: (-s.count, -s.avg_score))
    return stats[:limit]


def _distribution(levels: Iterable[Level]) -> LevelDistribution:
    dist = LevelDistribution()
    for level in levels:
        setattr(dist, level, getattr(dist, level) + 1)
    return dist


def summarize(items: list[AlphaItem], top_n: int = DEFAULT_TOP_N) -> AlphaSummary:
    if not items:
        return AlphaSummary()

    return AlphaSummary(
        total_alpha_signals=len(items),
        high_confidence_alphas=sum(1 for i in items if i.confidence > HIGH_CONFIDENCE),
        average_alpha_score=sum(i.alpha_score for i in items) / len(items),
        risk_distribution=_distribution(i.risk_level for i in items),
        impact_distribution=_distribution(i.potential_impact for i in items),
        top_alpha_signals=top_signals(items, top_n),
        top_alpha_items=items[:top_n],
    )


def detect_alpha(
    items: Iterable[ScoredItem],
    retention_threshold: float = DEFAULT_RETENTION,
    top_n: int = DEFAULT_TOP_N,
) -> AlphaResult:
    """Filter, re-score, retain and rank alpha candidates."""
    scored = [score_alpha(item) for item in items if is_candidate(item)]
    retained = [a for a in scored if a.alpha_score >= retention_threshold]
    retained.sort(key=lambda a: a.alpha_score, reverse=True)

    logger.debug(
        "Alpha detection: %d candidates, %d retained (threshold %.1f)",
        len(scored),
        len(retained),
        retention_threshold,
    )
    return AlphaResult(alpha_items=retained, summary=summarize(retained, top_n))
