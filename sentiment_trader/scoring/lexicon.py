"""Weighted alpha-signal phrases matched as lowercase substrings."""

ALPHA_SIGNALS: dict[str, float] = {
    # Technical
    "breakout": 3,
    "support": 2,
    "resistance": 2,
    "consolidation": 1,
    "accumulation": 3,
    "distribution": -2,
    "volume spike": 4,
    "liquidity": 2,
    "market cap": 1,
    "circulating supply": 1,
    # Fundamental
    "partnership": 3,
    "adoption": 4,
    "institutional": 3,
    "regulation": 2,
    "compliance": 2,
    "audit": 2,
    "security": 2,
    "team": 2,
    "roadmap": 1,
    "milestone": 2,
    # Social
    "viral": 4,
    "trending": 3,
    "fomo": 2,
    "community": 2,
    "influencer": 3,
    "whale": 2,
    "diamond hands": 2,
    "hodl": 1,
    # Market
    "bull run": 3,
    "alt season": 2,
    "rotation": 2,
    "sector": 2,
    "narrative": 2,
    "momentum": 3,
    "relative strength": 3,
    # Risk
    "scam": -5,
    "rug": -5,
    "ponzi": -5,
    "fake": -4,
    "manipulation": -4,
    "pump and dump": -4,
    "insider": -3,
    "wash trading": -4,
}

# Any of these forces risk_level=high
FRAUD_INDICATORS: tuple[str, ...] = ("scam", "rug", "ponzi", "fake", "manipulation")
