"""Pre-trade safety checks — run before every execution."""

import logging
import time

from sentiment_trader.config import Settings, settings as default_settings
from sentiment_trader.trading.models import TradePlan

logger = logging.getLogger(__name__)

# In-memory cooldown tracker: {pair: last_execution_timestamp}
_cooldowns: dict[str, float] = {}


def check_pair(plan: TradePlan, cfg: Settings) -> str | None:
    """Pair must look like BASE/QUOTE with both sides supported."""
    base, _, quote = plan.pair.partition("/")
    if not base or not quote:
        return "Invalid token pair format. Expected format: TOKEN1/TOKEN2"

    supported = cfg.supported_token_list
    for asset in (base, quote):
        if asset.upper() not in supported:
            return f"Unsupported asset: {asset}"
    return None


def check_amount(plan: TradePlan) -> str | None:
    if plan.amount <= 0:
        return f"Invalid trade amount: {plan.amount}"
    return None


def check_cooldown(pair: str, cfg: Settings) -> str | None:
    """Prevent re-trading the same pair within the cooldown period."""
    last = _cooldowns.get(pair)
    if last is None:
        return None
    elapsed = time.time() - last
    if elapsed < cfg.trade_cooldown_seconds:
        remaining = int(cfg.trade_cooldown_seconds - elapsed)
        return f"Cooldown active — wait {remaining}s before trading {pair} again"
    return None


def set_cooldown(pair: str) -> None:
    _cooldowns[pair] = time.time()


def reset_cooldowns() -> None:
    _cooldowns.clear()


def run_all_checks(plan: TradePlan, cfg: Settings | None = None) -> str | None:
    """Run all safety checks. Returns first failure message or None if all pass."""
    cfg = cfg or default_settings
    checks = [
        check_pair(plan, cfg),
        check_amount(plan),
        check_cooldown(plan.pair, cfg),
    ]
    for result in checks:
        if result is not None:
            logger.warning("Safety check failed for %s: %s", plan.pair, result)
            return result
    return None
