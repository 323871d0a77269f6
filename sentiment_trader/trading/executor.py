"""Acting on a TradePlan through an ExecutionGateway."""

import logging

from sentiment_trader.config import Settings, settings as default_settings
from sentiment_trader.errors import ExecutionError
from sentiment_trader.trading.gateway import ExecutionGateway
from sentiment_trader.trading.models import ExecutionResult, TradePlan
from sentiment_trader.trading.safety import run_all_checks, set_cooldown

logger = logging.getLogger(__name__)


async def execute_plan(
    plan: TradePlan,
    gateway: ExecutionGateway,
    cfg: Settings | None = None,
) -> ExecutionResult:
    """Run safety checks, then the gateway. Never raises; failures come back as results."""
    cfg = cfg or default_settings

    failure = run_all_checks(plan, cfg)
    if failure is not None:
        return ExecutionResult(success=False, plan=plan, error=failure)

    try:
        result = await gateway.execute_trade(plan.base_asset, plan.quote_asset, plan.amount, plan.action)
    except ExecutionError as exc:
        logger.error("Trade execution failed: %s", exc)
        return ExecutionResult(success=False, plan=plan, error=str(exc))
    except Exception as exc:
        logger.exception("Gateway error executing %s %s", plan.action, plan.pair)
        return ExecutionResult(success=False, plan=plan, error=f"Gateway error: {exc}")

    if result.success:
        set_cooldown(plan.pair)

    return ExecutionResult(
        success=result.success,
        plan=plan,
        transaction_hash=result.transaction_hash,
        amount_received=result.amount_received,
        error=result.error,
    )
