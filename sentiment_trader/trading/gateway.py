"""Execution gateway — the boundary to wallets and settlement.

The pipeline only talks to ExecutionGateway. PaperGateway simulates fills so
plans can be exercised end to end without touching a chain.
"""

import logging
import secrets
from abc import ABC, abstractmethod

from sentiment_trader.errors import ExecutionError
from sentiment_trader.trading.models import (
    BalanceResult,
    TradeAction,
    TradeResult,
    TransferResult,
)

logger = logging.getLogger(__name__)


class ExecutionGateway(ABC):
    @abstractmethod
    async def execute_trade(
        self, from_asset: str, to_asset: str, amount: float, action: TradeAction
    ) -> TradeResult:
        ...

    @abstractmethod
    async def get_balance(self, asset: str) -> BalanceResult:
        ...

    @abstractmethod
    async def transfer(self, asset: str, amount: float, destination: str) -> TransferResult:
        ...


def _fake_tx_hash() -> str:
    return "0x" + secrets.token_hex(32)


class PaperGateway(ExecutionGateway):
    """Simulated fills against an in-memory balance sheet."""

    BUY_FILL_RATIO = 1.1
    SELL_FILL_RATIO = 0.9

    def __init__(self, balances: dict[str, float] | None = None) -> None:
        self._balances = {k.upper(): v for k, v in (balances or {}).items()}

    async def execute_trade(
        self, from_asset: str, to_asset: str, amount: float, action: TradeAction
    ) -> TradeResult:
        logger.info("Paper %s: %s %s -> %s", action, amount, from_asset, to_asset)
        if amount <= 0:
            raise ExecutionError(f"Invalid trade amount: {amount}")

        ratio = self.BUY_FILL_RATIO if action == "buy" else self.SELL_FILL_RATIO
        received = round(amount * ratio, 6)
        self._balances[to_asset.upper()] = self._balances.get(to_asset.upper(), 0.0) + received

        tx_hash = _fake_tx_hash()
        logger.info("Paper trade filled: %s", tx_hash)
        return TradeResult(success=True, transaction_hash=tx_hash, amount_received=received)

    async def get_balance(self, asset: str) -> BalanceResult:
        return BalanceResult(asset=asset.upper(), balance=self._balances.get(asset.upper(), 0.0))

    async def transfer(self, asset: str, amount: float, destination: str) -> TransferResult:
        logger.info("Paper transfer: %s %s to %s", amount, asset, destination)
        if not destination:
            return TransferResult(success=False, error="Missing destination address")

        available = self._balances.get(asset.upper(), 0.0)
        if amount <= 0 or amount > available:
            return TransferResult(
                success=False,
                error=f"Insufficient {asset.upper()} balance ({available:.6f} < {amount})",
            )

        self._balances[asset.upper()] = available - amount
        return TransferResult(success=True, transaction_hash=_fake_tx_hash())
