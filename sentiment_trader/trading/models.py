"""Pydantic models for the trading module."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

TradeAction = Literal["buy", "sell"]


class TradePlan(BaseModel):
    """A policy-bounded decision derived from one message's sentiment."""

    model_config = ConfigDict(frozen=True)

    action: TradeAction
    pair: str
    amount: float  # in base asset
    price_threshold: float  # USD
    sentiment_score: float  # -1 - 1
    source: str = "unknown"
    timestamp: datetime
    provider_used: str

    @property
    def base_asset(self) -> str:
        return self.pair.split("/")[0]

    @property
    def quote_asset(self) -> str:
        parts = self.pair.split("/")
        return parts[1] if len(parts) > 1 else ""


class Decision(BaseModel):
    """Outcome of evaluating one message; plan is None when there is nothing to do."""

    plan: TradePlan | None = None
    score: float | None = None
    provider: str = ""
    unavailable: bool = False
    error: str = ""

    @property
    def has_signal(self) -> bool:
        return self.plan is not None


class TradeResult(BaseModel):
    success: bool
    transaction_hash: str = ""
    amount_received: float | None = None
    error: str = ""


class BalanceResult(BaseModel):
    asset: str
    balance: float

    @property
    def formatted(self) -> str:
        return f"{self.balance:.6f} {self.asset}"


class TransferResult(BaseModel):
    success: bool
    transaction_hash: str = ""
    error: str = ""


class ExecutionResult(BaseModel):
    """What the consumer reports after trying to act on a TradePlan."""

    success: bool
    plan: TradePlan
    transaction_hash: str = ""
    amount_received: float | None = None
    error: str = ""
