from typing import Literal

from pydantic import BaseModel, ConfigDict

from sentiment_trader.trading.models import TradePlan

ItemStatus = Literal["signal", "no-signal", "error"]


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = ""
    source: str = "unknown"


class BatchItemResult(BaseModel):
    index: int
    post: Post
    status: ItemStatus
    trade_plan: TradePlan | None = None
    error: str = ""
    # no sentiment provider could score this post
    unavailable: bool = False

    @property
    def has_signal(self) -> bool:
        return self.status == "signal"


class BatchReport(BaseModel):
    total_posts: int = 0
    strong_signals: int = 0
    unavailable: int = 0
    results: list[BatchItemResult] = []
