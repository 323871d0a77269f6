import logging

from fastapi import APIRouter, Query, Request
from pydantic import BaseModel, Field

from sentiment_trader.pipeline.models import BatchReport, Post
from sentiment_trader.research.prices import get_price_usd

logger = logging.getLogger(__name__)

router = APIRouter()


class TradePlanRequest(BaseModel):
    text: str = Field(..., min_length=1)
    source: str = "api"


class BatchRequest(BaseModel):
    posts: list[Post] = []
    source: str = "batch_analysis"


class ExecuteRequest(BaseModel):
    source: str = "api"


@router.get("/health")
async def health(request: Request):
    return {"status": "ok", "providers": request.app.state.message_router.providers}


@router.post("/api/trade-plan")
async def api_trade_plan(body: TradePlanRequest, request: Request):
    reply = await request.app.state.message_router.trade_plan(body.text, body.source)
    return {"text": reply.text, **reply.data}


@router.post("/api/batch", response_model=BatchReport)
async def api_batch(body: BatchRequest, request: Request):
    return await request.app.state.batch.run_batch(body.posts, body.source)


@router.get("/api/tweets")
async def api_tweets(request: Request, coin: str = Query("ethereum", min_length=2, max_length=10)):
    reply = await request.app.state.message_router.tweets(coin.lower(), "api")
    return {"text": reply.text, **reply.data}


@router.get("/api/alpha")
async def api_alpha(request: Request, coin: str = Query("ethereum", min_length=2, max_length=10)):
    reply = await request.app.state.message_router.alpha(coin.lower(), "api")
    return {"text": reply.text, **reply.data}


@router.post("/api/execute")
async def api_execute(body: ExecuteRequest, request: Request):
    reply = await request.app.state.message_router.execute(body.source)
    return {"text": reply.text, **reply.data}


@router.get("/api/price")
async def api_price(request: Request, token: str = Query(..., min_length=2, max_length=10)):
    usd = await get_price_usd(token, request.app.state.settings)
    return {"token": token.upper(), "usd": usd}
