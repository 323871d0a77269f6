from fastapi import FastAPI

from sentiment_trader.config import Settings, settings as default_settings
from sentiment_trader.delivery.web.routes import router
from sentiment_trader.pipeline.batch import BatchOrchestrator
from sentiment_trader.pipeline.router import MessageRouter


def create_app(
    message_router: MessageRouter,
    batch: BatchOrchestrator,
    cfg: Settings | None = None,
) -> FastAPI:
    app = FastAPI(title="Sentiment Trader", version="0.1.0")
    app.state.settings = cfg or default_settings
    app.state.message_router = message_router
    app.state.batch = batch
    app.include_router(router)
    return app
