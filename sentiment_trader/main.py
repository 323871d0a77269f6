import asyncio
import logging

import uvicorn

from sentiment_trader.config import Settings, settings
from sentiment_trader.delivery.base import DeliveryChannel, LogDelivery
from sentiment_trader.delivery.web.app import create_app
from sentiment_trader.ingestion.factory import create_ingester
from sentiment_trader.pipeline.batch import BatchOrchestrator
from sentiment_trader.pipeline.router import MessageRouter
from sentiment_trader.scoring.scorer import TweetScorer
from sentiment_trader.sentiment.classifier import SentimentClassifier
from sentiment_trader.sentiment.providers.factory import create_providers
from sentiment_trader.trading.gateway import PaperGateway
from sentiment_trader.trading.planner import TradeDecisionEngine
from sentiment_trader.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_router(cfg: Settings) -> MessageRouter:
    classifier = SentimentClassifier(create_providers(cfg), cfg)
    engine = TradeDecisionEngine(classifier, cfg)
    return MessageRouter(
        engine,
        scorer=TweetScorer(classifier),
        ingester=create_ingester(cfg),
        gateway=PaperGateway(),
        cfg=cfg,
    )


async def main() -> None:
    setup_logging()
    logger.info("Starting Sentiment Trader")

    message_router = build_router(settings)

    # Telegram: push delivery + commands
    delivery: DeliveryChannel = LogDelivery()
    tg_app = None
    if settings.telegram_bot_token and settings.telegram_chat_id:
        from sentiment_trader.delivery.telegram_bot import TelegramDelivery

        telegram_delivery = TelegramDelivery(message_router, settings)
        tg_app = telegram_delivery.build_application()
        delivery = telegram_delivery
        logger.info("Telegram delivery enabled")
    else:
        logger.warning("Telegram not configured — summaries will only be logged")

    batch = BatchOrchestrator(message_router.engine, notify=delivery.send_text)

    app = create_app(message_router, batch, settings)
    config = uvicorn.Config(
        app,
        host=settings.web_host,
        port=settings.web_port,
        log_level="info",
    )
    server = uvicorn.Server(config)

    tasks = [server.serve()]
    if tg_app is not None:

        async def run_telegram():
            async with tg_app:
                await tg_app.updater.start_polling()
                await tg_app.start()
                logger.info("Telegram bot polling started")
                try:
                    while True:
                        await asyncio.sleep(3600)
                except asyncio.CancelledError:
                    await tg_app.updater.stop()
                    await tg_app.stop()

        tasks.append(run_telegram())

    await asyncio.gather(*tasks)


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
