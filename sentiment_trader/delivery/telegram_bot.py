import logging

import telegram
from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes, MessageHandler, filters

from sentiment_trader.config import Settings, settings as default_settings
from sentiment_trader.delivery.base import DeliveryChannel
from sentiment_trader.pipeline.router import MessageRouter

logger = logging.getLogger(__name__)

_TELEGRAM_LIMIT = 4000
_SOURCE = "telegram"


class TelegramDelivery(DeliveryChannel):
    """Push summaries to a chat and answer /plan, /alpha, /tweets and free text."""

    def __init__(self, router: MessageRouter | None = None, cfg: Settings | None = None) -> None:
        self._settings = cfg or default_settings
        self._bot = telegram.Bot(token=self._settings.telegram_bot_token)
        self._chat_id = self._settings.telegram_chat_id
        self._router = router
        self._app: Application | None = None

    async def send_text(self, text: str, data: dict | None = None) -> None:
        try:
            # Telegram caps messages at 4096 chars
            for i in range(0, len(text), _TELEGRAM_LIMIT):
                await self._bot.send_message(
                    chat_id=self._chat_id,
                    text=text[i : i + _TELEGRAM_LIMIT],
                )
        except telegram.error.TelegramError as exc:
            logger.error("Telegram send failed: %s", exc)

    def build_application(self) -> Application:
        """Build the telegram Application with command handlers."""
        self._app = Application.builder().token(self._settings.telegram_bot_token).build()
        self._app.add_handler(CommandHandler("start", self._cmd_help))
        self._app.add_handler(CommandHandler("help", self._cmd_help))
        self._app.add_handler(CommandHandler("plan", self._cmd_plan))
        self._app.add_handler(CommandHandler("alpha", self._cmd_alpha))
        self._app.add_handler(CommandHandler("tweets", self._cmd_tweets))
        self._app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, self._on_text))
        return self._app

    @staticmethod
    async def _cmd_help(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await update.message.reply_text(
            "*Sentiment Trader*\n\n"
            "/plan <message> — Trade plan from a message's sentiment\n"
            "/alpha <coin> — Alpha signals from recent tweets\n"
            "/tweets <coin> — Twitter sentiment report\n\n"
            'Reply "execute trade" to act on the last plan.',
            parse_mode="Markdown",
        )

    async def _reply(self, update: Update, text: str) -> None:
        for i in range(0, len(text), _TELEGRAM_LIMIT):
            await update.message.reply_text(text[i : i + _TELEGRAM_LIMIT])

    async def _cmd_plan(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if not context.args:
            await update.message.reply_text("Usage: /plan ETH is going to moon!")
            return
        try:
            reply = await self._router.trade_plan(" ".join(context.args), _SOURCE)
            await self._reply(update, reply.text)
        except Exception as exc:
            logger.exception("/plan failed")
            await update.message.reply_text(f"Trade plan failed: {exc}")

    async def _cmd_alpha(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        coin = context.args[0].lower() if context.args else "ethereum"
        await update.message.reply_text(f"Analyzing alpha signals for {coin.upper()}… this may take a minute.")
        try:
            reply = await self._router.alpha(coin, _SOURCE)
            await self._reply(update, reply.text)
        except Exception as exc:
            logger.exception("/alpha failed for %s", coin)
            await update.message.reply_text(f"Alpha analysis failed: {exc}")

    async def _cmd_tweets(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        coin = context.args[0].lower() if context.args else "ethereum"
        try:
            reply = await self._router.tweets(coin, _SOURCE)
            await self._reply(update, reply.text)
        except Exception as exc:
            logger.exception("/tweets failed for %s", coin)
            await update.message.reply_text(f"Twitter analysis failed: {exc}")

    async def _on_text(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        text = update.message.text or ""
        try:
            reply = await self._router.handle(text, _SOURCE)
        except Exception:
            logger.exception("Message handling failed")
            return
        if reply is not None:
            await self._reply(update, reply.text)
