"""Gemini sentiment oracle using google-genai."""

import logging

from google import genai

from sentiment_trader.sentiment.providers.base import LLMProvider

logger = logging.getLogger(__name__)


class GeminiProvider(LLMProvider):
    name = "gemini"

    def __init__(self, api_key: str, model: str) -> None:
        self._api_key = (api_key or "").strip()
        self._model = model
        self._client: genai.Client | None = None

    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def generate(self, prompt: str) -> str:
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        response = await self._client.aio.models.generate_content(
            model=self._model,
            contents=prompt,
        )
        text = response.text or ""
        logger.debug("Gemini raw response: %r", text[:200])
        return text
