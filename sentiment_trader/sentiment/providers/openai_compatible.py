"""OpenAI (or any OpenAI-compatible endpoint) sentiment oracle."""

import logging

from openai import AsyncOpenAI

from sentiment_trader.sentiment.providers.base import LLMProvider

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    name = "openai"

    def __init__(self, api_key: str, model: str, base_url: str = "") -> None:
        self._api_key = (api_key or "").strip()
        self._model = model
        self._base_url = base_url or None
        self._client: AsyncOpenAI | None = None

    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def generate(self, prompt: str) -> str:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._api_key, base_url=self._base_url)
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=[{"role": "user", "content": prompt}],
            temperature=0,
        )
        text = response.choices[0].message.content or ""
        logger.debug("OpenAI raw response: %r", text[:200])
        return text
