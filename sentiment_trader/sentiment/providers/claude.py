"""Claude sentiment oracle."""

import anthropic

from sentiment_trader.sentiment.providers.base import LLMProvider


class AnthropicProvider(LLMProvider):
    name = "anthropic"

    def __init__(self, api_key: str, model: str, max_tokens: int = 300) -> None:
        self._api_key = (api_key or "").strip()
        self._model = model
        self._max_tokens = max_tokens
        self._client: anthropic.AsyncAnthropic | None = None

    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def generate(self, prompt: str) -> str:
        if self._client is None:
            self._client = anthropic.AsyncAnthropic(api_key=self._api_key)
        message = await self._client.messages.create(
            model=self._model,
            max_tokens=self._max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
        return message.content[0].text
