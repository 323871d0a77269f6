from abc import ABC, abstractmethod

from sentiment_trader.sentiment.prompts import message_prompt, tweet_prompt


class SentimentProvider(ABC):
    """One sentiment oracle. Returns the oracle's raw answer; validation is the caller's job."""

    name: str = ""

    def is_configured(self) -> bool:
        return True

    @abstractmethod
    async def message_sentiment(self, text: str, pair: str) -> str:
        """Raw answer for the -1..1 message scale (expected: a bare number)."""
        ...

    @abstractmethod
    async def tweet_sentiment(self, text: str) -> str:
        """Raw answer for the 1..10 tweet scale (expected: a JSON object)."""
        ...


class LLMProvider(SentimentProvider):
    """Provider backed by a text-generation model driven by the fixed prompts."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        ...

    async def message_sentiment(self, text: str, pair: str) -> str:
        return await self.generate(message_prompt(text, pair))

    async def tweet_sentiment(self, text: str) -> str:
        return await self.generate(tweet_prompt(text))
