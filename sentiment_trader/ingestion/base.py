from abc import ABC, abstractmethod

from sentiment_trader.ingestion.models import RawTweet


class BaseIngester(ABC):
    @abstractmethod
    async def search(self, query: str, count: int = 15) -> list[RawTweet]:
        """Most recent tweets matching the query, newest first. May be empty.

        Raises IngestionError when the source itself fails.
        """
        ...
