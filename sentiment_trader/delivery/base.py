import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class DeliveryChannel(ABC):
    """Consumer of human-readable summaries. Delivery is fire-and-forget."""

    @abstractmethod
    async def send_text(self, text: str, data: dict | None = None) -> None:
        ...


class LogDelivery(DeliveryChannel):
    """Default channel when nothing else is configured."""

    async def send_text(self, text: str, data: dict | None = None) -> None:
        logger.info("Delivery: %s", text.replace("\n", " | "))
