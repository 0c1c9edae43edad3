# src/mr_relay/notifiers/base.py
from abc import ABC, abstractmethod
from mr_relay.models.message import MarkdownMessage, MessageContent, OutboundMessage, TextMessage


class Notifier(ABC):
    @abstractmethod
    async def send(self, message: OutboundMessage) -> None:
        """Deliver one message, raising DeliveryError on failure."""
        pass

    async def send_text(self, content: str) -> None:
        await self.send(TextMessage(text=MessageContent(content=content)))

    async def send_markdown(self, content: str) -> None:
        await self.send(MarkdownMessage(markdown=MessageContent(content=content)))
