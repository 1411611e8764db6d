"""Interface contract for delivery channels."""

from abc import ABC, abstractmethod

from message_dispatcher.models.message import Message


class Channel(ABC):
    """Defines outbound message delivery to a single recipient."""

    @abstractmethod
    async def send_message(self, message: Message | None) -> None:
        """Deliver one message to the channel's recipient."""
        raise NotImplementedError
