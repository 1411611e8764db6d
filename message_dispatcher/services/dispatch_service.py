"""Sequential delivery of a batch of messages through one channel."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from message_dispatcher.interfaces.channel import Channel
from message_dispatcher.models.message import Message
from message_dispatcher.services.channel_factory import ChannelFactory, ChannelKind

logger = logging.getLogger(__name__)


class DispatchService:
    """Builds a channel through the factory and sends messages one after another."""

    def __init__(self, channel_factory: ChannelFactory) -> None:
        self.channel_factory = channel_factory

    async def send_all(
        self,
        kind: ChannelKind | str,
        recipient: str,
        messages: Iterable[Message | None],
    ) -> int:
        """Build the channel for ``kind`` and send every message through it."""
        channel = self.channel_factory.create(kind, recipient)
        logger.info("Dispatching to %s via %s", recipient, getattr(kind, "value", kind))
        return await self.send(channel, messages)

    async def send(self, channel: Channel, messages: Iterable[Message | None]) -> int:
        """Send every message in order and return how many were sent.

        The first failure propagates; later messages are not sent.
        """
        batch = list(messages)
        logger.info("Sending %d message(s)", len(batch))

        sent = 0
        for message in batch:
            try:
                await channel.send_message(message)
            except Exception:
                logger.warning("Dispatch aborted after %d of %d message(s)", sent, len(batch))
                raise
            sent += 1
        return sent
