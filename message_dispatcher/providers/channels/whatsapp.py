"""Simulated WhatsApp channel implementation."""

import logging

from message_dispatcher.core.exceptions import ChannelValidationError, ValidationErrorKind
from message_dispatcher.models.message import Message
from message_dispatcher.providers.channels.base import BaseChannel

logger = logging.getLogger(__name__)

PHONE_PREFIX = "+"


class SimulatedWhatsAppChannel(BaseChannel):
    """Waits out a fake network delay, then writes the formatted line to the sink."""

    def __init__(self, recipient: str, **kwargs) -> None:
        super().__init__(recipient, **kwargs)
        if not self.recipient.startswith(PHONE_PREFIX):
            raise ChannelValidationError(
                ValidationErrorKind.MALFORMED_RECIPIENT,
                f"Invalid WhatsApp number '{recipient}': it must start with '{PHONE_PREFIX}'.",
            )

    async def _deliver(self, message: Message) -> None:
        await self.clock.sleep(self.settings.send_delay_seconds)
        line = self.format_line(message)
        logger.debug("WhatsApp send to %s (%s)", self.recipient, message.kind.value)
        self.sink.log(line)
