"""Shared recipient handling and line formatting for channels."""

from __future__ import annotations

from abc import abstractmethod

from message_dispatcher.core.clock import Clock, system_clock
from message_dispatcher.core.exceptions import ChannelValidationError, ValidationErrorKind
from message_dispatcher.core.settings import Settings, settings as default_settings
from message_dispatcher.interfaces.channel import Channel
from message_dispatcher.interfaces.output_sink import OutputSink
from message_dispatcher.models.message import Message
from message_dispatcher.providers.output.console import ConsoleOutputSink


class BaseChannel(Channel):
    """Channel bound to one validated recipient."""

    def __init__(
        self,
        recipient: str,
        *,
        sink: OutputSink | None = None,
        clock: Clock | None = None,
        settings: Settings | None = None,
    ) -> None:
        if not isinstance(recipient, str) or not recipient.strip():
            raise ChannelValidationError(ValidationErrorKind.BLANK_RECIPIENT, "Recipient is required.")
        self.recipient = recipient
        self.sink = sink or ConsoleOutputSink()
        self.clock = clock or system_clock
        self.settings = settings or default_settings

    async def send_message(self, message: Message | None) -> None:
        """Validate the message and hand it to the channel-specific delivery."""
        if message is None:
            raise ChannelValidationError(ValidationErrorKind.MISSING_MESSAGE, "Message is required.")
        await self._deliver(message)

    @abstractmethod
    async def _deliver(self, message: Message) -> None:
        raise NotImplementedError

    def format_line(self, message: Message) -> str:
        """Return '<UTC timestamp> | To: <recipient> | <message format>'."""
        timestamp = self.clock.now().strftime(self.settings.timestamp_format)
        return f"{timestamp} | To: {self.recipient} | {message.format()}"
