"""Channel kind enumeration and factory dispatch."""

from __future__ import annotations

from enum import Enum

from message_dispatcher.core.clock import Clock, system_clock
from message_dispatcher.core.exceptions import ChannelNotImplementedError
from message_dispatcher.core.settings import Settings, settings as default_settings
from message_dispatcher.interfaces.channel import Channel
from message_dispatcher.interfaces.output_sink import OutputSink
from message_dispatcher.providers.channels.whatsapp import SimulatedWhatsAppChannel
from message_dispatcher.providers.output.console import ConsoleOutputSink


class ChannelKind(str, Enum):
    """Closed set of channel kinds; only WhatsApp is implemented."""

    WHATSAPP = "whatsapp"
    TELEGRAM = "telegram"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"


class ChannelFactory:
    """
    Builds a channel for a kind and recipient.

    Adding a channel means adding a branch to ``create``.
    """

    def __init__(
        self,
        *,
        sink: OutputSink | None = None,
        clock: Clock | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.sink = sink or ConsoleOutputSink()
        self.clock = clock or system_clock
        self.settings = settings or default_settings

    def create(self, kind: ChannelKind | str, recipient: str) -> Channel:
        """
        Create a channel instance.

        Args:
            kind: Channel kind, as a ``ChannelKind`` or its string value
            recipient: Recipient identifier for the channel

        Returns:
            Channel instance bound to ``recipient``

        Raises:
            ChannelNotImplementedError: If the kind has no implementation
            ChannelValidationError: If the recipient is rejected by the channel
        """
        try:
            kind = ChannelKind(kind.lower() if isinstance(kind, str) else kind)
        except ValueError as exc:
            raise ChannelNotImplementedError(kind) from exc

        if kind is ChannelKind.WHATSAPP:
            return SimulatedWhatsAppChannel(
                recipient,
                sink=self.sink,
                clock=self.clock,
                settings=self.settings,
            )
        raise ChannelNotImplementedError(kind)
