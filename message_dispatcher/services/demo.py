"""Fixed demo run: one channel, a short list of messages, one top-level error handler."""

from __future__ import annotations

import logging
from datetime import timedelta

from message_dispatcher.core.clock import Clock, system_clock
from message_dispatcher.core.settings import Settings, settings as default_settings
from message_dispatcher.interfaces.output_sink import OutputSink
from message_dispatcher.models.message import Message, TextMessage, VideoMessage
from message_dispatcher.providers.output.console import ConsoleOutputSink
from message_dispatcher.services.channel_factory import ChannelFactory
from message_dispatcher.services.dispatch_service import DispatchService

logger = logging.getLogger(__name__)

START_MESSAGE = "Starting message dispatcher..."


def build_demo_messages(clock: Clock) -> list[Message]:
    """Return the messages sent by the demo, stamped with ``clock``."""
    created_at = clock.now()
    return [
        TextMessage("Hello! Your order has been confirmed.", created_at=created_at),
        VideoMessage(
            "Product walkthrough",
            "walkthrough",
            "mp4",
            timedelta(seconds=45),
            created_at=created_at,
        ),
    ]


async def run_demo(
    sink: OutputSink | None = None,
    clock: Clock | None = None,
    settings: Settings | None = None,
) -> None:
    """Send the demo messages; any failure is reported once and swallowed."""
    sink = sink or ConsoleOutputSink()
    clock = clock or system_clock
    settings = settings or default_settings

    sink.log(START_MESSAGE)
    try:
        factory = ChannelFactory(sink=sink, clock=clock, settings=settings)
        channel = factory.create(settings.demo_channel, settings.demo_recipient)
        messages = build_demo_messages(clock)
        await DispatchService(channel_factory=factory).send(channel, messages)
    except Exception as exc:
        logger.error("Demo run failed: %s", exc)
        sink.log(f"Error: {exc}")
