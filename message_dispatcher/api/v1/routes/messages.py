"""Endpoints for dispatching messages through a channel."""

from fastapi import APIRouter, Depends, HTTPException

from message_dispatcher.core.clock import Clock, get_clock
from message_dispatcher.core.exceptions import ChannelNotImplementedError, DispatcherValidationError
from message_dispatcher.core.settings import Settings, get_settings
from message_dispatcher.providers.output.memory import MemoryOutputSink
from message_dispatcher.schemas.dispatch import DispatchRequest, DispatchResponse
from message_dispatcher.services.channel_factory import ChannelFactory
from message_dispatcher.services.dispatch_service import DispatchService

router = APIRouter()


@router.post("/messages/send", response_model=DispatchResponse)
async def send_messages(
    payload: DispatchRequest,
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(get_settings),
) -> DispatchResponse:
    """Send the given messages in order and return the lines the channel emitted."""
    sink = MemoryOutputSink()
    service = DispatchService(channel_factory=ChannelFactory(sink=sink, clock=clock, settings=settings))
    try:
        messages = [item.to_message(clock) for item in payload.messages]
        sent = await service.send_all(payload.channel, payload.recipient, messages)
    except ChannelNotImplementedError as exc:
        raise HTTPException(status_code=501, detail=str(exc)) from exc
    except DispatcherValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return DispatchResponse(
        channel=payload.channel,
        recipient=payload.recipient,
        sent=sent,
        lines=sink.lines,
    )
