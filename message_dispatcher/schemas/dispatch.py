"""Schemas for the message dispatch endpoint."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from message_dispatcher.core.clock import Clock
from message_dispatcher.models.message import Message, TextMessage, VideoMessage
from message_dispatcher.services.channel_factory import ChannelKind


class TextMessagePayload(BaseModel):
    """Text message item."""

    type: Literal["text"] = "text"
    content: str = Field(..., description="Message body", examples=["Hola, tu pedido fue confirmado."])

    def to_message(self, clock: Clock) -> Message:
        return TextMessage(self.content, created_at=clock.now())


class VideoMessagePayload(BaseModel):
    """Video message item."""

    type: Literal["video"]
    content: str = Field(..., description="Caption shown with the video")
    file_name: str = Field(..., examples=["walkthrough"])
    file_format: str = Field(..., examples=["mp4"])
    duration_seconds: float = Field(..., allow_inf_nan=False, description="Video length in seconds", examples=[45])

    def to_message(self, clock: Clock) -> Message:
        return VideoMessage(
            self.content,
            self.file_name,
            self.file_format,
            self.duration_seconds,
            created_at=clock.now(),
        )


MessagePayload = Annotated[Union[TextMessagePayload, VideoMessagePayload], Field(discriminator="type")]


class DispatchRequest(BaseModel):
    """Request body for /messages/send."""

    channel: ChannelKind = Field(default=ChannelKind.WHATSAPP, description="Delivery channel")
    recipient: str = Field(..., description="Recipient identifier", examples=["+5511999999999"])
    messages: list[MessagePayload] = Field(..., min_length=1)


class DispatchResponse(BaseModel):
    """Response payload for /messages/send."""

    channel: ChannelKind
    recipient: str
    sent: int
    lines: list[str]
