"""Message models package."""

from message_dispatcher.models.message import MediaMessage, Message, MessageKind, TextMessage, VideoMessage

__all__ = [
    "Message",
    "MessageKind",
    "TextMessage",
    "MediaMessage",
    "VideoMessage",
]
