"""Immutable message variants and their tagged text rendering."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import ClassVar

from message_dispatcher.core.clock import utc_now
from message_dispatcher.core.exceptions import MessageValidationError, ValidationErrorKind

TEXT_TAG = "[TEXTO]"
VIDEO_TAG = "[VIDEO]"


class MessageKind(str, Enum):
    """Tag identifying a concrete message variant."""

    TEXT = "text"
    VIDEO = "video"


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or not value.strip()


def _seconds_to_timedelta(seconds: int | float) -> timedelta:
    if isinstance(seconds, float) and math.isnan(seconds):
        raise MessageValidationError(
            ValidationErrorKind.DURATION_OUT_OF_RANGE,
            "Video duration must be a finite number of seconds.",
        )
    if seconds <= 0:
        raise MessageValidationError(
            ValidationErrorKind.NON_POSITIVE_DURATION,
            "Video duration must be strictly positive.",
        )
    try:
        duration = timedelta(seconds=seconds)
    except (OverflowError, ValueError) as exc:
        raise MessageValidationError(
            ValidationErrorKind.DURATION_OUT_OF_RANGE,
            f"Video duration of {seconds!r} seconds is out of range.",
        ) from exc
    # Positive values under one microsecond round down to zero.
    if duration == timedelta(0):
        raise MessageValidationError(
            ValidationErrorKind.DURATION_OUT_OF_RANGE,
            f"Video duration of {seconds!r} seconds is below the one microsecond resolution.",
        )
    return duration


def _format_seconds(duration: timedelta) -> str:
    seconds = duration.total_seconds()
    if seconds.is_integer():
        return str(int(seconds))
    return repr(seconds)


@dataclass(frozen=True, slots=True)
class Message(ABC):
    """Base payload: non-blank content stamped with its UTC creation time."""

    kind: ClassVar[MessageKind]

    content: str
    created_at: datetime = field(default_factory=utc_now, kw_only=True)

    def __post_init__(self) -> None:
        if _is_blank(self.content):
            raise MessageValidationError(ValidationErrorKind.BLANK_CONTENT, "Message content is required.")

    @abstractmethod
    def format(self) -> str:
        """Return the tagged human-readable form of this message."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class TextMessage(Message):
    """Plain text message."""

    kind: ClassVar[MessageKind] = MessageKind.TEXT

    def format(self) -> str:
        return f"{TEXT_TAG} {self.content}"


@dataclass(frozen=True, slots=True)
class MediaMessage(Message, ABC):
    """Message pointing at a media file."""

    file_name: str
    file_format: str

    def __post_init__(self) -> None:
        Message.__post_init__(self)
        if _is_blank(self.file_name):
            raise MessageValidationError(ValidationErrorKind.BLANK_FILE_NAME, "Media file name is required.")
        if _is_blank(self.file_format):
            raise MessageValidationError(ValidationErrorKind.BLANK_FILE_FORMAT, "Media file format is required.")

    @property
    def file(self) -> str:
        return f"{self.file_name}.{self.file_format}"


@dataclass(frozen=True, slots=True)
class VideoMessage(MediaMessage):
    """Video message; duration accepts a timedelta or a number of seconds."""

    kind: ClassVar[MessageKind] = MessageKind.VIDEO

    duration: timedelta

    def __post_init__(self) -> None:
        MediaMessage.__post_init__(self)
        duration = self.duration
        if isinstance(duration, (int, float)) and not isinstance(duration, bool):
            duration = _seconds_to_timedelta(duration)
            object.__setattr__(self, "duration", duration)
        if not isinstance(duration, timedelta) or duration <= timedelta(0):
            raise MessageValidationError(
                ValidationErrorKind.NON_POSITIVE_DURATION,
                "Video duration must be strictly positive.",
            )

    @property
    def duration_seconds(self) -> float:
        return self.duration.total_seconds()

    def format(self) -> str:
        return f"{VIDEO_TAG} {self.content} | File: {self.file} | Duration: {_format_seconds(self.duration)}s"
