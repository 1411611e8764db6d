"""Error taxonomy shared by messages, channels and the factory."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ValidationErrorKind(str, Enum):
    """Named precondition that a value failed."""

    BLANK_CONTENT = "blank_content"
    BLANK_FILE_NAME = "blank_file_name"
    BLANK_FILE_FORMAT = "blank_file_format"
    NON_POSITIVE_DURATION = "non_positive_duration"
    DURATION_OUT_OF_RANGE = "duration_out_of_range"
    BLANK_RECIPIENT = "blank_recipient"
    MALFORMED_RECIPIENT = "malformed_recipient"
    MISSING_MESSAGE = "missing_message"


class DispatcherError(Exception):
    """Base class for every error raised by the dispatcher."""


class DispatcherValidationError(DispatcherError, ValueError):
    """Raised when a constructor or operation precondition is violated."""

    def __init__(self, kind: ValidationErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class MessageValidationError(DispatcherValidationError):
    """Raised when a message cannot be constructed from the given fields."""


class ChannelValidationError(DispatcherValidationError):
    """
    Raised for an invalid recipient or an absent message on send.

    Expected Result: nothing is delivered.
    """


class ChannelNotImplementedError(DispatcherError, NotImplementedError):
    """Raised when a channel kind has no concrete implementation."""

    def __init__(self, kind: Any) -> None:
        label = getattr(kind, "value", kind)
        super().__init__(f"Channel '{label}' is not implemented.")
        self.kind = kind
