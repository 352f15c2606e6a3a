"""Exceptions raised by the duration parser and formatter."""

from typing import Optional


class DurationError(ValueError):
    """Base class for every rejected duration input.

    ``kind`` is a stable machine-readable tag; ``value`` is the input that
    was rejected (when there is one).
    """

    kind = "duration_error"
    default_message = "invalid duration"

    def __init__(self, message: Optional[str] = None, value=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.value = value

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "message": self.message,
            "input": None if self.value is None else str(self.value),
        }


class InvalidValue(DurationError):
    kind = "invalid_value"
    default_message = "invalid value"


class InvalidPostfix(DurationError):
    kind = "invalid_postfix"
    default_message = "invalid postfix"


class InputTooLong(DurationError):
    kind = "input_too_long"
    default_message = "input too long"


class NegativeDurationUnsupported(DurationError):
    kind = "negative_duration_unsupported"
    default_message = "negative durations are not supported"
