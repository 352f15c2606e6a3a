"""Convert human-readable duration strings to milliseconds and back."""

from .durations import (
    MAX_INPUT_LENGTH,
    format_duration,
    format_duration_auto,
    format_duration_auto_long,
    ms,
    parse_duration,
    parse_timedelta,
)
from .errors import (
    DurationError,
    InputTooLong,
    InvalidPostfix,
    InvalidValue,
    NegativeDurationUnsupported,
)
from .units import Unit, resolve_unit

__all__ = [
    "MAX_INPUT_LENGTH",
    "DurationError",
    "InputTooLong",
    "InvalidPostfix",
    "InvalidValue",
    "NegativeDurationUnsupported",
    "Unit",
    "format_duration",
    "format_duration_auto",
    "format_duration_auto_long",
    "ms",
    "parse_duration",
    "parse_timedelta",
    "resolve_unit",
]
