"""Parse human-friendly duration strings into milliseconds and format them back.

Accepted input is a decimal number followed by an optional unit suffix,
e.g. ``"1d"``, ``"2 days"``, ``"2.5 hrs"`` or ``"-100"``. A missing suffix
means milliseconds. See :mod:`msconverter.units` for the full vocabulary.
"""

import math
from datetime import timedelta
from functools import lru_cache
from typing import Optional, Union

from .errors import InputTooLong, InvalidValue, NegativeDurationUnsupported
from .lexer import parse_number, split_token
from .units import Unit, resolve_unit

MAX_INPUT_LENGTH = 100

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_SHORT_TIERS = (
    (Unit.DAY, "d"),
    (Unit.HOUR, "h"),
    (Unit.MINUTE, "m"),
    (Unit.SECOND, "s"),
)

_LONG_TIERS = (
    (Unit.DAY, " day", " days"),
    (Unit.HOUR, " hour", " hours"),
    (Unit.MINUTE, " minute", " minutes"),
    (Unit.SECOND, " second", " seconds"),
    (Unit.MILLISECOND, " millisecond", " milliseconds"),
)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    The built-in :func:`round` rounds ties to even, which would turn
    ``"2.5ms"`` into 2.
    """
    whole = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return whole


def _divide_round(milliseconds: int, divisor: int) -> int:
    quotient, remainder = divmod(abs(milliseconds), divisor)
    if 2 * remainder >= divisor:
        quotient += 1
    return -quotient if milliseconds < 0 else quotient


def _to_int64(value: float, source) -> int:
    if not math.isfinite(value):
        raise InvalidValue(f"value is not finite: {source!r}", value=source)
    result = round_half_away(value)
    if not INT64_MIN <= result <= INT64_MAX:
        raise InvalidValue(f"value out of range: {source!r}", value=source)
    return result


def parse_duration(
    value: Union[str, bytes], max_length: Optional[int] = MAX_INPUT_LENGTH
) -> int:
    """Convert a duration expression into a signed number of milliseconds.

    Parameters
    ----------
    value:
        Duration expression such as ``"1d"`` or ``"2.5 hrs"``.
    max_length:
        Longest accepted input in characters; ``None`` disables the check.

    Returns
    -------
    int
        Milliseconds, rounded to the nearest integer after the unit is
        applied. The result always fits a signed 64-bit integer.

    Raises
    ------
    InputTooLong
        If ``value`` is longer than ``max_length``.
    InvalidValue
        If the numeric part is malformed, or the result does not fit.
    InvalidPostfix
        If the unit suffix is not recognised.
    """
    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidValue("input is not valid UTF-8", value=value) from exc
    if not isinstance(value, str):
        raise TypeError(f"duration must be a string, not {type(value).__name__}")
    if max_length is not None and len(value) > max_length:
        raise InputTooLong(
            f"input is {len(value)} characters, limit is {max_length}", value=value
        )

    number, suffix = split_token(value)
    amount = parse_number(number)
    unit = resolve_unit(suffix)
    return _to_int64(amount * unit.multiplier, value)


@lru_cache(maxsize=256)
def ms(value: str) -> int:
    """Cached :func:`parse_duration` for literals used over and over."""
    return parse_duration(value)


def parse_timedelta(
    value: Union[str, bytes], max_length: Optional[int] = MAX_INPUT_LENGTH
) -> timedelta:
    """Parse ``value`` into a :class:`~datetime.timedelta`.

    Negative durations are rejected with
    :class:`~msconverter.errors.NegativeDurationUnsupported`.
    """
    milliseconds = parse_duration(value, max_length=max_length)
    if milliseconds < 0:
        raise NegativeDurationUnsupported(
            f"negative duration: {value!r}", value=value
        )
    try:
        return timedelta(milliseconds=milliseconds)
    except OverflowError as exc:
        raise InvalidValue(f"value out of range: {value!r}", value=value) from exc


def format_duration(milliseconds: int, suffix: str) -> str:
    """Render ``milliseconds`` in the unit named by ``suffix``.

    The value is rounded to a whole number of units and ``suffix`` is
    appended exactly as given, so ``" day"`` yields ``"2 day"`` and
    ``"day"`` yields ``"2day"``.
    """
    unit = resolve_unit(suffix)
    if isinstance(milliseconds, bool) or not isinstance(milliseconds, int):
        raise TypeError(
            f"milliseconds must be an int, not {type(milliseconds).__name__}"
        )
    if not INT64_MIN <= milliseconds <= INT64_MAX:
        raise InvalidValue(f"value out of range: {milliseconds}", value=milliseconds)
    return f"{_divide_round(milliseconds, unit.multiplier)}{suffix}"


def _auto_unit(milliseconds: int) -> Unit:
    magnitude = abs(milliseconds)
    for unit, _ in _SHORT_TIERS:
        if magnitude >= unit.multiplier:
            return unit
    return Unit.MILLISECOND


def format_duration_auto(milliseconds: int) -> str:
    """Render ``milliseconds`` in the largest whole unit up to days.

    >>> format_duration_auto(90_000)
    '2m'
    """
    unit = _auto_unit(milliseconds)
    for tier, suffix in _SHORT_TIERS:
        if tier is unit:
            return format_duration(milliseconds, suffix)
    return format_duration(milliseconds, "ms")


def format_duration_auto_long(milliseconds: int) -> str:
    """Like :func:`format_duration_auto` with spelled-out unit names.

    The plural is used once the magnitude reaches one and a half units.
    """
    unit = _auto_unit(milliseconds)
    for tier, singular, plural in _LONG_TIERS:
        if tier is unit:
            # at least 1.5 units
            if 2 * abs(milliseconds) >= 3 * tier.multiplier:
                return format_duration(milliseconds, plural)
            return format_duration(milliseconds, singular)
    raise AssertionError(f"no long suffix for {unit}")  # pragma: no cover


__all__ = [
    "MAX_INPUT_LENGTH",
    "format_duration",
    "format_duration_auto",
    "format_duration_auto_long",
    "ms",
    "parse_duration",
    "parse_timedelta",
    "round_half_away",
]
