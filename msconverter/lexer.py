"""Scanner for the numeric part of a duration string.

Only plain decimal notation is accepted: an optional sign, integer digits
and an optional fractional part. Exponents, ``inf`` and ``nan`` are not
numbers here, so :func:`float` is deliberately not used.
"""

from typing import Tuple

from .errors import InvalidValue

NUMERIC_CHARS = frozenset("0123456789.-+")


def split_token(text: str) -> Tuple[str, str]:
    """Split ``text`` at the first character that cannot start a number.

    Returns the numeric part and the (untrimmed) suffix.
    """
    end = 0
    for ch in text:
        if ch not in NUMERIC_CHARS:
            break
        end += 1
    return text[:end], text[end:]


def _is_digit(ch: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits
    return "0" <= ch <= "9"


def _scan_digits(text: str, pos: int) -> Tuple[float, int, int]:
    acc = 0.0
    count = 0
    while pos < len(text) and _is_digit(text[pos]):
        acc = acc * 10 + (ord(text[pos]) - 48)
        pos += 1
        count += 1
    return acc, count, pos


def parse_number(text: str) -> float:
    """Parse a signed decimal number such as ``"-12.5"`` or ``"12."``.

    Raises :class:`~msconverter.errors.InvalidValue` for empty input, a
    bare sign, misplaced signs, repeated decimal points, or any character
    left over after the number.
    """
    length = len(text)
    pos = 0
    sign = 1.0
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1.0
        pos += 1

    whole, whole_digits, pos = _scan_digits(text, pos)
    fraction = 0.0
    fraction_digits = 0
    if pos < length and text[pos] == ".":
        fraction, fraction_digits, pos = _scan_digits(text, pos + 1)

    if pos != length:
        raise InvalidValue(f"invalid value: {text!r}", value=text)
    if whole_digits == 0 and fraction_digits == 0:
        raise InvalidValue(f"invalid value: {text!r}", value=text)

    magnitude = whole
    if fraction_digits:
        # 10.0 ** n overflows past 308 digits
        if fraction_digits <= 308:
            magnitude += fraction / 10.0 ** fraction_digits
        else:
            magnitude += fraction * 10.0 ** -fraction_digits
    return sign * magnitude
