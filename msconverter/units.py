"""Time units and the suffix vocabulary that selects them."""

from enum import Enum
from typing import Dict, Tuple

from .errors import InvalidPostfix

MILLISECOND = 1
SECOND = MILLISECOND * 1000
MINUTE = SECOND * 60
HOUR = MINUTE * 60
DAY = HOUR * 24
WEEK = DAY * 7
# 365.25 days, a fixed approximation rather than a calendar year
YEAR = DAY * 365 + DAY // 4


class Unit(Enum):
    """A duration unit; ``value`` is the number of milliseconds per unit."""

    MILLISECOND = MILLISECOND
    SECOND = SECOND
    MINUTE = MINUTE
    HOUR = HOUR
    DAY = DAY
    WEEK = WEEK
    YEAR = YEAR

    @property
    def multiplier(self) -> int:
        return self.value

    @property
    def suffixes(self) -> Tuple[str, ...]:
        return UNIT_SUFFIXES[self]


# Longest spelling first; the empty suffix means milliseconds.
UNIT_SUFFIXES: Dict[Unit, Tuple[str, ...]] = {
    Unit.YEAR: ("years", "year", "yrs", "yr", "y"),
    Unit.WEEK: ("weeks", "week", "w"),
    Unit.DAY: ("days", "day", "d"),
    Unit.HOUR: ("hours", "hour", "hrs", "hr", "h"),
    Unit.MINUTE: ("minutes", "minute", "mins", "min", "m"),
    Unit.SECOND: ("seconds", "second", "secs", "sec", "s"),
    Unit.MILLISECOND: ("milliseconds", "millisecond", "msecs", "msec", "ms", ""),
}

SUFFIX_TO_UNIT: Dict[str, Unit] = {
    suffix: unit for unit, suffixes in UNIT_SUFFIXES.items() for suffix in suffixes
}


def resolve_unit(suffix: str) -> Unit:
    """Look up the unit for ``suffix``.

    Surrounding whitespace is ignored; everything else must match a known
    spelling exactly (case-sensitive). Unknown suffixes raise
    :class:`~msconverter.errors.InvalidPostfix`.
    """
    try:
        return SUFFIX_TO_UNIT[suffix.strip()]
    except KeyError:
        raise InvalidPostfix(f"invalid postfix: {suffix.strip()!r}", value=suffix) from None


def unit_table() -> Dict[str, dict]:
    """Return the suffix vocabulary as plain data, largest unit first."""
    return {
        unit.name.lower(): {"milliseconds": unit.multiplier, "suffixes": list(unit.suffixes)}
        for unit in sorted(Unit, key=lambda u: u.multiplier, reverse=True)
    }
