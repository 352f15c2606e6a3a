import pytest

from msconverter.errors import InvalidPostfix
from msconverter.units import (
    DAY,
    HOUR,
    MINUTE,
    SECOND,
    SUFFIX_TO_UNIT,
    UNIT_SUFFIXES,
    WEEK,
    YEAR,
    Unit,
    resolve_unit,
    unit_table,
)


def test_multipliers():
    assert Unit.MILLISECOND.multiplier == 1
    assert Unit.SECOND.multiplier == SECOND == 1_000
    assert Unit.MINUTE.multiplier == MINUTE == 60_000
    assert Unit.HOUR.multiplier == HOUR == 3_600_000
    assert Unit.DAY.multiplier == DAY == 86_400_000
    assert Unit.WEEK.multiplier == WEEK == 604_800_000
    assert Unit.YEAR.multiplier == YEAR == 31_557_600_000


def test_multipliers_strictly_increase():
    ordered = [
        Unit.MILLISECOND,
        Unit.SECOND,
        Unit.MINUTE,
        Unit.HOUR,
        Unit.DAY,
        Unit.WEEK,
        Unit.YEAR,
    ]
    values = [unit.multiplier for unit in ordered]
    assert values == sorted(set(values))


@pytest.mark.parametrize(
    "suffix, unit",
    [
        ("years", Unit.YEAR),
        ("yr", Unit.YEAR),
        ("y", Unit.YEAR),
        ("weeks", Unit.WEEK),
        ("w", Unit.WEEK),
        ("day", Unit.DAY),
        ("d", Unit.DAY),
        ("hrs", Unit.HOUR),
        ("h", Unit.HOUR),
        ("mins", Unit.MINUTE),
        ("m", Unit.MINUTE),
        ("secs", Unit.SECOND),
        ("s", Unit.SECOND),
        ("msecs", Unit.MILLISECOND),
        ("ms", Unit.MILLISECOND),
        ("", Unit.MILLISECOND),
        ("  days ", Unit.DAY),
        (" ", Unit.MILLISECOND),
    ],
)
def test_resolve_unit(suffix, unit):
    assert resolve_unit(suffix) is unit


@pytest.mark.parametrize("suffix", ["xs", "D", "Days", "MS", "d ays", "dd", "mss", "hour s"])
def test_resolve_unit_rejects_unknown_suffixes(suffix):
    with pytest.raises(InvalidPostfix) as excinfo:
        resolve_unit(suffix)
    assert excinfo.value.kind == "invalid_postfix"


def test_every_suffix_maps_to_exactly_one_unit():
    spellings = [s for suffixes in UNIT_SUFFIXES.values() for s in suffixes]
    assert len(spellings) == len(set(spellings)) == len(SUFFIX_TO_UNIT)
    for unit in Unit:
        for suffix in unit.suffixes:
            assert SUFFIX_TO_UNIT[suffix] is unit


def test_unit_table_lists_largest_unit_first():
    table = unit_table()
    assert list(table) == [
        "year",
        "week",
        "day",
        "hour",
        "minute",
        "second",
        "millisecond",
    ]
    assert table["year"]["milliseconds"] == 31_557_600_000
    assert "" in table["millisecond"]["suffixes"]
