import pytest

from msconverter.durations import (
    format_duration,
    format_duration_auto,
    format_duration_auto_long,
    parse_duration,
)
from msconverter.errors import InvalidPostfix, InvalidValue
from msconverter.units import DAY, HOUR, WEEK


@pytest.mark.parametrize("text", ["1d", "7d", "10h", "32m", "12s", "11ms"])
def test_auto_format_round_trips_short_forms(text):
    assert format_duration_auto(parse_duration(text)) == text


@pytest.mark.parametrize(
    "milliseconds, expected",
    [
        (2 * WEEK, "14d"),
        (0, "0ms"),
        (999, "999ms"),
        (1_000, "1s"),
        (90_000, "2m"),
        (59_999, "60s"),
        (-DAY, "-1d"),
        (-1_500, "-2s"),
        (-10, "-10ms"),
        (int(2.5 * HOUR), "3h"),
    ],
)
def test_format_duration_auto(milliseconds, expected):
    assert format_duration_auto(milliseconds) == expected


@pytest.mark.parametrize(
    "milliseconds, expected",
    [
        (WEEK, "7 days"),
        (DAY, "1 day"),
        (int(1.5 * DAY), "2 days"),
        (int(1.4 * DAY), "1 day"),
        (-HOUR, "-1 hour"),
        (-2 * HOUR, "-2 hours"),
        (90_000, "2 minutes"),
        (60_000, "1 minute"),
        (1_000, "1 second"),
        (1, "1 millisecond"),
        (2, "2 milliseconds"),
        (0, "0 millisecond"),
    ],
)
def test_format_duration_auto_long(milliseconds, expected):
    assert format_duration_auto_long(milliseconds) == expected


def test_format_duration_keeps_suffix_verbatim():
    assert format_duration(2 * DAY, " day") == "2 day"
    assert format_duration(2 * DAY, "day") == "2day"
    assert format_duration(2 * DAY, "  days") == "2  days"
    assert format_duration(9_000_000, "hrs") == "3hrs"
    assert format_duration(WEEK, "w") == "1w"
    assert format_duration(1_234, "") == "1234"


def test_space_in_suffix_never_changes_the_number():
    for milliseconds in (0, 1, DAY, int(2.5 * DAY), -3 * DAY, 123_456_789):
        spaced = format_duration(milliseconds, " day")
        plain = format_duration(milliseconds, "day")
        assert spaced.replace(" ", "") == plain


def test_format_duration_rejects_unknown_suffix():
    with pytest.raises(InvalidPostfix):
        format_duration(5, "xs")


def test_format_duration_handles_int64_bounds():
    assert format_duration(2**63 - 1, "ms") == str(2**63 - 1) + "ms"
    assert format_duration(-(2**63), "") == str(-(2**63))


def test_format_duration_rejects_values_beyond_int64():
    with pytest.raises(InvalidValue):
        format_duration(2**63, "ms")
    with pytest.raises(InvalidValue):
        format_duration(-(2**63) - 1, "d")
    with pytest.raises(InvalidValue):
        format_duration_auto(10**30)


def test_format_duration_requires_int():
    with pytest.raises(TypeError):
        format_duration(1.5, "ms")
    with pytest.raises(TypeError):
        format_duration(True, "ms")
