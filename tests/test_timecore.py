import pytest

from dutime import timecore
from dutime.timecore import (
    HMS,
    ParsedTime,
    TimeParseError,
    add_seconds,
    compare_times,
    current_time,
    diff_nanos,
    diff_seconds,
    format_time,
    format_time_spec,
    guess_time,
    parse_time,
    parse_time_spec,
)
from dutime.token import parse_spec


def spec(fmt):
    return parse_spec(fmt, 0)[0]


def test_parse_default_format():
    value, end = parse_time("12:34:56")
    assert (value.h, value.m, value.s) == (12, 34, 56)
    assert end == len("12:34:56")


@pytest.mark.parametrize("text", ["00:00:00", "09:08:07", "23:59:60", "12:00:01"])
def test_format_parse_round_trip(text):
    assert format_time(parse_time(text)[0]) == text


def test_hms_format_name_is_case_insensitive():
    assert parse_time("01:02:03", "HMS")[0] == parse_time("01:02:03")[0]
    assert format_time(HMS(1, 2, 3), "hms") == format_time(HMS(1, 2, 3))


def test_parse_stops_when_text_runs_out():
    value, end = parse_time("12", "%H:%M:%S")
    assert value == HMS(12, 0, 0)
    assert end == 2


def test_pm_adds_twelve_hours():
    am = parse_time("07:05 am", "%I:%M %p")[0]
    pm = parse_time("07:05 PM", "%I:%M %p")[0]
    assert pm.h == am.h + 12
    assert pm.m == am.m == 5


def test_twelve_am_is_midnight():
    assert parse_time("12 am", "%I %p")[0].h == 0


def test_nanoseconds_are_scaled_by_digit_count():
    short = parse_time("5", "%N")[0]
    full = parse_time("500000000", "%N")[0]
    assert short.ns == full.ns


def test_nanosecond_round_trip():
    value = parse_time("01:02:03.000123456", "%T.%N")[0]
    assert format_time(value, "%T.%N") == "01:02:03.000123456"


@pytest.mark.parametrize(
    "text, fmt",
    [
        ("25:00:00", None),
        ("12-00-00", None),
        ("2001", "%Y"),
        ("13", "%I"),
        ("xm", "%p"),
        ("", None),
    ],
)
def test_parse_errors(text, fmt):
    with pytest.raises(TimeParseError):
        parse_time(text, fmt)


def test_unknown_directive_matches_percent():
    value, _ = parse_time("%5", "%x%H")
    assert value.h == 5


def test_twelve_hour_clock_formatting():
    assert format_time(HMS(0, 0, 0), "%I") == format_time(HMS(12, 0, 0), "%I")
    for hour in range(24):
        value = HMS(hour, 30, 0)
        text = format_time(value, "%I:%M %p")
        assert parse_time(text, "%I:%M %p")[0] == value


def test_ampm_case():
    for hour in (3, 15):
        value = HMS(hour, 0, 0)
        assert format_time(value, "%P") == format_time(value, "%p").lower()


def test_padding_modes():
    value = HMS(5, 7, 9)
    assert format_time(value, "%H") == "05"
    assert format_time(value, "%-H") == "5"
    assert format_time(value, "% M") == " 7"
    assert format_time(value, "%0S") == "09"


def test_literals_and_non_time_specs():
    assert format_time(HMS(1, 2, 3), "%%%t%n%Y") == "%\t\n"


def test_parse_time_spec_sets_flags_and_position():
    parsed = ParsedTime()
    end = parse_time_spec(parsed, "x42", 1, spec("%M"))
    assert end == 3
    assert parsed.m == 42 and parsed.m_set and not parsed.h_set


def test_parse_time_spec_rejects_date_spec():
    with pytest.raises(TimeParseError):
        parse_time_spec(ParsedTime(), "2001", 0, spec("%Y"))


def test_format_time_spec_matches_format_time():
    parsed = ParsedTime(h=14, m=3, s=9)
    assert format_time_spec(parsed, spec("%T")) == format_time(HMS(14, 3, 9), "%T")


def test_guess_time():
    with pytest.raises(TimeParseError):
        guess_time(ParsedTime())
    assert guess_time(ParsedTime(h=3, h_set=True)) == HMS(3, 0, 0)


@pytest.mark.parametrize("start", [HMS(0, 0, 0), HMS(23, 59, 59), HMS(12, 30, 15)])
@pytest.mark.parametrize("delta", [0, 1, -1, 3600, -90000, 200000])
def test_add_then_diff(start, delta):
    res = add_seconds(start, delta)
    assert res.carry * timecore.SECS_PER_DAY + diff_seconds(start, res) == delta
    assert 0 <= res.seconds_since_midnight() < timecore.SECS_PER_DAY


def test_add_negative_wraps_to_previous_day():
    res = add_seconds(HMS(0, 0, 0), -1)
    assert res.carry == -1
    assert res.seconds_since_midnight() == timecore.SECS_PER_DAY - 1


def test_add_on_leap_second_day():
    res = add_seconds(HMS(23, 59, 59), 1, 1)
    assert res == HMS(23, 59, 60)


def test_add_keeps_nanoseconds():
    assert add_seconds(HMS(1, 0, 0, ns=77), 5).ns == 77


def test_diff_nanos_consistent_with_seconds():
    t1 = HMS(1, 2, 3, ns=500)
    t2 = HMS(4, 5, 6, ns=100)
    assert diff_nanos(t1, t2) == diff_seconds(t1, t2) * timecore.NANOS_PER_SEC - 400
    assert diff_nanos(t2, t1) == -diff_nanos(t1, t2)


def test_compare_times():
    times = [HMS(1, 0, 0), HMS(0, 59, 59), HMS(0, 59, 59, ns=1), HMS(1, 0, 0)]
    assert compare_times(times[0], times[3]) == 0
    assert compare_times(times[1], times[2]) == -1
    assert compare_times(times[0], times[1]) == 1
    for a in times:
        for b in times:
            assert compare_times(a, b) == -compare_times(b, a)


def test_current_time_in_range():
    now = current_time()
    assert 0 <= now.seconds_since_midnight() < timecore.SECS_PER_DAY
    assert 0 <= now.ns < timecore.NANOS_PER_SEC
    assert now.ns % 1000 == 0