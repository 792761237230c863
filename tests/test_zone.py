import pytest

from dutime.zone import format_zone, parse_zone


def test_zulu_consumes_one_char():
    assert parse_zone("Z") == (0, 1)


def test_format_zero():
    assert format_zone(0) == "+00:00"


@pytest.mark.parametrize("text", ["x", "", "1200", " +01:00"])
def test_no_zone_consumes_nothing(text):
    assert parse_zone(text) == (0, 0)


@pytest.mark.parametrize("minutes", [0, 1, 30, 59, 60, 330, 345, 600, 839])
def test_round_trip_positive_and_negative(minutes):
    secs = minutes * 60
    assert parse_zone(format_zone(secs)) == (secs, 6)
    assert parse_zone(format_zone(-secs)) == (-secs, 6)


def test_negative_format_mirrors_positive():
    assert format_zone(-19800) == "-" + format_zone(19800)[1:]


def test_colon_optional():
    assert parse_zone("+0530") == (parse_zone("+05:30")[0], 5)


def test_unpadded_hours_rejected():
    assert parse_zone("+1:00") == (0, 0)


def test_hours_out_of_range_rejected():
    assert parse_zone("+15:00") == (0, 0)


def test_hours_only_carry_value_but_consume_nothing():
    value, end = parse_zone("+05")
    assert end == 0
    assert value == parse_zone("+05:00")[0]


def test_seconds_part():
    with_secs, end = parse_zone("+01:00:30")
    without, _ = parse_zone("+01:00")
    assert with_secs - without == 30
    assert end == len("+01:00:30")


def test_negative_seconds_part():
    value, end = parse_zone("-01:00:30")
    assert value == -parse_zone("+01:00:30")[0]
    assert end == 9


def test_unparseable_seconds_stop_after_minutes():
    value, end = parse_zone("+01:00:xx")
    assert (value, end) == (parse_zone("+01:00")[0], 6)


def test_start_position():
    value, end = parse_zone("T+01:00", 1)
    assert value == parse_zone("+01:00")[0]
    assert end == 7


def test_format_drops_seconds():
    assert format_zone(parse_zone("+01:00:30")[0]) == "+01:00"