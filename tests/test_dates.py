"""Tests for publish date normalization."""

from datetime import datetime, timezone

import pytest

from feedfan.exceptions import DateFormatUnrecognized
from feedfan.utils.dates import DATE_LAYOUTS, match_layout, parse_date


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("value", "layout", "expected"),
    [
        ("06 Sep 09 16:20 GMT", "RFC822", utc(2009, 9, 6, 16, 20)),
        ("06 Sep 09 16:20:30 GMT", "RFC822 with seconds", utc(2009, 9, 6, 16, 20, 30)),
        ("06 Sep 09 16:20 -0700", "RFC822Z", utc(2009, 9, 6, 23, 20)),
        ("2009-09-06T16:20:00Z", "RFC3339", utc(2009, 9, 6, 16, 20)),
        ("2009-09-06T16:20:00+02:00", "RFC3339", utc(2009, 9, 6, 14, 20)),
        (
            "2009-09-06T16:20:00.250Z",
            "RFC3339 with fraction",
            utc(2009, 9, 6, 16, 20, 0, 250000),
        ),
        ("Sun Sep  6 16:20:00 PST 2009", "UnixDate", utc(2009, 9, 7, 0, 20)),
        ("Sun Sep 06 16:20:00 -0700 2009", "RubyDate", utc(2009, 9, 6, 23, 20)),
        ("Sunday, 06-Sep-09 16:20:00 GMT", "RFC850", utc(2009, 9, 6, 16, 20)),
        ("Sun, 06 Sep 2009 16:20:00 +0000", "RFC1123Z", utc(2009, 9, 6, 16, 20)),
        ("Sun, 06 Sep 2009 16:20:00 EST", "RFC1123", utc(2009, 9, 6, 21, 20)),
        ("Sun Sep  6 16:20:00 2009", "ANSIC", utc(2009, 9, 6, 16, 20)),
        (
            "Sun, September 6 2009 16:20:00 +0100",
            "Weekday, full month",
            utc(2009, 9, 6, 15, 20),
        ),
        (
            "Sun, Sep 6 2009 16:20:00 -07",
            "Weekday, short month, short offset",
            utc(2009, 9, 6, 23, 20),
        ),
        ("Sun, Sep 6 2009 16:20:00 -0700", "Weekday, short month", utc(2009, 9, 6, 23, 20)),
    ],
)
def test_parse_date_accepts_each_layout(value, layout, expected):
    assert match_layout(value).name == layout
    assert parse_date(value) == expected


def test_every_layout_is_covered():
    names = [layout.name for layout in DATE_LAYOUTS]
    assert len(names) == len(set(names)) == 14


@pytest.mark.parametrize("value", ["not-a-date", "", "2009/09/06 16:20", "Sun, 06 Sep 2009"])
def test_parse_date_rejects_unknown_formats(value):
    with pytest.raises(DateFormatUnrecognized) as exc_info:
        parse_date(value)

    assert exc_info.value.value == value
    assert value in str(exc_info.value)


def test_result_is_timezone_aware_utc():
    parsed = parse_date("Sun, 06 Sep 2009 18:20:00 +0200")

    assert parsed.tzinfo is timezone.utc
    assert parsed == utc(2009, 9, 6, 16, 20)


def test_unknown_zone_name_resolves_to_utc():
    assert parse_date("Sun, 06 Sep 2009 16:20:00 XYZ") == utc(2009, 9, 6, 16, 20)


def test_numeric_offset_never_matches_named_zone_layout():
    # RFC1123 comes after RFC1123Z; a numeric zone must stop at the former
    assert match_layout("Sun, 06 Sep 2009 16:20:00 -0300").name == "RFC1123Z"


def test_weekday_is_not_checked_against_date():
    # 2009-09-06 was a Sunday
    assert parse_date("Mon, 06 Sep 2009 16:20:00 +0000") == utc(2009, 9, 6, 16, 20)


def test_two_digit_years_pivot_at_69():
    assert parse_date("06 Sep 69 16:20 GMT").year == 1969
    assert parse_date("06 Sep 68 16:20 GMT").year == 2068


@pytest.mark.parametrize(
    "value",
    [
        "Sun, 06 Sep 2009 16:20:00 Z",  # "Z" only belongs to RFC 3339
        "2009-09-06T16:20:00-0700",  # RFC 3339 offsets carry a colon
        "Sun, 6 Sep 2009 16:20:00 +0000",  # RFC 1123 days are zero-padded
        "6 Sep 09 16:20 GMT",
        "Sun Sep 6 16:20:00 -0700 2009",
        "Sun, 06 Sep 2009 16:20:00 +00:00",
        "Sun, 06 Sep 2009 16:20 +0000",
        " Sun, 06 Sep 2009 16:20:00 +0000",
    ],
)
def test_parse_date_rejects_near_misses(value):
    with pytest.raises(DateFormatUnrecognized):
        parse_date(value)


def test_space_padded_day_accepts_two_digits():
    assert parse_date("Sun Sep 16 16:20:00 2009") == utc(2009, 9, 16, 16, 20)


def test_layout_shapes_follow_patterns():
    rfc1123z = next(layout for layout in DATE_LAYOUTS if layout.name == "RFC1123Z")

    assert rfc1123z.shape.fullmatch("Sun, 06 Sep 2009 16:20:00 +0000")
    assert not rfc1123z.shape.fullmatch("Sun, 06 Sep 2009 16:20:00 GMT")
    assert rfc1123z.strptime_pattern == "%a, %d %b %Y %H:%M:%S %z"
