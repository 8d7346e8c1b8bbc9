"""This module contains the unit tests for the DateParsingService."""

import logging
from unittest.mock import patch

import pytest
from timecraft.exceptions.parsing import ParseError
from timecraft.models.date_time import DateTime
from timecraft.services.parsing import DateParsingService


@pytest.fixture
def parser() -> DateParsingService:
    """Provides a DateParsingService instance."""
    return DateParsingService()


@pytest.mark.parametrize(
    "text, expected, offset",
    [
        ("Tue, 26 Jan 2016 13:48:02 GMT", DateTime.utc(2016, 1, 26, 13, 48, 2), 0),
        ("Sun, 17 May 1998 03:00:00 GMT+01", DateTime.utc(1998, 5, 17, 2, 0, 0), 60),
        ("26 Jan 2016 13:48 +0100", DateTime.utc(2016, 1, 26, 12, 48), 60),
        ("Thu, 1 Jan 2015 00:00:00 EST", DateTime.utc(2015, 1, 1, 5), -300),
        ("Thu, 01 Jan 2015 00:00:00 pdt", DateTime.utc(2015, 1, 1, 7), -420),
        ("26 Jan 2016 13:48:02 UT-03:30", DateTime.utc(2016, 1, 26, 17, 18, 2), -210),
        ("26 Jan 2016 13:48:02 -0000", DateTime.utc(2016, 1, 26, 13, 48, 2), 0),
        ("tue, 26 jan 2016 13:48:02 gmt", DateTime.utc(2016, 1, 26, 13, 48, 2), 0),
    ],
)
def test_parse_rfc2822(parser: DateParsingService, text: str, expected: DateTime, offset: int) -> None:
    """Tests RFC 2822 parsing across optional components and zone styles."""
    value = parser.parse_rfc2822(text)

    assert value.same_instant(expected)
    assert value.offset_minutes == offset


def test_parse_rfc2822_ignores_comments_and_folding(parser: DateParsingService) -> None:
    """Tests that comments, nested or not, and folding whitespace are ignored."""
    text = "Tue,\r\n 26 Jan (the (very) last) 2016   13:48:02 GMT (Greenwich \\) time)"

    assert parser.parse_rfc2822(text).same_instant(DateTime.utc(2016, 1, 26, 13, 48, 2))


@pytest.mark.parametrize(
    "text, year",
    [
        ("Sat, 01 Jan 00 00:00:00 +0000", 2000),
        ("01 Jan 49 00:00:00 +0000", 2049),
        ("Fri, 01 Jan 99 00:00:00 +0000", 1999),
        ("01 Jan 116 00:00:00 +0000", 2016),
    ],
)
def test_parse_rfc2822_obsolete_years(parser: DateParsingService, text: str, year: int) -> None:
    """Tests the expansion of two and three digit years."""
    assert parser.parse_rfc2822(text).year == year


def test_parse_rfc2822_leap_day(parser: DateParsingService) -> None:
    """Tests that 29 February exists only in leap years."""
    assert parser.parse_rfc2822("Mon, 29 Feb 2016 00:00:00 GMT").day == 29
    with pytest.raises(ParseError, match="does not exist"):
        parser.parse_rfc2822("29 Feb 2015 00:00:00 GMT")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "not a date",
        "26 Jan 99999999999999999999 13:48:02 GMT",
        "26 Jan " + "9" * 5000 + " 13:48:02 GMT",
        "26 Jan 20160 13:48:02 GMT",
        "Mon, 26 Jan 2016 13:48:02 GMT",
        "Xyz, 26 Jan 2016 13:48:02 GMT",
        "26 Foo 2016 13:48:02 GMT",
        "32 Jan 2016 13:48:02 GMT",
        "26 Jan 2016 24:00:00 GMT",
        "26 Jan 2016 13:60:00 GMT",
        "26 Jan 2016 13:48:60 GMT",
        "26 Jan 2016 3:48:02 GMT",
        "26 Jan 2016 13:48:02",
        "26 Jan 2016 13:48:02 XYZ",
        "26 Jan 2016 13:48:02 EST+01",
        "26 Jan 2016 13:48:02 +2400",
        "26 Jan 2016 13:48:02 +0160",
        "26 Jan 2016 13:48:02 GMT (unterminated",
        "26 Jan 2016 13:48:02 GMT)",
        "2016-01-26T13:48:02Z",
    ],
)
def test_parse_rfc2822_rejects_invalid_input(parser: DateParsingService, text: str) -> None:
    """Tests that malformed or impossible dates raise ParseError."""
    with pytest.raises(ParseError):
        parser.parse_rfc2822(text)


def test_parse_rfc2822_rejects_calendar_overflow(parser: DateParsingService) -> None:
    """Tests that an overflow while assembling the value becomes a ParseError."""
    with patch.object(DateTime, "from_fields", side_effect=OverflowError("date value out of range")):
        with pytest.raises(ParseError, match="out of range"):
            parser.parse_rfc2822("26 Jan 2016 13:48:02 GMT")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("December 17, 1995 03:24:00", DateTime.utc(1995, 12, 17, 3, 24)),
        ("december 17, 1995 03:24", DateTime.utc(1995, 12, 17, 3, 24)),
        ("Jun 5, 2016 7:05:09", DateTime.utc(2016, 6, 5, 7, 5, 9)),
        ("  February 29 , 2016   23:59:59 ", DateTime.utc(2016, 2, 29, 23, 59, 59)),
    ],
)
def test_parse_rfc2822_long_form(parser: DateParsingService, text: str, expected: DateTime) -> None:
    """Tests the zone-less long form, read in the configured local timezone."""
    value = parser.parse_rfc2822(text)

    assert value == expected
    assert value.offset_minutes == 0


def test_parse_rfc2822_long_form_uses_local_timezone(
    parser: DateParsingService, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Tests that the long form follows LOCAL_TIMEZONE."""
    monkeypatch.setenv("LOCAL_TIMEZONE", "Asia/Tokyo")

    value = parser.parse_rfc2822("December 17, 1995 03:24:00")

    assert value.same_instant(DateTime.utc(1995, 12, 16, 18, 24))
    assert value.offset_minutes == 540
    assert (value.year, value.month, value.day, value.hour) == (1995, 12, 17, 3)


@pytest.mark.parametrize(
    "text",
    [
        "Decembr 17, 1995 03:24:00",
        "December 32, 1995 03:24:00",
        "February 29, 2015 00:00:00",
        "December 17 1995 03:24:00",
        "December 17, 95 03:24:00",
        "December 17, 1995 24:00:00",
        "December 17, 1995 03:24:00 GMT",
        "December 17, 1995",
        "December 17, 0000 03:24:00",
    ],
)
def test_parse_rfc2822_long_form_rejects_invalid_input(parser: DateParsingService, text: str) -> None:
    """Tests that malformed long-form dates still raise ParseError."""
    with pytest.raises(ParseError):
        parser.parse_rfc2822(text)


def test_parse_iso8601_offsets_denote_same_instant(parser: DateParsingService) -> None:
    """Tests that UTC and offset forms of one instant agree."""
    utc = parser.parse_iso8601("2016-01-19T08:07:37Z")
    shifted = parser.parse_iso8601("2016-01-19T16:07:37+08:00")
    behind = parser.parse_iso8601("2016-01-19T03:07:37-05:00")

    assert utc.same_instant(shifted)
    assert utc.same_instant(behind)
    assert shifted.offset_minutes == 480
    assert behind.offset_minutes == -300


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2016-01-19T16:07:37+00:00", DateTime.utc(2016, 1, 19, 16, 7, 37)),
        ("2016-01-19T16:07:37-00:00", DateTime.utc(2016, 1, 19, 16, 7, 37)),
        ("2016-01-19t16:07:37z", DateTime.utc(2016, 1, 19, 16, 7, 37)),
        ("2016-01-19T16:07Z", DateTime.utc(2016, 1, 19, 16, 7)),
        ("2016-01-19T16:07:37.5Z", DateTime.utc(2016, 1, 19, 16, 7, 37, 500)),
        ("2016-01-19T16:07:37,25Z", DateTime.utc(2016, 1, 19, 16, 7, 37, 250)),
        ("2016-01-19T16:07:37.123999999Z", DateTime.utc(2016, 1, 19, 16, 7, 37, 123)),
        ("  2016-01-19T16:07:37Z ", DateTime.utc(2016, 1, 19, 16, 7, 37)),
    ],
)
def test_parse_iso8601(parser: DateParsingService, text: str, expected: DateTime) -> None:
    """Tests ISO 8601 parsing of optional seconds, fractions and designators."""
    assert parser.parse_iso8601(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "garbage",
        "2016-01-19",
        "2016-01-19T08:07:37",
        "2016-01-19 08:07:37Z",
        "20160119T080737Z",
        "2016-01-19T08:07:37+0800",
        "2016-01-19T08:07:37+08",
        "2016-13-19T08:07:37Z",
        "2016-00-19T08:07:37Z",
        "2015-02-29T08:07:37Z",
        "2016-04-31T08:07:37Z",
        "2016-01-19T24:00:00Z",
        "2016-01-19T08:60:00Z",
        "2016-01-19T08:07:60Z",
        "2016-01-19T08:07:37+24:00",
        "2016-01-19T08:07:37+05:60",
        "0000-01-01T00:00:00Z",
        "Tue, 26 Jan 2016 13:48:02 GMT",
    ],
)
def test_parse_iso8601_rejects_invalid_input(parser: DateParsingService, text: str) -> None:
    """Tests that malformed or impossible dates raise ParseError."""
    with pytest.raises(ParseError):
        parser.parse_iso8601(text)


@pytest.mark.parametrize(
    "value",
    [
        DateTime.utc(2016, 1, 19, 8, 7, 37),
        DateTime.from_fields(2012, 2, 29, 23, 59, 59, 999, offset_minutes=-210),
        DateTime.from_fields(1, 1, 1, offset_minutes=0),
        DateTime.from_fields(9999, 12, 31, 23, 59, 59, 999, offset_minutes=840),
    ],
)
def test_parse_iso8601_round_trips_isoformat(parser: DateParsingService, value: DateTime) -> None:
    """Tests that a value parsed from its own ISO 8601 form is unchanged."""
    assert parser.parse_iso8601(value.isoformat()) == value


def test_parse_error_carries_input_and_reason(parser: DateParsingService) -> None:
    """Tests the attributes of ParseError and that it is a ValueError."""
    with pytest.raises(ValueError) as exc_info:
        parser.parse_iso8601("2016-02-30T00:00:00Z")

    error = exc_info.value
    assert isinstance(error, ParseError)
    assert error.text == "2016-02-30T00:00:00Z"
    assert "does not exist" in error.reason
    assert "Could not parse" in str(error)


def test_rejections_are_logged(parser: DateParsingService, caplog: pytest.LogCaptureFixture) -> None:
    """Tests that rejected inputs are logged at debug level."""
    caplog.set_level(logging.DEBUG, logger="timecraft")

    with pytest.raises(ParseError):
        parser.parse_rfc2822("not a date")

    assert "Rejected date string 'not a date'" in caplog.text
