from datetime import datetime, timezone

import pytest

from html_rss.dates import parse_date


@pytest.mark.parametrize("raw", [None, "", "   ", "\n\t"])
def test_empty_input_is_absent(raw):
    assert parse_date(raw) is None


def test_iso8601_utc():
    assert parse_date("2024-01-15T10:30:00Z") == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


def test_iso8601_with_offset_and_fraction_is_exact():
    dt = parse_date("2024-01-15T10:30:00.123456+02:00")
    assert dt == datetime(2024, 1, 15, 8, 30, 0, 123456, tzinfo=timezone.utc)


def test_naive_iso8601_is_taken_as_utc():
    dt = parse_date("2024-01-15T10:30:00")
    assert dt.tzinfo is not None
    assert dt == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


def test_surrounding_whitespace_is_ignored():
    assert parse_date("  2023-06-01  ") == datetime(2023, 6, 1, tzinfo=timezone.utc)


def test_rfc822_date():
    assert parse_date("Mon, 01 Jan 2024 10:00:00 GMT") == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)


def test_unparseable_text_is_absent():
    assert parse_date("sometime soon") is None


def test_slash_separated_date_is_year_month_day():
    assert parse_date("2024/01/05") == datetime(2024, 1, 5, tzinfo=timezone.utc)


@pytest.mark.parametrize("raw", ["March 3, 2024", "Mar 3, 2024", "3 March 2024"])
def test_free_text_byline_dates(raw):
    assert parse_date(raw) == datetime(2024, 3, 3, tzinfo=timezone.utc)


def test_free_text_with_time_of_day():
    assert parse_date("January 5, 2024 10:00 AM") == datetime(2024, 1, 5, 10, 0, tzinfo=timezone.utc)
