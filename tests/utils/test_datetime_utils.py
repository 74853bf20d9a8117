"""Tests for timestamp helpers."""

from datetime import date, datetime, timezone

from src.utils.datetime_utils import coerce_date, coerce_datetime


def test_coerce_datetime_reads_iso_strings_as_utc():
    parsed = coerce_datetime("2024-01-15T10:00:00Z")

    assert parsed == datetime(2024, 1, 15, 10, tzinfo=timezone.utc)
    assert coerce_datetime("not a date") is None


def test_coerce_date_of_stored_values():
    assert coerce_date("2025-03-01") == date(2025, 3, 1)
    assert coerce_date(date(2025, 3, 1)) == date(2025, 3, 1)
    assert coerce_date("") is None
    assert coerce_date(None) is None
