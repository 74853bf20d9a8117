"""Helpers for timestamp normalization."""

from datetime import date, datetime, timezone


def coerce_datetime(value) -> datetime | None:
    """Normalize timestamps from SQL rows or records to aware datetimes.

    Args:
        value: datetime, date, ISO-8601 string or None.

    Returns:
        datetime | None: UTC-aware datetime, or None when missing/invalid.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def coerce_date(value) -> date | None:
    """Return the calendar date of ``value``, or None when missing/invalid."""
    parsed = coerce_datetime(value)
    return parsed.date() if parsed else None


def utc_now() -> datetime:
    """Return the current UTC time."""
    return datetime.now(timezone.utc)


__all__ = ["coerce_date", "coerce_datetime", "utc_now"]
