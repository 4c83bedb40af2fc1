"""Date parsing utilities."""

from datetime import date, datetime, timedelta, UTC
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def utc_today() -> date:
    """Current date in UTC, the calendar used for service creation dates."""
    return datetime.now(UTC).date()


def parse_date(date_str: str, today: date | None = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "15/01/2024" (day first), etc.
    - Relative dates: "today", "tomorrow", "next week", "in 3 days", etc.

    Args:
        date_str: Date string in various formats
        today: Reference date for relative dates (defaults to the UTC date)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if today is None:
        today = utc_today()

    # Handle relative dates
    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # Delivery dates are mostly a few days or weeks ahead
    if date_str.startswith("in "):
        parts = date_str[3:].split()
        if len(parts) == 2 and parts[0].isdigit():
            amount, unit = int(parts[0]), parts[1].rstrip("s")
            if unit == "day":
                return today + timedelta(days=amount)
            elif unit == "week":
                return today + timedelta(weeks=amount)
            elif unit == "month":
                return today + relativedelta(months=amount)

    elif date_str.startswith("next "):
        period = date_str[5:]
        if period == "week":
            return today + timedelta(days=(7 - today.weekday()))
        elif period == "month":
            return (today + relativedelta(months=1)).replace(day=1)

    # Try parsing as absolute date; slash dates are day first (15/01/2024)
    try:
        dt = date_parser.parse(date_str, dayfirst="/" in date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def month_range(today: date) -> tuple[date, date]:
    """First and last day of the calendar month containing today."""
    start = today.replace(day=1)
    end = start + relativedelta(months=1) - timedelta(days=1)
    return (start, end)


def last_days(today: date, count: int) -> tuple[date, ...]:
    """The count days ending with today, oldest first."""
    return tuple(today - timedelta(days=offset) for offset in range(count - 1, -1, -1))
