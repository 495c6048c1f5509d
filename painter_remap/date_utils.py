"""Shared calendar helpers for the contribution-graph grid."""

from datetime import date, timedelta

# Day-of-week names in grid row order (Sunday = 0, Saturday = 6)
DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

# Month names in calendar order (Jan = 1 after offset)
MONTH_NAMES = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]

# Mapping from month abbreviation to month number (1-12)
MONTH_TO_NUMBER = {name: i + 1 for i, name in enumerate(MONTH_NAMES)}

DAYS_PER_WEEK = 7


def sunday_row(day: date) -> int:
    """Weekday index with Sunday = 0 (``date.weekday`` uses Monday = 0)."""
    return (day.weekday() + 1) % DAYS_PER_WEEK


def week_start(day: date) -> date:
    """Return the Sunday on or before ``day``."""
    return day - timedelta(days=sunday_row(day))


def grid_origin(year: int) -> date:
    """Return the Sunday on or before January 1 of ``year``."""
    return week_start(date(year, 1, 1))


def format_utc_noon(day: date) -> str:
    """
    Format a calendar day as a noon-UTC date token.

    Example: ``Mon Apr 20 2026 12:00:00 GMT+0000 (UTC)``

    Args:
        day: Calendar day to format

    Returns:
        Date token pinned to 12:00:00 UTC
    """
    dow = DAY_NAMES[sunday_row(day)]
    month = MONTH_NAMES[day.month - 1]
    return f"{dow} {month} {day.day:02d} {day.year:04d} 12:00:00 GMT+0000 (UTC)"
