"""Date utilities for spendwise.

Pure functions for calendar-month matching and date ranges.
"""

from datetime import date, timedelta


def same_month(day: date, reference: date) -> bool:
    """Check whether a date falls in the reference date's calendar month."""
    return day.year == reference.year and day.month == reference.month


def last_n_days(today: date, n: int) -> list[date]:
    """List the last n days ending today, oldest first.

    Args:
        today: Last day of the range.
        n: Number of days.

    Returns:
        List of n dates.
    """
    return [today - timedelta(days=i) for i in range(n - 1, -1, -1)]


def last_n_months(today: date, n: int) -> list[tuple[int, int]]:
    """List the last n calendar months ending with today's month, oldest first.

    Args:
        today: Date within the last month of the range.
        n: Number of months.

    Returns:
        List of (year, month) tuples.
    """
    months = []
    for offset in range(n - 1, -1, -1):
        index = today.year * 12 + (today.month - 1) - offset
        months.append((index // 12, index % 12 + 1))
    return months


def month_label(year: int, month: int) -> str:
    """Short month name (e.g., "Jan") for a calendar month."""
    return date(year, month, 1).strftime("%b")
