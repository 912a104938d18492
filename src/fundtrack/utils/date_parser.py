"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Optional
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow", "next month",
      "end of year", "in 30 days"

    Args:
        date_str: Date string in various formats
        today: Reference date for relative forms (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if today is None:
        today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith("next "):
        period = date_str[5:]
        if period == "week":
            return today + timedelta(days=(7 - today.weekday()))
        elif period == "month":
            return (today + relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) + relativedelta(years=1)

    elif date_str.startswith("end of "):
        period = date_str[7:]
        if period == "month":
            return today + relativedelta(day=31)
        elif period == "year":
            return today.replace(month=12, day=31)

    elif date_str.startswith("in "):
        # "in 30 days", "in 2 weeks", "in 3 months"
        parts = date_str[3:].split()
        if len(parts) == 2 and parts[0].isdigit():
            count = int(parts[0])
            unit = parts[1].rstrip("s")
            if unit == "day":
                return today + timedelta(days=count)
            elif unit == "week":
                return today + timedelta(weeks=count)
            elif unit == "month":
                return today + relativedelta(months=count)
            elif unit == "year":
                return today + relativedelta(years=count)

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
