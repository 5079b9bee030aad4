"""Date parsing utilities."""

import re
from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and the
    relative forms used when filtering cost entries: "today", "yesterday",
    "this week/month/year", "last week/month/year" and "N days ago".

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = date.today()

    if text == "today":
        return today
    if text == "yesterday":
        return today - timedelta(days=1)

    match = re.fullmatch(r"(\d+)\s+days?\s+ago", text)
    if match:
        return today - timedelta(days=int(match.group(1)))

    if text.startswith(("this ", "last ")):
        which, _, period = text.partition(" ")
        if period == "week":
            start = today - timedelta(days=today.weekday())
            return start - timedelta(days=7) if which == "last" else start
        if period == "month":
            start = today.replace(day=1)
            return start - relativedelta(months=1) if which == "last" else start
        if period == "year":
            start = today.replace(month=1, day=1)
            return start - relativedelta(years=1) if which == "last" else start

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
