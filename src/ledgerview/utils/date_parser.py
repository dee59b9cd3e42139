"""Date parsing utilities for import rows."""

from datetime import date, datetime
from dateutil import parser as date_parser

# Missing components (e.g. "Jan 15") are filled from this date, not today,
# so parsing is stable over time.
_DEFAULT = datetime(2000, 1, 1)


def parse_date(date_str: str, dayfirst: bool = False) -> date:
    """Parse a date string from a bank export into a date object.

    Supports the layouts banks commonly export:
    - ISO dates: "2024-01-15"
    - US dates: "01/15/2024", "1/15/24"
    - Day-first dates with ``dayfirst=True``: "15/01/2024", "15.01.2024"
    - Long forms: "January 15, 2024", "15 Jan 2024"
    - Timestamps: "2024-01-15T08:30:00" (time is dropped)

    Args:
        date_str: Date string
        dayfirst: Whether ambiguous numeric dates put the day first

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    if not date_str or not date_str.strip():
        raise ValueError("Empty date string")

    date_str = date_str.strip()
    try:
        dt = date_parser.parse(date_str, dayfirst=dayfirst, default=_DEFAULT)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from None
    return dt.date()


def format_iso_date(value: date) -> str:
    """Return the ISO form (YYYY-MM-DD) used in duplicate keys and output."""
    return value.isoformat()
