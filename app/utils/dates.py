"""
Calendar date helpers.

Dates are stored and compared as ISO strings ("YYYY-MM-DD"); lexical order
matches chronological order for this shape.
"""
import re
from datetime import date

ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def is_valid_iso_date(value) -> bool:
    """
    Check the YYYY-MM-DD shape of a date string.

    Examples:
        >>> is_valid_iso_date("2025-01-31")
        True
        >>> is_valid_iso_date("2025-1-31")
        False
    """
    return isinstance(value, str) and ISO_DATE_RE.fullmatch(value) is not None


def today_iso_date() -> str:
    """Today's local calendar date as YYYY-MM-DD."""
    return date.today().isoformat()
