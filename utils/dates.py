"""
Calendar date codec for Alpha Vantage "YYYY-MM-DD" fields.
"""

import re
from datetime import date, datetime, timezone

from utils.parsing import ParseError


DATE_LAYOUT = "%Y-%m-%d"

# strptime alone accepts unpadded months and days
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_date(value: str) -> date:
    """
    Parse a zero-padded "YYYY-MM-DD" string into a date.

    Raises:
        ParseError: Any other layout or an impossible calendar day
    """
    if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
        raise ParseError(value, "expected YYYY-MM-DD")
    try:
        return datetime.strptime(value, DATE_LAYOUT).date()
    except ValueError as e:
        raise ParseError(value, str(e)) from e


def format_date(value: date) -> str:
    """Format a date (or the UTC day of an aware datetime) as "YYYY-MM-DD"."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        value = value.date()
    # strftime does not zero-pad years below 1000 on every platform
    return value.isoformat()


def decode_date(value) -> date:
    """Decode a date field taken from a JSON payload. No sentinel tokens."""
    return parse_date(value)


def encode_date(value: date) -> str:
    """Encode a date for a JSON payload as a quoted string."""
    return f'"{format_date(value)}"'
