"""
Fixed-point money codec.

Alpha Vantage ratios and per-share figures arrive as decimal strings with
up to four fraction digits ("0.1234", ".42", "-1.0", "28282828"). They are
stored as integers scaled by 10,000 so no float rounding ever happens.
"""

import re

from utils.parsing import ParseError, parse_int64


SCALE = 10_000
FRACTION_DIGITS = 4

MISSING_TOKENS = ("", "None", "nil")
NULL_JSON_TOKEN = "null"

# sign belongs to the integer part only
_WHOLE_RE = re.compile(r"[+-]?[0-9]*")
_FRACTION_RE = re.compile(r"[0-9]*")


class Money(int):
    """Decimal amount stored as an integer scaled by 10,000."""

    def __str__(self) -> str:
        return format_money(self)

    def __repr__(self) -> str:
        return f"Money('{format_money(self)}')"


def normalize_fraction(fraction: str) -> str:
    """
    Right-pad a fraction to exactly four digits.

    Returns "" when the fraction has more than four characters; extra
    precision is rejected, never rounded.
    """
    if len(fraction) > FRACTION_DIGITS:
        return ""
    return fraction.ljust(FRACTION_DIGITS, "0")


def parse_money(value: str) -> Money:
    """
    Parse a decimal string into scaled Money.

    Args:
        value: Wire string such as "0.1234", ".42" or "None"

    Returns:
        Money, zero for the missing-value tokens

    Raises:
        ParseError: More than one '.', more than four fraction digits,
            non-digit content or a value outside the int64 range
    """
    if not isinstance(value, str):
        raise ParseError(value, "money must be a string")
    if value in MISSING_TOKENS:
        return Money(0)

    parts = value.split(".")
    if len(parts) not in (1, 2):
        raise ParseError(value, "too many '.' separators")

    whole = parts[0]
    fraction = parts[1] if len(parts) == 2 else ""
    if not _WHOLE_RE.fullmatch(whole) or not _FRACTION_RE.fullmatch(fraction):
        raise ParseError(value, "not a decimal number")
    if not whole.lstrip("+-") and not fraction:
        raise ParseError(value, "no digits")

    fraction = normalize_fraction(fraction)
    if not fraction:
        raise ParseError(value, f"more than {FRACTION_DIGITS} fraction digits")

    try:
        return Money(parse_int64(whole + fraction))
    except ParseError:
        raise ParseError(value, "not a decimal number") from None


def format_money(value: int) -> str:
    """Format scaled Money as "<int>.<4 digits>", e.g. -1200 -> "-0.1200"."""
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(int(value)), SCALE)
    return f"{sign}{whole}.{fraction:0{FRACTION_DIGITS}d}"


def decode_money(value) -> Money:
    """Decode a money field taken from a JSON payload."""
    if value == NULL_JSON_TOKEN:
        return Money(0)
    return parse_money(value)


def encode_money(value: int) -> str:
    """Encode money for a JSON payload; always a quoted string."""
    return f'"{format_money(value)}"'
