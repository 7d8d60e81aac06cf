"""
Shared parse error and integer parsing for Alpha Vantage wire values.

Alpha Vantage sends every number as a JSON string and uses the literal
token "None" when a figure is not available.
"""

import re


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# int() also accepts whitespace, underscores and non-ASCII digits
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class ParseError(ValueError):
    """Raised when a wire value cannot be decoded."""

    def __init__(self, value, reason: str = ""):
        self.value = value
        self.reason = reason
        message = f"Cannot parse '{value}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def parse_int64(value: str) -> int:
    """Parse a signed decimal string into an int within the 64-bit range."""
    if not isinstance(value, str) or not _INTEGER_RE.fullmatch(value):
        raise ParseError(value, "not an integer")
    result = int(value)
    if result < INT64_MIN or result > INT64_MAX:
        raise ParseError(value, "out of int64 range")
    return result


def parse_int64ish(value: str) -> int:
    """Parse an integer field, mapping the "None" sentinel to 0."""
    if value == "None":
        return 0
    return parse_int64(value)


def parse_text(value) -> str:
    """Pass a text field through, mapping JSON null to ""."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ParseError(value, "not a string")
    return value
