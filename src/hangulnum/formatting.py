"""
Number formatting helpers for the CLI.
"""

from .config import MAX_VALUE
from .errors import InvalidNumberError


def format_with_commas(n: int) -> str:
    """Format an integer with thousands separators, e.g. 12345 -> 12,345."""
    return f"{n:,}"


def parse_number(text: str) -> int:
    """
    Parse user input as a non-negative integer.

    Surrounding whitespace and thousands-separator commas are ignored.

    Raises:
        InvalidNumberError: If the text is not a number in [0, 2^64 - 1]
    """
    cleaned = text.strip().replace(",", "")
    if not cleaned.isdigit() or not cleaned.isascii():
        raise InvalidNumberError(text, f"Not a valid number: {text!r}")

    value = int(cleaned)
    if value > MAX_VALUE:
        raise InvalidNumberError(value)
    return value
