"""Currency formatting and parsing utilities."""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

Number = Union[int, Decimal]


def format_currency(amount: Number) -> str:
    """Format an amount as a grouped whole number.

    Examples:
        1234567 -> "1,234,567"
        Decimal("12.5") -> "13"

    Args:
        amount: Amount in whole currency units

    Returns:
        Display string without fractional digits
    """
    rounded = Decimal(amount).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return f"{int(rounded):,}"


def parse_currency(value: str) -> Decimal:
    """Parse a display string back into an amount.

    Every character other than digits, "." and "-" is dropped first, so
    grouping separators and currency symbols are ignored. An empty result
    parses as zero.

    Args:
        value: Display string, e.g. "1,234 ؋"

    Returns:
        Decimal amount

    Raises:
        ValueError: If the remaining characters are not a number
    """
    cleaned = re.sub(r"[^\d.-]", "", value)
    if not cleaned:
        return Decimal(0)
    try:
        return Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{value}'") from e


def digits_only(value: str) -> str:
    """Strip everything except ASCII digits."""
    return re.sub(r"[^0-9]", "", value)
