"""Tests for currency formatting and parsing."""

from decimal import Decimal

import pytest

from expensebook.utils.currency import digits_only, format_currency, parse_currency


def test_format_groups_thousands():
    """Test grouping of large amounts."""
    assert format_currency(0) == "0"
    assert format_currency(950) == "950"
    assert format_currency(1234567) == "1,234,567"


def test_format_drops_fraction():
    """Test that fractional amounts are rounded to whole units."""
    assert format_currency(Decimal("12.4")) == "12"
    assert format_currency(Decimal("12.5")) == "13"


def test_parse_ignores_separators_and_symbols():
    """Test parsing display strings."""
    assert parse_currency("1,234") == Decimal(1234)
    assert parse_currency("1,234 ؋") == Decimal(1234)
    assert parse_currency("$ 99.50") == Decimal("99.50")


def test_parse_empty_is_zero():
    """Test that an empty string parses as zero."""
    assert parse_currency("") == 0
    assert parse_currency("؋") == 0


def test_parse_invalid_number():
    """Test that malformed numbers are rejected."""
    with pytest.raises(ValueError, match="Could not parse"):
        parse_currency("1.2.3")


@pytest.mark.parametrize("amount", [0, 7, 1000, 98765432])
def test_format_parse_round_trip(amount):
    """Test that formatting a parsed display string is stable."""
    formatted = format_currency(amount)
    assert format_currency(parse_currency(formatted)) == formatted


def test_digits_only():
    """Test stripping non-digit characters."""
    assert digits_only("1,5a0") == "150"
    assert digits_only("abc") == ""
