"""
Tests for Brazilian Real amount parsing and formatting.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from bankparse.utils.money import parse_brl_amount, format_brl
from decimal import Decimal
import pytest


class TestParseBrlAmount:
    """Test conversion of locale-formatted numbers to Decimal."""

    @pytest.mark.parametrize("raw, expected", [
        ("1.234,56", Decimal("1234.56")),
        ("45,90", Decimal("45.90")),
        ("100", Decimal("100")),
        ("1.000.000,00", Decimal("1000000.00")),
        ("0,99", Decimal("0.99")),
        (" 12,5 ", Decimal("12.5")),
    ])
    def test_valid_amounts(self, raw, expected):
        assert parse_brl_amount(raw) == expected

    def test_keeps_source_precision(self):
        """No rounding: trailing zeros and extra digits survive."""
        assert str(parse_brl_amount("45,90")) == "45.90"
        assert str(parse_brl_amount("3,14159")) == "3.14159"

    @pytest.mark.parametrize("raw", ["abc", "", "   ", ",", "1,2,3", "NaN", "Infinity", None])
    def test_invalid_amounts_return_none(self, raw):
        assert parse_brl_amount(raw) is None

    def test_negative_is_made_absolute(self):
        assert parse_brl_amount("-5,00") == Decimal("5.00")


class TestFormatBrl:
    """Test display formatting."""

    def test_thousands_and_cents(self):
        assert format_brl(Decimal("1234.5")) == "R$ 1.234,50"

    def test_small_amount(self):
        assert format_brl(Decimal("45.90")) == "R$ 45,90"

    def test_none(self):
        assert format_brl(None) == "N/A"
