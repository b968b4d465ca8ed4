"""
Tests for merchant name cleanup.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from bankparse.utils.text import clean_merchant_name, merchant_or_none, MAX_MERCHANT_LENGTH


class TestCleanMerchantName:

    def test_collapses_whitespace(self):
        assert clean_merchant_name("  Padaria \t  Silva  ") == "Padaria Silva"

    def test_removes_card_marker(self):
        assert clean_merchant_name("Loja X •••• 1234") == "Loja X"
        assert clean_merchant_name("Loja X ****1234") == "Loja X"

    def test_removes_trailing_dash(self):
        assert clean_merchant_name("Mercado - ") == "Mercado"
        assert clean_merchant_name("Posto –") == "Posto"

    def test_keeps_inner_dash(self):
        assert clean_merchant_name("Coca-Cola Store") == "Coca-Cola Store"

    def test_truncates_long_names(self):
        cleaned = clean_merchant_name("A" * 80)
        assert len(cleaned) == MAX_MERCHANT_LENGTH

    def test_empty_input(self):
        assert clean_merchant_name("") == ""


class TestMerchantOrNone:

    def test_blank_becomes_none(self):
        assert merchant_or_none("   ") is None
        assert merchant_or_none("•••• 1234") is None
        assert merchant_or_none(None) is None

    def test_valid_name_is_cleaned(self):
        assert merchant_or_none(" João   Silva ") == "João Silva"
