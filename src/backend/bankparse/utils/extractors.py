"""
Generic field extractors used when no vendor rule set applies.

Each extractor walks an ordered list of patterns and returns the first usable
match. They are stateless and safe to share between threads.
"""

from decimal import Decimal
from typing import Optional
import logging

from bankparse.utils.money import parse_brl_amount
from bankparse.utils.patterns import PatternSpec, AMOUNT, CURRENCY
from bankparse.utils.text import merchant_or_none

logger = logging.getLogger(__name__)

MIN_MERCHANT_LENGTH = 3

# Letters (with Portuguese accents), digits, spaces and "&"
_NAME = r'([A-Za-zÀ-ÖØ-öø-ÿ0-9&][A-Za-zÀ-ÖØ-öø-ÿ0-9\s&]{0,79})'

# NOTE: the last pattern also fires on any 4-digit number that ends the text
# or precedes a preposition (years, whole-real amounts). Pattern order is the
# only tie-break.
CARD_SUFFIX_PATTERNS = (
    PatternSpec(
        name='masked_digits',
        pattern=r'[•*]{1,20}\s{0,5}([0-9]{4})',
        example='•••• 1234',
    ),
    PatternSpec(
        name='final_digits',
        pattern=r'\bfinal\s{1,5}([0-9]{4})',
        example='final 1234',
    ),
    PatternSpec(
        name='card_word_digits',
        pattern=r'\bcart[ãa]o\s{1,5}(?:final\s{1,5})?([0-9]{4})',
        example='cartão final 1234',
    ),
    PatternSpec(
        name='bare_digits',
        pattern=r'\b([0-9]{4})(?:\s{0,10}$|\s{1,10}(?:em|no|para)\b)',
        example='1234 em Loja',
        notes='Heuristic, ambiguous with 4-digit amounts and years',
    ),
)

AMOUNT_PATTERNS = (
    PatternSpec(
        name='currency_symbol',
        pattern=CURRENCY + AMOUNT,
        example='R$ 45,90',
    ),
)

MERCHANT_PATTERNS = (
    PatternSpec(
        name='after_preposition',
        pattern=r'\b(?:em|no|para)\s{1,5}' + _NAME,
        example='R$ 20,00 no Mercado',
    ),
    PatternSpec(
        name='after_dash',
        pattern=r'[-–]\s{1,5}' + _NAME,
        example='R$ 20,00 - Mercado',
        flags=0,
    ),
)


def extract_card_last_four(text: str) -> Optional[str]:
    """
    Extract the last four digits of a payment card.

    Args:
        text: Combined notification text

    Returns:
        Four ASCII digits or None
    """
    for spec in CARD_SUFFIX_PATTERNS:
        match = spec.search(text)
        if match:
            logger.debug("Card suffix matched", extra={"pattern": spec.name})
            return match.group(1)
    return None


def extract_amount(text: str) -> Optional[Decimal]:
    """Extract the first R$-prefixed amount from text."""
    for spec in AMOUNT_PATTERNS:
        match = spec.search(text)
        if match:
            return parse_brl_amount(match.group(1))
    return None


def extract_merchant(text: str) -> Optional[str]:
    """
    Extract a merchant name after a preposition or a dash.

    A candidate shorter than three characters is rejected and the next
    pattern is tried.
    """
    for spec in MERCHANT_PATTERNS:
        match = spec.search(text)
        if not match:
            continue

        candidate = match.group(1).strip()
        if len(candidate) >= MIN_MERCHANT_LENGTH:
            merchant = merchant_or_none(candidate)
            if merchant:
                return merchant

    return None
