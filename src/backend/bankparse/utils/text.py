"""
Merchant/counterparty name cleanup shared by vendor rules and generic extraction.
"""

from typing import Optional
import re

MAX_MERCHANT_LENGTH = 50

_WHITESPACE = re.compile(r'\s+')
# "•••• 1234", "*** 1234", "****1234"
CARD_MARKER = re.compile(r'[•*]{1,20}\s{0,5}[0-9]{4}')
_TRAILING_DASH = re.compile(r'\s*[-–]\s*$')


def clean_merchant_name(merchant: str) -> str:
    """
    Clean and normalize a merchant name for display.

    Steps run in order: collapse whitespace, drop card-number markers,
    drop a trailing dash, trim, cap at 50 characters.

    Args:
        merchant: Raw captured merchant text

    Returns:
        Cleaned name, possibly empty
    """
    if not merchant:
        return ''

    name = _WHITESPACE.sub(' ', merchant)
    name = CARD_MARKER.sub('', name)
    name = _TRAILING_DASH.sub('', name)
    name = name.strip()

    return name[:MAX_MERCHANT_LENGTH].rstrip()


def merchant_or_none(merchant: Optional[str]) -> Optional[str]:
    """Clean a merchant candidate and map blank results to None."""
    if merchant is None:
        return None

    cleaned = clean_merchant_name(merchant)
    return cleaned or None
