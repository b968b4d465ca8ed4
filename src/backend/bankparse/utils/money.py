"""
Money parsing utilities for Brazilian Real notification text.

Bank apps print amounts the Brazilian way:
- Thousands: 1.234,56
- Plain: 45,90
- No cents: 100
"""

from decimal import Decimal, InvalidOperation
from typing import Optional


def parse_brl_amount(amount_str: str) -> Optional[Decimal]:
    """
    Parse a Brazilian-formatted number into a Decimal.

    Dots are thousands separators and are dropped, the comma becomes the
    decimal point. The source precision is kept as-is (no rounding).

    Args:
        amount_str: Numeric substring (e.g., "1.234,56", "45,90")

    Returns:
        Non-negative Decimal or None if the text is not numeric

    Examples:
        >>> parse_brl_amount("1.234,56")
        Decimal('1234.56')
        >>> parse_brl_amount("45,90")
        Decimal('45.90')
        >>> parse_brl_amount("abc") is None
        True
    """
    if not amount_str or not isinstance(amount_str, str):
        return None

    cleaned = amount_str.strip().replace('.', '').replace(',', '.')
    if not cleaned:
        return None

    try:
        result = Decimal(cleaned)
    except (InvalidOperation, ValueError):
        return None

    # Decimal happily parses "NaN" and "Infinity"
    if not result.is_finite():
        return None

    return abs(result)


def format_brl(amount: Optional[Decimal]) -> str:
    """
    Format a Decimal as a Brazilian Real display string.

    Examples:
        >>> format_brl(Decimal('1234.5'))
        'R$ 1.234,50'
    """
    if amount is None:
        return 'N/A'

    # Format US-style first, then swap the separators
    formatted = f"{amount:,.2f}"
    formatted = formatted.replace(',', '_').replace('.', ',').replace('_', '.')

    return f"R$ {formatted}"
