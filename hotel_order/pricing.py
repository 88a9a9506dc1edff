"""Rupiah price formatting."""

from __future__ import annotations

from hotel_order.constant import CURRENCY_SYMBOL, CURRENCY_SYMBOL_SEPARATOR, THOUSANDS_SEPARATOR


def format_price(amount: int) -> str:
    """
    Format a whole-Rupiah amount the way the id-ID locale does.

    Thousands are grouped with ".", there are no decimals and the symbol is
    prefixed: 130000 -> "Rp 130.000". Negative amounts put the sign before
    the symbol.
    """
    grouped = f"{abs(amount):,}".replace(",", THOUSANDS_SEPARATOR)
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{CURRENCY_SYMBOL_SEPARATOR}{grouped}"
