"""Formatting helpers for estimate output.

Amounts are shown the way the price list quotes them: whole roubles,
thousands grouped with a non-breaking space (e.g. '162 000 ₽').
"""

from __future__ import annotations

CURRENCY_SYMBOL = "₽"
_NBSP = "\u00a0"

INCLUDED_LABEL = "Included"


def format_currency(amount: float) -> str:
    """Format an amount as whole roubles with grouped thousands."""
    grouped = f"{amount:,.0f}".replace(",", _NBSP)
    return f"{grouped}{_NBSP}{CURRENCY_SYMBOL}"


def format_line_price(amount: float, included: bool = False) -> str:
    """Format a line price, showing rows bundled with the shell as 'Included'."""
    if included:
        return INCLUDED_LABEL
    return format_currency(amount)


def format_dimensions(length: float, width: float, height: float) -> str:
    """Format cabin dimensions as 'L x W x H m'."""
    return f"{length:g} x {width:g} x {height:g} m"
