"""Formatting utilities for currency display."""

from __future__ import annotations

from typing import Any

from . import config

_SYMBOLS = {'INR': '₹', 'USD': '$', 'EUR': '€', 'GBP': '£'}


def format_currency(amount: Any, currency: str = config.CURRENCY) -> str:
    """Format an amount as whole currency units.

    Non-numeric values render as zero.

    Example:
        >>> format_currency(4399)
        '₹4,399'
        >>> format_currency(None)
        '₹0'
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        amount = 0
    symbol = _SYMBOLS.get(currency, f"{currency} ")
    sign = '-' if amount < 0 else ''
    return f"{sign}{symbol}{abs(amount):,.0f}"


def escape_dollar_for_markdown(text: str) -> str:
    """Escape dollar signs so markdown does not treat them as LaTeX delimiters."""
    return text.replace("$", "\\$")
