"""Hypothesis strategies for currencyvalidator property-based testing.

Usage:
    from tests.strategies import format_options, formatted_amounts
"""

from .currency import (
    SYMBOLS,
    any_format_options,
    format_options,
    formatted_amounts,
    grouped_amounts,
    plain_amounts,
)

__all__ = [
    "SYMBOLS",
    "any_format_options",
    "format_options",
    "formatted_amounts",
    "grouped_amounts",
    "plain_amounts",
]
