"""Configurable currency-string validation.

- is_currency() NEVER raises; every failure is a plain False
- FormatOptions describes one locale's currency format (immutable)
- The matching grammar is synthesized from FormatOptions at call time and
  cached per distinct format

Public API:
    Validation:
        is_currency - Returns bool for (text, FormatOptions | None)

    Format description:
        FormatOptions - Frozen currency format rules with with_* setters
        FormatOptions.for_locale - Options derived from CLDR via Babel
        PRESETS - Named regional formats (US_DOLLAR, EURO_ITALIAN, ...)

    Grammar internals (for inspection and testing):
        build_currency_pattern - Pattern source for FormatOptions
        GrammarCache - Process-wide compiled grammar cache
        first_failed_guard - First guard check rejecting a text

Example:
    >>> from currencyvalidator.validation import FormatOptions, is_currency
    >>> is_currency("$10.5", FormatOptions(digits_after_decimal=(1, 3)))
    True

Python 3.11+.
"""

from .currency import is_currency
from .grammar import (
    GrammarCache,
    build_currency_pattern,
    check_option_types,
    compile_currency_grammar,
)
from .guards import GUARD_CHECKS, first_failed_guard, passes_guard_checks
from .options import FormatOptions
from .presets import (
    BRAZILIAN_REAL,
    CHINESE_YUAN,
    DANISH_KRONE,
    EURO_GREEK,
    EURO_ITALIAN,
    PARENTHESIZED_DOLLAR,
    PRESETS,
    SOUTH_AFRICAN_RAND,
    US_DOLLAR,
)

__all__ = [
    # Presets
    "BRAZILIAN_REAL",
    "CHINESE_YUAN",
    "DANISH_KRONE",
    "EURO_GREEK",
    "EURO_ITALIAN",
    "GUARD_CHECKS",
    "PARENTHESIZED_DOLLAR",
    "PRESETS",
    "SOUTH_AFRICAN_RAND",
    "US_DOLLAR",
    # Format description
    "FormatOptions",
    # Grammar internals
    "GrammarCache",
    "build_currency_pattern",
    "check_option_types",
    "compile_currency_grammar",
    "first_failed_guard",
    # Validation
    "is_currency",
    "passes_guard_checks",
]
