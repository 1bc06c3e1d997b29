"""Shared constants for currencyvalidator.

Centralized defaults and limits used across the validation and
diagnostics packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Format defaults: US dollar conventions used by FormatOptions()
- Grammar glyphs: Characters the synthesized grammar treats specially
- Cache limits: Memory bounds for the grammar cache

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Format defaults
    "DEFAULT_SYMBOL",
    "DEFAULT_THOUSANDS_SEPARATOR",
    "DEFAULT_DECIMAL_SEPARATOR",
    "DEFAULT_DIGITS_AFTER_DECIMAL",
    # Grammar glyphs
    "NEGATIVE_SIGN",
    "OPEN_PAREN",
    "CLOSE_PAREN",
    "SPACE",
    "CLDR_CURRENCY_PLACEHOLDER",
    # Cache limits
    "MAX_GRAMMAR_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# FORMAT DEFAULTS
# ============================================================================

# US dollar: "$", comma grouping, dot decimal, exactly two fractional digits.
DEFAULT_SYMBOL: str = "$"
DEFAULT_THOUSANDS_SEPARATOR: str = ","
DEFAULT_DECIMAL_SEPARATOR: str = "."
DEFAULT_DIGITS_AFTER_DECIMAL: tuple[int, ...] = (2,)

# ============================================================================
# GRAMMAR GLYPHS
# ============================================================================

NEGATIVE_SIGN: str = "-"
OPEN_PAREN: str = "("
CLOSE_PAREN: str = ")"

# Only the plain ASCII space counts as spacing; NBSP and friends do not.
SPACE: str = " "

# CLDR number patterns mark the currency symbol position with U+00A4.
CLDR_CURRENCY_PLACEHOLDER: str = "¤"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum compiled grammars retained by GrammarCache.
# The cache is append-only: past this limit grammars are compiled per call
# and not stored. 256 distinct formats is far beyond typical applications
# (one or two formats per supported region).
MAX_GRAMMAR_CACHE_SIZE: int = 256

# Maximum cached Babel Locale objects for CLDR-derived options.
MAX_LOCALE_CACHE_SIZE: int = 128
