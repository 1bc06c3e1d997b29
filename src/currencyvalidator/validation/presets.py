"""Ready-made currency formats for common regional conventions.

Each preset is an immutable FormatOptions value and can be refined with
the ``with_*`` methods:

    >>> from currencyvalidator import is_currency
    >>> is_currency("kr. -1.234,56", DANISH_KRONE)
    True
    >>> is_currency("R$ 1.400,00", BRAZILIAN_REAL.with_allow_negatives(False))
    True

For formats straight from CLDR data use FormatOptions.for_locale().

Python 3.11+.
"""

from types import MappingProxyType

from .options import FormatOptions

__all__ = [
    "BRAZILIAN_REAL",
    "CHINESE_YUAN",
    "DANISH_KRONE",
    "EURO_GREEK",
    "EURO_ITALIAN",
    "PARENTHESIZED_DOLLAR",
    "PRESETS",
    "SOUTH_AFRICAN_RAND",
    "US_DOLLAR",
]

# -$##,###.## (en-US, en-CA, en-AU, en-NZ, en-HK)
US_DOLLAR = FormatOptions()

# $##,###.## with (##,###.##) for negatives
PARENTHESIZED_DOLLAR = FormatOptions(parens_for_negatives=True)

# -€ ##.###,## (it-IT)
EURO_ITALIAN = FormatOptions(
    symbol="€",
    thousands_separator=".",
    decimal_separator=",",
    allow_space_after_symbol=True,
)

# -##.###,## € (el-GR)
EURO_GREEK = FormatOptions(
    symbol="€",
    thousands_separator=".",
    decimal_separator=",",
    symbol_after_digits=True,
    allow_space_after_digits=True,
)

# kr. -##.###,## (da-DK)
DANISH_KRONE = FormatOptions(
    symbol="kr.",
    negative_sign_before_digits=True,
    thousands_separator=".",
    decimal_separator=",",
    allow_space_after_symbol=True,
)

# ¥-##,###.## (zh-CN)
CHINESE_YUAN = FormatOptions(symbol="¥", negative_sign_before_digits=True)

# R ## ###,## and R-## ###,## (en-ZA)
SOUTH_AFRICAN_RAND = FormatOptions(
    symbol="R",
    negative_sign_before_digits=True,
    thousands_separator=" ",
    decimal_separator=",",
    allow_negative_sign_placeholder=True,
)

# R$ ##.###,## (pt-BR)
BRAZILIAN_REAL = FormatOptions(
    symbol="R$",
    require_symbol=True,
    allow_space_after_symbol=True,
    thousands_separator=".",
    decimal_separator=",",
)

PRESETS: MappingProxyType[str, FormatOptions] = MappingProxyType({
    "us_dollar": US_DOLLAR,
    "parenthesized_dollar": PARENTHESIZED_DOLLAR,
    "euro_italian": EURO_ITALIAN,
    "euro_greek": EURO_GREEK,
    "danish_krone": DANISH_KRONE,
    "chinese_yuan": CHINESE_YUAN,
    "south_african_rand": SOUTH_AFRICAN_RAND,
    "brazilian_real": BRAZILIAN_REAL,
})
