"""FormatOptions derived from Unicode CLDR data via Babel.

Reads a locale's standard (or accounting) currency pattern and number
symbols and maps them onto FormatOptions fields:

    symbol                  babel.numbers.get_currency_symbol
    thousands_separator     babel.numbers.get_group_symbol (space-like -> " ")
    decimal_separator       babel.numbers.get_decimal_symbol
    digits_after_decimal    babel.numbers.get_currency_precision (0 = no decimals)
    symbol position/spacing positive prefix/suffix of the currency pattern
    sign position           negative prefix/suffix of the currency pattern
    parens_for_negatives    accounting pattern with "(" negative prefix

CLDR spaces between symbol and number are usually NO-BREAK SPACE; they only
switch the corresponding allow_space_* flag on. The grammar itself matches
a plain ASCII space, and space-like group separators (NO-BREAK SPACE,
NARROW NO-BREAK SPACE) are mapped to it too. Text produced by
babel.numbers.format_currency therefore validates once its non-breaking
spaces are replaced with plain ones.

Python 3.11+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging

from babel import UnknownLocaleError
from babel.numbers import (
    get_currency_precision,
    get_currency_symbol,
    get_decimal_symbol,
    get_group_symbol,
    get_territory_currencies,
)

from currencyvalidator.constants import (
    CLDR_CURRENCY_PLACEHOLDER,
    DEFAULT_DIGITS_AFTER_DECIMAL,
    NEGATIVE_SIGN,
    SPACE,
    OPEN_PAREN,
)
from currencyvalidator.diagnostics import ErrorTemplate, LocaleFormatError
from currencyvalidator.locale_utils import get_babel_locale

from .options import FormatOptions

__all__ = ["options_for_locale"]

logger = logging.getLogger(__name__)


def _is_spaced(affix: str) -> bool:
    """True if the affix holds whitespace besides the currency placeholder."""
    rest = affix.replace(CLDR_CURRENCY_PLACEHOLDER, "").replace(NEGATIVE_SIGN, "")
    return rest != "" and rest.isspace()


def _resolve_currency(locale_code: str, territory: str | None, currency: str | None) -> str:
    if currency:
        return currency.upper()
    if territory:
        currencies = get_territory_currencies(territory)
        if currencies:
            return currencies[0]
    raise LocaleFormatError(
        ErrorTemplate.locale_currency_unknown(locale_code), locale_code=locale_code
    )


def options_for_locale(
    locale_code: str,
    currency: str | None = None,
    *,
    accounting: bool = False,
) -> FormatOptions:
    """Build FormatOptions from a locale's CLDR currency format.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "de-DE", "en_US")
        currency: ISO 4217 code; defaults to the territory's current currency
        accounting: Use the accounting pattern instead of the standard one

    Returns:
        FormatOptions describing the locale's currency format

    Raises:
        LocaleFormatError: If the locale is unknown, no currency can be
            inferred, or the currency code is not known to CLDR

    Example:
        >>> opts = options_for_locale("de_DE")
        >>> opts.symbol, opts.thousands_separator, opts.symbol_after_digits
        ('€', '.', True)
    """
    try:
        babel_locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise LocaleFormatError(
            ErrorTemplate.locale_unknown(locale_code, str(e)), locale_code=locale_code
        ) from None

    code = _resolve_currency(locale_code, babel_locale.territory, currency)
    if code not in babel_locale.currencies:
        raise LocaleFormatError(
            ErrorTemplate.locale_currency_unknown(locale_code), locale_code=locale_code
        )

    format_type = "accounting" if accounting else "standard"
    pattern = babel_locale.currency_formats.get(format_type) or (
        babel_locale.currency_formats["standard"]
    )
    positive_prefix, negative_prefix = pattern.prefix
    positive_suffix, negative_suffix = pattern.suffix

    symbol_after_digits = CLDR_CURRENCY_PLACEHOLDER in positive_suffix
    symbol_spaced = _is_spaced(positive_suffix if symbol_after_digits else positive_prefix)

    parens = negative_prefix.startswith(OPEN_PAREN)
    sign_after_digits = not parens and NEGATIVE_SIGN in negative_suffix
    # "¤ -1,00": the sign follows the symbol, i.e. sits right before the digits
    sign_before_digits = (
        not parens
        and not symbol_after_digits
        and NEGATIVE_SIGN in negative_prefix
        and CLDR_CURRENCY_PLACEHOLDER in negative_prefix
        and negative_prefix.index(CLDR_CURRENCY_PLACEHOLDER)
        < negative_prefix.index(NEGATIVE_SIGN)
    )

    group = get_group_symbol(babel_locale)
    precision = get_currency_precision(code)
    options = FormatOptions(
        symbol=get_currency_symbol(code, locale=babel_locale),
        allow_space_after_symbol=symbol_spaced and not symbol_after_digits,
        symbol_after_digits=symbol_after_digits,
        parens_for_negatives=parens,
        negative_sign_before_digits=sign_before_digits,
        negative_sign_after_digits=sign_after_digits,
        thousands_separator=SPACE if group.isspace() else group,
        decimal_separator=get_decimal_symbol(babel_locale),
        allow_decimal=precision > 0,
        digits_after_decimal=(precision,) if precision > 0 else DEFAULT_DIGITS_AFTER_DECIMAL,
        allow_space_after_digits=symbol_spaced and symbol_after_digits,
    )
    logger.debug("Derived currency format for %s/%s: %r", locale_code, code, options)
    return options
