"""Locale code handling for CLDR-derived currency formats.

FormatOptions.for_locale() accepts both "de-DE" and "de_DE". Babel only
understands the underscore form, and loading a Locale parses CLDR data,
so parsed locales are memoized here.

Python 3.11+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from currencyvalidator.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Turn a user-supplied locale code into Babel's underscore form.

    Surrounding whitespace is dropped and hyphens become underscores.

    Example:
        >>> normalize_locale(" pt-BR ")
        'pt_BR'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a locale once per distinct code.

    Repeated FormatOptions.for_locale() calls for the same locale (one per
    request in a typical web form handler) reuse the parsed Locale and its
    currency patterns and number symbols.

    Args:
        locale_code: Locale code, hyphen or underscore form

    Returns:
        Babel Locale holding the CLDR data for the code

    Raises:
        babel.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If the code is not a well-formed locale identifier
    """
    # Importing Babel loads its CLDR index; only for_locale() needs it.
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
