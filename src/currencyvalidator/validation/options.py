"""Immutable currency format description.

FormatOptions holds one locale's currency format rules: symbol placement,
separators, sign conventions, fractional digit counts and spacing. It is
pure data. No validation happens at construction; the grammar builder
rejects unusable combinations (see grammar.py).

Instances are frozen and hashable, so the same object can be shared across
threads and used as a grammar cache key. Chainable ``with_*`` methods return
updated copies:

    >>> euro = (
    ...     FormatOptions()
    ...     .with_symbol("€")
    ...     .with_thousands_separator(".")
    ...     .with_decimal_separator(",")
    ... )
    >>> euro.symbol, FormatOptions().symbol
    ('€', '$')

Python 3.11+.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from currencyvalidator.constants import (
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_DIGITS_AFTER_DECIMAL,
    DEFAULT_SYMBOL,
    DEFAULT_THOUSANDS_SEPARATOR,
)

if TYPE_CHECKING:
    from typing import Self

__all__ = ["FormatOptions"]


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Currency format rules for one locale.

    The default instance describes US dollars: optional leading "$", comma
    grouping, dot decimal, exactly two fractional digits, optional leading
    minus sign in front of the symbol.

    Attributes:
        symbol: Currency symbol or string, e.g. "$" or "kr." (may be empty)
        require_symbol: Symbol is mandatory instead of optional
        allow_space_after_symbol: One space may separate symbol and amount
        symbol_after_digits: Symbol follows the amount instead of leading it
        allow_negatives: Negative amounts are accepted at all; when False the
            sign position and parenthesis fields below are inert
        parens_for_negatives: Negatives are written "(amount)"; overrides sign
            placement
        negative_sign_before_digits: Sign sits directly before the digits
            (after the symbol), e.g. "¥-10.03"
        negative_sign_after_digits: Sign trails the digits, e.g. "$10.45-"
        allow_negative_sign_placeholder: A space may stand where the sign would
            go, e.g. both "R 123" and "R-123"
        thousands_separator: Grouping separator (one character)
        decimal_separator: Fractional separator (one character)
        allow_decimal: Fractional part is permitted
        require_decimal: Fractional part is mandatory (implies allow_decimal)
        digits_after_decimal: Accepted fractional digit counts, non-empty
        allow_space_after_digits: One space may follow the amount
    """

    symbol: str = DEFAULT_SYMBOL
    require_symbol: bool = False
    allow_space_after_symbol: bool = False
    symbol_after_digits: bool = False
    allow_negatives: bool = True
    parens_for_negatives: bool = False
    negative_sign_before_digits: bool = False
    negative_sign_after_digits: bool = False
    allow_negative_sign_placeholder: bool = False
    thousands_separator: str = DEFAULT_THOUSANDS_SEPARATOR
    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR
    allow_decimal: bool = True
    require_decimal: bool = False
    digits_after_decimal: tuple[int, ...] = field(default=DEFAULT_DIGITS_AFTER_DECIMAL)
    allow_space_after_digits: bool = False

    def __post_init__(self) -> None:
        """Freeze digits_after_decimal into a tuple so instances stay hashable.

        Lists and other iterables are accepted for convenience; their contents
        are not checked here.
        """
        digits: Any = self.digits_after_decimal
        if not isinstance(digits, tuple) and isinstance(digits, Iterable):
            object.__setattr__(self, "digits_after_decimal", tuple(digits))

    @property
    def has_ambiguous_separators(self) -> bool:
        """True when grouping and decimal separators are the same character."""
        return self.thousands_separator == self.decimal_separator

    def replace(self, **changes: Any) -> Self:
        """Return a copy with the given fields changed."""
        return replace(self, **changes)

    # ------------------------------------------------------------------
    # Chainable setters
    # ------------------------------------------------------------------

    def with_symbol(self, symbol: str) -> Self:
        """Set the currency symbol."""
        return replace(self, symbol=symbol)

    def with_require_symbol(self, require: bool) -> Self:
        """Set whether the symbol is required."""
        return replace(self, require_symbol=require)

    def with_allow_space_after_symbol(self, allow: bool) -> Self:
        """Set whether a space may follow the symbol."""
        return replace(self, allow_space_after_symbol=allow)

    def with_symbol_after_digits(self, after: bool) -> Self:
        """Set whether the symbol follows the digits."""
        return replace(self, symbol_after_digits=after)

    def with_allow_negatives(self, allow: bool) -> Self:
        """Set whether negative amounts are accepted."""
        return replace(self, allow_negatives=allow)

    def with_parens_for_negatives(self, use_parens: bool) -> Self:
        """Set whether negatives are written in parentheses."""
        return replace(self, parens_for_negatives=use_parens)

    def with_negative_sign_before_digits(self, before: bool) -> Self:
        """Set whether the sign sits directly before the digits."""
        return replace(self, negative_sign_before_digits=before)

    def with_negative_sign_after_digits(self, after: bool) -> Self:
        """Set whether the sign trails the digits."""
        return replace(self, negative_sign_after_digits=after)

    def with_allow_negative_sign_placeholder(self, allow: bool) -> Self:
        """Set whether a space may stand in for the sign."""
        return replace(self, allow_negative_sign_placeholder=allow)

    def with_thousands_separator(self, separator: str) -> Self:
        """Set the grouping separator."""
        return replace(self, thousands_separator=separator)

    def with_decimal_separator(self, separator: str) -> Self:
        """Set the fractional separator."""
        return replace(self, decimal_separator=separator)

    def with_allow_decimal(self, allow: bool) -> Self:
        """Set whether a fractional part is permitted."""
        return replace(self, allow_decimal=allow)

    def with_require_decimal(self, require: bool) -> Self:
        """Set whether a fractional part is mandatory."""
        return replace(self, require_decimal=require)

    def with_digits_after_decimal(self, digits: Iterable[int]) -> Self:
        """Set the accepted fractional digit counts."""
        return replace(self, digits_after_decimal=tuple(digits))

    def with_allow_space_after_digits(self, allow: bool) -> Self:
        """Set whether a space may follow the amount."""
        return replace(self, allow_space_after_digits=allow)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def for_locale(
        cls,
        locale_code: str,
        currency: str | None = None,
        *,
        accounting: bool = False,
    ) -> FormatOptions:
        """Build options from Unicode CLDR data for a locale.

        Args:
            locale_code: BCP-47 or POSIX locale code (e.g., "de-DE", "en_US")
            currency: ISO 4217 code; defaults to the territory's currency
            accounting: Use the accounting pattern (parenthesized negatives
                where CLDR defines them)

        Returns:
            FormatOptions describing the locale's currency format

        Raises:
            LocaleFormatError: If the locale or its currency is unknown

        Example:
            >>> FormatOptions.for_locale("de_DE").decimal_separator
            ','
        """
        from .locale_formats import options_for_locale  # noqa: PLC0415 - circular

        return options_for_locale(locale_code, currency, accounting=accounting)
