"""Tests for FormatOptions derived from CLDR data via Babel."""

from __future__ import annotations

from decimal import Decimal

import pytest
from babel.numbers import format_currency

from currencyvalidator import FormatOptions, LocaleFormatError, is_currency
from currencyvalidator.diagnostics import DiagnosticCode
from currencyvalidator.locale_utils import get_babel_locale, normalize_locale
from currencyvalidator.validation.locale_formats import options_for_locale


class TestNormalizeLocale:
    """BCP-47 to POSIX conversion."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("en-US", "en_US"), ("pt_BR", "pt_BR"), ("de", "de"), (" da-DK ", "da_DK")],
    )
    def test_normalize(self, code: str, expected: str) -> None:
        """Hyphens become underscores and whitespace is stripped."""
        assert normalize_locale(code) == expected

    def test_babel_locale_cached(self) -> None:
        """Equal codes return the same Locale object."""
        assert get_babel_locale("en-US") is get_babel_locale("en-US")


class TestOptionsForLocale:
    """Currency formats read from CLDR."""

    def test_en_us_matches_default(self) -> None:
        """en-US yields the default US dollar format."""
        assert FormatOptions.for_locale("en-US") == FormatOptions()

    def test_de_de(self) -> None:
        """German: symbol after a space, dot grouping, comma decimals."""
        opts = FormatOptions.for_locale("de_DE")
        assert opts.symbol == "€"
        assert opts.thousands_separator == "."
        assert opts.decimal_separator == ","
        assert opts.symbol_after_digits is True
        assert opts.allow_space_after_digits is True
        assert is_currency("1.234,56 €", opts) is True
        assert is_currency("-1.234,56 €", opts) is True
        assert is_currency("€1.234,56", opts) is False

    def test_explicit_currency(self) -> None:
        """A currency code overrides the territory default."""
        opts = FormatOptions.for_locale("en_US", "EUR")
        assert opts.symbol == "€"
        assert is_currency("€1,234.56", opts) is True

    def test_language_only_with_currency(self) -> None:
        """A language-only locale works when the currency is given."""
        opts = options_for_locale("de", "EUR")
        assert opts.decimal_separator == ","

    def test_zero_precision_currency(self) -> None:
        """Currencies without minor units disallow a fractional part."""
        opts = FormatOptions.for_locale("ja_JP")
        assert opts.allow_decimal is False
        assert is_currency(opts.symbol + "1,234", opts) is True
        assert is_currency(opts.symbol + "1,234.50", opts) is False

    def test_accounting_parens(self) -> None:
        """The accounting pattern puts negatives in parentheses."""
        opts = FormatOptions.for_locale("en_US", accounting=True)
        assert opts.parens_for_negatives is True
        assert is_currency("($1,234.56)", opts) is True
        assert is_currency("-$1,234.56", opts) is False


class TestLocaleErrors:
    """Unresolvable locales raise LocaleFormatError."""

    def test_unknown_locale(self) -> None:
        """Locales missing from CLDR are rejected."""
        with pytest.raises(LocaleFormatError) as exc_info:
            FormatOptions.for_locale("xx_YY")
        assert exc_info.value.locale_code == "xx_YY"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.LOCALE_UNKNOWN

    def test_no_territory(self) -> None:
        """Without a territory the currency must be given."""
        with pytest.raises(LocaleFormatError) as exc_info:
            FormatOptions.for_locale("de")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.LOCALE_CURRENCY_UNKNOWN

    def test_unknown_currency(self) -> None:
        """Currency codes unknown to CLDR are rejected."""
        with pytest.raises(LocaleFormatError):
            FormatOptions.for_locale("en_US", "XYZ")

    def test_is_value_error(self) -> None:
        """Callers catching ValueError still see locale failures."""
        with pytest.raises(ValueError, match="xx_YY"):
            options_for_locale("xx_YY")


def _plain_spaces(text: str) -> str:
    """Replace CLDR's non-breaking spaces with ASCII spaces."""
    return text.replace("\xa0", " ").replace("\u202f", " ")


class TestCldrRoundTrip:
    """Amounts formatted by Babel validate against the locale's own options."""

    @pytest.mark.parametrize(
        ("locale_code", "currency"),
        [
            ("en_US", "USD"),
            ("de_DE", "EUR"),
            ("fr_FR", "EUR"),
            ("da_DK", "DKK"),
            ("nl_NL", "EUR"),
            ("en_ZA", "ZAR"),
        ],
    )
    @pytest.mark.parametrize(
        "value", [Decimal("1234.56"), Decimal("-1234.56"), Decimal("1234567.89")]
    )
    def test_formatted_amount_validates(
        self, locale_code: str, currency: str, value: Decimal
    ) -> None:
        """format_currency output is accepted once spaces are plain."""
        text = _plain_spaces(format_currency(value, currency, locale=locale_code))
        assert is_currency(text, FormatOptions.for_locale(locale_code)) is True

    def test_space_grouping_mapped_to_ascii(self) -> None:
        """Space-like CLDR group separators become a plain space."""
        opts = FormatOptions.for_locale("fr_FR")
        assert opts.thousands_separator == " "
        assert is_currency("1 234,56 €", opts) is True

    def test_rand_typed_with_plain_space(self) -> None:
        """en-ZA amounts typed with ASCII spaces validate."""
        opts = FormatOptions.for_locale("en-ZA")
        assert is_currency("R1 234,56", opts) is True

    def test_non_breaking_space_not_accepted(self) -> None:
        """Only ASCII spacing is matched; raw CLDR output needs normalizing."""
        opts = FormatOptions.for_locale("de_DE")
        assert is_currency("1.234,56\xa0€", opts) is False
