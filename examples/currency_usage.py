"""Currency Validation Example - Regional Formats.

Demonstrates is_currency() with the default US format, regional presets,
custom FormatOptions and a CLDR-derived format:

1. Default US dollar format
2. Euro (Italian format)
3. Chinese Yuan
4. South African Rand
5. Brazilian Real
6. Parentheses for negatives
7. Custom fractional digit counts
8. Format derived from CLDR locale data

Python 3.11+.
"""

from __future__ import annotations

from currencyvalidator import FormatOptions, is_currency
from currencyvalidator.validation import (
    BRAZILIAN_REAL,
    CHINESE_YUAN,
    EURO_ITALIAN,
    PARENTHESIZED_DOLLAR,
    SOUTH_AFRICAN_RAND,
)


def _show(title: str, values: list[str], options: FormatOptions | None = None) -> None:
    print(title)
    for value in values:
        print(f"   {value!r:>16} -> {is_currency(value, options)}")
    print()


def main() -> None:
    """Run all examples."""
    print("=" * 60)
    print("Currency Validator Examples")
    print("=" * 60)
    print()

    _show("1. Default USD format:", ["$10,123.45", "10,123.45", "-$99.99", "$.99", "$ 32.50"])

    _show("2. Euro (Italian format - €1.234,56):", ["€1.234,56", "€ 1.234,56", "-€10,50"],
          EURO_ITALIAN)

    _show("3. Chinese Yuan (¥):", ["¥1,234.56", "¥-999.99", "123,456.78"], CHINESE_YUAN)

    _show("4. South African Rand (R 123 or R-123):",
          ["R 10 123,45", "R-10 123,45", "R 123,45", "R -123,45"], SOUTH_AFRICAN_RAND)

    _show("5. Brazilian Real (R$ 1.234,56):", ["R$ 1.400,00", "R$ 400,00", "$ 1.400,00"],
          BRAZILIAN_REAL)

    _show("6. Parentheses for negatives:",
          ["($1,234.56)", "$1,234.56", "(1,234.56)", "-$1,234.56"], PARENTHESIZED_DOLLAR)

    _show("7. Custom decimal digits (1 or 3 digits):",
          ["$10.5", "$10.123", "$10.12", "$10.1234"],
          FormatOptions().with_digits_after_decimal([1, 3]))

    german = FormatOptions.for_locale("de-DE")
    _show(f"8. CLDR format for de-DE ({german.symbol!r} after digits):",
          ["1.234,56 €", "1.234,56€", "-1.234,56 €", "€1.234,56"], german)

    print("=" * 60)
    print("All examples completed")
    print("=" * 60)


if __name__ == "__main__":
    main()
