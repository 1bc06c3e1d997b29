"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages:
        - Testable
        - Consistently formatted
        - Documented in one place
    """

    @staticmethod
    def digits_after_decimal_empty() -> Diagnostic:
        """No fractional digit count configured.

        Returns:
            Diagnostic for DIGITS_AFTER_DECIMAL_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.DIGITS_AFTER_DECIMAL_EMPTY,
            message="digits_after_decimal must not be empty",
            hint="Pass at least one fractional digit count, e.g. (2,)",
            field="digits_after_decimal",
        )

    @staticmethod
    def digits_after_decimal_invalid(count: object) -> Diagnostic:
        """Fractional digit count that is not a positive integer.

        Args:
            count: The offending entry of digits_after_decimal

        Returns:
            Diagnostic for DIGITS_AFTER_DECIMAL_INVALID
        """
        msg = f"digits_after_decimal entries must be positive integers, got {count!r}"
        return Diagnostic(
            code=DiagnosticCode.DIGITS_AFTER_DECIMAL_INVALID,
            message=msg,
            hint="Use allow_decimal=False for formats without a fractional part",
            field="digits_after_decimal",
        )

    @staticmethod
    def separator_invalid(field: str, value: object) -> Diagnostic:
        """Separator that is not exactly one character.

        Args:
            field: FormatOptions field name (thousands_separator or decimal_separator)
            value: The configured separator

        Returns:
            Diagnostic for SEPARATOR_INVALID
        """
        msg = f"{field} must be a single character, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.SEPARATOR_INVALID,
            message=msg,
            hint="Separators are matched as exactly one literal character",
            field=field,
        )

    @staticmethod
    def symbol_invalid(value: object) -> Diagnostic:
        """Currency symbol that is not a string.

        Args:
            value: The configured symbol

        Returns:
            Diagnostic for SYMBOL_INVALID
        """
        msg = f"symbol must be a string, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.SYMBOL_INVALID,
            message=msg,
            hint="Use an empty string for formats without a symbol",
            field="symbol",
        )

    @staticmethod
    def grammar_compile_failed(pattern: str, reason: str) -> Diagnostic:
        """Synthesized pattern rejected by the regular expression engine.

        Args:
            pattern: The synthesized pattern source
            reason: Error text reported by the re module

        Returns:
            Diagnostic for GRAMMAR_COMPILE_FAILED
        """
        msg = f"Currency grammar {pattern!r} failed to compile: {reason}"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_COMPILE_FAILED,
            message=msg,
            hint="Check symbol and separator settings for unusual characters",
        )

    @staticmethod
    def locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Locale code not known to CLDR.

        Args:
            locale_code: The requested locale code
            reason: Error text reported by Babel

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale identifier '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a BCP-47 or POSIX locale code such as 'en-US' or 'de_DE'",
        )

    @staticmethod
    def locale_currency_unknown(locale_code: str) -> Diagnostic:
        """Locale has no territory currency to default to.

        Args:
            locale_code: The requested locale code

        Returns:
            Diagnostic for LOCALE_CURRENCY_UNKNOWN
        """
        msg = f"Cannot determine a currency for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_CURRENCY_UNKNOWN,
            message=msg,
            hint="Pass currency= explicitly or use a locale with a territory",
        )
