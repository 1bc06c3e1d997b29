"""currencyvalidator exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic object for rich error
information. None of them escape is_currency(): configuration errors are
converted to a False result at the validator boundary.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic


class CurrencyValidatorError(Exception):
    """Base exception for all currencyvalidator errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CurrencyValidatorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class FormatConfigurationError(CurrencyValidatorError, ValueError):
    """FormatOptions cannot be turned into a matching grammar.

    Raised by the grammar builder, e.g. for an empty digits_after_decimal
    set or a multi-character separator. is_currency() reports these as
    False instead of propagating them.

    Attributes:
        field: Name of the offending FormatOptions field (empty if unknown)
    """

    def __init__(self, message: str | Diagnostic, *, field: str = "") -> None:
        """Initialize FormatConfigurationError.

        Args:
            message: Error message string OR Diagnostic object
            field: Name of the offending FormatOptions field
        """
        super().__init__(message)
        if not field and isinstance(message, Diagnostic) and message.field:
            field = message.field
        self.field = field


class LocaleFormatError(CurrencyValidatorError, ValueError):
    """Locale or currency code cannot be resolved from CLDR data.

    Raised by FormatOptions.for_locale(). Subclasses ValueError so callers
    treating bad locale codes as bad arguments keep working.

    Attributes:
        locale_code: The locale code that was requested
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        """Initialize LocaleFormatError.

        Args:
            message: Error message string OR Diagnostic object
            locale_code: The locale code that was requested
        """
        super().__init__(message)
        self.locale_code = locale_code
