"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for configuration failures
and input rejections.

Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (FormatOptions that cannot yield a grammar)
        2000-2999: Input rejections (guard checks; surfaced in logs only)
        3000-3999: Locale errors (CLDR-derived options)
    """

    # Configuration errors (1000-1999)
    DIGITS_AFTER_DECIMAL_EMPTY = 1001
    DIGITS_AFTER_DECIMAL_INVALID = 1002
    SEPARATOR_INVALID = 1003
    GRAMMAR_COMPILE_FAILED = 1004
    SYMBOL_INVALID = 1005

    # Input rejections (2000-2999)
    INPUT_EMPTY = 2001
    INPUT_OUTER_SPACE = 2002
    INPUT_SPACED_SIGN = 2003
    INPUT_NO_DIGITS = 2004
    INPUT_SPACE_AFTER_SYMBOL = 2005
    INPUT_SPACED_SYMBOL_SIGN = 2006
    INPUT_TRAILING_SPACE = 2007
    INPUT_GRAMMAR_MISMATCH = 2008

    # Locale errors (3000-3999)
    LOCALE_UNKNOWN = 3001
    LOCALE_CURRENCY_UNKNOWN = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        field: FormatOptions field that caused the error (configuration errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    field: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[DIGITS_AFTER_DECIMAL_EMPTY]: digits_after_decimal must not be empty
              = field: digits_after_decimal
              = help: Pass at least one fractional digit count, e.g. (2,)

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape_control(self.message)}"]
        if self.field is not None:
            lines.append(f"  = field: {self.field}")
        if self.hint is not None:
            lines.append(f"  = help: {_escape_control(self.hint)}")
        return "\n".join(lines)


def _escape_control(text: str) -> str:
    """Escape control characters so user input cannot forge log lines."""
    return "".join(
        ch if ch.isprintable() or ch == " " else ch.encode("unicode_escape").decode("ascii")
        for ch in text
    )
