"""Diagnostic system for currency validation.

Provides structured error diagnostics with codes and hints.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import CurrencyValidatorError, FormatConfigurationError, LocaleFormatError
from .templates import ErrorTemplate

__all__ = [
    "CurrencyValidatorError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "FormatConfigurationError",
    "LocaleFormatError",
]
