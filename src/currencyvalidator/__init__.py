"""currencyvalidator - Configurable validation of monetary amount strings.

Decides whether a piece of text is a syntactically valid amount for a
given currency format: symbol placement, grouping and decimal separators,
sign conventions, fractional digit counts and spacing rules. The matching
grammar is synthesized from the format description at call time.

Public API:
    is_currency - Validate text against a FormatOptions (never raises)
    FormatOptions - Immutable currency format description
    PRESETS - Named regional formats

Exceptions:
    CurrencyValidatorError - Base exception class
    FormatConfigurationError - FormatOptions that cannot yield a grammar
    LocaleFormatError - Unknown locale/currency for FormatOptions.for_locale

Submodules:
    currencyvalidator.validation - Options, grammar, guards, presets
    currencyvalidator.diagnostics - Error types and diagnostic codes
"""

from .diagnostics import CurrencyValidatorError, FormatConfigurationError, LocaleFormatError
from .validation import PRESETS, FormatOptions, is_currency

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("currencyvalidator")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "PRESETS",
    "CurrencyValidatorError",
    "FormatConfigurationError",
    "FormatOptions",
    "LocaleFormatError",
    "__version__",
    "is_currency",
]
