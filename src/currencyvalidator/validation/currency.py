"""Currency string validation.

API: is_currency() returns bool. It NEVER raises: misconfigured options
and rejected inputs both come back as False.

Pipeline:
    option type check -> guard checks (fail fast) -> grammar for options
    (cached) -> full match

Thread-safe. FormatOptions is immutable and the grammar cache is
lock-guarded and append-only.

Python 3.11+.
"""

from __future__ import annotations

import logging

from currencyvalidator.diagnostics import DiagnosticCode, FormatConfigurationError

from .grammar import GrammarCache, check_option_types
from .guards import first_failed_guard
from .options import FormatOptions

__all__ = ["DEFAULT_OPTIONS", "is_currency"]

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = FormatOptions()


def is_currency(text: str, options: FormatOptions | None = None) -> bool:
    """Check whether text is a syntactically valid monetary amount.

    Runs the guard checks, then matches the whole text against the grammar
    synthesized from options. No value is extracted; only syntax is judged.

    Args:
        text: Candidate currency string
        options: Currency format rules (default: US dollar format)

    Returns:
        True if text is a valid amount in the given format. False if it is
        not, or if options cannot produce a grammar (e.g. an empty
        digits_after_decimal).

    Example:
        >>> is_currency("$10,123.45")
        True
        >>> is_currency("$ 32.50")
        False
        >>> euro = FormatOptions(symbol="€", thousands_separator=".", decimal_separator=",")
        >>> is_currency("€1.234,56", euro)
        True
    """
    opts = DEFAULT_OPTIONS if options is None else options

    try:
        check_option_types(opts)
    except FormatConfigurationError as e:
        _log_configuration_error(text, e)
        return False

    failed = first_failed_guard(text, opts)
    if failed is not None:
        logger.debug("Rejected %r: %s", text, failed.name)
        return False

    try:
        grammar = GrammarCache.get(opts)
    except FormatConfigurationError as e:
        _log_configuration_error(text, e)
        return False

    if grammar.match(text) is None:
        logger.debug("Rejected %r: %s", text, DiagnosticCode.INPUT_GRAMMAR_MISMATCH.name)
        return False
    return True


def _log_configuration_error(text: str, error: FormatConfigurationError) -> None:
    logger.warning("Currency format rejected, treating %r as invalid: %s", text, error)
