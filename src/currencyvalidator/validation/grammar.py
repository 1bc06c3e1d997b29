"""Currency grammar synthesis.

Turns a FormatOptions value into a regular expression matching exactly the
amount strings that format accepts. The pattern is assembled from
fragments in a fixed order; later steps wrap or prefix what earlier steps
produced:

    1. fractional digit-count alternation      (\\d{1}|\\d{3})
    2. symbol fragment                         (?:\\$)?
    3. whole amount                            (?:0|[1-9]\\d*|[1-9]\\d{0,2}(?:,\\d{3})*)?
    4. optional decimal part                   (?:\\.(?:\\d{2}))?
    5. sign before/after the digits
    6. spacing modifier (placeholder, space after symbol, space after digits)
    7. symbol before or after the amount
    8. parenthesized negatives, or the default leading sign
    9. anchoring to the whole string

The grammar uses no lookaround. Inputs the grammar alone cannot exclude
are filtered beforehand by guards.py.

Compiled grammars are memoized per FormatOptions in GrammarCache.

Python 3.11+.
"""

from __future__ import annotations

import logging
import re
import threading
from typing import TYPE_CHECKING, ClassVar

from currencyvalidator.constants import (
    CLOSE_PAREN,
    MAX_GRAMMAR_CACHE_SIZE,
    NEGATIVE_SIGN,
    OPEN_PAREN,
    SPACE,
)
from currencyvalidator.diagnostics import ErrorTemplate, FormatConfigurationError

if TYPE_CHECKING:
    from .options import FormatOptions

__all__ = [
    "GrammarCache",
    "build_currency_pattern",
    "check_option_types",
    "compile_currency_grammar",
    "escape_separator",
]

logger = logging.getLogger(__name__)

_SIGN = re.escape(NEGATIVE_SIGN) + "?"
_SPACE = re.escape(SPACE)
_OPEN_PAREN = re.escape(OPEN_PAREN)
_CLOSE_PAREN = re.escape(CLOSE_PAREN)

# Amounts are ASCII digits; the symbol and separators are matched literally.
_GRAMMAR_FLAGS = re.ASCII


def escape_separator(separator: str) -> str:
    """Escape a separator character for literal use in the grammar.

    Alphanumeric characters and underscore are inserted as-is; every other
    character is backslash-escaped, since nearly all of them are (or may
    become) pattern metacharacters.

    Args:
        separator: A single separator character

    Returns:
        Pattern source matching the separator literally

    Example:
        >>> escape_separator(".")
        '\\\\.'
        >>> escape_separator("_")
        '_'
    """
    if separator.isalnum() or separator == "_":
        return separator
    return "\\" + separator


def check_option_types(options: FormatOptions) -> None:
    """Reject symbol and digit-count values no guard or grammar step can read.

    Runs ahead of the guard checks, which operate on the symbol directly.

    Raises:
        FormatConfigurationError: If the symbol is not a string or
            digits_after_decimal is not a sequence of counts
    """
    if not isinstance(options.symbol, str):
        raise FormatConfigurationError(ErrorTemplate.symbol_invalid(options.symbol))
    if not isinstance(options.digits_after_decimal, tuple):
        raise FormatConfigurationError(
            ErrorTemplate.digits_after_decimal_invalid(options.digits_after_decimal)
        )


def _check_separator(field_name: str, separator: object) -> str:
    if not isinstance(separator, str) or len(separator) != 1:
        raise FormatConfigurationError(ErrorTemplate.separator_invalid(field_name, separator))
    return separator


def _decimal_digits_alternation(digits_after_decimal: tuple[int, ...]) -> str:
    if not digits_after_decimal:
        raise FormatConfigurationError(ErrorTemplate.digits_after_decimal_empty())
    alternatives: list[str] = []
    for count in digits_after_decimal:
        # bool is an int subclass; True is not a digit count
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise FormatConfigurationError(ErrorTemplate.digits_after_decimal_invalid(count))
        alternatives.append(rf"\d{{{count}}}")
    return "|".join(alternatives)


def build_currency_pattern(options: FormatOptions) -> str:
    """Synthesize the anchored pattern source for a currency format.

    Deterministic: equal options always produce the identical string.

    Args:
        options: Currency format rules

    Returns:
        Regular expression source anchored at both ends (\\A ... \\Z)

    Raises:
        FormatConfigurationError: If digits_after_decimal is empty or holds
            a non-positive count, a separator is not a single character, or
            the symbol is not a string

    Example:
        >>> from currencyvalidator import FormatOptions
        >>> bool(re.match(build_currency_pattern(FormatOptions()), "-$1,234.56"))
        True
    """
    check_option_types(options)
    decimal_digits = _decimal_digits_alternation(options.digits_after_decimal)
    thousands = escape_separator(
        _check_separator("thousands_separator", options.thousands_separator)
    )
    decimal = escape_separator(_check_separator("decimal_separator", options.decimal_separator))

    if options.has_ambiguous_separators:
        logger.warning(
            "Thousands and decimal separators are both %r; grouping and fraction "
            "cannot be told apart in this format",
            options.thousands_separator,
        )

    symbol = f"(?:{re.escape(options.symbol)})" + ("" if options.require_symbol else "?")

    whole_amounts = (
        "0",
        r"[1-9]\d*",
        rf"[1-9]\d{{0,2}}(?:{thousands}\d{{3}})*",
    )
    # The whole part may be omitted entirely (".99").
    pattern = "(?:" + "|".join(whole_amounts) + ")?"

    if options.allow_decimal or options.require_decimal:
        pattern += f"(?:{decimal}(?:{decimal_digits}))" + ("" if options.require_decimal else "?")

    if options.allow_negatives and not options.parens_for_negatives:
        if options.negative_sign_after_digits:
            pattern += _SIGN
        elif options.negative_sign_before_digits:
            pattern = _SIGN + pattern

    # Only the first applicable spacing rule is applied.
    if options.allow_negative_sign_placeholder:
        pattern = f"(?:{_SPACE}?{_SIGN})?" + pattern
    elif options.allow_space_after_symbol:
        pattern = f"{_SPACE}?" + pattern
    elif options.allow_space_after_digits:
        pattern += f"{_SPACE}?"

    if options.symbol_after_digits:
        pattern += symbol
    else:
        pattern = symbol + pattern

    if options.allow_negatives:
        if options.parens_for_negatives:
            pattern = f"(?:{_OPEN_PAREN}{pattern}{_CLOSE_PAREN}|{pattern})"
        elif not (options.negative_sign_before_digits or options.negative_sign_after_digits):
            pattern = _SIGN + pattern

    return rf"\A{pattern}\Z"


def compile_currency_grammar(options: FormatOptions) -> re.Pattern[str]:
    """Build and compile the grammar for a currency format (uncached).

    Args:
        options: Currency format rules

    Returns:
        Compiled, fully anchored pattern

    Raises:
        FormatConfigurationError: If the options cannot produce a grammar
    """
    source = build_currency_pattern(options)
    try:
        return re.compile(source, _GRAMMAR_FLAGS)
    except re.error as e:
        raise FormatConfigurationError(
            ErrorTemplate.grammar_compile_failed(source, str(e))
        ) from e


class GrammarCache:
    """Process-wide, append-only cache of compiled currency grammars.

    Keyed by FormatOptions equality. Entries are never replaced or evicted:
    once MAX_GRAMMAR_CACHE_SIZE grammars are stored, further formats are
    compiled on every call but not retained. Configuration errors are
    never cached.

    Thread Safety:
        Lookups and insertions are guarded by a lock with a double-check on
        insert, so concurrent callers with equal options share one compiled
        pattern.

    Example:
        >>> from currencyvalidator import FormatOptions
        >>> GrammarCache.clear()
        >>> grammar = GrammarCache.get(FormatOptions())
        >>> GrammarCache.get(FormatOptions()) is grammar
        True
        >>> GrammarCache.size()
        1
    """

    _cache: ClassVar[dict[FormatOptions, re.Pattern[str]]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def get(cls, options: FormatOptions) -> re.Pattern[str]:
        """Return the compiled grammar for options, compiling on first use.

        Args:
            options: Currency format rules

        Returns:
            Compiled, fully anchored pattern

        Raises:
            FormatConfigurationError: If the options cannot produce a grammar
        """
        try:
            hash(options)
        except TypeError:
            # Unhashable field contents; compile_currency_grammar rejects them.
            return compile_currency_grammar(options)

        with cls._lock:
            cached = cls._cache.get(options)
        if cached is not None:
            return cached

        grammar = compile_currency_grammar(options)

        with cls._lock:
            existing = cls._cache.get(options)
            if existing is not None:
                return existing
            if len(cls._cache) < MAX_GRAMMAR_CACHE_SIZE:
                cls._cache[options] = grammar
                logger.debug("Compiled currency grammar %s", grammar.pattern)
            else:
                logger.debug("Grammar cache full; using uncached grammar %s", grammar.pattern)
        return grammar

    @classmethod
    def clear(cls) -> None:
        """Drop all cached grammars (for tests and memory release)."""
        with cls._lock:
            cls._cache.clear()

    @classmethod
    def size(cls) -> int:
        """Get current number of cached grammars."""
        with cls._lock:
            return len(cls._cache)

    @classmethod
    def info(cls) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with ``size`` (cached grammars) and ``max_size``
        """
        with cls._lock:
            return {"size": len(cls._cache), "max_size": MAX_GRAMMAR_CACHE_SIZE}
