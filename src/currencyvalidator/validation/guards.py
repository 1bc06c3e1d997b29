"""Procedural pre-checks run before grammar matching.

The synthesized grammar uses no lookaround, so a few rules are easier to
state (and read) as plain string predicates. Each guard is a pure, total
function ``(text, options) -> bool`` that returns True when the text is
acceptable and False when it must be rejected.

GUARD_CHECKS lists the guards in evaluation order; validation stops at the
first failure:

    1. not_empty                          ""
    2. no_outer_space                     " 1.00", "1.00 "
    3. no_leading_spaced_sign             "- 1.00"
    4. has_digit                          "$", "-", "$-,."
    5. no_space_after_symbol              "$ 1.00" (unless spacing is allowed)
    6. no_spaced_symbol_sign              "R -10" (placeholder formats)
    7. no_trailing_space_after_amount     "(1.00 )", "1.00 $"

Python 3.11+.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NamedTuple

from currencyvalidator.constants import CLOSE_PAREN, NEGATIVE_SIGN, SPACE
from currencyvalidator.diagnostics import DiagnosticCode

if TYPE_CHECKING:
    from .options import FormatOptions

__all__ = [
    "GUARD_CHECKS",
    "GuardCheck",
    "first_failed_guard",
    "has_digit",
    "no_leading_spaced_sign",
    "no_outer_space",
    "no_space_after_symbol",
    "no_spaced_symbol_sign",
    "no_trailing_space_after_amount",
    "not_empty",
    "passes_guard_checks",
]

_ASCII_DIGITS = frozenset("0123456789")


def not_empty(text: str, options: FormatOptions) -> bool:  # noqa: ARG001
    """Reject the empty string."""
    return text != ""


def no_outer_space(text: str, options: FormatOptions) -> bool:  # noqa: ARG001
    """Reject leading or trailing plain spaces."""
    return not (text.startswith(SPACE) or text.endswith(SPACE))


def no_leading_spaced_sign(text: str, options: FormatOptions) -> bool:  # noqa: ARG001
    """Reject a minus sign followed by a space at the start of the text.

    Applies regardless of options. Interior "sign + space" sequences are
    left to the grammar, which only admits them where the format places a
    space after a trailing sign (e.g. "10,03- €").
    """
    return not text.startswith(NEGATIVE_SIGN + SPACE)


def has_digit(text: str, options: FormatOptions) -> bool:  # noqa: ARG001
    """Require at least one ASCII digit."""
    return not _ASCII_DIGITS.isdisjoint(text)


def no_space_after_symbol(text: str, options: FormatOptions) -> bool:
    """Reject "symbol + space" when the format allows no such space.

    Only enforced when neither allow_space_after_symbol nor
    allow_negative_sign_placeholder is set. With an empty symbol every
    space is rejected.
    """
    if options.allow_space_after_symbol or options.allow_negative_sign_placeholder:
        return True
    return options.symbol + SPACE not in text


def no_spaced_symbol_sign(text: str, options: FormatOptions) -> bool:
    """Reject "symbol + space + sign" in placeholder formats.

    With allow_negative_sign_placeholder the space stands in for the sign;
    once a real sign is present the space must go ("R-123", not "R -123").
    Formats that also allow a space after the symbol accept both.
    """
    if not options.allow_negative_sign_placeholder or options.allow_space_after_symbol:
        return True
    return options.symbol + SPACE + NEGATIVE_SIGN not in text


def no_trailing_space_after_amount(text: str, options: FormatOptions) -> bool:
    """Reject an amount followed by a bare space.

    One trailing symbol and then one trailing closing parenthesis are
    stripped first, so "1.00 $" and "(1.00 )" are caught as well as
    "1.00 ". Skipped when allow_space_after_digits or
    allow_negative_sign_placeholder is set.
    """
    if options.allow_space_after_digits or options.allow_negative_sign_placeholder:
        return True
    stripped = text.removesuffix(options.symbol)
    return not stripped.removesuffix(CLOSE_PAREN).endswith(SPACE)


class GuardCheck(NamedTuple):
    """A guard predicate paired with the diagnostic code it reports."""

    code: DiagnosticCode
    predicate: Callable[[str, FormatOptions], bool]


GUARD_CHECKS: tuple[GuardCheck, ...] = (
    GuardCheck(DiagnosticCode.INPUT_EMPTY, not_empty),
    GuardCheck(DiagnosticCode.INPUT_OUTER_SPACE, no_outer_space),
    GuardCheck(DiagnosticCode.INPUT_SPACED_SIGN, no_leading_spaced_sign),
    GuardCheck(DiagnosticCode.INPUT_NO_DIGITS, has_digit),
    GuardCheck(DiagnosticCode.INPUT_SPACE_AFTER_SYMBOL, no_space_after_symbol),
    GuardCheck(DiagnosticCode.INPUT_SPACED_SYMBOL_SIGN, no_spaced_symbol_sign),
    GuardCheck(DiagnosticCode.INPUT_TRAILING_SPACE, no_trailing_space_after_amount),
)


def first_failed_guard(text: str, options: FormatOptions) -> DiagnosticCode | None:
    """Run the guards in order and report the first one that rejects.

    Args:
        text: Candidate currency string
        options: Currency format rules

    Returns:
        Code of the first failing guard, or None if every guard passes

    Example:
        >>> from currencyvalidator import FormatOptions
        >>> first_failed_guard("$ 32.50", FormatOptions())
        <DiagnosticCode.INPUT_SPACE_AFTER_SYMBOL: 2005>
        >>> first_failed_guard("$32.50", FormatOptions()) is None
        True
    """
    for check in GUARD_CHECKS:
        if not check.predicate(text, options):
            return check.code
    return None


def passes_guard_checks(text: str, options: FormatOptions) -> bool:
    """True when no guard rejects the text."""
    return first_failed_guard(text, options) is None
