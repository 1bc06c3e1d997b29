"""Tests for the named regional format presets."""

from __future__ import annotations

import pytest

from currencyvalidator import PRESETS, FormatOptions, is_currency
from currencyvalidator.validation import presets


class TestPresetRegistry:
    """PRESETS maps names to immutable FormatOptions."""

    def test_names(self) -> None:
        """Every regional preset is registered."""
        assert set(PRESETS) == {
            "us_dollar",
            "parenthesized_dollar",
            "euro_italian",
            "euro_greek",
            "danish_krone",
            "chinese_yuan",
            "south_african_rand",
            "brazilian_real",
        }

    def test_values_are_module_constants(self) -> None:
        """Registry entries are the module-level constants."""
        for name, options in PRESETS.items():
            assert getattr(presets, name.upper()) is options

    def test_read_only(self) -> None:
        """The registry cannot be modified."""
        with pytest.raises(TypeError):
            PRESETS["custom"] = FormatOptions()  # type: ignore[index]

    def test_us_dollar_is_default(self) -> None:
        """The US dollar preset equals the default options."""
        assert PRESETS["us_dollar"] == FormatOptions()


class TestPresetSamples:
    """One typical amount per preset, positive and negative."""

    @pytest.mark.parametrize(
        ("name", "positive", "negative"),
        [
            ("us_dollar", "$1,234.56", "-$1,234.56"),
            ("parenthesized_dollar", "$1,234.56", "($1,234.56)"),
            ("euro_italian", "€ 1.234,56", "-€ 1.234,56"),
            ("euro_greek", "1.234,56 €", "-1.234,56 €"),
            ("danish_krone", "kr. 1.234,56", "kr. -1.234,56"),
            ("chinese_yuan", "¥1,234.56", "¥-1,234.56"),
            ("south_african_rand", "R 1 234,56", "R-1 234,56"),
            ("brazilian_real", "R$ 1.234,56", "-R$ 1.234,56"),
        ],
    )
    def test_sample(self, name: str, positive: str, negative: str) -> None:
        """Preset accepts its own positive and negative notation."""
        options = PRESETS[name]
        assert is_currency(positive, options) is True
        assert is_currency(negative, options) is True

    def test_refinement(self) -> None:
        """Presets are refined with setters without changing the original."""
        strict = presets.BRAZILIAN_REAL.with_allow_negatives(False)
        assert is_currency("-R$ 1.234,56", strict) is False
        assert is_currency("-R$ 1.234,56", presets.BRAZILIAN_REAL) is True
