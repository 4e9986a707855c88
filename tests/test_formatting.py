#!/usr/bin/env python3
"""Tests for display formatting."""

from models.formatting import CURRENCY, format_amount, format_liters, format_profit, truncate


class TestFormatAmount:
    """Tests for format_amount."""

    def test_formats_number(self):
        assert format_amount(1234.5) == f"{CURRENCY}1,234.50"
        assert format_amount(0) == f"{CURRENCY}0.00"

    def test_none_returns_dash(self):
        assert format_amount(None) == "-"


class TestFormatProfit:
    """Tests for format_profit."""

    def test_positive_has_plus(self):
        assert format_profit(7000) == f"+{CURRENCY}7,000.00"

    def test_zero_has_plus(self):
        assert format_profit(0) == f"+{CURRENCY}0.00"

    def test_negative(self):
        assert format_profit(-500) == f"-{CURRENCY}500.00"


class TestFormatLiters:
    """Tests for format_liters."""

    def test_formats(self):
        assert format_liters(40.5) == "40.5 L"
        assert format_liters(1200) == "1,200.0 L"

    def test_none(self):
        assert format_liters(None) == "-"


class TestTruncate:
    """Tests for truncate."""

    def test_short_text_unchanged(self):
        assert truncate("short") == "short"

    def test_exact_length_unchanged(self):
        text = "a" * 30
        assert truncate(text) == text

    def test_long_text_truncated(self):
        text = "a" * 50
        result = truncate(text)
        assert len(result) == 30
        assert result.endswith("...")

    def test_custom_max_len(self):
        assert truncate("hello world", max_len=8) == "hello..."

    def test_none_returns_dash(self):
        assert truncate(None) == "-"
