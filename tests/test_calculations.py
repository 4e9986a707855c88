#!/usr/bin/env python3
"""Tests for calculation helper functions."""
from models import amount, sum_amounts, check_profit_status, ProfitStatus


class TestAmount:
    """Tests for amount coercion."""

    def test_numbers_pass_through(self):
        assert amount(5000) == 5000.0
        assert amount(12.5) == 12.5
        assert amount(0) == 0.0

    def test_none_is_zero(self):
        """Missing fields contribute nothing."""
        assert amount(None) == 0.0

    def test_numeric_strings_are_parsed(self):
        assert amount("250") == 250.0

    def test_garbage_is_zero(self):
        """Non-numeric values count as zero instead of raising."""
        assert amount("n/a") == 0.0
        assert amount("") == 0.0
        assert amount([1, 2]) == 0.0

    def test_nan_is_zero(self):
        assert amount(float("nan")) == 0.0


class TestSumAmounts:
    """Tests for sum_amounts."""

    def test_sums_with_missing_values(self):
        assert sum_amounts([100, None, 50, "x"]) == 150.0

    def test_empty_is_zero(self):
        assert sum_amounts([]) == 0.0

    def test_accepts_generators(self):
        assert sum_amounts(x for x in (1, 2, 3)) == 6.0


class TestCheckProfitStatus:
    """Tests for check_profit_status."""

    def test_profit(self):
        assert check_profit_status(0.01) == ProfitStatus.PROFIT
        assert check_profit_status(7000) == ProfitStatus.PROFIT

    def test_loss(self):
        assert check_profit_status(-500) == ProfitStatus.LOSS

    def test_zero_is_break_even(self):
        """Exactly zero is neither profitable nor losing."""
        assert check_profit_status(0) == ProfitStatus.BREAK_EVEN
        assert check_profit_status(0.0) == ProfitStatus.BREAK_EVEN
