"""Helper functions for cost and profit calculations."""

import math
from typing import Any, Iterable

from .status import ProfitStatus


def amount(value: Any) -> float:
    """
    Coerce a monetary field to a float.

    Missing (None), non-numeric and NaN values count as zero so a
    half-filled record never breaks a total.
    """
    if value is None:
        return 0.0
    try:
        result = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(result):
        return 0.0
    return result


def sum_amounts(values: Iterable[Any]) -> float:
    """Sum monetary values, treating missing ones as zero."""
    return sum((amount(v) for v in values), 0.0)


def check_profit_status(profit: float) -> ProfitStatus:
    """Classify a profit figure. Exactly zero is break-even."""
    if profit > 0:
        return ProfitStatus.PROFIT
    if profit < 0:
        return ProfitStatus.LOSS
    return ProfitStatus.BREAK_EVEN
