"""ProfitStatus enum for vehicle profitability."""

from enum import Enum


class ProfitStatus(Enum):
    """Profitability categories. Lower value = needs more attention."""

    LOSS = 1
    BREAK_EVEN = 2  # Counted as neither profitable nor losing
    PROFIT = 3
