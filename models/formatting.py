"""Display formatting shared by the CLI and the web app."""

import os
from typing import Optional

CURRENCY = os.environ.get("FLEET_CURRENCY", "₹")


def format_amount(value: Optional[float]) -> str:
    """Format an amount for display."""
    return f"{CURRENCY}{value:,.2f}" if value is not None else "-"


def format_profit(value: float) -> str:
    """Format a profit figure with an explicit sign (e.g. '+₹1.00', '-₹5.00')."""
    if value < 0:
        return f"-{CURRENCY}{abs(value):,.2f}"
    return f"+{CURRENCY}{value:,.2f}"


def format_liters(value: Optional[float]) -> str:
    return f"{value:,.1f} L" if value is not None else "-"


def truncate(text: Optional[str], max_len: int = 30) -> str:
    """Truncate text with ellipsis if too long."""
    if text is None:
        return "-"
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
