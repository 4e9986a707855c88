"""
Top-N lists for the analytics dashboard.

All rankings use Python's stable sort, so records with equal keys keep
their input order, and return new lists without touching the input.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar

from dateutil.parser import isoparse

from .profit_calculation import ProfitCalculation

T = TypeVar("T")

DEFAULT_TOP_N = 5

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _top(
    items: Iterable[T],
    key: Callable[[T], Any],
    n: int,
    reverse: bool = False,
    where: Optional[Callable[[T], bool]] = None,
) -> List[T]:
    """Filter, stable-sort and truncate."""
    if n <= 0:
        return []
    selected = [i for i in items if where is None or where(i)]
    return sorted(selected, key=key, reverse=reverse)[:n]


def loss_leaders(
    calculations: Sequence[ProfitCalculation], n: int = DEFAULT_TOP_N
) -> List[ProfitCalculation]:
    """Vehicles running at a loss, biggest loss first."""
    return _top(calculations, lambda c: c.profit, n, where=lambda c: c.profit < 0)


def least_profitable(
    calculations: Sequence[ProfitCalculation], n: int = DEFAULT_TOP_N
) -> List[ProfitCalculation]:
    """Profitable vehicles with the thinnest margin first."""
    return _top(calculations, lambda c: c.profit, n, where=lambda c: c.profit > 0)


def highest_maintenance(
    calculations: Sequence[ProfitCalculation], n: int = DEFAULT_TOP_N
) -> List[ProfitCalculation]:
    """Vehicles with the highest maintenance spend."""
    return _top(
        calculations,
        lambda c: c.maintenance_cost,
        n,
        reverse=True,
        where=lambda c: c.maintenance_cost > 0,
    )


def highest_fuel(
    calculations: Sequence[ProfitCalculation], n: int = DEFAULT_TOP_N
) -> List[ProfitCalculation]:
    """Vehicles with the highest fuel spend across their trips."""
    return _top(
        calculations,
        lambda c: c.fuel_cost,
        n,
        reverse=True,
        where=lambda c: c.fuel_cost > 0,
    )


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp, assuming UTC when no zone is given."""
    if not value:
        return None
    try:
        parsed = isoparse(str(value))
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def latest_submissions(records: Sequence[T], n: int = DEFAULT_TOP_N) -> List[T]:
    """
    Most recently created records first.

    Works for any record with a created_at attribute. Records with a
    missing or unparseable timestamp sort last.
    """
    return _top(
        records,
        lambda r: parse_timestamp(getattr(r, "created_at", None)) or _OLDEST,
        n,
        reverse=True,
    )
