"""Dataclasses for calculated profit figures."""

from dataclasses import dataclass, field
from typing import List

from .calculations import check_profit_status
from .status import ProfitStatus


@dataclass
class ProfitCalculation:
    """Calculated profit information for one vehicle."""

    vehicle_id: str
    vehicle_number: str
    total_hire: float = 0.0
    fixed_cost: float = 0.0
    variable_cost: float = 0.0
    maintenance_cost: float = 0.0
    fuel_cost: float = 0.0
    trip_count: int = 0
    profit: float = 0.0

    @property
    def status(self) -> ProfitStatus:
        return check_profit_status(self.profit)

    @property
    def total_cost(self) -> float:
        return self.fixed_cost + self.variable_cost + self.maintenance_cost


@dataclass
class FleetSummary:
    """Fleet-wide totals derived from per-vehicle calculations."""

    total_profit: float = 0.0
    profitable_count: int = 0
    losing_count: int = 0
    vehicle_count: int = 0

    @property
    def break_even_count(self) -> int:
        return self.vehicle_count - self.profitable_count - self.losing_count


@dataclass
class ProfitReport:
    """Per-vehicle calculations plus the fleet totals they add up to."""

    calculations: List[ProfitCalculation] = field(default_factory=list)
    summary: FleetSummary = field(default_factory=FleetSummary)
