"""
Profit aggregation over fleet records.

Every function here is pure: it reads the records it is given, returns new
ProfitCalculation/FleetSummary objects and never mutates its inputs. Callers
should pass collections taken from one consistent snapshot (see
models.loader.load_fleet).
"""

from typing import Iterable, List

from .calculations import amount, sum_amounts
from .operational_cost import OperationalCost
from .profit_calculation import FleetSummary, ProfitCalculation, ProfitReport
from .status import ProfitStatus
from .trip import Trip
from .vehicle import Vehicle


def calculate_profit(
    vehicle: Vehicle,
    trips: Iterable[Trip],
    operational_costs: Iterable[OperationalCost],
) -> ProfitCalculation:
    """
    Calculate profit for a single vehicle.

    Logic:
    - fixed cost: the vehicle's EMI + insurance + tax + PUCC + permit
    - variable cost: fuel + bata + toll + RTO + misc over the vehicle's trips
    - maintenance: maintenance charges booked against the vehicle
    - profit = total hire - fixed - variable - maintenance

    Trips and costs for other vehicles are ignored, so the full
    collections can be passed in.
    """
    vehicle_trips = [t for t in trips if t.vehicle_id == vehicle.id]
    maintenance_cost = sum_amounts(
        c.maintenance_charge for c in operational_costs if c.vehicle_id == vehicle.id
    )

    fixed_cost = vehicle.fixed_cost
    variable_cost = sum((t.expense for t in vehicle_trips), 0.0)
    total_hire = sum_amounts(t.hire for t in vehicle_trips)

    return ProfitCalculation(
        vehicle_id=vehicle.id,
        vehicle_number=vehicle.vehicle_number,
        total_hire=total_hire,
        fixed_cost=fixed_cost,
        variable_cost=variable_cost,
        maintenance_cost=maintenance_cost,
        fuel_cost=sum_amounts(t.fuel for t in vehicle_trips),
        trip_count=len(vehicle_trips),
        profit=total_hire - fixed_cost - variable_cost - maintenance_cost,
    )


def calculate_fleet_profit(
    vehicles: Iterable[Vehicle],
    trips: Iterable[Trip],
    operational_costs: Iterable[OperationalCost],
) -> List[ProfitCalculation]:
    """Calculate profit for every vehicle, in input order."""
    # Materialize once; each vehicle scans the full lists
    trips = list(trips)
    operational_costs = list(operational_costs)
    return [calculate_profit(v, trips, operational_costs) for v in vehicles]


def summarize_profits(calculations: Iterable[ProfitCalculation]) -> FleetSummary:
    """
    Roll per-vehicle calculations up into fleet totals.

    A vehicle with profit of exactly zero is counted as neither
    profitable nor losing.
    """
    calculations = list(calculations)
    statuses = [c.status for c in calculations]
    return FleetSummary(
        total_profit=sum((amount(c.profit) for c in calculations), 0.0),
        profitable_count=statuses.count(ProfitStatus.PROFIT),
        losing_count=statuses.count(ProfitStatus.LOSS),
        vehicle_count=len(calculations),
    )


def build_profit_report(
    vehicles: Iterable[Vehicle],
    trips: Iterable[Trip],
    operational_costs: Iterable[OperationalCost],
) -> ProfitReport:
    """Per-vehicle calculations plus fleet totals in one call."""
    calculations = calculate_fleet_profit(vehicles, trips, operational_costs)
    return ProfitReport(
        calculations=calculations, summary=summarize_profits(calculations)
    )
