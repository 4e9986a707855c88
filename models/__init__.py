"""
Fleet profitability tracking models.

This package provides data models and calculations for a vehicle fleet:
- Vehicle, Driver, Trip, OperationalCost: the recorded entities
- ProfitStatus: Profit / break-even / loss classification
- ProfitCalculation, FleetSummary, ProfitReport: Calculated figures
- Fleet: A loaded snapshot of all records
- calculate_fleet_profit and friends: Pure profit aggregation
- loader: YAML-backed record store
"""

from .status import ProfitStatus
from .vehicle import Vehicle
from .driver import Driver
from .trip import Trip
from .operational_cost import OperationalCost
from .profit_calculation import ProfitCalculation, FleetSummary, ProfitReport
from .calculations import amount, sum_amounts, check_profit_status
from .profit import (
    calculate_profit,
    calculate_fleet_profit,
    summarize_profits,
    build_profit_report,
)
from .rankings import (
    loss_leaders,
    least_profitable,
    highest_maintenance,
    highest_fuel,
    latest_submissions,
)
from .fleet import Fleet
from .loader import (
    create_fleet_file,
    load_fleet,
    add_vehicle,
    update_vehicle,
    delete_vehicle,
    add_driver,
    update_driver,
    delete_driver,
    add_trip,
    update_trip,
    delete_trip,
    add_operational_cost,
    update_operational_cost,
    delete_operational_cost,
    delete_record,
)

__all__ = [
    "ProfitStatus",
    "Vehicle",
    "Driver",
    "Trip",
    "OperationalCost",
    "ProfitCalculation",
    "FleetSummary",
    "ProfitReport",
    "amount",
    "sum_amounts",
    "check_profit_status",
    "calculate_profit",
    "calculate_fleet_profit",
    "summarize_profits",
    "build_profit_report",
    "loss_leaders",
    "least_profitable",
    "highest_maintenance",
    "highest_fuel",
    "latest_submissions",
    "Fleet",
    "create_fleet_file",
    "load_fleet",
    "add_vehicle",
    "update_vehicle",
    "delete_vehicle",
    "add_driver",
    "update_driver",
    "delete_driver",
    "add_trip",
    "update_trip",
    "delete_trip",
    "add_operational_cost",
    "update_operational_cost",
    "delete_operational_cost",
    "delete_record",
]
