"""Fleet class - a snapshot of every record, plus lookups and reports."""

from datetime import datetime
from typing import List, Optional

from .calculations import amount
from .driver import Driver
from .operational_cost import OperationalCost
from .profit import build_profit_report
from .profit_calculation import ProfitReport
from .rankings import parse_timestamp
from .trip import Trip
from .vehicle import Vehicle


class Fleet:
    """All vehicles, drivers, trips and operational costs loaded together."""

    def __init__(
        self,
        vehicles: Optional[List[Vehicle]] = None,
        drivers: Optional[List[Driver]] = None,
        trips: Optional[List[Trip]] = None,
        operational_costs: Optional[List[OperationalCost]] = None,
    ):
        self.vehicles = vehicles or []
        self.drivers = drivers or []
        self.trips = trips or []
        self.operational_costs = operational_costs or []

    @property
    def last_updated(self) -> Optional[datetime]:
        """Latest created_at across all records, None when empty."""
        stamps = [
            parse_timestamp(r.created_at)
            for r in self.vehicles + self.drivers + self.trips + self.operational_costs
        ]
        stamps = [s for s in stamps if s is not None]
        return max(stamps) if stamps else None

    def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        for vehicle in self.vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None

    def get_driver(self, driver_id: str) -> Optional[Driver]:
        for driver in self.drivers:
            if driver.id == driver_id:
                return driver
        return None

    def find_vehicle(self, ref: str) -> Optional[Vehicle]:
        """Find a vehicle by id, or by registration number (case-insensitive)."""
        vehicle = self.get_vehicle(ref)
        if vehicle is not None:
            return vehicle
        normalized = ref.strip().lower()
        for vehicle in self.vehicles:
            if (vehicle.vehicle_number or "").lower() == normalized:
                return vehicle
        return None

    def find_driver(self, ref: str) -> Optional[Driver]:
        """Find a driver by id, or by name (case-insensitive)."""
        driver = self.get_driver(ref)
        if driver is not None:
            return driver
        normalized = ref.strip().lower()
        for driver in self.drivers:
            if (driver.name or "").lower() == normalized:
                return driver
        return None

    def trips_for_vehicle(self, vehicle_id: str) -> List[Trip]:
        return [t for t in self.trips if t.vehicle_id == vehicle_id]

    def costs_for_vehicle(self, vehicle_id: str) -> List[OperationalCost]:
        return [c for c in self.operational_costs if c.vehicle_id == vehicle_id]

    def vehicle_number_for(self, vehicle_id: str) -> str:
        """Registration for display, falling back to the raw id."""
        vehicle = self.get_vehicle(vehicle_id)
        return vehicle.vehicle_number if vehicle else vehicle_id

    def get_trips_sorted(
        self, sort_by: str = "date", reverse: bool = True
    ) -> List[Trip]:
        """
        Get trips sorted by specified field.

        Args:
            sort_by: "date", "hire", or "vehicle"
            reverse: If True, newest/highest first (default)
        """
        if sort_by == "date":
            return sorted(self.trips, key=lambda t: t.date or "", reverse=reverse)
        elif sort_by == "hire":
            return sorted(self.trips, key=lambda t: amount(t.hire), reverse=reverse)
        elif sort_by == "vehicle":
            return sorted(
                self.trips,
                key=lambda t: (self.vehicle_number_for(t.vehicle_id), t.date or ""),
                reverse=reverse,
            )
        return list(self.trips)

    def profit_report(self) -> ProfitReport:
        """Run the profit aggregation over this snapshot."""
        return build_profit_report(self.vehicles, self.trips, self.operational_costs)
