"""OperationalCost class for maintenance charges."""
from typing import Optional


class OperationalCost:
    """A maintenance charge booked against a vehicle."""

    def __init__(
            self,
            vehicle_id: str,
            maintenance_charge: Optional[float] = None,
            notes: Optional[str] = None,
            id: Optional[str] = None,
            created_at: Optional[str] = None,
    ):
        self.id = id
        self.vehicle_id = vehicle_id
        self.maintenance_charge = maintenance_charge
        self.notes = notes
        self.created_at = created_at
