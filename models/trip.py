"""Trip class for hire runs and their variable costs."""
from typing import Optional

from .calculations import amount, sum_amounts


class Trip:
    """A single hire run by one vehicle and one driver."""

    def __init__(
            self,
            vehicle_id: str,
            driver_id: str,
            date: str,
            from_location: str,
            to_location: str,
            fuel_liters: Optional[float] = None,
            fuel: Optional[float] = None,
            bata: Optional[float] = None,
            toll: Optional[float] = None,
            rto: Optional[float] = None,
            misc: Optional[float] = None,
            hire: Optional[float] = None,
            vehicle_number: Optional[str] = None,
            driver_name: Optional[str] = None,
            id: Optional[str] = None,
            created_at: Optional[str] = None,
    ):
        self.id = id
        self.vehicle_id = vehicle_id
        self.driver_id = driver_id
        self.vehicle_number = vehicle_number
        self.driver_name = driver_name
        self.date = date
        self.from_location = from_location
        self.to_location = to_location
        self.fuel_liters = fuel_liters
        self.fuel = fuel
        self.bata = bata
        self.toll = toll
        self.rto = rto
        self.misc = misc
        self.hire = hire
        self.created_at = created_at

    @property
    def expense(self) -> float:
        """Variable trip cost: fuel + bata + toll + RTO + misc."""
        return sum_amounts([self.fuel, self.bata, self.toll, self.rto, self.misc])

    @property
    def balance(self) -> float:
        """Hire left over after this trip's own expenses."""
        return amount(self.hire) - self.expense

    @property
    def route(self) -> str:
        return f"{self.from_location} -> {self.to_location}"

    def __repr__(self) -> str:
        return f"Trip({self.date!r}, {self.route!r}, id={self.id!r})"
