"""Vehicle class for registered fleet vehicles."""

from typing import Optional

from .calculations import sum_amounts


class Vehicle:
    """A registered vehicle and its fixed monthly costs."""

    def __init__(
        self,
        vehicle_number: str,
        emi: Optional[float] = None,
        insurance: Optional[float] = None,
        tax: Optional[float] = None,
        pucc: Optional[float] = None,
        permit: Optional[float] = None,
        id: Optional[str] = None,
        created_at: Optional[str] = None,
    ):
        self.id = id
        self.vehicle_number = vehicle_number
        self.emi = emi
        self.insurance = insurance
        self.tax = tax
        self.pucc = pucc
        self.permit = permit
        self.created_at = created_at

    @property
    def fixed_cost(self) -> float:
        """EMI + insurance + tax + PUCC + permit, missing fields as zero."""
        return sum_amounts(
            [self.emi, self.insurance, self.tax, self.pucc, self.permit]
        )

    def __repr__(self) -> str:
        return f"Vehicle({self.vehicle_number!r}, id={self.id!r})"
