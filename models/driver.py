"""Driver class."""
from typing import Optional


class Driver:
    """A driver who can be assigned to trips."""

    def __init__(
            self,
            name: str,
            license_no: Optional[str] = None,
            contact_no: Optional[str] = None,
            id: Optional[str] = None,
            created_at: Optional[str] = None,
    ):
        self.id = id
        self.name = name
        self.license_no = license_no
        self.contact_no = contact_no
        self.created_at = created_at

    def __repr__(self) -> str:
        return f"Driver({self.name!r}, id={self.id!r})"
