"""YAML loading and saving utilities for fleet records."""

import uuid
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import yaml

from .driver import Driver
from .fleet import Fleet
from .operational_cost import OperationalCost
from .trip import Trip
from .vehicle import Vehicle

PathLike = Union[str, Path]

SECTIONS = ("vehicles", "drivers", "trips", "operationalCosts")

# (attribute, YAML key) pairs for each record type
VEHICLE_FIELDS = [
    ("id", "id"),
    ("vehicle_number", "vehicleNumber"),
    ("emi", "emi"),
    ("insurance", "insurance"),
    ("tax", "tax"),
    ("pucc", "pucc"),
    ("permit", "permit"),
    ("created_at", "createdAt"),
]
DRIVER_FIELDS = [
    ("id", "id"),
    ("name", "name"),
    ("license_no", "licenseNo"),
    ("contact_no", "contactNo"),
    ("created_at", "createdAt"),
]
TRIP_FIELDS = [
    ("id", "id"),
    ("vehicle_id", "vehicleId"),
    ("driver_id", "driverId"),
    ("vehicle_number", "vehicleNumber"),
    ("driver_name", "driverName"),
    ("date", "date"),
    ("from_location", "fromLocation"),
    ("to_location", "toLocation"),
    ("fuel_liters", "fuelLiters"),
    ("fuel", "fuel"),
    ("bata", "bata"),
    ("toll", "toll"),
    ("rto", "rto"),
    ("misc", "misc"),
    ("hire", "hire"),
    ("created_at", "createdAt"),
]
OPERATIONAL_COST_FIELDS = [
    ("id", "id"),
    ("vehicle_id", "vehicleId"),
    ("maintenance_charge", "maintenanceCharge"),
    ("notes", "notes"),
    ("created_at", "createdAt"),
]


def _to_dict(record: Any, fields) -> Dict[str, Any]:
    """Serialize a record to the YAML dict format, omitting None values."""
    d: Dict[str, Any] = {}
    for attr, key in fields:
        value = getattr(record, attr)
        if value is not None:
            d[key] = value
    return d


def _plain(value: Any) -> Any:
    # Unquoted YAML dates load as date/datetime objects
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def _from_dict(cls: Callable, dct: Dict[str, Any], fields) -> Any:
    """Build a record from its YAML dict, missing keys become None."""
    return cls(**{attr: _plain(dct.get(key)) for attr, key in fields})


def _vehicle_from_dict(dct: Dict[str, Any]) -> Vehicle:
    return _from_dict(Vehicle, dct, VEHICLE_FIELDS)


def _driver_from_dict(dct: Dict[str, Any]) -> Driver:
    return _from_dict(Driver, dct, DRIVER_FIELDS)


def _trip_from_dict(dct: Dict[str, Any]) -> Trip:
    return _from_dict(Trip, dct, TRIP_FIELDS)


def _operational_cost_from_dict(dct: Dict[str, Any]) -> OperationalCost:
    return _from_dict(OperationalCost, dct, OPERATIONAL_COST_FIELDS)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def _read_raw(filename: PathLike) -> Dict[str, Any]:
    """Load the raw YAML data (not parsed into objects)."""
    with open(filename, "r") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader) or {}
    for section in SECTIONS:
        if data.get(section) is None:
            data[section] = []
        for dct in data[section]:
            for key, value in dct.items():
                dct[key] = _plain(value)
    return data


def _write_raw(filename: PathLike, data: Dict[str, Any]) -> None:
    with open(filename, "w") as fp:
        yaml.dump(
            data,
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )


def _find_index(records: List[Dict[str, Any]], record_id: str, label: str) -> int:
    for index, dct in enumerate(records):
        if dct.get("id") == record_id:
            return index
    raise KeyError(f"{label} '{record_id}' not found")


def _add_record(filename: PathLike, section: str, record: Any, fields) -> Any:
    """
    Append a record to one section of a fleet YAML file.

    Assigns an id and created_at timestamp when the record has none,
    and returns the record.
    """
    data = _read_raw(filename)
    if record.id is None:
        record.id = str(uuid.uuid4())
    if record.created_at is None:
        record.created_at = _now()
    data[section].append(_to_dict(record, fields))
    _write_raw(filename, data)
    return record


def _update_record(
    filename: PathLike, section: str, record_id: str, record: Any, fields, label: str
) -> Any:
    """
    Replace the record with the given id.

    The stored id and created_at are kept; everything else comes from
    the new record.
    """
    data = _read_raw(filename)
    records = data[section]
    index = _find_index(records, record_id, label)

    record.id = record_id
    record.created_at = records[index].get("createdAt")
    records[index] = _to_dict(record, fields)

    _write_raw(filename, data)
    return record


def _delete_record(filename: PathLike, section: str, record_id: str, label: str) -> None:
    data = _read_raw(filename)
    records = data[section]
    del records[_find_index(records, record_id, label)]
    _write_raw(filename, data)


def create_fleet_file(filename: PathLike) -> None:
    """Create a new, empty fleet YAML file (parent directories included)."""
    path = Path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    _write_raw(path, {section: [] for section in SECTIONS})


def load_fleet(filename: PathLike) -> Fleet:
    """Load every record from a fleet YAML file into one snapshot."""
    data = _read_raw(filename)
    return Fleet(
        vehicles=[_vehicle_from_dict(d) for d in data["vehicles"]],
        drivers=[_driver_from_dict(d) for d in data["drivers"]],
        trips=[_trip_from_dict(d) for d in data["trips"]],
        operational_costs=[
            _operational_cost_from_dict(d) for d in data["operationalCosts"]
        ],
    )


# =============================================================================
# Vehicles
# =============================================================================


def add_vehicle(filename: PathLike, vehicle: Vehicle) -> Vehicle:
    return _add_record(filename, "vehicles", vehicle, VEHICLE_FIELDS)


def update_vehicle(filename: PathLike, vehicle_id: str, vehicle: Vehicle) -> Vehicle:
    return _update_record(
        filename, "vehicles", vehicle_id, vehicle, VEHICLE_FIELDS, "Vehicle"
    )


def delete_vehicle(filename: PathLike, vehicle_id: str) -> None:
    """Remove a vehicle. Its trips and costs are left in place."""
    _delete_record(filename, "vehicles", vehicle_id, "Vehicle")


# =============================================================================
# Drivers
# =============================================================================


def add_driver(filename: PathLike, driver: Driver) -> Driver:
    return _add_record(filename, "drivers", driver, DRIVER_FIELDS)


def update_driver(filename: PathLike, driver_id: str, driver: Driver) -> Driver:
    return _update_record(
        filename, "drivers", driver_id, driver, DRIVER_FIELDS, "Driver"
    )


def delete_driver(filename: PathLike, driver_id: str) -> None:
    _delete_record(filename, "drivers", driver_id, "Driver")


# =============================================================================
# Trips
# =============================================================================


def add_trip(filename: PathLike, trip: Trip) -> Trip:
    return _add_record(filename, "trips", trip, TRIP_FIELDS)


def update_trip(filename: PathLike, trip_id: str, trip: Trip) -> Trip:
    return _update_record(filename, "trips", trip_id, trip, TRIP_FIELDS, "Trip")


def delete_trip(filename: PathLike, trip_id: str) -> None:
    _delete_record(filename, "trips", trip_id, "Trip")


# =============================================================================
# Operational costs
# =============================================================================


def add_operational_cost(filename: PathLike, cost: OperationalCost) -> OperationalCost:
    return _add_record(filename, "operationalCosts", cost, OPERATIONAL_COST_FIELDS)


def update_operational_cost(
    filename: PathLike, cost_id: str, cost: OperationalCost
) -> OperationalCost:
    return _update_record(
        filename,
        "operationalCosts",
        cost_id,
        cost,
        OPERATIONAL_COST_FIELDS,
        "Operational cost",
    )


def delete_operational_cost(filename: PathLike, cost_id: str) -> None:
    _delete_record(filename, "operationalCosts", cost_id, "Operational cost")


def delete_record(filename: PathLike, kind: str, record_id: str) -> None:
    """Delete by kind name: vehicle, driver, trip or cost."""
    deleters: Dict[str, Callable[[PathLike, str], None]] = {
        "vehicle": delete_vehicle,
        "driver": delete_driver,
        "trip": delete_trip,
        "cost": delete_operational_cost,
    }
    if kind not in deleters:
        raise ValueError(f"Unknown record kind '{kind}'")
    deleters[kind](filename, record_id)
