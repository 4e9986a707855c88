#!/usr/bin/env python3
"""Validate fleet YAML files against the schema."""
import sys
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List

import yaml
from jsonschema import Draft7Validator

SECTIONS = ("vehicles", "drivers", "trips", "operationalCosts")


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path) as f:
        return yaml.safe_load(f)


def find_reference_warnings(data: Dict[str, Any]) -> List[str]:
    """
    Cross-record checks the schema cannot express.

    Orphaned trips and costs are legal (deletes do not cascade) so these
    are reported as warnings, not errors.
    """
    warnings = []
    sections = {s: data.get(s) or [] for s in SECTIONS}

    for section, records in sections.items():
        counts = Counter(r.get("id") for r in records if isinstance(r, dict))
        for record_id, count in counts.items():
            if record_id is not None and count > 1:
                warnings.append(f"Duplicate id in {section}: {record_id}")

    vehicle_ids = {v.get("id") for v in sections["vehicles"] if isinstance(v, dict)}
    driver_ids = {d.get("id") for d in sections["drivers"] if isinstance(d, dict)}

    for index, trip in enumerate(sections["trips"]):
        if not isinstance(trip, dict):
            continue
        if trip.get("vehicleId") not in vehicle_ids:
            warnings.append(f"trips.{index}: unknown vehicle {trip.get('vehicleId')}")
        if trip.get("driverId") not in driver_ids:
            warnings.append(f"trips.{index}: unknown driver {trip.get('driverId')}")

    for index, cost in enumerate(sections["operationalCosts"]):
        if isinstance(cost, dict) and cost.get("vehicleId") not in vehicle_ids:
            warnings.append(
                f"operationalCosts.{index}: unknown vehicle {cost.get('vehicleId')}"
            )

    return warnings


def validate_fleet_file(filepath: Path, schema: dict) -> List[str]:
    """Validate a single fleet YAML file. Returns list of errors."""
    errors = []
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return [f"YAML parse error: {e}"]
    except OSError as e:
        return [f"Error: {e}"]

    validator = Draft7Validator(schema)
    found = validator.iter_errors(data or {})
    for error in sorted(found, key=lambda e: [str(p) for p in e.path]):
        errors.append(f"Schema validation error: {error.message}")
        if error.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in error.path)}")
    return errors


def load_data(filepath: Path) -> Dict[str, Any]:
    with open(filepath) as f:
        return yaml.safe_load(f) or {}


def main(argv=None):
    """Validate the given fleet files, or every YAML file in data/."""
    argv = sys.argv[1:] if argv is None else argv
    schema = load_schema()

    if argv:
        yaml_files = [Path(p) for p in argv]
    else:
        data_dir = Path(__file__).parent / "data"
        if not data_dir.exists():
            print(f"Error: data directory not found: {data_dir}")
            return 1
        yaml_files = sorted(
            list(data_dir.glob("*.yaml")) + list(data_dir.glob("*.yml"))
        )
        if not yaml_files:
            print(f"Warning: No YAML files found in {data_dir}")
            return 0

    all_valid = True
    for filepath in yaml_files:
        errors = validate_fleet_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
            continue

        print(f"OK: {filepath.name}")
        for warning in find_reference_warnings(load_data(filepath)):
            print(f"  Warning: {warning}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
