#!/usr/bin/env python3
"""
Unified CLI for fleet profitability tracking.

Commands:
  init          - Create an empty fleet file
  profit        - Show profit/loss per vehicle and fleet totals
  analytics     - Show top-N loss, margin, maintenance and fuel lists
  vehicles      - List vehicles and their fixed costs
  drivers       - List drivers
  trips         - List trips
  costs         - List operational (maintenance) costs
  add-vehicle   - Register a vehicle
  edit-vehicle  - Change a vehicle's registration or fixed costs
  add-driver    - Register a driver
  add-trip      - Record a trip
  add-cost      - Record a maintenance charge
  delete        - Delete a record by id
  export        - Write a CSV report
"""

import argparse
import sys
from datetime import date
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

from models import (
    Driver,
    Fleet,
    OperationalCost,
    ProfitCalculation,
    Trip,
    Vehicle,
    add_driver,
    add_operational_cost,
    add_trip,
    add_vehicle,
    create_fleet_file,
    delete_record,
    highest_fuel,
    highest_maintenance,
    latest_submissions,
    least_profitable,
    load_fleet,
    loss_leaders,
    update_vehicle,
)
from models.calculations import amount
from models.export import export_filename, write_profit_csv, write_trips_csv
from models.formatting import format_amount, format_liters, format_profit, truncate
from models.validation import parse_amount, parse_date

# =============================================================================
# Argument types
# =============================================================================


def amount_arg(value: str) -> float:
    """argparse type for non-negative amounts."""
    try:
        return parse_amount(value, "Amount")
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def date_arg(value: str) -> str:
    """argparse type for YYYY-MM-DD dates."""
    try:
        return parse_date(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


# =============================================================================
# Table helpers
# =============================================================================


def make_profit_table(calculations: List[ProfitCalculation]) -> List[List[str]]:
    """Convert profit calculations to table rows."""
    rows = []
    for calc in calculations:
        rows.append(
            [
                calc.vehicle_number,
                str(calc.trip_count),
                format_amount(calc.total_hire),
                format_amount(calc.fixed_cost),
                format_amount(calc.variable_cost),
                format_amount(calc.maintenance_cost),
                format_profit(calc.profit),
            ]
        )
    return rows


def make_trip_table(trips: List[Trip], fleet: Fleet) -> List[List[str]]:
    """Convert trips to table rows."""
    rows = []
    for trip in trips:
        vehicle = fleet.get_vehicle(trip.vehicle_id)
        driver = fleet.get_driver(trip.driver_id)
        rows.append(
            [
                trip.date,
                vehicle.vehicle_number if vehicle else (trip.vehicle_number or "-"),
                driver.name if driver else (trip.driver_name or "-"),
                truncate(trip.route),
                format_liters(trip.fuel_liters),
                format_amount(amount(trip.hire)),
                format_amount(trip.expense),
                format_profit(trip.balance),
                trip.id,
            ]
        )
    return rows


def make_vehicle_table(vehicles: List[Vehicle]) -> List[List[str]]:
    rows = []
    for v in vehicles:
        rows.append(
            [
                v.vehicle_number,
                format_amount(amount(v.emi)),
                format_amount(amount(v.insurance)),
                format_amount(amount(v.tax)),
                format_amount(amount(v.pucc)),
                format_amount(amount(v.permit)),
                format_amount(v.fixed_cost),
                v.id,
            ]
        )
    return rows


def _resolve_vehicle(fleet: Fleet, ref: str) -> Optional[Vehicle]:
    vehicle = fleet.find_vehicle(ref)
    if vehicle is None:
        print(f"Error: Unknown vehicle '{ref}'")
        if fleet.vehicles:
            print("\nAvailable vehicles:")
            for v in sorted(fleet.vehicles, key=lambda v: v.vehicle_number or ""):
                print(f"  {v.vehicle_number}")
    return vehicle


# =============================================================================
# Init command
# =============================================================================


def cmd_init(args):
    """Create an empty fleet file."""
    if args.fleet_file.exists() and not args.force:
        print(f"Error: File already exists: {args.fleet_file} (use --force)")
        return 1
    create_fleet_file(args.fleet_file)
    print(f"Created {args.fleet_file}")
    return 0


# =============================================================================
# Profit command
# =============================================================================


def cmd_profit(args):
    """Show profit/loss per vehicle and fleet totals."""
    fleet = load_fleet(args.fleet_file)
    report = fleet.profit_report()
    summary = report.summary

    print(f"Vehicles: {summary.vehicle_count}")
    print(f"Trips: {len(fleet.trips)}")
    print(f"Total profit: {format_profit(summary.total_profit)}")
    print(f"Profitable vehicles: {summary.profitable_count}")
    print(f"Loss-making vehicles: {summary.losing_count}")
    if summary.break_even_count:
        print(f"Break-even vehicles: {summary.break_even_count}")
    print()

    if not report.calculations:
        print("No vehicles found.")
        return 0

    calculations = report.calculations
    if args.sort == "profit":
        calculations = sorted(calculations, key=lambda c: c.profit, reverse=not args.asc)
    elif args.sort == "hire":
        calculations = sorted(
            calculations, key=lambda c: c.total_hire, reverse=not args.asc
        )
    elif args.sort == "vehicle":
        calculations = sorted(calculations, key=lambda c: c.vehicle_number or "")

    headers = [
        "Vehicle",
        "Trips",
        "Total Hire",
        "Fixed Cost",
        "Variable Cost",
        "Maintenance",
        "Profit/Loss",
    ]
    print(
        tabulate(make_profit_table(calculations), headers=headers, tablefmt="simple")
    )
    return 0


# =============================================================================
# Analytics command
# =============================================================================


def _print_ranking(title: str, rows: List[List[str]], empty_message: str) -> None:
    print(f"{title}:")
    if rows:
        print(tabulate(rows, tablefmt="plain"))
    else:
        print(f"  {empty_message}")
    print()


def cmd_analytics(args):
    """Show top-N lists derived from the profit report."""
    fleet = load_fleet(args.fleet_file)
    calculations = fleet.profit_report().calculations
    n = args.top

    last_updated = fleet.last_updated
    if last_updated:
        print(f"Last updated: {last_updated.isoformat()}")
        print()

    _print_ranking(
        f"TOP {n} RUNNING AT LOSS",
        [[c.vehicle_number, format_profit(c.profit)] for c in loss_leaders(calculations, n)],
        "No vehicles running at loss",
    )
    _print_ranking(
        f"TOP {n} LEAST PROFIT",
        [
            [c.vehicle_number, format_profit(c.profit)]
            for c in least_profitable(calculations, n)
        ],
        "No profitable vehicles yet",
    )
    _print_ranking(
        f"TOP {n} HIGHEST MAINTENANCE",
        [
            [c.vehicle_number, format_amount(c.maintenance_cost)]
            for c in highest_maintenance(calculations, n)
        ],
        "No maintenance costs recorded",
    )
    _print_ranking(
        f"TOP {n} HIGHEST FUEL COST",
        [
            [c.vehicle_number, format_amount(c.fuel_cost)]
            for c in highest_fuel(calculations, n)
        ],
        "No fuel costs recorded",
    )
    _print_ranking(
        f"LATEST {n} TRIPS",
        [
            [t.date, fleet.vehicle_number_for(t.vehicle_id), format_profit(t.balance)]
            for t in latest_submissions(fleet.trips, n)
        ],
        "No trips yet",
    )
    return 0


# =============================================================================
# Listing commands
# =============================================================================


def cmd_vehicles(args):
    """List vehicles and their fixed costs."""
    fleet = load_fleet(args.fleet_file)
    print(f"Vehicles: {len(fleet.vehicles)}")
    print()
    if not fleet.vehicles:
        print("No vehicles found.")
        return 0
    vehicles = sorted(fleet.vehicles, key=lambda v: v.vehicle_number or "")
    headers = ["Vehicle", "EMI", "Insurance", "Tax", "PUCC", "Permit", "Fixed Cost", "Id"]
    print(tabulate(make_vehicle_table(vehicles), headers=headers, tablefmt="simple"))
    return 0


def cmd_drivers(args):
    """List drivers."""
    fleet = load_fleet(args.fleet_file)
    print(f"Drivers: {len(fleet.drivers)}")
    print()
    if not fleet.drivers:
        print("No drivers found.")
        return 0
    rows = [
        [d.name, d.license_no or "-", d.contact_no or "-", d.id]
        for d in sorted(fleet.drivers, key=lambda d: d.name or "")
    ]
    print(
        tabulate(rows, headers=["Name", "License", "Contact", "Id"], tablefmt="simple")
    )
    return 0


def cmd_trips(args):
    """List trips."""
    fleet = load_fleet(args.fleet_file)

    trips = fleet.get_trips_sorted(sort_by=args.sort, reverse=not args.asc)

    # Apply filters
    if args.vehicle:
        vehicle = _resolve_vehicle(fleet, args.vehicle)
        if vehicle is None:
            return 1
        trips = [t for t in trips if t.vehicle_id == vehicle.id]

    if args.since:
        trips = [t for t in trips if (t.date or "") >= args.since]

    total_hire = sum(amount(t.hire) for t in trips)
    total_expense = sum(t.expense for t in trips)

    print(f"Total trips: {len(fleet.trips)}")
    if args.vehicle or args.since:
        print(f"Showing: {len(trips)} (filtered)")
    if trips:
        print(f"Total hire: {format_amount(total_hire)}")
        print(f"Total expense: {format_amount(total_expense)}")
    print()

    if not trips:
        print("No trips found.")
        return 0

    headers = ["Date", "Vehicle", "Driver", "Route", "Fuel", "Hire", "Expense", "Balance", "Id"]
    print(tabulate(make_trip_table(trips, fleet), headers=headers, tablefmt="simple"))
    return 0


def cmd_costs(args):
    """List operational (maintenance) costs."""
    fleet = load_fleet(args.fleet_file)
    costs = fleet.operational_costs

    if args.vehicle:
        vehicle = _resolve_vehicle(fleet, args.vehicle)
        if vehicle is None:
            return 1
        costs = fleet.costs_for_vehicle(vehicle.id)

    total = sum(amount(c.maintenance_charge) for c in costs)
    print(f"Operational costs: {len(costs)}")
    if costs:
        print(f"Total maintenance: {format_amount(total)}")
    print()

    if not costs:
        print("No operational costs found.")
        return 0

    rows = [
        [
            fleet.vehicle_number_for(c.vehicle_id),
            format_amount(amount(c.maintenance_charge)),
            truncate(c.notes),
            c.id,
        ]
        for c in costs
    ]
    print(
        tabulate(rows, headers=["Vehicle", "Charge", "Notes", "Id"], tablefmt="simple")
    )
    return 0


# =============================================================================
# Add / edit / delete commands
# =============================================================================


def cmd_add_vehicle(args):
    """Register a vehicle."""
    fleet = load_fleet(args.fleet_file)
    number = args.vehicle_number.strip()
    if not number:
        print("Error: Vehicle number is required")
        return 1
    if fleet.find_vehicle(number) is not None:
        print(f"Error: Vehicle '{number}' already exists")
        return 1

    vehicle = Vehicle(
        vehicle_number=number,
        emi=args.emi,
        insurance=args.insurance,
        tax=args.tax,
        pucc=args.pucc,
        permit=args.permit,
    )

    print(f"Adding vehicle to {args.fleet_file}:")
    print(f"  Vehicle:    {vehicle.vehicle_number}")
    print(f"  Fixed cost: {format_amount(vehicle.fixed_cost)}")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    add_vehicle(args.fleet_file, vehicle)
    print(f"Vehicle saved ({vehicle.id}).")
    return 0


def cmd_edit_vehicle(args):
    """Change a vehicle's registration or fixed costs."""
    fleet = load_fleet(args.fleet_file)
    vehicle = _resolve_vehicle(fleet, args.vehicle)
    if vehicle is None:
        return 1

    # Only overwrite fields that were given
    for attr in ("emi", "insurance", "tax", "pucc", "permit"):
        value = getattr(args, attr)
        if value is not None:
            setattr(vehicle, attr, value)
    if args.number:
        number = args.number.strip()
        if not number:
            print("Error: Vehicle number is required")
            return 1
        existing = fleet.find_vehicle(number)
        if existing is not None and existing.id != vehicle.id:
            print(f"Error: Vehicle '{number}' already exists")
            return 1
        vehicle.vehicle_number = number

    print(f"Updating vehicle {vehicle.vehicle_number}:")
    print(f"  Fixed cost: {format_amount(vehicle.fixed_cost)}")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    update_vehicle(args.fleet_file, vehicle.id, vehicle)
    print("Vehicle updated.")
    return 0


def cmd_add_driver(args):
    """Register a driver."""
    name = args.name.strip()
    if not name:
        print("Error: Driver name is required")
        return 1

    driver = Driver(name=name, license_no=args.license, contact_no=args.contact)

    print(f"Adding driver to {args.fleet_file}:")
    print(f"  Name:    {driver.name}")
    if driver.license_no:
        print(f"  License: {driver.license_no}")
    if driver.contact_no:
        print(f"  Contact: {driver.contact_no}")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    add_driver(args.fleet_file, driver)
    print(f"Driver saved ({driver.id}).")
    return 0


def cmd_add_trip(args):
    """Record a trip."""
    fleet = load_fleet(args.fleet_file)

    vehicle = _resolve_vehicle(fleet, args.vehicle)
    if vehicle is None:
        return 1

    driver = fleet.find_driver(args.driver)
    if driver is None:
        print(f"Error: Unknown driver '{args.driver}'")
        return 1

    if not args.origin.strip() or not args.destination.strip():
        print("Error: From and to locations are required")
        return 1

    trip = Trip(
        vehicle_id=vehicle.id,
        driver_id=driver.id,
        vehicle_number=vehicle.vehicle_number,
        driver_name=driver.name,
        date=args.date or date.today().isoformat(),
        from_location=args.origin.strip(),
        to_location=args.destination.strip(),
        fuel_liters=args.fuel_liters,
        fuel=args.fuel,
        bata=args.bata,
        toll=args.toll,
        rto=args.rto,
        misc=args.misc,
        hire=args.hire,
    )

    print(f"Adding trip to {args.fleet_file}:")
    print(f"  Vehicle: {vehicle.vehicle_number}")
    print(f"  Driver:  {driver.name}")
    print(f"  Date:    {trip.date}")
    print(f"  Route:   {trip.route}")
    print(f"  Hire:    {format_amount(amount(trip.hire))}")
    print(f"  Expense: {format_amount(trip.expense)}")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    add_trip(args.fleet_file, trip)
    print(f"Trip saved ({trip.id}).")
    return 0


def cmd_add_cost(args):
    """Record a maintenance charge."""
    fleet = load_fleet(args.fleet_file)
    vehicle = _resolve_vehicle(fleet, args.vehicle)
    if vehicle is None:
        return 1

    cost = OperationalCost(
        vehicle_id=vehicle.id,
        maintenance_charge=args.amount,
        notes=args.notes,
    )

    print(f"Adding operational cost to {args.fleet_file}:")
    print(f"  Vehicle: {vehicle.vehicle_number}")
    print(f"  Charge:  {format_amount(cost.maintenance_charge)}")
    if cost.notes:
        print(f"  Notes:   {cost.notes}")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    add_operational_cost(args.fleet_file, cost)
    print(f"Operational cost saved ({cost.id}).")
    return 0


RECORD_LABELS = {
    "vehicle": "Vehicle",
    "driver": "Driver",
    "trip": "Trip",
    "cost": "Operational cost",
}


def cmd_delete(args):
    """Delete a record by id."""
    fleet = load_fleet(args.fleet_file)
    records = {
        "vehicle": fleet.vehicles,
        "driver": fleet.drivers,
        "trip": fleet.trips,
        "cost": fleet.operational_costs,
    }[args.kind]
    if not any(r.id == args.record_id for r in records):
        print(f"Error: {RECORD_LABELS[args.kind]} '{args.record_id}' not found")
        return 1

    if args.dry_run:
        print(f"Would delete {args.kind} {args.record_id}")
        print("(dry run - no changes made)")
        return 0

    try:
        delete_record(args.fleet_file, args.kind, args.record_id)
    except KeyError as e:
        print(f"Error: {e.args[0]}")
        return 1

    print(f"Deleted {args.kind} {args.record_id}.")
    return 0


# =============================================================================
# Export command
# =============================================================================


def cmd_export(args):
    """Write a CSV report."""
    fleet = load_fleet(args.fleet_file)
    output = args.output or Path(export_filename(args.kind))

    with open(output, "w", newline="", encoding="utf-8") as fp:
        if args.kind == "profit":
            calculations = fleet.profit_report().calculations
            write_profit_csv(calculations, fp)
            count = len(calculations)
        else:
            trips = fleet.get_trips_sorted(sort_by="date", reverse=True)
            write_trips_csv(trips, fp)
            count = len(trips)

    print(f"Wrote {count} rows to {output}")
    return 0


# =============================================================================
# Main
# =============================================================================


def _add_dry_run(parser):
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would change without saving",
    )


def _add_fixed_cost_args(parser):
    for name, label in (
        ("emi", "Monthly loan installment (EMI)"),
        ("insurance", "Insurance"),
        ("tax", "Road tax"),
        ("pucc", "Pollution certificate (PUCC) fee"),
        ("permit", "Permit fee"),
    ):
        parser.add_argument(f"--{name}", type=amount_arg, help=label)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Fleet profitability tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s data/fleet.yaml init
  %(prog)s data/fleet.yaml add-vehicle KA01AB1234 --emi 5000 --insurance 1000
  %(prog)s data/fleet.yaml add-driver "Ravi Kumar" --license DL-042
  %(prog)s data/fleet.yaml add-trip KA01AB1234 "Ravi Kumar" \\
      --from Bengaluru --to Chennai --hire 10000 --fuel 2000 --bata 500
  %(prog)s data/fleet.yaml add-cost KA01AB1234 800 --notes "Brake pads"
  %(prog)s data/fleet.yaml profit --sort profit
  %(prog)s data/fleet.yaml analytics --top 3
  %(prog)s data/fleet.yaml trips --vehicle KA01AB1234 --since 2025-01-01
  %(prog)s data/fleet.yaml export --kind trips
""",
    )
    parser.add_argument(
        "fleet_file",
        type=Path,
        help="Path to fleet YAML file",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Init subcommand
    init_parser = subparsers.add_parser("init", help="Create an empty fleet file")
    init_parser.add_argument(
        "--force", action="store_true", help="Overwrite an existing file"
    )

    # Profit subcommand
    profit_parser = subparsers.add_parser(
        "profit", help="Show profit/loss per vehicle and fleet totals"
    )
    profit_parser.add_argument(
        "--sort",
        choices=["entry", "profit", "hire", "vehicle"],
        default="entry",
        help="Sort order (default: entry order)",
    )
    profit_parser.add_argument(
        "--asc",
        action="store_true",
        help="Sort profit/hire ascending instead of descending",
    )

    # Analytics subcommand
    analytics_parser = subparsers.add_parser(
        "analytics", help="Show top-N loss, margin, maintenance and fuel lists"
    )
    analytics_parser.add_argument(
        "--top", type=int, default=5, help="Entries per list (default: 5)"
    )

    # Listing subcommands
    subparsers.add_parser("vehicles", help="List vehicles and their fixed costs")
    subparsers.add_parser("drivers", help="List drivers")

    trips_parser = subparsers.add_parser("trips", help="List trips")
    trips_parser.add_argument(
        "--vehicle", type=str, help="Only trips for this vehicle (number or id)"
    )
    trips_parser.add_argument(
        "--since", type=date_arg, help="Show only trips since date (YYYY-MM-DD)"
    )
    trips_parser.add_argument(
        "--sort",
        choices=["date", "hire", "vehicle"],
        default="date",
        help="Sort order (default: date)",
    )
    trips_parser.add_argument(
        "--asc", action="store_true", help="Sort ascending instead of descending"
    )

    costs_parser = subparsers.add_parser(
        "costs", help="List operational (maintenance) costs"
    )
    costs_parser.add_argument(
        "--vehicle", type=str, help="Only costs for this vehicle (number or id)"
    )

    # Add vehicle subcommand
    add_vehicle_parser = subparsers.add_parser("add-vehicle", help="Register a vehicle")
    add_vehicle_parser.add_argument("vehicle_number", type=str, help="Registration number")
    _add_fixed_cost_args(add_vehicle_parser)
    _add_dry_run(add_vehicle_parser)

    # Edit vehicle subcommand
    edit_vehicle_parser = subparsers.add_parser(
        "edit-vehicle", help="Change a vehicle's registration or fixed costs"
    )
    edit_vehicle_parser.add_argument("vehicle", type=str, help="Vehicle number or id")
    edit_vehicle_parser.add_argument("--number", type=str, help="New registration number")
    _add_fixed_cost_args(edit_vehicle_parser)
    _add_dry_run(edit_vehicle_parser)

    # Add driver subcommand
    add_driver_parser = subparsers.add_parser("add-driver", help="Register a driver")
    add_driver_parser.add_argument("name", type=str, help="Driver name")
    add_driver_parser.add_argument("--license", type=str, help="License number")
    add_driver_parser.add_argument("--contact", type=str, help="Contact number")
    _add_dry_run(add_driver_parser)

    # Add trip subcommand
    add_trip_parser = subparsers.add_parser("add-trip", help="Record a trip")
    add_trip_parser.add_argument("vehicle", type=str, help="Vehicle number or id")
    add_trip_parser.add_argument("driver", type=str, help="Driver name or id")
    add_trip_parser.add_argument(
        "--date", type=date_arg, help="Trip date in YYYY-MM-DD format (default: today)"
    )
    add_trip_parser.add_argument(
        "--from", dest="origin", type=str, required=True, help="From location"
    )
    add_trip_parser.add_argument(
        "--to", dest="destination", type=str, required=True, help="To location"
    )
    add_trip_parser.add_argument("--fuel-liters", type=amount_arg, help="Fuel volume (liters)")
    add_trip_parser.add_argument("--fuel", type=amount_arg, help="Fuel cost")
    add_trip_parser.add_argument("--bata", type=amount_arg, help="Driver allowance (bata)")
    add_trip_parser.add_argument("--toll", type=amount_arg, help="Toll charges")
    add_trip_parser.add_argument("--rto", type=amount_arg, help="RTO charges")
    add_trip_parser.add_argument("--misc", type=amount_arg, help="Miscellaneous costs")
    add_trip_parser.add_argument("--hire", type=amount_arg, help="Hire (revenue)")
    _add_dry_run(add_trip_parser)

    # Add cost subcommand
    add_cost_parser = subparsers.add_parser(
        "add-cost", help="Record a maintenance charge"
    )
    add_cost_parser.add_argument("vehicle", type=str, help="Vehicle number or id")
    add_cost_parser.add_argument("amount", type=amount_arg, help="Maintenance charge")
    add_cost_parser.add_argument("--notes", type=str, help="Notes about the work")
    _add_dry_run(add_cost_parser)

    # Delete subcommand
    delete_parser = subparsers.add_parser("delete", help="Delete a record by id")
    delete_parser.add_argument(
        "kind", choices=["vehicle", "driver", "trip", "cost"], help="Record kind"
    )
    delete_parser.add_argument("record_id", type=str, help="Record id")
    _add_dry_run(delete_parser)

    # Export subcommand
    export_parser = subparsers.add_parser("export", help="Write a CSV report")
    export_parser.add_argument(
        "--kind",
        choices=["profit", "trips"],
        default="profit",
        help="Report to export (default: profit)",
    )
    export_parser.add_argument(
        "--output", type=Path, help="Output path (default: fleet_<kind>_<date>.csv)"
    )

    return parser


COMMANDS = {
    "init": cmd_init,
    "profit": cmd_profit,
    "analytics": cmd_analytics,
    "vehicles": cmd_vehicles,
    "drivers": cmd_drivers,
    "trips": cmd_trips,
    "costs": cmd_costs,
    "add-vehicle": cmd_add_vehicle,
    "edit-vehicle": cmd_edit_vehicle,
    "add-driver": cmd_add_driver,
    "add-trip": cmd_add_trip,
    "add-cost": cmd_add_cost,
    "delete": cmd_delete,
    "export": cmd_export,
}


def main(argv=None):
    args = build_parser().parse_args(argv)

    # Validate fleet file exists
    if args.command != "init" and not args.fleet_file.exists():
        print(f"Error: File not found: {args.fleet_file}")
        print(f"Create one with: {Path(sys.argv[0]).name} {args.fleet_file} init")
        return 1

    # Dispatch to command handler
    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main() or 0)
