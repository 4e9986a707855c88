"""Flask web application for fleet profitability tracking."""

import os
from pathlib import Path

from flask import (
    Flask,
    Response,
    abort,
    current_app,
    flash,
    redirect,
    render_template,
    request,
    url_for,
)

# Add parent directory to path for model imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import (
    Driver,
    OperationalCost,
    ProfitStatus,
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
    update_driver,
    update_operational_cost,
    update_trip,
    update_vehicle,
)
from models.calculations import amount
from models.export import export_filename, profit_csv, trips_csv
from models.formatting import format_amount, format_liters, format_profit
from models.validation import optional_text, parse_amount, parse_date, require_text

app = Flask(__name__)
app.secret_key = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-prod")

# Path to the fleet YAML file (relative to project root by default)
app.config["FLEET_FILE"] = Path(
    os.environ.get("FLEET_FILE", Path(__file__).parent.parent / "data" / "fleet.yaml")
)

RECORD_KINDS = {
    "vehicle": "vehicles",
    "driver": "drivers",
    "trip": "trips",
    "cost": "costs",
}


def fleet_path() -> Path:
    """Fleet file path, created empty on first use."""
    path = Path(current_app.config["FLEET_FILE"])
    if not path.exists():
        create_fleet_file(path)
        current_app.logger.info("Created empty fleet file %s", path)
    return path


def get_fleet():
    return load_fleet(fleet_path())


def profit_color(value: float) -> str:
    """Get Tailwind color classes for a profit figure."""
    if value > 0:
        return "text-green-600"
    if value < 0:
        return "text-red-600"
    return "text-gray-600"


def status_badge_color(status: ProfitStatus) -> str:
    """Get Tailwind color classes for a profit status badge."""
    colors = {
        ProfitStatus.LOSS: "bg-red-500 text-white",
        ProfitStatus.BREAK_EVEN: "bg-gray-400 text-white",
        ProfitStatus.PROFIT: "bg-green-500 text-white",
    }
    return colors.get(status, "bg-gray-500 text-white")


# Register template filters
app.jinja_env.filters["amount"] = lambda v: format_amount(amount(v))
app.jinja_env.filters["profit"] = format_profit
app.jinja_env.filters["liters"] = format_liters
app.jinja_env.filters["profit_color"] = profit_color
app.jinja_env.filters["status_badge_color"] = status_badge_color


# =============================================================================
# Form parsing
# =============================================================================


def vehicle_from_form(form) -> Vehicle:
    """Build a Vehicle from submitted form data. Raises ValueError."""
    return Vehicle(
        vehicle_number=require_text(form.get("vehicle_number"), "Vehicle number"),
        emi=parse_amount(form.get("emi"), "EMI"),
        insurance=parse_amount(form.get("insurance"), "Insurance"),
        tax=parse_amount(form.get("tax"), "Tax"),
        pucc=parse_amount(form.get("pucc"), "PUCC"),
        permit=parse_amount(form.get("permit"), "Permit"),
    )


def driver_from_form(form) -> Driver:
    return Driver(
        name=require_text(form.get("name"), "Name"),
        license_no=optional_text(form.get("license_no")),
        contact_no=optional_text(form.get("contact_no")),
    )


def trip_from_form(form, fleet) -> Trip:
    """Build a Trip, copying the vehicle number and driver name for display."""
    vehicle = fleet.get_vehicle(require_text(form.get("vehicle_id"), "Vehicle"))
    if vehicle is None:
        raise ValueError("Vehicle is required")
    driver = fleet.get_driver(require_text(form.get("driver_id"), "Driver"))
    if driver is None:
        raise ValueError("Driver is required")

    return Trip(
        vehicle_id=vehicle.id,
        driver_id=driver.id,
        vehicle_number=vehicle.vehicle_number,
        driver_name=driver.name,
        date=parse_date(form.get("date")),
        from_location=require_text(form.get("from_location"), "From location"),
        to_location=require_text(form.get("to_location"), "To location"),
        fuel_liters=parse_amount(form.get("fuel_liters"), "Fuel liters"),
        fuel=parse_amount(form.get("fuel"), "Fuel cost"),
        bata=parse_amount(form.get("bata"), "Bata"),
        toll=parse_amount(form.get("toll"), "Toll"),
        rto=parse_amount(form.get("rto"), "RTO"),
        misc=parse_amount(form.get("misc"), "Misc"),
        hire=parse_amount(form.get("hire"), "Hire"),
    )


def cost_from_form(form, fleet) -> OperationalCost:
    vehicle = fleet.get_vehicle(require_text(form.get("vehicle_id"), "Vehicle"))
    if vehicle is None:
        raise ValueError("Vehicle is required")
    return OperationalCost(
        vehicle_id=vehicle.id,
        maintenance_charge=parse_amount(
            form.get("maintenance_charge"), "Maintenance charge"
        ),
        notes=optional_text(form.get("notes")),
    )


# =============================================================================
# Dashboard
# =============================================================================


@app.route("/")
def index():
    """Dashboard: fleet totals, profit table and analytics lists."""
    fleet = get_fleet()
    report = fleet.profit_report()
    calculations = report.calculations

    analytics = [
        ("Top 5 Vehicles Running at Loss", "profit", loss_leaders(calculations),
         "No vehicles running at loss"),
        ("Top 5 Vehicles with Least Profit", "profit", least_profitable(calculations),
         "No profitable vehicles yet"),
        ("Top 5 Vehicles with Highest Maintenance", "maintenance_cost",
         highest_maintenance(calculations), "No maintenance costs recorded"),
        ("Top 5 Vehicles with Highest Fuel Cost", "fuel_cost",
         highest_fuel(calculations), "No fuel costs recorded"),
    ]

    return render_template(
        "index.html",
        fleet=fleet,
        report=report,
        summary=report.summary,
        analytics=analytics,
        latest_trips=latest_submissions(fleet.trips),
        last_updated=fleet.last_updated,
        active_tab="dashboard",
    )


# =============================================================================
# Vehicles
# =============================================================================


@app.route("/vehicles", methods=["GET"])
def vehicles():
    fleet = get_fleet()
    return render_template(
        "vehicles.html",
        fleet=fleet,
        vehicles=sorted(fleet.vehicles, key=lambda v: v.vehicle_number or ""),
        active_tab="vehicles",
    )


@app.route("/vehicles", methods=["POST"])
def create_vehicle():
    """Handle add vehicle form submission."""
    fleet = get_fleet()
    try:
        vehicle = vehicle_from_form(request.form)
    except ValueError as e:
        current_app.logger.warning("Rejected vehicle form: %s", e)
        flash(str(e), "error")
        return redirect(url_for("vehicles"))

    if fleet.find_vehicle(vehicle.vehicle_number) is not None:
        flash(f"Vehicle '{vehicle.vehicle_number}' already exists", "error")
        return redirect(url_for("vehicles"))

    add_vehicle(fleet_path(), vehicle)
    current_app.logger.info("Added vehicle %s (%s)", vehicle.vehicle_number, vehicle.id)
    flash(f"Added vehicle {vehicle.vehicle_number}", "success")
    return redirect(url_for("vehicles"))


@app.route("/vehicles/<record_id>/edit", methods=["GET", "POST"])
def edit_vehicle(record_id: str):
    fleet = get_fleet()
    vehicle = fleet.get_vehicle(record_id)
    if vehicle is None:
        flash(f"Vehicle '{record_id}' not found", "error")
        return redirect(url_for("vehicles"))

    if request.method == "POST":
        try:
            updated = vehicle_from_form(request.form)
        except ValueError as e:
            current_app.logger.warning("Rejected vehicle edit %s: %s", record_id, e)
            flash(str(e), "error")
            return redirect(url_for("edit_vehicle", record_id=record_id))

        existing = fleet.find_vehicle(updated.vehicle_number)
        if existing is not None and existing.id != record_id:
            flash(f"Vehicle '{updated.vehicle_number}' already exists", "error")
            return redirect(url_for("edit_vehicle", record_id=record_id))

        update_vehicle(fleet_path(), record_id, updated)
        current_app.logger.info("Updated vehicle %s", record_id)
        flash(f"Updated vehicle {updated.vehicle_number}", "success")
        return redirect(url_for("vehicles"))

    return render_template(
        "edit.html", kind="vehicle", record=vehicle, fleet=fleet, active_tab="vehicles"
    )


# =============================================================================
# Drivers
# =============================================================================


@app.route("/drivers", methods=["GET"])
def drivers():
    fleet = get_fleet()
    return render_template(
        "drivers.html",
        fleet=fleet,
        drivers=sorted(fleet.drivers, key=lambda d: d.name or ""),
        active_tab="drivers",
    )


@app.route("/drivers", methods=["POST"])
def create_driver():
    """Handle add driver form submission."""
    try:
        driver = driver_from_form(request.form)
    except ValueError as e:
        current_app.logger.warning("Rejected driver form: %s", e)
        flash(str(e), "error")
        return redirect(url_for("drivers"))

    add_driver(fleet_path(), driver)
    current_app.logger.info("Added driver %s (%s)", driver.name, driver.id)
    flash(f"Added driver {driver.name}", "success")
    return redirect(url_for("drivers"))


@app.route("/drivers/<record_id>/edit", methods=["GET", "POST"])
def edit_driver(record_id: str):
    fleet = get_fleet()
    driver = fleet.get_driver(record_id)
    if driver is None:
        flash(f"Driver '{record_id}' not found", "error")
        return redirect(url_for("drivers"))

    if request.method == "POST":
        try:
            updated = driver_from_form(request.form)
        except ValueError as e:
            flash(str(e), "error")
            return redirect(url_for("edit_driver", record_id=record_id))
        update_driver(fleet_path(), record_id, updated)
        current_app.logger.info("Updated driver %s", record_id)
        flash(f"Updated driver {updated.name}", "success")
        return redirect(url_for("drivers"))

    return render_template(
        "edit.html", kind="driver", record=driver, fleet=fleet, active_tab="drivers"
    )


# =============================================================================
# Trips
# =============================================================================


@app.route("/trips", methods=["GET"])
def trips():
    fleet = get_fleet()
    vehicle_filter = request.args.get("vehicle") or None

    trip_list = fleet.get_trips_sorted(sort_by="date", reverse=True)
    if vehicle_filter:
        trip_list = [t for t in trip_list if t.vehicle_id == vehicle_filter]

    return render_template(
        "trips.html",
        fleet=fleet,
        trips=trip_list,
        vehicle_filter=vehicle_filter,
        total_hire=sum(amount(t.hire) for t in trip_list),
        total_expense=sum(t.expense for t in trip_list),
        active_tab="trips",
    )


@app.route("/trips", methods=["POST"])
def create_trip():
    """Handle trip entry form submission."""
    fleet = get_fleet()
    try:
        trip = trip_from_form(request.form, fleet)
    except ValueError as e:
        current_app.logger.warning("Rejected trip form: %s", e)
        flash(str(e), "error")
        return redirect(url_for("trips"))

    add_trip(fleet_path(), trip)
    current_app.logger.info("Added trip %s for %s", trip.id, trip.vehicle_number)
    flash(f"Added trip {trip.route}", "success")
    return redirect(url_for("trips"))


@app.route("/trips/<record_id>/edit", methods=["GET", "POST"])
def edit_trip(record_id: str):
    fleet = get_fleet()
    trip = next((t for t in fleet.trips if t.id == record_id), None)
    if trip is None:
        flash(f"Trip '{record_id}' not found", "error")
        return redirect(url_for("trips"))

    if request.method == "POST":
        try:
            updated = trip_from_form(request.form, fleet)
        except ValueError as e:
            flash(str(e), "error")
            return redirect(url_for("edit_trip", record_id=record_id))
        update_trip(fleet_path(), record_id, updated)
        current_app.logger.info("Updated trip %s", record_id)
        flash(f"Updated trip {updated.route}", "success")
        return redirect(url_for("trips"))

    return render_template(
        "edit.html", kind="trip", record=trip, fleet=fleet, active_tab="trips"
    )


# =============================================================================
# Operational costs
# =============================================================================


@app.route("/costs", methods=["GET"])
def costs():
    fleet = get_fleet()
    return render_template(
        "costs.html",
        fleet=fleet,
        costs=fleet.operational_costs,
        total=sum(amount(c.maintenance_charge) for c in fleet.operational_costs),
        active_tab="costs",
    )


@app.route("/costs", methods=["POST"])
def create_cost():
    """Handle maintenance form submission."""
    fleet = get_fleet()
    try:
        cost = cost_from_form(request.form, fleet)
    except ValueError as e:
        current_app.logger.warning("Rejected maintenance form: %s", e)
        flash(str(e), "error")
        return redirect(url_for("costs"))

    add_operational_cost(fleet_path(), cost)
    current_app.logger.info("Added operational cost %s", cost.id)
    flash(
        f"Added maintenance charge of {format_amount(amount(cost.maintenance_charge))}",
        "success",
    )
    return redirect(url_for("costs"))


@app.route("/costs/<record_id>/edit", methods=["GET", "POST"])
def edit_cost(record_id: str):
    fleet = get_fleet()
    cost = next((c for c in fleet.operational_costs if c.id == record_id), None)
    if cost is None:
        flash(f"Operational cost '{record_id}' not found", "error")
        return redirect(url_for("costs"))

    if request.method == "POST":
        try:
            updated = cost_from_form(request.form, fleet)
        except ValueError as e:
            flash(str(e), "error")
            return redirect(url_for("edit_cost", record_id=record_id))
        update_operational_cost(fleet_path(), record_id, updated)
        current_app.logger.info("Updated operational cost %s", record_id)
        flash("Updated maintenance charge", "success")
        return redirect(url_for("costs"))

    return render_template(
        "edit.html", kind="cost", record=cost, fleet=fleet, active_tab="costs"
    )


# =============================================================================
# Delete / export
# =============================================================================


@app.route("/<kind>/<record_id>/delete", methods=["POST"])
def delete(kind: str, record_id: str):
    """Delete any record kind; kind is the singular name (vehicle, trip...)."""
    if kind not in RECORD_KINDS:
        abort(404)
    try:
        delete_record(fleet_path(), kind, record_id)
    except KeyError as e:
        flash(e.args[0], "error")
    else:
        current_app.logger.info("Deleted %s %s", kind, record_id)
        flash(f"Deleted {kind}", "success")
    return redirect(url_for(RECORD_KINDS[kind]))


@app.route("/export/<kind>.csv")
def export(kind: str):
    """Download the profit report or trip ledger as CSV."""
    fleet = get_fleet()
    if kind == "profit":
        body = profit_csv(fleet.profit_report().calculations)
    elif kind == "trips":
        body = trips_csv(fleet.get_trips_sorted(sort_by="date", reverse=True))
    else:
        abort(404)

    return Response(
        body,
        mimetype="text/csv",
        headers={
            "Content-Disposition": f"attachment; filename={export_filename(kind)}"
        },
    )


if __name__ == "__main__":
    # Run with debug mode for development
    # Using 5001 to avoid conflict with macOS AirPlay Receiver on 5000
    app.run(debug=True, host="0.0.0.0", port=5001)
