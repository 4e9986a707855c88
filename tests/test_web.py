#!/usr/bin/env python3
"""Tests for the Flask web application."""

import csv
import io

import pytest

from models import load_fleet
from models.formatting import CURRENCY
from web.app import app


@pytest.fixture
def fleet_file(tmp_path):
    return tmp_path / "data" / "fleet.yaml"


@pytest.fixture
def client(fleet_file):
    app.config.update(TESTING=True, FLEET_FILE=fleet_file)
    with app.test_client() as client:
        yield client


@pytest.fixture
def populated(client, fleet_file):
    """Fleet with one loss-making and one profitable vehicle."""
    client.post("/vehicles", data={
        "vehicle_number": "KA01AB1234", "emi": "5000", "insurance": "1000",
        "tax": "500", "pucc": "200", "permit": "300",
    })
    client.post("/vehicles", data={"vehicle_number": "KA02CD5678"})
    client.post("/drivers", data={"name": "Ravi Kumar", "license_no": "DL-1"})

    fleet = load_fleet(fleet_file)
    v1, v2 = fleet.vehicles
    driver = fleet.drivers[0]

    client.post("/trips", data={
        "vehicle_id": v1.id, "driver_id": driver.id, "date": "2025-01-15",
        "from_location": "Bengaluru", "to_location": "Chennai",
        "fuel": "2000", "bata": "500", "toll": "100", "rto": "50", "misc": "50",
        "hire": "10000",
    })
    client.post("/trips", data={
        "vehicle_id": v2.id, "driver_id": driver.id, "date": "2025-01-20",
        "from_location": "Mysuru", "to_location": "Hassan", "hire": "3000",
    })
    client.post("/costs", data={
        "vehicle_id": v1.id, "maintenance_charge": "800", "notes": "Brake pads",
    })
    # Render a page so the setup flash messages are consumed
    client.get("/")
    return load_fleet(fleet_file)


class TestDashboard:
    """Tests for the dashboard page."""

    def test_empty_fleet_creates_file(self, client, fleet_file):
        response = client.get("/")
        assert response.status_code == 200
        assert fleet_file.exists()
        assert "No vehicles yet" in response.get_data(as_text=True)

    def test_shows_profit_report(self, client, populated):
        body = client.get("/").get_data(as_text=True)
        assert "KA01AB1234" in body
        assert f"-{CURRENCY}500.00" in body
        assert f"+{CURRENCY}3,000.00" in body
        assert f"+{CURRENCY}2,500.00" in body
        assert "Top 5 Vehicles Running at Loss" in body
        assert "Mysuru -&gt; Hassan" in body


class TestVehicles:
    """Tests for vehicle pages."""

    def test_create(self, client, fleet_file):
        response = client.post(
            "/vehicles",
            data={"vehicle_number": " KA05 ", "emi": "1200"},
            follow_redirects=True,
        )
        assert response.status_code == 200
        assert "Added vehicle KA05" in response.get_data(as_text=True)

        vehicle = load_fleet(fleet_file).vehicles[0]
        assert vehicle.vehicle_number == "KA05"
        assert vehicle.emi == 1200
        assert vehicle.insurance == 0

    def test_blank_number_rejected(self, client, fleet_file):
        response = client.post(
            "/vehicles", data={"vehicle_number": ""}, follow_redirects=True
        )
        assert "Vehicle number is required" in response.get_data(as_text=True)
        assert load_fleet(fleet_file).vehicles == []

    def test_negative_amount_rejected(self, client, fleet_file):
        response = client.post(
            "/vehicles",
            data={"vehicle_number": "KA05", "emi": "-1"},
            follow_redirects=True,
        )
        assert "EMI must be non-negative" in response.get_data(as_text=True)
        assert load_fleet(fleet_file).vehicles == []

    def test_duplicate_rejected(self, client, populated, fleet_file):
        response = client.post(
            "/vehicles", data={"vehicle_number": "ka01ab1234"}, follow_redirects=True
        )
        assert "already exists" in response.get_data(as_text=True)
        assert len(load_fleet(fleet_file).vehicles) == 2

    def test_edit(self, client, populated, fleet_file):
        vehicle = populated.vehicles[1]
        page = client.get(f"/vehicles/{vehicle.id}/edit")
        assert page.status_code == 200
        assert "Edit Vehicle" in page.get_data(as_text=True)

        client.post(
            f"/vehicles/{vehicle.id}/edit",
            data={"vehicle_number": "KA02CD5678", "emi": "900"},
        )
        updated = load_fleet(fleet_file).get_vehicle(vehicle.id)
        assert updated.emi == 900
        assert updated.created_at == vehicle.created_at

    def test_edit_rejects_existing_number(self, client, populated, fleet_file):
        vehicle = populated.vehicles[1]
        response = client.post(
            f"/vehicles/{vehicle.id}/edit",
            data={"vehicle_number": "ka01ab1234"},
            follow_redirects=True,
        )
        assert "already exists" in response.get_data(as_text=True)
        numbers = [v.vehicle_number for v in load_fleet(fleet_file).vehicles]
        assert numbers == ["KA01AB1234", "KA02CD5678"]

    def test_edit_unknown(self, client, populated):
        response = client.get("/vehicles/nope/edit")
        assert response.status_code == 302


class TestDrivers:
    """Tests for driver pages."""

    def test_list(self, client, populated):
        body = client.get("/drivers").get_data(as_text=True)
        assert "Ravi Kumar" in body
        assert "DL-1" in body

    def test_edit(self, client, populated, fleet_file):
        driver = populated.drivers[0]
        client.post(f"/drivers/{driver.id}/edit", data={"name": "Ravi K"})
        assert load_fleet(fleet_file).get_driver(driver.id).name == "Ravi K"


class TestTrips:
    """Tests for trip pages."""

    def test_trip_saved_with_display_names(self, populated):
        trip = populated.trips[0]
        assert trip.vehicle_number == "KA01AB1234"
        assert trip.driver_name == "Ravi Kumar"
        assert trip.date == "2025-01-15"
        assert trip.hire == 10000

    def test_list_filtered_by_vehicle(self, client, populated):
        vehicle = populated.vehicles[1]
        body = client.get(f"/trips?vehicle={vehicle.id}").get_data(as_text=True)
        assert "Trips (1)" in body
        assert "Mysuru -&gt; Hassan" in body
        assert "Bengaluru -&gt; Chennai" not in body

    def test_bad_date_rejected(self, client, populated, fleet_file):
        vehicle, driver = populated.vehicles[0], populated.drivers[0]
        response = client.post("/trips", data={
            "vehicle_id": vehicle.id, "driver_id": driver.id, "date": "yesterday",
            "from_location": "A", "to_location": "B",
        }, follow_redirects=True)
        assert "YYYY-MM-DD" in response.get_data(as_text=True)
        assert len(load_fleet(fleet_file).trips) == 2

    def test_unknown_vehicle_rejected(self, client, populated, fleet_file):
        response = client.post("/trips", data={
            "vehicle_id": "ghost", "driver_id": populated.drivers[0].id,
            "date": "2025-01-01", "from_location": "A", "to_location": "B",
        }, follow_redirects=True)
        assert "Vehicle is required" in response.get_data(as_text=True)
        assert len(load_fleet(fleet_file).trips) == 2

    def test_edit_page(self, client, populated):
        trip = populated.trips[0]
        body = client.get(f"/trips/{trip.id}/edit").get_data(as_text=True)
        assert "Edit Trip" in body
        assert 'value="Bengaluru"' in body


class TestCosts:
    """Tests for maintenance cost pages."""

    def test_list(self, client, populated):
        body = client.get("/costs").get_data(as_text=True)
        assert "Brake pads" in body

    def test_edit(self, client, populated, fleet_file):
        cost = populated.operational_costs[0]
        client.post(f"/costs/{cost.id}/edit", data={
            "vehicle_id": cost.vehicle_id, "maintenance_charge": "950",
        })
        assert load_fleet(fleet_file).operational_costs[0].maintenance_charge == 950


class TestDelete:
    """Tests for the shared delete route."""

    def test_delete_trip(self, client, populated, fleet_file):
        trip = populated.trips[0]
        response = client.post(f"/trip/{trip.id}/delete")
        assert response.status_code == 302
        assert response.headers["Location"].endswith("/trips")
        assert [t.id for t in load_fleet(fleet_file).trips] == [populated.trips[1].id]

    def test_delete_vehicle_keeps_trips(self, client, populated, fleet_file):
        client.post(f"/vehicle/{populated.vehicles[0].id}/delete")
        fleet = load_fleet(fleet_file)
        assert len(fleet.vehicles) == 1
        assert len(fleet.trips) == 2

    def test_unknown_id(self, client, populated):
        response = client.post("/cost/nope/delete", follow_redirects=True)
        assert "not found" in response.get_data(as_text=True)

    def test_unknown_kind(self, client):
        assert client.post("/bus/x/delete").status_code == 404


class TestExport:
    """Tests for CSV downloads."""

    def test_profit_csv(self, client, populated):
        response = client.get("/export/profit.csv")
        assert response.status_code == 200
        assert response.mimetype == "text/csv"
        assert "fleet_profit_" in response.headers["Content-Disposition"]

        rows = list(csv.reader(io.StringIO(response.get_data(as_text=True))))
        assert rows[0][0] == "Vehicle"
        assert rows[1][-1] == "-500"
        assert rows[2][-1] == "3000"

    def test_trips_csv(self, client, populated):
        rows = list(csv.reader(io.StringIO(
            client.get("/export/trips.csv").get_data(as_text=True)
        )))
        assert len(rows) == 3

    def test_unknown_kind(self, client):
        assert client.get("/export/other.csv").status_code == 404
