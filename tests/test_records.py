#!/usr/bin/env python3
"""Tests for the Vehicle, Driver, Trip and OperationalCost record classes."""

from models import Driver, OperationalCost, Trip, Vehicle


class TestVehicle:
    """Tests for Vehicle class."""

    def test_fixed_cost_sums_all_fields(self):
        vehicle = Vehicle(
            "KA01AB1234", emi=5000, insurance=1000, tax=500, pucc=200, permit=300
        )
        assert vehicle.fixed_cost == 7000

    def test_fixed_cost_treats_missing_as_zero(self):
        """Unset cost fields contribute zero."""
        vehicle = Vehicle("KA01AB1234", emi=5000, tax=None)
        assert vehicle.fixed_cost == 5000

    def test_fixed_cost_all_missing(self):
        assert Vehicle("KA01AB1234").fixed_cost == 0

    def test_optional_attributes_default_to_none(self):
        vehicle = Vehicle("KA01AB1234")
        assert vehicle.id is None
        assert vehicle.created_at is None
        assert vehicle.emi is None
        assert vehicle.permit is None


class TestDriver:
    """Tests for Driver class."""

    def test_required_attributes(self):
        driver = Driver("Ravi Kumar")
        assert driver.name == "Ravi Kumar"
        assert driver.license_no is None
        assert driver.contact_no is None

    def test_optional_attributes(self):
        driver = Driver("Ravi Kumar", license_no="DL-042", contact_no="98450 00000")
        assert driver.license_no == "DL-042"
        assert driver.contact_no == "98450 00000"


class TestTrip:
    """Tests for Trip class."""

    def _trip(self, **kwargs):
        return Trip("v1", "d1", "2025-01-15", "Bengaluru", "Chennai", **kwargs)

    def test_expense_sums_variable_costs(self):
        """Expense is fuel + bata + toll + RTO + misc."""
        trip = self._trip(fuel=2000, bata=500, toll=100, rto=50, misc=50, hire=10000)
        assert trip.expense == 2700

    def test_expense_excludes_hire_and_liters(self):
        trip = self._trip(fuel_liters=120, hire=10000)
        assert trip.expense == 0

    def test_balance(self):
        trip = self._trip(fuel=2000, bata=500, toll=100, rto=50, misc=50, hire=10000)
        assert trip.balance == 7300

    def test_balance_with_missing_hire(self):
        trip = self._trip(fuel=300)
        assert trip.balance == -300

    def test_route(self):
        assert self._trip().route == "Bengaluru -> Chennai"


class TestOperationalCost:
    """Tests for OperationalCost class."""

    def test_attributes(self):
        cost = OperationalCost("v1", maintenance_charge=800, notes="Brake pads")
        assert cost.vehicle_id == "v1"
        assert cost.maintenance_charge == 800
        assert cost.notes == "Brake pads"

    def test_optional_attributes_default_to_none(self):
        cost = OperationalCost("v1")
        assert cost.maintenance_charge is None
        assert cost.notes is None
        assert cost.id is None
