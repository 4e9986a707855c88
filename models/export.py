"""CSV export of profit reports and the trip ledger."""

import csv
import io
from datetime import date
from typing import Iterable, List, Optional, TextIO, Union

from .calculations import amount
from .profit_calculation import ProfitCalculation
from .trip import Trip

PROFIT_HEADERS = [
    "Vehicle",
    "Trips",
    "Total Hire",
    "Fixed Cost",
    "Variable Cost",
    "Maintenance",
    "Profit/Loss",
]

TRIP_HEADERS = [
    "Date",
    "Vehicle",
    "Driver",
    "From",
    "To",
    "Fuel (L)",
    "Fuel",
    "Bata",
    "Toll",
    "RTO",
    "Misc",
    "Hire",
    "Expense",
    "Balance",
]


def csv_number(value) -> Union[int, float]:
    """Whole amounts without a trailing .0, others rounded to paise."""
    number = amount(value)
    if number.is_integer():
        return int(number)
    return round(number, 2)


def profit_rows(calculations: Iterable[ProfitCalculation]) -> List[list]:
    return [
        [
            c.vehicle_number,
            c.trip_count,
            csv_number(c.total_hire),
            csv_number(c.fixed_cost),
            csv_number(c.variable_cost),
            csv_number(c.maintenance_cost),
            csv_number(c.profit),
        ]
        for c in calculations
    ]


def trip_rows(trips: Iterable[Trip]) -> List[list]:
    return [
        [
            t.date,
            t.vehicle_number or t.vehicle_id,
            t.driver_name or t.driver_id,
            t.from_location,
            t.to_location,
            csv_number(t.fuel_liters),
            csv_number(t.fuel),
            csv_number(t.bata),
            csv_number(t.toll),
            csv_number(t.rto),
            csv_number(t.misc),
            csv_number(t.hire),
            csv_number(t.expense),
            csv_number(t.balance),
        ]
        for t in trips
    ]


def write_profit_csv(calculations: Iterable[ProfitCalculation], fp: TextIO) -> None:
    writer = csv.writer(fp)
    writer.writerow(PROFIT_HEADERS)
    writer.writerows(profit_rows(calculations))


def write_trips_csv(trips: Iterable[Trip], fp: TextIO) -> None:
    writer = csv.writer(fp)
    writer.writerow(TRIP_HEADERS)
    writer.writerows(trip_rows(trips))


def profit_csv(calculations: Iterable[ProfitCalculation]) -> str:
    """Profit report as CSV text."""
    buf = io.StringIO()
    write_profit_csv(calculations, buf)
    return buf.getvalue()


def trips_csv(trips: Iterable[Trip]) -> str:
    """Trip ledger as CSV text."""
    buf = io.StringIO()
    write_trips_csv(trips, buf)
    return buf.getvalue()


def export_filename(kind: str, today: Optional[date] = None) -> str:
    """Default download name, e.g. fleet_profit_2025-01-15.csv."""
    today = today or date.today()
    return f"fleet_{kind}_{today.isoformat()}.csv"
