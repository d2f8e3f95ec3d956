"""Drivers, employees and vehicles."""

from typing import Any

from backoffice.application.schemas import (
    DriverCreate,
    DriverUpdate,
    EmployeeCreate,
    EmployeeUpdate,
    VehicleCreate,
    VehicleUpdate,
)
from backoffice.reporting import display, display_date
from backoffice.reporting.layouts import DRIVER_EXPORT, EMPLOYEE_EXPORT, VEHICLE_EXPORT
from backoffice.reporting.layouts.fleet import DriverRow, EmployeeRow, VehicleRow, status_label

from ..table import Column
from .base import ModuleDefinition

# ── Drivers ──────────────────────────────────────────────────────────


def driver_search_fields(row: DriverRow):
    return (row.code, row.name, row.city, row.phone_number)


def _present_driver(entity: dict[str, Any]) -> dict[str, str]:
    row = DriverRow.model_validate(entity)
    return {
        "Code": row.code,
        "Name": row.name,
        "Gender": display(row.gender),
        "Address": row.address_line1,
        "Address 2": display(row.address_line2),
        "City": row.city,
        "Phone": row.phone_number,
        "Status": status_label(row.status_active),
        "Active Date": display_date(row.active_date),
    }


DRIVERS = ModuleDefinition(
    name="drivers",
    export=DRIVER_EXPORT,
    columns=(
        Column("code", "Code", hideable=False),
        Column("name", "Name", hideable=False),
        Column("gender", "Gender"),
        Column("city", "City"),
        Column("phone_number", "Phone", sortable=False),
        Column("status_active", "Status"),
    ),
    search_fields=driver_search_fields,
    create_schema=DriverCreate,
    update_schema=DriverUpdate,
    immutable_fields=("code",),
    presenter=_present_driver,
)


# ── Employees ────────────────────────────────────────────────────────


def employee_search_fields(row: EmployeeRow):
    return (row.nik, row.name, row.city, row.phone_number, row.position, row.division)


def _present_employee(entity: dict[str, Any]) -> dict[str, str]:
    row = EmployeeRow.model_validate(entity)
    return {
        "NIK": row.nik,
        "Name": row.name,
        "Gender": display(row.gender),
        "City": row.city,
        "Phone": row.phone_number,
        "Position": display(row.position),
        "Division": display(row.division),
        "Status": status_label(row.is_active),
        "Active Date": display_date(row.active_date),
        "Resign Date": display_date(row.resign_date),
    }


EMPLOYEES = ModuleDefinition(
    name="employees",
    export=EMPLOYEE_EXPORT,
    columns=(
        Column("nik", "NIK", hideable=False),
        Column("name", "Name", hideable=False),
        Column("position", "Position"),
        Column("division", "Division"),
        Column("city", "City"),
        Column("is_active", "Status"),
    ),
    search_fields=employee_search_fields,
    create_schema=EmployeeCreate,
    update_schema=EmployeeUpdate,
    immutable_fields=("nik",),
    presenter=_present_employee,
)


# ── Vehicles ─────────────────────────────────────────────────────────


def vehicle_search_fields(row: VehicleRow):
    return (row.vehicle_number, row.vehicle_make, row.vehicle_type)


VEHICLES = ModuleDefinition(
    name="vehicles",
    export=VEHICLE_EXPORT,
    columns=(
        Column("vehicle_number", "Number", hideable=False),
        Column("vehicle_type", "Type"),
        Column("vehicle_make", "Make"),
        Column("vehicle_year", "Year"),
    ),
    search_fields=vehicle_search_fields,
    create_schema=VehicleCreate,
    update_schema=VehicleUpdate,
    immutable_fields=("vehicle_number",),
    presenter=lambda e: {
        "Vehicle Number": display(e.get("vehicle_number")),
        "Type": display(e.get("vehicle_type")),
        "Make": display(e.get("vehicle_make")),
        "Year": display(e.get("vehicle_year")),
    },
)
