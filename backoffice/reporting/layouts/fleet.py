"""Driver, employee and vehicle rows."""

from pydantic import BaseModel, ConfigDict

from backoffice.domain.entities import Gender, VehicleType

from ..csv_export import CsvField, ExportLayout
from ..rows import LenientDate, RowModel


def status_label(active: bool) -> str:
    return "Active" if active else "Inactive"


class DriverRow(RowModel):
    code: str
    name: str
    gender: Gender
    address_line1: str
    address_line2: str | None = None
    city: str
    phone_number: str
    status_active: bool = True
    active_date: LenientDate = None


class EmploymentRow(BaseModel):
    model_config = ConfigDict(extra="ignore")

    start_date: LenientDate = None
    end_date: LenientDate = None
    position: str | None = None
    division: str | None = None


class EmployeeRow(RowModel):
    nik: str
    name: str
    gender: Gender
    city: str
    phone_number: str
    is_active: bool = True
    active_date: LenientDate = None
    resign_date: LenientDate = None
    current_employment: EmploymentRow | None = None

    @property
    def position(self) -> str | None:
        return self.current_employment.position if self.current_employment else None

    @property
    def division(self) -> str | None:
        return self.current_employment.division if self.current_employment else None


class VehicleRow(RowModel):
    vehicle_number: str
    vehicle_type: VehicleType
    vehicle_make: str | None = None
    vehicle_year: str | None = None


DRIVER_EXPORT = ExportLayout(
    "drivers",
    DriverRow,
    (
        CsvField("Code", lambda r: r.code),
        CsvField("Name", lambda r: r.name),
        CsvField("Gender", lambda r: r.gender),
        CsvField("Address", lambda r: r.address_line1),
        CsvField("City", lambda r: r.city),
        CsvField("Phone", lambda r: r.phone_number),
        CsvField("Status", lambda r: status_label(r.status_active)),
        CsvField("Active Date", lambda r: r.active_date),
    ),
)

EMPLOYEE_EXPORT = ExportLayout(
    "employees",
    EmployeeRow,
    (
        CsvField("NIK", lambda r: r.nik),
        CsvField("Name", lambda r: r.name),
        CsvField("Gender", lambda r: r.gender),
        CsvField("Position", lambda r: r.position),
        CsvField("Division", lambda r: r.division),
        CsvField("City", lambda r: r.city),
        CsvField("Phone", lambda r: r.phone_number),
        CsvField("Status", lambda r: status_label(r.is_active)),
        CsvField("Active Date", lambda r: r.active_date),
    ),
)

VEHICLE_EXPORT = ExportLayout(
    "vehicles",
    VehicleRow,
    (
        CsvField("Vehicle Number", lambda r: r.vehicle_number),
        CsvField("Type", lambda r: r.vehicle_type),
        CsvField("Make", lambda r: r.vehicle_make),
        CsvField("Year", lambda r: r.vehicle_year),
    ),
)
