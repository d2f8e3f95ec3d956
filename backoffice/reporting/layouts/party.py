"""Supplier and customer rows; both share one CSV layout."""

from pydantic import BaseModel, ConfigDict

from backoffice.domain.entities import CustomerType, StatusActive, SupplierType

from ..csv_export import CsvField, ExportLayout
from ..rows import LenientDate, RowModel, primary_of


class AddressRow(BaseModel):
    model_config = ConfigDict(extra="ignore")

    address_line1: str | None = None
    address_line2: str | None = None
    zipcode: str | None = None
    is_primary: bool = False


class ContactRow(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    phone_number: str | None = None
    email: str | None = None
    is_primary: bool = False


class PartyRow(RowModel):
    code: str
    name: str
    status_active: StatusActive
    active_date: LenientDate = None
    npwp_number: str | None = None
    notes: str | None = None
    addresses: list[AddressRow] = []
    contacts: list[ContactRow] = []

    @property
    def primary_address(self) -> AddressRow | None:
        return primary_of(self.addresses)

    @property
    def primary_contact(self) -> ContactRow | None:
        return primary_of(self.contacts)


class SupplierRow(PartyRow):
    supplier_type: SupplierType


class CustomerRow(PartyRow):
    customer_type: CustomerType


def contact_attr(row: PartyRow, attr: str) -> str | None:
    contact = row.primary_contact
    return getattr(contact, attr) if contact is not None else None


def _fields(type_field: str) -> tuple[CsvField, ...]:
    return (
        CsvField("Code", lambda r: r.code),
        CsvField("Name", lambda r: r.name),
        CsvField("Type", lambda r: getattr(r, type_field)),
        CsvField("Status", lambda r: r.status_active),
        CsvField("NPWP", lambda r: r.npwp_number),
        CsvField("Contact", lambda r: contact_attr(r, "name")),
        CsvField("Phone", lambda r: contact_attr(r, "phone_number")),
        CsvField("Email", lambda r: contact_attr(r, "email")),
        CsvField(
            "Address",
            lambda r: r.primary_address.address_line1 if r.primary_address else None,
        ),
        CsvField("Active Date", lambda r: r.active_date),
    )


SUPPLIER_EXPORT = ExportLayout("suppliers", SupplierRow, _fields("supplier_type"))
CUSTOMER_EXPORT = ExportLayout("customers", CustomerRow, _fields("customer_type"))
