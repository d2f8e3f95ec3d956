"""Suppliers and customers: same columns and search fields."""

from backoffice.application.schemas import (
    CustomerCreate,
    CustomerUpdate,
    SupplierCreate,
    SupplierUpdate,
)
from backoffice.reporting import display, display_date
from backoffice.reporting.layouts import CUSTOMER_EXPORT, SUPPLIER_EXPORT
from backoffice.reporting.layouts.party import PartyRow, contact_attr

from ..table import Column
from .base import ModuleDefinition


def party_search_fields(row: PartyRow):
    yield row.name
    yield row.code
    yield row.npwp_number
    for contact in row.contacts:
        yield contact.name
        yield contact.phone_number
        yield contact.email
    for address in row.addresses:
        yield address.address_line1


def _columns(type_field: str) -> tuple[Column, ...]:
    return (
        Column("code", "Code", hideable=False),
        Column("name", "Name", hideable=False),
        Column(type_field, "Type"),
        Column("contact", "Contact", accessor=lambda r: contact_attr(r, "name")),
        Column("phone", "Phone", accessor=lambda r: contact_attr(r, "phone_number"), sortable=False),
        Column("status_active", "Status"),
        Column("active_date", "Active Date"),
    )


def _presenter(type_field: str):
    def present(entity: dict) -> dict[str, str]:
        row = PartyRow.model_validate(entity)
        contact = row.primary_contact
        address = row.primary_address
        return {
            "Code": row.code,
            "Name": row.name,
            "Type": display(entity.get(type_field)),
            "Status": display(row.status_active),
            "Active Date": display_date(row.active_date),
            "NPWP": display(row.npwp_number),
            "Contact": display(contact.name if contact else None),
            "Phone": display(contact.phone_number if contact else None),
            "Email": display(contact.email if contact else None),
            "Address": display(address.address_line1 if address else None),
            "Notes": display(row.notes),
        }

    return present


SUPPLIERS = ModuleDefinition(
    name="suppliers",
    export=SUPPLIER_EXPORT,
    columns=_columns("supplier_type"),
    search_fields=party_search_fields,
    create_schema=SupplierCreate,
    update_schema=SupplierUpdate,
    immutable_fields=("code",),
    presenter=_presenter("supplier_type"),
)

CUSTOMERS = ModuleDefinition(
    name="customers",
    export=CUSTOMER_EXPORT,
    columns=_columns("customer_type"),
    search_fields=party_search_fields,
    create_schema=CustomerCreate,
    update_schema=CustomerUpdate,
    immutable_fields=("code",),
    presenter=_presenter("customer_type"),
)
