"""Materials and material purchases."""

from typing import Any

from backoffice.application.schemas import (
    MaterialCreate,
    MaterialInCreate,
    MaterialInUpdate,
    MaterialUpdate,
)
from backoffice.domain import calculations
from backoffice.reporting import display, display_date, display_money
from backoffice.reporting.layouts import MATERIAL_EXPORT, MATERIAL_IN_EXPORT
from backoffice.reporting.layouts.materials import MaterialInRow, MaterialRow

from ..table import Column
from .base import ModuleDefinition

# ── Materials ────────────────────────────────────────────────────────


def material_search_fields(row: MaterialRow):
    return (row.code, row.name, row.description, row.category, row.brand)


def _present_material(entity: dict[str, Any]) -> dict[str, str]:
    row = MaterialRow.model_validate(entity)
    return {
        "Code": row.code,
        "Name": row.name,
        "Category": display(row.category),
        "Unit": display(row.unit),
        "Brand": display(row.brand),
        "Description": display(row.description),
        "Current Stock": str(row.current_stock),
        "Good Stock": str(row.good_stock),
        "Bad Stock": str(row.bad_stock),
        "Minimum Stock": str(row.minimum_stock),
        "Maximum Stock": display(row.maximum_stock),
        "Stock Status": display(row.stock_status),
        "Last Purchase Price": display_money(row.last_purchase_price),
    }


MATERIALS = ModuleDefinition(
    name="materials",
    export=MATERIAL_EXPORT,
    columns=(
        Column("code", "Code", hideable=False),
        Column("name", "Name", hideable=False),
        Column("category", "Category"),
        Column("unit", "Unit"),
        Column("current_stock", "Stock"),
        Column("stock_status", "Status"),
        Column("last_purchase_price", "Last Price"),
    ),
    search_fields=material_search_fields,
    create_schema=MaterialCreate,
    update_schema=MaterialUpdate,
    immutable_fields=("code", "current_stock", "good_stock", "bad_stock"),
    presenter=_present_material,
)


# ── Material purchases ───────────────────────────────────────────────


def material_in_search_fields(row: MaterialInRow):
    return (row.transaction_no, row.supplier_name, row.invoice_no)


def derive_material_in(values: dict[str, Any]) -> None:
    """Line totals, subtotal, tax and grand total of a purchase draft."""
    items = values.get("items") or []
    for line in items:
        line["total_price"] = calculations.line_total(line.get("quantity"), line.get("unit_price"))
    subtotal = calculations.subtotal(line["total_price"] for line in items)
    tax = calculations.tax_from_percentage(subtotal, values.get("tax_percentage"))
    if tax is None:
        tax = values.get("total_tax")
    values["total_amount_before_tax"] = subtotal
    values["tax_amount"] = float(tax or 0)
    values["total_amount"] = calculations.grand_total([subtotal], tax, values.get("other_costs"))


def _present_material_in(entity: dict[str, Any]) -> dict[str, str]:
    row = MaterialInRow.model_validate(entity)
    fields = {
        "Transaction No": row.transaction_no,
        "Date": display_date(row.transaction_date),
        "Supplier": display(row.supplier_name),
        "Invoice No": display(row.invoice_no),
        "Subtotal": display_money(row.total_amount_before_tax),
        "Tax": display_money(row.total_tax),
        "Other Costs": display_money(row.other_costs),
        "Total": display_money(row.total_amount),
        "Created By": display(row.created_by),
    }
    for number, item in enumerate(row.items, start=1):
        fields[f"Item {number}"] = (
            f"{display(item.material_name)} × {item.quantity} @ "
            f"{display_money(item.unit_price)} = {display_money(item.total_price)}"
        )
    return fields


MATERIAL_INS = ModuleDefinition(
    name="material-ins",
    export=MATERIAL_IN_EXPORT,
    columns=(
        Column("transaction_no", "Transaction No", hideable=False),
        Column("transaction_date", "Date"),
        Column("supplier_name", "Supplier"),
        Column("invoice_no", "Invoice"),
        Column("items", "Items", accessor=lambda r: len(r.items)),
        Column("total_amount", "Total"),
    ),
    search_fields=material_in_search_fields,
    create_schema=MaterialInCreate,
    update_schema=MaterialInUpdate,
    immutable_fields=("transaction_no", "supplier_id", "items"),
    derived_fields=(
        "items.*.total_price",
        "total_amount_before_tax",
        "tax_amount",
        "total_amount",
    ),
    derive=derive_material_in,
    presenter=_present_material_in,
)
