"""Material and material purchase rows."""

from pydantic import BaseModel, ConfigDict

from backoffice.domain.entities import MaterialCategory, StockStatus, StockType, Unit

from ..csv_export import CsvField, ExportLayout
from ..rows import Amount, Count, LenientDateTime, RowModel, display_money


class MaterialRow(RowModel):
    code: str
    name: str
    description: str | None = None
    category: MaterialCategory
    unit: Unit
    brand: str | None = None
    current_stock: Count = 0
    minimum_stock: Count = 0
    maximum_stock: int | None = None
    good_stock: Count = 0
    bad_stock: Count = 0
    last_purchase_price: Amount = 0.0
    stock_status: StockStatus | None = None


class MaterialInItemRow(BaseModel):
    model_config = ConfigDict(extra="ignore")

    material_id: str | None = None
    material_code: str | None = None
    material_name: str | None = None
    quantity: Count = 0
    unit_price: Amount = 0.0
    total_price: Amount = 0.0
    stock_type: StockType = StockType.GOOD


class MaterialInRow(RowModel):
    transaction_no: str
    transaction_date: LenientDateTime = None
    supplier_id: str
    supplier_name: str | None = None
    invoice_no: str | None = None
    total_amount_before_tax: Amount = 0.0
    total_tax: Amount = 0.0
    other_costs: Amount = 0.0
    total_amount: Amount = 0.0
    created_by: str | None = None
    items: list[MaterialInItemRow] = []


MATERIAL_EXPORT = ExportLayout(
    "materials",
    MaterialRow,
    (
        CsvField("Code", lambda r: r.code),
        CsvField("Name", lambda r: r.name),
        CsvField("Category", lambda r: r.category),
        CsvField("Unit", lambda r: r.unit),
        CsvField("Brand", lambda r: r.brand),
        CsvField("Current Stock", lambda r: r.current_stock),
        CsvField("Good Stock", lambda r: r.good_stock),
        CsvField("Bad Stock", lambda r: r.bad_stock),
        CsvField("Minimum Stock", lambda r: r.minimum_stock),
        CsvField("Maximum Stock", lambda r: r.maximum_stock),
        CsvField("Stock Status", lambda r: r.stock_status),
        CsvField("Last Purchase Price", lambda r: display_money(r.last_purchase_price)),
    ),
)

MATERIAL_IN_EXPORT = ExportLayout(
    "material-ins",
    MaterialInRow,
    (
        CsvField("Transaction No", lambda r: r.transaction_no),
        CsvField("Date", lambda r: r.transaction_date.date() if r.transaction_date else None),
        CsvField("Supplier", lambda r: r.supplier_name),
        CsvField("Invoice No", lambda r: r.invoice_no),
        CsvField("Items", lambda r: len(r.items)),
        CsvField("Subtotal", lambda r: display_money(r.total_amount_before_tax)),
        CsvField("Tax", lambda r: display_money(r.total_tax)),
        CsvField("Other Costs", lambda r: display_money(r.other_costs)),
        CsvField("Total", lambda r: display_money(r.total_amount)),
    ),
)
