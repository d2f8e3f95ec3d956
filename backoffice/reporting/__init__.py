"""Row models and CSV layouts shared by the API and the dashboard."""

from .csv_export import CsvExport, CsvField, ExportLayout, ExportUnavailableError, export_to_csv
from .rows import (
    PLACEHOLDER,
    RowModel,
    display,
    display_cbm,
    display_date,
    display_money,
    primary_of,
    validate_rows,
)

__all__ = [
    "CsvExport",
    "CsvField",
    "ExportLayout",
    "ExportUnavailableError",
    "export_to_csv",
    "PLACEHOLDER",
    "RowModel",
    "display",
    "display_cbm",
    "display_date",
    "display_money",
    "primary_of",
    "validate_rows",
]
