"""CSV export of selected rows.

Quoting is RFC 4180 minimal quoting from the standard ``csv`` writer:
fields holding a comma, quote, CR or LF are wrapped in quotes and embedded
quotes are doubled.
"""

import csv
import io
import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any

from .rows import RowModel, validate_rows

logger = logging.getLogger(__name__)

CSV_MEDIA_TYPE = "text/csv"


class ExportUnavailableError(Exception):
    """Raised when an export is requested with nothing selected."""


@dataclass(frozen=True)
class CsvField:
    header: str
    extract: Callable[[Any], Any]


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str
    row_count: int
    media_type: str = CSV_MEDIA_TYPE

    def save_to(self, directory: str | Path) -> Path:
        target_dir = Path(directory)
        target_dir.mkdir(parents=True, exist_ok=True)
        target = target_dir / self.filename
        target.write_text(self.content, encoding="utf-8", newline="")
        return target

    @property
    def content_disposition(self) -> str:
        return f'attachment; filename="{self.filename}"'


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


@dataclass(frozen=True)
class ExportLayout:
    """Row model and column order of one entity's CSV file."""

    name: str
    row_model: type[RowModel]
    fields: tuple[CsvField, ...]

    @property
    def prefix(self) -> str:
        return self.name.replace("-", "_")

    def render(self, payloads: Iterable[dict[str, Any]], *, on: date | None = None) -> CsvExport:
        """Validate raw payloads and export every row that survives."""
        rows = validate_rows(self.row_model, payloads)
        return export_to_csv(rows, self.fields, self.prefix, on=on)


def export_filename(prefix: str, on: date | None = None) -> str:
    return f"{prefix}_{(on or date.today()).isoformat()}.csv"


def export_to_csv(
    rows: Iterable[Any],
    fields: Sequence[CsvField],
    filename_prefix: str,
    *,
    on: date | None = None,
) -> CsvExport:
    """Write one header line then one line per row.

    A row whose extraction raises is skipped and logged.
    """
    snapshot = list(rows)
    if not snapshot:
        raise ExportUnavailableError("Select at least one row to export")

    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n")
    writer.writerow([f.header for f in fields])

    written = 0
    for row in snapshot:
        try:
            line = [_cell(f.extract(row)) for f in fields]
        except Exception:
            logger.warning(
                "Skipping row %s in %s export",
                getattr(row, "id", "?"),
                filename_prefix,
                exc_info=True,
            )
            continue
        writer.writerow(line)
        written += 1

    return CsvExport(
        filename=export_filename(filename_prefix, on),
        content=buffer.getvalue(),
        row_count=written,
    )
