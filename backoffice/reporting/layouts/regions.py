"""Province, regency and district rows."""

from ..csv_export import CsvField, ExportLayout
from ..rows import RowModel


class ProvinceRow(RowModel):
    code: str
    name: str


class RegencyRow(ProvinceRow):
    province_code: str


class DistrictRow(ProvinceRow):
    regency_code: str


_BASE = (
    CsvField("Code", lambda r: r.code),
    CsvField("Name", lambda r: r.name),
)

PROVINCE_EXPORT = ExportLayout("provinces", ProvinceRow, _BASE)
REGENCY_EXPORT = ExportLayout(
    "regencies", RegencyRow, _BASE + (CsvField("Province Code", lambda r: r.province_code),)
)
DISTRICT_EXPORT = ExportLayout(
    "districts", DistrictRow, _BASE + (CsvField("Regency Code", lambda r: r.regency_code),)
)
