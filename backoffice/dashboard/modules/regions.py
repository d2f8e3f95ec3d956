"""Province / regency / district reference data."""

from backoffice.application.schemas import (
    DistrictCreate,
    DistrictUpdate,
    ProvinceCreate,
    ProvinceUpdate,
    RegencyCreate,
    RegencyUpdate,
)
from backoffice.reporting.layouts import DISTRICT_EXPORT, PROVINCE_EXPORT, REGENCY_EXPORT
from backoffice.reporting.layouts.regions import ProvinceRow

from ..table import Column
from .base import ModuleDefinition


def region_search_fields(row: ProvinceRow):
    return (row.code, row.name)


_BASE_COLUMNS = (
    Column("code", "Code", hideable=False),
    Column("name", "Name", hideable=False),
)

PROVINCES = ModuleDefinition(
    name="provinces",
    export=PROVINCE_EXPORT,
    columns=_BASE_COLUMNS,
    search_fields=region_search_fields,
    create_schema=ProvinceCreate,
    update_schema=ProvinceUpdate,
    immutable_fields=("code",),
)

REGENCIES = ModuleDefinition(
    name="regencies",
    export=REGENCY_EXPORT,
    columns=_BASE_COLUMNS + (Column("province_code", "Province"),),
    search_fields=region_search_fields,
    create_schema=RegencyCreate,
    update_schema=RegencyUpdate,
    immutable_fields=("code",),
)

DISTRICTS = ModuleDefinition(
    name="districts",
    export=DISTRICT_EXPORT,
    columns=_BASE_COLUMNS + (Column("regency_code", "Regency"),),
    search_fields=region_search_fields,
    create_schema=DistrictCreate,
    update_schema=DistrictUpdate,
    immutable_fields=("code",),
)
