from ..csv_export import ExportLayout
from .party import CUSTOMER_EXPORT, SUPPLIER_EXPORT
from .materials import MATERIAL_EXPORT, MATERIAL_IN_EXPORT
from .fleet import DRIVER_EXPORT, EMPLOYEE_EXPORT, VEHICLE_EXPORT
from .surveys import SURVEY_EXPORT
from .regions import DISTRICT_EXPORT, PROVINCE_EXPORT, REGENCY_EXPORT
from .users import USER_EXPORT

EXPORT_LAYOUTS: dict[str, ExportLayout] = {
    layout.name: layout
    for layout in (
        SUPPLIER_EXPORT,
        CUSTOMER_EXPORT,
        MATERIAL_EXPORT,
        MATERIAL_IN_EXPORT,
        DRIVER_EXPORT,
        EMPLOYEE_EXPORT,
        VEHICLE_EXPORT,
        SURVEY_EXPORT,
        PROVINCE_EXPORT,
        REGENCY_EXPORT,
        DISTRICT_EXPORT,
        USER_EXPORT,
    )
}

__all__ = [
    "EXPORT_LAYOUTS",
    "CUSTOMER_EXPORT",
    "DISTRICT_EXPORT",
    "DRIVER_EXPORT",
    "EMPLOYEE_EXPORT",
    "MATERIAL_EXPORT",
    "MATERIAL_IN_EXPORT",
    "PROVINCE_EXPORT",
    "REGENCY_EXPORT",
    "SUPPLIER_EXPORT",
    "SURVEY_EXPORT",
    "USER_EXPORT",
    "VEHICLE_EXPORT",
]
