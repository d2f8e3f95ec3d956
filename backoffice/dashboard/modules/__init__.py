from .base import ModuleDefinition
from .party import CUSTOMERS, SUPPLIERS
from .materials import MATERIAL_INS, MATERIALS
from .fleet import DRIVERS, EMPLOYEES, VEHICLES
from .surveys import SURVEYS
from .regions import DISTRICTS, PROVINCES, REGENCIES
from .users import USERS

MODULES: dict[str, ModuleDefinition] = {
    module.name: module
    for module in (
        SUPPLIERS,
        CUSTOMERS,
        MATERIALS,
        MATERIAL_INS,
        DRIVERS,
        EMPLOYEES,
        VEHICLES,
        SURVEYS,
        PROVINCES,
        REGENCIES,
        DISTRICTS,
        USERS,
    )
}

__all__ = [
    "MODULES",
    "ModuleDefinition",
    "CUSTOMERS",
    "DISTRICTS",
    "DRIVERS",
    "EMPLOYEES",
    "MATERIALS",
    "MATERIAL_INS",
    "PROVINCES",
    "REGENCIES",
    "SUPPLIERS",
    "SURVEYS",
    "USERS",
    "VEHICLES",
]
