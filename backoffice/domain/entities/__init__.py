from .pagination import Page
from .party import Address, AddressType, Contact, ContactType, StatusActive
from .supplier import Supplier, SupplierType
from .customer import Customer, CustomerType
from .material import Material, MaterialCategory, StockStatus, StockType, Unit
from .material_in import MaterialIn, MaterialInItem
from .driver import Driver, Gender
from .employee import Employee, Employment
from .vehicle import Vehicle, VehicleType
from .survey import (
    CargoType,
    ShipmentDetail,
    ShipmentType,
    Survey,
    SurveyItem,
    SurveyStatus,
    SurveyStatusHistory,
)
from .region import District, Province, Regency
from .user import Role, User

__all__ = [
    "Page",
    "Address",
    "AddressType",
    "Contact",
    "ContactType",
    "StatusActive",
    "Supplier",
    "SupplierType",
    "Customer",
    "CustomerType",
    "Material",
    "MaterialCategory",
    "StockStatus",
    "StockType",
    "Unit",
    "MaterialIn",
    "MaterialInItem",
    "Driver",
    "Gender",
    "Employee",
    "Employment",
    "Vehicle",
    "VehicleType",
    "CargoType",
    "ShipmentDetail",
    "ShipmentType",
    "Survey",
    "SurveyItem",
    "SurveyStatus",
    "SurveyStatusHistory",
    "District",
    "Province",
    "Regency",
    "Role",
    "User",
]
