from .supplier_repository import SupplierRepository
from .customer_repository import CustomerRepository
from .material_repository import MaterialRepository
from .material_in_repository import MaterialInRepository
from .driver_repository import DriverRepository
from .employee_repository import EmployeeRepository
from .vehicle_repository import VehicleRepository
from .survey_repository import SurveyRepository
from .region_repository import RegionRepository
from .user_repository import UserRepository

__all__ = [
    "SupplierRepository",
    "CustomerRepository",
    "MaterialRepository",
    "MaterialInRepository",
    "DriverRepository",
    "EmployeeRepository",
    "VehicleRepository",
    "SurveyRepository",
    "RegionRepository",
    "UserRepository",
]
