from .supplier_service import SupplierService
from .customer_service import CustomerService
from .material_service import MaterialService
from .material_in_service import MaterialInService
from .driver_service import DriverService
from .employee_service import EmployeeService
from .vehicle_service import VehicleService
from .survey_service import SurveyService
from .region_service import RegionService
from .user_service import UserService

__all__ = [
    "SupplierService",
    "CustomerService",
    "MaterialService",
    "MaterialInService",
    "DriverService",
    "EmployeeService",
    "VehicleService",
    "SurveyService",
    "RegionService",
    "UserService",
]
