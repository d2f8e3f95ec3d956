from .party_repository import SQLAlchemyCustomerRepository, SQLAlchemySupplierRepository
from .material_repository import SQLAlchemyMaterialRepository
from .material_in_repository import SQLAlchemyMaterialInRepository
from .driver_repository import SQLAlchemyDriverRepository
from .employee_repository import SQLAlchemyEmployeeRepository
from .vehicle_repository import SQLAlchemyVehicleRepository
from .survey_repository import SQLAlchemySurveyRepository
from .region_repository import SQLAlchemyRegionRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyCustomerRepository",
    "SQLAlchemySupplierRepository",
    "SQLAlchemyMaterialRepository",
    "SQLAlchemyMaterialInRepository",
    "SQLAlchemyDriverRepository",
    "SQLAlchemyEmployeeRepository",
    "SQLAlchemyVehicleRepository",
    "SQLAlchemySurveyRepository",
    "SQLAlchemyRegionRepository",
    "SQLAlchemyUserRepository",
]
