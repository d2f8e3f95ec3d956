from .common import (
    BulkResponse,
    MessageResponse,
    MutationResponse,
    NextCodeResponse,
    PaginatedResponse,
)
from .party import AddressInput, AddressResponse, ContactInput, ContactResponse
from .supplier import SupplierCreate, SupplierResponse, SupplierUpdate
from .customer import CustomerCreate, CustomerResponse, CustomerUpdate
from .material import MaterialCreate, MaterialResponse, MaterialUpdate
from .material_in import (
    MaterialInCreate,
    MaterialInItemCreate,
    MaterialInItemResponse,
    MaterialInResponse,
    MaterialInUpdate,
)
from .driver import DriverCreate, DriverResponse, DriverUpdate
from .employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate, EmploymentInput
from .vehicle import VehicleCreate, VehicleResponse, VehicleUpdate
from .survey import (
    SurveyCreate,
    SurveyItemInput,
    SurveyResponse,
    SurveyStatsResponse,
    SurveyStatusBreakdown,
    SurveyStatusHistoryResponse,
    SurveyStatusUpdate,
    SurveyUpdate,
)
from .region import (
    DistrictCreate,
    DistrictResponse,
    DistrictUpdate,
    ProvinceCreate,
    ProvinceResponse,
    ProvinceUpdate,
    RegencyCreate,
    RegencyResponse,
    RegencyUpdate,
)
from .user import UserCreate, UserResponse, UserRoleUpdate, UserStatusUpdate

__all__ = [
    "BulkResponse",
    "MessageResponse",
    "MutationResponse",
    "NextCodeResponse",
    "PaginatedResponse",
    "AddressInput",
    "AddressResponse",
    "ContactInput",
    "ContactResponse",
    "SupplierCreate",
    "SupplierResponse",
    "SupplierUpdate",
    "CustomerCreate",
    "CustomerResponse",
    "CustomerUpdate",
    "MaterialCreate",
    "MaterialResponse",
    "MaterialUpdate",
    "MaterialInCreate",
    "MaterialInItemCreate",
    "MaterialInItemResponse",
    "MaterialInResponse",
    "MaterialInUpdate",
    "DriverCreate",
    "DriverResponse",
    "DriverUpdate",
    "EmployeeCreate",
    "EmployeeResponse",
    "EmployeeUpdate",
    "EmploymentInput",
    "VehicleCreate",
    "VehicleResponse",
    "VehicleUpdate",
    "SurveyCreate",
    "SurveyItemInput",
    "SurveyResponse",
    "SurveyStatsResponse",
    "SurveyStatusBreakdown",
    "SurveyStatusHistoryResponse",
    "SurveyStatusUpdate",
    "SurveyUpdate",
    "DistrictCreate",
    "DistrictResponse",
    "DistrictUpdate",
    "ProvinceCreate",
    "ProvinceResponse",
    "ProvinceUpdate",
    "RegencyCreate",
    "RegencyResponse",
    "RegencyUpdate",
    "UserCreate",
    "UserResponse",
    "UserRoleUpdate",
    "UserStatusUpdate",
]
