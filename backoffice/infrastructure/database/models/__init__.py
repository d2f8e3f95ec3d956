from .party import (
    CustomerAddressModel,
    CustomerContactModel,
    CustomerModel,
    SupplierAddressModel,
    SupplierContactModel,
    SupplierModel,
)
from .material import MaterialInItemModel, MaterialInModel, MaterialModel
from .fleet import DriverModel, EmployeeModel, EmploymentModel, VehicleModel
from .survey import SurveyItemModel, SurveyModel, SurveyStatusHistoryModel
from .region import DistrictModel, ProvinceModel, RegencyModel
from .user import UserModel

__all__ = [
    "CustomerAddressModel",
    "CustomerContactModel",
    "CustomerModel",
    "SupplierAddressModel",
    "SupplierContactModel",
    "SupplierModel",
    "MaterialInItemModel",
    "MaterialInModel",
    "MaterialModel",
    "DriverModel",
    "EmployeeModel",
    "EmploymentModel",
    "VehicleModel",
    "SurveyItemModel",
    "SurveyModel",
    "SurveyStatusHistoryModel",
    "DistrictModel",
    "ProvinceModel",
    "RegencyModel",
    "UserModel",
]
