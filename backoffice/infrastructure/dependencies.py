"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.application.services import (
    CustomerService,
    DriverService,
    EmployeeService,
    MaterialInService,
    MaterialService,
    RegionService,
    SupplierService,
    SurveyService,
    UserService,
    VehicleService,
)
from backoffice.infrastructure.database.session import get_db_session
from backoffice.infrastructure.database.repositories import (
    SQLAlchemyCustomerRepository,
    SQLAlchemyDriverRepository,
    SQLAlchemyEmployeeRepository,
    SQLAlchemyMaterialInRepository,
    SQLAlchemyMaterialRepository,
    SQLAlchemyRegionRepository,
    SQLAlchemySupplierRepository,
    SQLAlchemySurveyRepository,
    SQLAlchemyUserRepository,
    SQLAlchemyVehicleRepository,
)


async def get_supplier_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SupplierService, None]:
    """Provides a SupplierService; purchases are consulted before deletes."""
    yield SupplierService(
        SQLAlchemySupplierRepository(session),
        SQLAlchemyMaterialInRepository(session),
    )


async def get_customer_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[CustomerService, None]:
    """Provides a CustomerService; surveys are consulted before deletes."""
    yield CustomerService(
        SQLAlchemyCustomerRepository(session),
        SQLAlchemySurveyRepository(session),
    )


async def get_material_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[MaterialService, None]:
    yield MaterialService(
        SQLAlchemyMaterialRepository(session),
        SQLAlchemyMaterialInRepository(session),
    )


async def get_material_in_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[MaterialInService, None]:
    """Provides a MaterialInService wired to the material and supplier repositories.

    All three share the request session so stock bookings commit together
    with the purchase record.
    """
    yield MaterialInService(
        SQLAlchemyMaterialInRepository(session),
        SQLAlchemyMaterialRepository(session),
        SQLAlchemySupplierRepository(session),
    )


async def get_driver_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[DriverService, None]:
    yield DriverService(SQLAlchemyDriverRepository(session))


async def get_employee_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[EmployeeService, None]:
    yield EmployeeService(SQLAlchemyEmployeeRepository(session))


async def get_vehicle_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[VehicleService, None]:
    yield VehicleService(SQLAlchemyVehicleRepository(session))


async def get_survey_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SurveyService, None]:
    """Provides a SurveyService with the customer repository for name lookups."""
    yield SurveyService(
        SQLAlchemySurveyRepository(session),
        SQLAlchemyCustomerRepository(session),
    )


async def get_region_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[RegionService, None]:
    """Provides a RegionService for provinces, regencies and districts."""
    yield RegionService(SQLAlchemyRegionRepository(session))


async def get_user_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[UserService, None]:
    yield UserService(SQLAlchemyUserRepository(session))
