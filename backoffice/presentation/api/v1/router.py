"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from backoffice.presentation.api.v1.endpoints.health import router as health_router
from backoffice.presentation.api.v1.endpoints.suppliers import router as suppliers_router
from backoffice.presentation.api.v1.endpoints.customers import router as customers_router
from backoffice.presentation.api.v1.endpoints.materials import router as materials_router
from backoffice.presentation.api.v1.endpoints.material_ins import router as material_ins_router
from backoffice.presentation.api.v1.endpoints.drivers import router as drivers_router
from backoffice.presentation.api.v1.endpoints.employees import router as employees_router
from backoffice.presentation.api.v1.endpoints.vehicles import router as vehicles_router
from backoffice.presentation.api.v1.endpoints.surveys import router as surveys_router
from backoffice.presentation.api.v1.endpoints.regions import router as regions_router
from backoffice.presentation.api.v1.endpoints.users import router as users_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(suppliers_router)
router.include_router(customers_router)
router.include_router(materials_router)
router.include_router(material_ins_router)
router.include_router(drivers_router)
router.include_router(employees_router)
router.include_router(vehicles_router)
router.include_router(surveys_router)
router.include_router(regions_router)
router.include_router(users_router)
