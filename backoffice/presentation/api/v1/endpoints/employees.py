"""Employee CRUD endpoints, including employment history."""

from fastapi import APIRouter, Depends, Query, Response, status

from backoffice.application.schemas import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
    MessageResponse,
    MutationResponse,
    PaginatedResponse,
)
from backoffice.application.services import EmployeeService
from backoffice.domain.entities import Employee
from backoffice.infrastructure.dependencies import get_employee_service
from backoffice.presentation.api.helpers import DOMAIN_ERRORS, csv_attachment, http_error
from backoffice.reporting.layouts import EMPLOYEE_EXPORT

router = APIRouter(prefix="/employees", tags=["Employees"])


def _to_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse.model_validate(employee, from_attributes=True)


@router.get("", response_model=PaginatedResponse[EmployeeResponse])
async def list_employees(
    search: str | None = Query(None, description="NIK, name, city, phone, position or division"),
    is_active: bool | None = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    service: EmployeeService = Depends(get_employee_service),
) -> PaginatedResponse[EmployeeResponse]:
    result = await service.list_employees(
        search=search, is_active=is_active, page=page, limit=limit
    )
    return PaginatedResponse[EmployeeResponse].from_page(result, _to_response)


@router.get("/export")
async def export_employees(
    ids: list[str] = Query(..., description="Selected employee IDs"),
    service: EmployeeService = Depends(get_employee_service),
) -> Response:
    employees = await service.get_employees(ids)
    return csv_attachment(EMPLOYEE_EXPORT, [_to_response(e) for e in employees])


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    try:
        employee = await service.get_employee(employee_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return _to_response(employee)


@router.post(
    "",
    response_model=MutationResponse[EmployeeResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    data: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> MutationResponse[EmployeeResponse]:
    try:
        employee = await service.create_employee(data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[EmployeeResponse](
        message="Employee created successfully", data=_to_response(employee)
    )


@router.put("/{employee_id}", response_model=MutationResponse[EmployeeResponse])
async def update_employee(
    employee_id: str,
    data: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
) -> MutationResponse[EmployeeResponse]:
    """Update an employee; employments with an id are edited, without one are added."""
    try:
        employee = await service.update_employee(employee_id, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[EmployeeResponse](
        message="Employee updated successfully", data=_to_response(employee)
    )


@router.delete("/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> MessageResponse:
    try:
        await service.delete_employee(employee_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MessageResponse(message="Employee deleted successfully")
