"""Customer CRUD endpoints."""

from fastapi import APIRouter, Depends, Query, Response, status

from backoffice.application.schemas import (
    CustomerCreate,
    CustomerResponse,
    CustomerUpdate,
    MessageResponse,
    MutationResponse,
    NextCodeResponse,
    PaginatedResponse,
)
from backoffice.application.services import CustomerService
from backoffice.domain.entities import Customer, CustomerType, StatusActive
from backoffice.infrastructure.dependencies import get_customer_service
from backoffice.presentation.api.helpers import DOMAIN_ERRORS, csv_attachment, http_error
from backoffice.reporting.layouts import CUSTOMER_EXPORT

router = APIRouter(prefix="/customers", tags=["Customers"])


def _to_response(customer: Customer) -> CustomerResponse:
    return CustomerResponse.model_validate(customer, from_attributes=True)


@router.get("", response_model=PaginatedResponse[CustomerResponse])
async def list_customers(
    search: str | None = Query(None, description="Name, code, NPWP, contact or address"),
    customer_type: CustomerType | None = Query(None, description="Filter by customer type"),
    status_active: StatusActive | None = Query(None, description="Filter by status"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    service: CustomerService = Depends(get_customer_service),
) -> PaginatedResponse[CustomerResponse]:
    """Retrieve a filtered, paginated list of customers."""
    result = await service.list_customers(
        search=search,
        customer_type=customer_type,
        status_active=status_active,
        page=page,
        limit=limit,
    )
    return PaginatedResponse[CustomerResponse].from_page(result, _to_response)


@router.get("/export")
async def export_customers(
    ids: list[str] = Query(..., description="Selected customer IDs"),
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    """Download the selected customers as CSV."""
    customers = await service.get_customers(ids)
    return csv_attachment(CUSTOMER_EXPORT, [_to_response(c) for c in customers])


@router.get("/next-code", response_model=NextCodeResponse)
async def next_customer_code(
    service: CustomerService = Depends(get_customer_service),
) -> NextCodeResponse:
    """Preview the code the next created customer will receive."""
    return NextCodeResponse(code=await service.next_code())


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    try:
        customer = await service.get_customer(customer_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return _to_response(customer)


@router.post(
    "",
    response_model=MutationResponse[CustomerResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_customer(
    data: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
) -> MutationResponse[CustomerResponse]:
    """Create a customer; its code is assigned by the server."""
    try:
        customer = await service.create_customer(data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[CustomerResponse](
        message="Customer created successfully", data=_to_response(customer)
    )


@router.put("/{customer_id}", response_model=MutationResponse[CustomerResponse])
async def update_customer(
    customer_id: str,
    data: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
) -> MutationResponse[CustomerResponse]:
    """Partially update a customer and sync its addresses and contacts."""
    try:
        customer = await service.update_customer(customer_id, data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[CustomerResponse](
        message="Customer updated successfully", data=_to_response(customer)
    )


@router.delete("/{customer_id}", response_model=MessageResponse)
async def delete_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> MessageResponse:
    """Delete a customer that no survey refers to."""
    try:
        await service.delete_customer(customer_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MessageResponse(message="Customer deleted successfully")
