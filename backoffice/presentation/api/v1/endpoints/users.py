"""User and role management endpoints."""

from fastapi import APIRouter, Depends, Query, Response, status

from backoffice.application.schemas import (
    MessageResponse,
    MutationResponse,
    PaginatedResponse,
    UserCreate,
    UserResponse,
    UserRoleUpdate,
    UserStatusUpdate,
)
from backoffice.application.services import UserService
from backoffice.domain.entities import Role, User
from backoffice.domain.exceptions import EntityNotFoundError
from backoffice.infrastructure.dependencies import get_user_service
from backoffice.presentation.api.helpers import DOMAIN_ERRORS, csv_attachment, http_error
from backoffice.reporting.layouts import USER_EXPORT

router = APIRouter(prefix="/users", tags=["Users"])


def _to_response(user: User) -> UserResponse:
    return UserResponse.model_validate(user, from_attributes=True)


@router.get("", response_model=PaginatedResponse[UserResponse])
async def list_users(
    search: str | None = Query(None, description="Name, email or role"),
    role: Role | None = Query(None),
    is_active: bool | None = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    service: UserService = Depends(get_user_service),
) -> PaginatedResponse[UserResponse]:
    result = await service.list_users(
        search=search, role=role, is_active=is_active, page=page, limit=limit
    )
    return PaginatedResponse[UserResponse].from_page(result, _to_response)


@router.get("/export")
async def export_users(
    ids: list[str] = Query(..., description="Selected user IDs"),
    service: UserService = Depends(get_user_service),
) -> Response:
    users = []
    for user_id in ids:
        try:
            users.append(await service.get_user(user_id))
        except EntityNotFoundError:
            continue
    return csv_attachment(USER_EXPORT, [_to_response(u) for u in users])


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        user = await service.get_user(user_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return _to_response(user)


@router.post(
    "",
    response_model=MutationResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> MutationResponse[UserResponse]:
    try:
        user = await service.create_user(data)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[UserResponse](
        message="User created successfully", data=_to_response(user)
    )


@router.patch("/{user_id}/role", response_model=MutationResponse[UserResponse])
async def update_user_role(
    user_id: str,
    data: UserRoleUpdate,
    service: UserService = Depends(get_user_service),
) -> MutationResponse[UserResponse]:
    try:
        user = await service.update_role(user_id, data.role)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[UserResponse](
        message="User role updated successfully", data=_to_response(user)
    )


@router.patch("/{user_id}/status", response_model=MutationResponse[UserResponse])
async def update_user_status(
    user_id: str,
    data: UserStatusUpdate,
    service: UserService = Depends(get_user_service),
) -> MutationResponse[UserResponse]:
    try:
        user = await service.update_status(user_id, data.is_active)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MutationResponse[UserResponse](
        message="User status updated successfully", data=_to_response(user)
    )


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    try:
        await service.delete_user(user_id)
    except DOMAIN_ERRORS as e:
        raise http_error(e)
    return MessageResponse(message="User deleted successfully")
