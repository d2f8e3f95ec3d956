"""Application service (use case) for Employee operations."""

import logging

from backoffice.application.interfaces import EmployeeRepository
from backoffice.application.schemas.employee import EmployeeCreate, EmployeeUpdate
from backoffice.domain.entities import Employee, Employment, Page
from backoffice.domain.exceptions import DuplicateEntityError, EntityNotFoundError

from .sub_records import build_sub_records, merge_sub_records

logger = logging.getLogger(__name__)


class EmployeeService:

    def __init__(self, repository: EmployeeRepository):
        self._repository = repository

    async def get_employee(self, employee_id: str) -> Employee:
        employee = await self._repository.get_by_id(employee_id)
        if employee is None:
            raise EntityNotFoundError("Employee", employee_id)
        return employee

    async def get_employees(self, employee_ids: list[str]) -> list[Employee]:
        return await self._repository.get_by_ids(employee_ids)

    async def list_employees(
        self,
        *,
        search: str | None = None,
        is_active: bool | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Employee]:
        return await self._repository.get_all(
            search=search, is_active=is_active, page=page, limit=limit
        )

    async def create_employee(self, data: EmployeeCreate) -> Employee:
        if await self._repository.get_by_nik(data.nik) is not None:
            raise DuplicateEntityError("Employee", "nik", data.nik)
        employee = Employee(
            employments=build_sub_records(data.employments, Employment),
            **data.model_dump(exclude={"employments"}),
        )
        created = await self._repository.create(employee)
        logger.info("Created employee %s (%s)", created.nik, created.id)
        return created

    async def update_employee(self, employee_id: str, data: EmployeeUpdate) -> Employee:
        employee = await self.get_employee(employee_id)
        changes = data.model_dump(exclude_unset=True, exclude={"employments"})
        if data.employments is not None:
            changes["employments"] = merge_sub_records(
                employee.employments, data.employments, Employment, "Employment"
            )
        employee.update(**changes)
        updated = await self._repository.update(employee)
        logger.info("Updated employee %s", updated.nik)
        return updated

    async def delete_employee(self, employee_id: str) -> bool:
        employee = await self.get_employee(employee_id)
        deleted = await self._repository.delete(employee_id)
        logger.info("Deleted employee %s", employee.nik)
        return deleted
