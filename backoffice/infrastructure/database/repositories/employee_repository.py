"""Concrete repository implementation for Employee backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.application.interfaces import EmployeeRepository
from backoffice.domain.entities import Employee, Employment, Gender, Page
from backoffice.infrastructure.database.models import EmployeeModel, EmploymentModel

from .base import copy_attributes, paginate, search_clause, sync_children

_FIELDS = (
    "name",
    "address",
    "city",
    "zipcode",
    "phone_number",
    "is_active",
    "active_date",
    "resign_date",
    "photo",
)
_EMPLOYMENT_FIELDS = ("start_date", "end_date", "position", "division")


class SQLAlchemyEmployeeRepository(EmployeeRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: EmployeeModel) -> Employee:
        employee = Employee(
            id=model.id,
            nik=model.nik,
            name=model.name,
            gender=Gender(model.gender),
            address=model.address,
            city=model.city,
            zipcode=model.zipcode,
            phone_number=model.phone_number,
            employments=[
                Employment(
                    id=e.id,
                    start_date=e.start_date,
                    end_date=e.end_date,
                    position=e.position,
                    division=e.division,
                )
                for e in model.employments
            ],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
        copy_attributes(employee, model, _FIELDS)
        return employee

    @staticmethod
    def _employment_to_model(entity: Employment) -> EmploymentModel:
        model = EmploymentModel(id=entity.id)
        copy_attributes(model, entity, _EMPLOYMENT_FIELDS)
        return model

    @staticmethod
    def _apply_employment(model: EmploymentModel, entity: Employment) -> None:
        copy_attributes(model, entity, _EMPLOYMENT_FIELDS)

    def _to_model(self, entity: Employee) -> EmployeeModel:
        model = EmployeeModel(
            id=entity.id,
            nik=entity.nik,
            gender=entity.gender.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
        copy_attributes(model, entity, _FIELDS)
        model.employments = [self._employment_to_model(e) for e in entity.employments]
        return model

    async def get_by_id(self, employee_id: str) -> Employee | None:
        result = await self._session.get(EmployeeModel, employee_id)
        return self._to_entity(result) if result else None

    async def get_by_nik(self, nik: str) -> Employee | None:
        stmt = select(EmployeeModel).where(EmployeeModel.nik == nik)
        result = (await self._session.execute(stmt)).scalar_one_or_none()
        return self._to_entity(result) if result else None

    async def get_by_ids(self, employee_ids: list[str]) -> list[Employee]:
        if not employee_ids:
            return []
        stmt = (
            select(EmployeeModel)
            .where(EmployeeModel.id.in_(employee_ids))
            .order_by(EmployeeModel.nik)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_all(
        self,
        *,
        search: str | None = None,
        is_active: bool | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Employee]:
        stmt = select(EmployeeModel)
        clause = search_clause(
            search,
            EmployeeModel.nik,
            EmployeeModel.name,
            EmployeeModel.city,
            EmployeeModel.phone_number,
        )
        if clause is not None:
            employment_clause = search_clause(
                search, EmploymentModel.position, EmploymentModel.division
            )
            stmt = stmt.where(clause | EmployeeModel.employments.any(employment_clause))
        if is_active is not None:
            stmt = stmt.where(EmployeeModel.is_active == is_active)
        stmt = stmt.order_by(EmployeeModel.created_at.desc(), EmployeeModel.nik)
        return await paginate(
            self._session, stmt, page=page, limit=limit, convert=self._to_entity
        )

    async def create(self, employee: Employee) -> Employee:
        model = self._to_model(employee)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, employee: Employee) -> Employee:
        model = await self._session.get(EmployeeModel, employee.id)
        if model is None:
            raise ValueError(f"Employee {employee.id} not found in database")
        copy_attributes(model, employee, _FIELDS)
        model.gender = employee.gender.value
        model.updated_at = employee.updated_at
        sync_children(
            model.employments,
            employee.employments,
            self._employment_to_model,
            self._apply_employment,
        )
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, employee_id: str) -> bool:
        model = await self._session.get(EmployeeModel, employee_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
