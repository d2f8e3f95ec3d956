"""Application service (use case) for Customer operations."""

import logging

from backoffice.application.interfaces import CustomerRepository, SurveyRepository
from backoffice.application.schemas.customer import CustomerCreate, CustomerUpdate
from backoffice.domain.entities import (
    Address,
    Contact,
    Customer,
    CustomerType,
    Page,
    StatusActive,
)
from backoffice.domain.exceptions import EntityNotFoundError, ReferencedEntityError
from backoffice.domain.numbering import CUSTOMER_PREFIX, next_party_code

from .sub_records import build_sub_records, merge_sub_records

logger = logging.getLogger(__name__)


class CustomerService:
    """Orchestrates customer CRUD logic. Depends on repository ports (DI)."""

    def __init__(self, repository: CustomerRepository, survey_repository: SurveyRepository):
        self._repository = repository
        self._surveys = survey_repository

    async def get_customer(self, customer_id: str) -> Customer:
        customer = await self._repository.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError("Customer", customer_id)
        return customer

    async def get_customers(self, customer_ids: list[str]) -> list[Customer]:
        return await self._repository.get_by_ids(customer_ids)

    async def list_customers(
        self,
        *,
        search: str | None = None,
        customer_type: CustomerType | None = None,
        status_active: StatusActive | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> Page[Customer]:
        return await self._repository.get_all(
            search=search,
            customer_type=customer_type,
            status_active=status_active,
            page=page,
            limit=limit,
        )

    async def next_code(self) -> str:
        return next_party_code(CUSTOMER_PREFIX, await self._repository.get_last_code())

    async def create_customer(self, data: CustomerCreate) -> Customer:
        values = data.model_dump(exclude={"addresses", "contacts"})
        customer = Customer(
            code=await self.next_code(),
            addresses=build_sub_records(data.addresses, Address),
            contacts=build_sub_records(data.contacts, Contact),
            **values,
        )
        created = await self._repository.create(customer)
        logger.info("Created customer %s (%s)", created.code, created.id)
        return created

    async def update_customer(self, customer_id: str, data: CustomerUpdate) -> Customer:
        customer = await self.get_customer(customer_id)

        changes = data.model_dump(exclude_unset=True, exclude={"addresses", "contacts"})
        if data.addresses is not None:
            changes["addresses"] = merge_sub_records(
                customer.addresses, data.addresses, Address, "Address"
            )
        if data.contacts is not None:
            changes["contacts"] = merge_sub_records(
                customer.contacts, data.contacts, Contact, "Contact"
            )

        customer.update(**changes)
        updated = await self._repository.update(customer)
        logger.info("Updated customer %s", updated.code)
        return updated

    async def delete_customer(self, customer_id: str) -> bool:
        customer = await self.get_customer(customer_id)
        surveys = await self._surveys.count_by_customer(customer_id)
        if surveys:
            raise ReferencedEntityError("Customer", customer.code, "surveys", surveys)
        deleted = await self._repository.delete(customer_id)
        logger.info("Deleted customer %s", customer.code)
        return deleted
