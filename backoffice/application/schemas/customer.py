"""Pydantic DTOs for the Customer feature."""

from backoffice.domain.entities import CustomerType

from .party import PartyCreate, PartyResponse, PartyUpdate


class CustomerCreate(PartyCreate):
    customer_type: CustomerType


class CustomerUpdate(PartyUpdate):
    customer_type: CustomerType | None = None


class CustomerResponse(PartyResponse):
    customer_type: CustomerType
