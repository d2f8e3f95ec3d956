"""Pydantic DTOs for the Supplier feature."""

from backoffice.domain.entities import SupplierType

from .party import PartyCreate, PartyResponse, PartyUpdate


class SupplierCreate(PartyCreate):
    """The code is generated on creation and never sent by the client."""

    supplier_type: SupplierType


class SupplierUpdate(PartyUpdate):
    supplier_type: SupplierType | None = None


class SupplierResponse(PartyResponse):
    supplier_type: SupplierType
