"""Envelopes shared by every list and mutation endpoint."""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from backoffice.domain.entities import Page

T = TypeVar("T")

PHONE_PATTERN = r"^([+]?[\s0-9]+)?(\d{3}|[(]?[0-9]+[)])?([-]?[\s]?[0-9])+$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
ZIPCODE_PATTERN = r"^\d{5}$"


class PaginatedResponse(BaseModel, Generic[T]):
    """``{data, total, page, totalPages}``: one page of a filtered list."""

    data: list[T]
    total: int
    page: int
    total_pages: int = Field(alias="totalPages")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_page(
        cls, page: Page[Any], convert: Callable[[Any], T]
    ) -> "PaginatedResponse[T]":
        return cls(
            data=[convert(item) for item in page.data],
            total=page.total,
            page=page.page,
            total_pages=page.total_pages,
        )


class MutationResponse(BaseModel, Generic[T]):
    """``{message, data}`` returned by create/update endpoints."""

    message: str
    data: T


class MessageResponse(BaseModel):
    message: str


class BulkResponse(BaseModel):
    message: str
    count: int


class NextCodeResponse(BaseModel):
    code: str


def ensure_single_primary(items: list[Any] | None, label: str) -> None:
    """At most one sub-record may carry ``is_primary``."""
    if items and sum(1 for item in items if item.is_primary) > 1:
        raise ValueError(f"Only one {label} can be marked as primary")


def ensure_unique(items: list[Any] | None, attribute: str, label: str) -> None:
    if not items:
        return
    values = [getattr(item, attribute) for item in items]
    if len(values) != len(set(values)):
        raise ValueError(f"Each {label} can only be used once")
