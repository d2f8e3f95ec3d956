"""Typed rows: the boundary between entity payloads and tables or exports.

Payloads are validated once per fetch. A row that fails validation is
dropped and logged; the rest of the page (or export) still goes out.
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import date, datetime
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError

from backoffice.domain.calculations import format_cbm, format_money

logger = logging.getLogger(__name__)

PLACEHOLDER = "-"
DATE_FORMAT = "%d %B %Y"

R = TypeVar("R", bound="RowModel")


def _zero_if_missing(value: Any) -> Any:
    return 0 if value is None or value == "" else value


def _datetime_or_none(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


def _date_or_none(value: Any) -> date | None:
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    parsed = _datetime_or_none(value)
    return parsed.date() if parsed is not None else None


Amount = Annotated[float, BeforeValidator(_zero_if_missing)]
Count = Annotated[int, BeforeValidator(_zero_if_missing)]
LenientDate = Annotated[date | None, BeforeValidator(_date_or_none)]
LenientDateTime = Annotated[datetime | None, BeforeValidator(_datetime_or_none)]


class RowModel(BaseModel):
    """Base for every table row; unknown payload keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    id: str


def validate_rows(model: type[R], payloads: Iterable[dict[str, Any]]) -> list[R]:
    rows: list[R] = []
    for index, payload in enumerate(payloads):
        try:
            rows.append(model.model_validate(payload))
        except ValidationError as e:
            logger.warning(
                "Dropping malformed %s row #%d (id=%s): %d error(s)",
                model.__name__,
                index,
                payload.get("id") if isinstance(payload, dict) else None,
                e.error_count(),
            )
    return rows


def primary_of(items: Sequence[Any] | None) -> Any | None:
    """The sub-record flagged primary, else the first one, else None."""
    if not items:
        return None
    for item in items:
        if getattr(item, "is_primary", False):
            return item
    return items[0]


def display(value: Any) -> str:
    if value is None or value == "":
        return PLACEHOLDER
    if hasattr(value, "value"):
        return str(value.value)
    return str(value)


def display_date(value: date | datetime | str | None) -> str:
    if isinstance(value, (date, datetime)):
        return value.strftime(DATE_FORMAT)
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value).strftime(DATE_FORMAT)
        except ValueError:
            return PLACEHOLDER
    return PLACEHOLDER


def display_money(value: float | None) -> str:
    return format_money(value)


def display_cbm(value: float | None) -> str:
    return format_cbm(value)
