"""Merge rules for nested sub-records (addresses, contacts, employments)."""

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel

from backoffice.domain.exceptions import BusinessRuleError

T = TypeVar("T")


def build_sub_records(incoming: Sequence[BaseModel], build: Callable[..., T]) -> list[T]:
    """Create fresh sub-records, ignoring any client-sent ids."""
    return [build(**payload.model_dump(exclude={"id"})) for payload in incoming]


def merge_sub_records(
    current: Sequence[Any],
    incoming: Sequence[BaseModel],
    build: Callable[..., T],
    label: str,
) -> list[T]:
    """Apply an edited sub-record list onto the current one.

    Payloads with an ``id`` update the matching record, payloads without one
    are added, and current records absent from the payload are dropped.
    """
    by_id = {item.id: item for item in current}
    merged: list[T] = []
    for payload in incoming:
        values = payload.model_dump(exclude={"id"})
        record_id = getattr(payload, "id", None)
        if record_id is None:
            merged.append(build(**values))
            continue
        existing = by_id.get(record_id)
        if existing is None:
            raise BusinessRuleError(f"{label} '{record_id}' does not belong to this record")
        for name, value in values.items():
            setattr(existing, name, value)
        merged.append(existing)
    return merged
