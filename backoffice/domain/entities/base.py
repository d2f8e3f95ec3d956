"""Shared behaviour for mutable domain entities."""

from dataclasses import MISSING, fields
from datetime import datetime, timezone
from typing import Any, ClassVar

from backoffice.domain.exceptions import BusinessRuleError


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MutableEntity:
    """Mixin for dataclass entities that accept partial updates.

    Subclasses list their business keys in ``_immutable_fields``; those can
    be set at creation time only.
    """

    _immutable_fields: ClassVar[frozenset[str]] = frozenset({"id", "created_at"})

    def update(self, **changes: Any) -> None:
        """Apply partial changes and refresh the updated_at timestamp."""
        required = {
            f.name
            for f in fields(self)  # type: ignore[arg-type]
            if f.default is MISSING and f.default_factory is MISSING
        }
        for name, value in changes.items():
            if name in self._immutable_fields:
                raise AttributeError(f"{type(self).__name__}.{name} cannot be changed")
            if not hasattr(self, name):
                raise AttributeError(f"{type(self).__name__} has no field '{name}'")
            if value is None and name in required:
                raise BusinessRuleError(f"{type(self).__name__}.{name} cannot be empty")
        for name, value in changes.items():
            setattr(self, name, value)
        if hasattr(self, "updated_at"):
            self.updated_at = utcnow()
