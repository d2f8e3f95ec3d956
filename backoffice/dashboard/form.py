"""Schema-validated create/edit form.

States: ``IDLE`` → ``EDITING`` (clean or dirty) → ``SUBMITTING`` → back to
``IDLE`` on success, or ``EDITING`` (dirty, values kept) on a remote error.
"""

import copy
import fnmatch
import logging
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError

from backoffice.domain.exceptions import RemoteRequestError

from .client import GENERIC_ERROR_MESSAGE
from .notifications import Notifier
from .repository import EntityRepository

logger = logging.getLogger(__name__)

Derive = Callable[[dict[str, Any]], None]


class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


class FormState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    SUBMITTING = "submitting"


class FieldLockedError(ValueError):
    """Raised when code tries to write an immutable or derived field."""


def _split(path: str) -> list[str | int]:
    return [int(p) if p.isdigit() else p for p in path.split(".")]


def _read(values: Any, path: str) -> Any:
    current = values
    for part in _split(path):
        try:
            current = current[part]
        except (KeyError, IndexError, TypeError):
            return None
    return current


def _write(values: dict[str, Any], path: str, value: Any) -> None:
    parts = _split(path)
    target: Any = values
    for part in parts[:-1]:
        target = target[part]
    target[parts[-1]] = value


class EntityForm:
    """One create or edit form bound to a repository.

    ``derive`` recomputes read-only fields (line totals, CBM, grand total)
    in place after every change; paths listed in ``derived_fields`` may use
    ``*`` for a line index and can never be written directly.
    """

    def __init__(
        self,
        repository: EntityRepository,
        notifier: Notifier,
        *,
        create_schema: type[BaseModel],
        update_schema: type[BaseModel] | None = None,
        mode: FormMode = FormMode.CREATE,
        defaults: dict[str, Any] | None = None,
        entity_id: str | None = None,
        immutable_fields: Iterable[str] = (),
        derived_fields: Iterable[str] = (),
        derive: Derive | None = None,
        confirm: Callable[[str], bool] | None = None,
        on_success: Callable[[dict[str, Any] | None], None] | None = None,
    ):
        if mode is FormMode.EDIT and (entity_id is None or update_schema is None):
            raise ValueError("Edit forms need an entity_id and an update_schema")
        self._repository = repository
        self._notifier = notifier
        self._create_schema = create_schema
        self._update_schema = update_schema
        self.mode = mode
        self.entity_id = entity_id
        self._immutable = frozenset(immutable_fields)
        self._derived = tuple(derived_fields)
        self._derive = derive
        self._confirm = confirm
        self._on_success = on_success

        self._defaults: dict[str, Any] = copy.deepcopy(defaults or {})
        self._values: dict[str, Any] = {}
        self.state = FormState.IDLE
        self.dirty = False
        self.errors: dict[str, str] = {}
        self._reset_values()

    # ── Lifecycle ────────────────────────────────────────────────────

    def open(self) -> None:
        self.state = FormState.EDITING
        self.dirty = False
        self._reset_values()

    def load_entity(self, entity: dict[str, Any]) -> bool:
        """Adopt a freshly fetched entity as the form defaults.

        Ignored while the user has unsaved edits or a submit is pending,
        so a late fetch never clobbers typed values.
        """
        if self.dirty or self.state is FormState.SUBMITTING:
            logger.debug("Ignoring late load for %s: form is busy", self.entity_id)
            return False
        self._defaults = copy.deepcopy(entity)
        self._reset_values()
        return True

    def cancel(self) -> bool:
        if self.dirty and self._confirm is not None:
            if not self._confirm("Discard unsaved changes?"):
                return False
        self._reset_values()
        self.dirty = False
        self.state = FormState.IDLE
        return True

    def _reset_values(self) -> None:
        self._values = copy.deepcopy(self._defaults)
        self._recompute()

    # ── Field access ─────────────────────────────────────────────────

    @property
    def values(self) -> dict[str, Any]:
        return copy.deepcopy(self._values)

    def get(self, path: str) -> Any:
        return _read(self._values, path)

    def is_disabled(self, path: str) -> bool:
        """Immutable fields in edit mode and all derived fields are read-only."""
        if self._is_derived(path):
            return True
        return self.mode is FormMode.EDIT and path.split(".")[0] in self._immutable

    def _is_derived(self, path: str) -> bool:
        return any(fnmatch.fnmatchcase(path, pattern) for pattern in self._derived)

    def set_value(self, path: str, value: Any) -> None:
        if self.is_disabled(path):
            raise FieldLockedError(f"'{path}' cannot be changed")
        if self.state is FormState.IDLE:
            self.state = FormState.EDITING
        _write(self._values, path, value)
        self.dirty = True
        self._recompute()

    def add_line(self, field: str, line: dict[str, Any]) -> None:
        if self.is_disabled(field):
            raise FieldLockedError(f"'{field}' cannot be changed")
        self._values.setdefault(field, []).append(copy.deepcopy(line))
        self.dirty = True
        self._recompute()

    def remove_line(self, field: str, index: int) -> None:
        if self.is_disabled(field):
            raise FieldLockedError(f"'{field}' cannot be changed")
        del self._values[field][index]
        self.dirty = True
        self._recompute()

    # ── Validation ───────────────────────────────────────────────────

    @property
    def _schema(self) -> type[BaseModel]:
        if self.mode is FormMode.EDIT:
            return self._update_schema
        return self._create_schema

    def _payload_source(self) -> dict[str, Any]:
        allowed = self._schema.model_fields
        return {k: v for k, v in self._values.items() if k in allowed}

    def _recompute(self) -> None:
        if self._derive is not None:
            try:
                self._derive(self._values)
            except (TypeError, ValueError) as e:
                # Half-typed numbers; the schema below reports the bad field.
                logger.debug("Skipping derived fields for %s: %s", self.entity_id, e)
        try:
            self._schema.model_validate(self._payload_source())
        except ValidationError as e:
            self.errors = {
                ".".join(str(p) for p in err["loc"]) or "__root__": err["msg"]
                for err in e.errors()
            }
        else:
            self.errors = {}

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def can_submit(self) -> bool:
        if not self.valid or self.state is FormState.SUBMITTING:
            return False
        if self.mode is FormMode.EDIT:
            return self.dirty
        return True

    # ── Submit ───────────────────────────────────────────────────────

    async def submit(self) -> dict[str, Any] | None:
        """Send the form. Returns the saved entity, or None when nothing was saved."""
        if not self.can_submit:
            return None
        payload = self._schema.model_validate(self._payload_source()).model_dump(
            mode="json", exclude_unset=True
        )
        self.state = FormState.SUBMITTING
        try:
            if self.mode is FormMode.EDIT:
                result = await self._repository.update(self.entity_id, payload)
            else:
                result = await self._repository.create(payload)
        except RemoteRequestError as e:
            self.state = FormState.EDITING
            self.dirty = True
            self._notifier.error(e.message or GENERIC_ERROR_MESSAGE)
            return None

        self._notifier.success(result.message or "Saved")
        self._repository.invalidate_list()
        if self.mode is FormMode.EDIT:
            self._repository.invalidate_by_id(self.entity_id)
            if result.data is not None:
                self._defaults = copy.deepcopy(result.data)
        self._reset_values()
        self.dirty = False
        self.state = FormState.IDLE
        if self._on_success is not None:
            self._on_success(result.data)
        return result.data
