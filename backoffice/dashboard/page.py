"""Per-module page controller: list query, filter state, selection, delete flow."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Generic, TypeVar

from backoffice.domain.exceptions import RemoteRequestError
from backoffice.reporting import CsvExport, CsvField, RowModel, export_to_csv, validate_rows

from .client import GENERIC_ERROR_MESSAGE
from .notifications import Notifier
from .repository import EntityRepository
from .table import DataTable

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=RowModel)


@dataclass(frozen=True)
class ListFilter:
    """Server-side list query. Changing anything but ``page`` resets it to 1."""

    page: int = 1
    limit: int = 10
    search: str | None = None
    filters: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.limit < 1:
            raise ValueError("limit must be > 0")

    def update(self, **changes: Any) -> "ListFilter":
        if set(changes) - {"page"}:
            changes.setdefault("page", 1)
        return replace(self, **changes)

    def with_filter(self, key: str, value: Any) -> "ListFilter":
        filters = dict(self.filters)
        if value is None:
            filters.pop(key, None)
        else:
            filters[key] = value
        return self.update(filters=filters)

    def params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"page": self.page, "limit": self.limit}
        if self.search:
            params["search"] = self.search
        for key, value in self.filters.items():
            if value is not None:
                params[key] = value.value if isinstance(value, Enum) else value
        return params


class PageController(Generic[R]):
    """Wires one module's repository, row model and table together."""

    def __init__(
        self,
        repository: EntityRepository,
        table: DataTable[R],
        row_model: type[R],
        notifier: Notifier,
        *,
        page_size: int = 10,
        max_limit: int = 100,
        confirm: Callable[[str], bool] | None = None,
        csv_fields: Sequence[CsvField] = (),
        export_prefix: str | None = None,
    ):
        self.repository = repository
        self.table = table
        self._row_model = row_model
        self._notifier = notifier
        self._page_size = page_size
        self._max_limit = max_limit
        self._confirm = confirm
        self._csv_fields = tuple(csv_fields)
        self._export_prefix = export_prefix or repository.name
        self.filter = ListFilter(limit=page_size)
        self.total = 0
        self.selected_id: str | None = None

    async def refresh(self, *, force: bool = False) -> bool:
        """Fetch the current page through the cache and feed the table."""
        self.table.set_loading(True)
        try:
            page = await self.repository.list(self.filter.params(), refresh=force)
        except RemoteRequestError as e:
            self.table.set_loading(False)
            self._notifier.error(e.message or GENERIC_ERROR_MESSAGE)
            return False
        self.total = page.total
        self.table.set_rows(validate_rows(self._row_model, page.data))
        return True

    @property
    def has_more(self) -> bool:
        return len(self.table.rows) < self.total

    async def apply(self, **changes: Any) -> bool:
        self.filter = self.filter.update(**changes)
        return await self.refresh()

    async def set_filter(self, key: str, value: Any) -> bool:
        self.filter = self.filter.with_filter(key, value)
        return await self.refresh()

    async def server_search(self, term: str | None) -> bool:
        """Search the whole dataset instead of only the loaded rows."""
        return await self.apply(search=term or None)

    async def load_more(self) -> bool:
        """Grow ``limit`` by one page; the API returns the longer list from page 1."""
        if not self.has_more or self.filter.limit >= self._max_limit:
            return False
        limit = min(self.filter.limit + self._page_size, self._max_limit)
        return await self.apply(limit=limit)

    def select(self, entity_id: str | None) -> None:
        """Remember the row the edit form or detail view is working on."""
        self.selected_id = entity_id

    async def after_mutation(self) -> None:
        """Called once a create/update succeeded: selection is cleared and the list refetched."""
        self.table.clear_selection()
        await self.refresh()

    async def delete(self, entity_id: str) -> bool:
        if self._confirm is not None and not self._confirm(
            "Are you sure? This action cannot be undone."
        ):
            return False
        try:
            result = await self.repository.delete(entity_id)
        except RemoteRequestError as e:
            self._notifier.error(e.message or GENERIC_ERROR_MESSAGE)
            return False

        self._notifier.success(result.message or "Deleted")
        self.repository.invalidate_list()
        self.repository.invalidate_by_id(entity_id)
        if self.selected_id == entity_id:
            self.selected_id = None
        await self.after_mutation()
        return True

    def export(self) -> CsvExport:
        """CSV of the currently selected rows."""
        return export_to_csv(self.table.selected_rows, self._csv_fields, self._export_prefix)
