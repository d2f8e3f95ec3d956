"""Client-side data table over one fetched page of rows.

Every piece of state (sorting, filters, visibility, selection, pagination)
lives on the ``DataTable`` instance. Two tables never share state.
"""

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from .search import SearchFields, matches, normalize_term

R = TypeVar("R")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class EmptyState(str, Enum):
    NONE = "none"
    NO_DATA = "no_data"
    NO_MATCHES = "no_matches"


@dataclass(frozen=True)
class Column:
    key: str
    header: str
    accessor: Callable[[Any], Any] | None = None
    sortable: bool = True
    hideable: bool = True

    def value(self, row: Any) -> Any:
        if self.accessor is not None:
            return self.accessor(row)
        return getattr(row, self.key, None)


@dataclass
class ColumnToggle:
    key: str
    header: str
    visible: bool


@dataclass
class Toolbar:
    search: str
    columns: list[ColumnToggle]
    can_export: bool
    export_label: str
    can_add: bool


@dataclass
class TableView(Generic[R]):
    columns: list[Column]
    rows: list[R]
    page_index: int
    page_count: int
    filtered_count: int
    selected_ids: set[str]
    loading: bool
    empty_state: EmptyState
    toolbar: Toolbar
    sorting: list[tuple[str, SortDirection]] = field(default_factory=list)


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _sort_key(value: Any) -> Any:
    value = _plain(value)
    if isinstance(value, str):
        return value.lower()
    return value


class DataTable(Generic[R]):
    """Sort, filter, select and paginate rows that are already in memory.

    The global search only sees the rows currently loaded; full-dataset
    search goes through the server-side ``search`` filter instead.
    """

    def __init__(
        self,
        columns: Iterable[Column],
        *,
        search_fields: SearchFields,
        page_size: int = 10,
        row_id: Callable[[R], str] = lambda row: row.id,
        can_add: bool = True,
    ):
        if page_size < 1:
            raise ValueError("page_size must be positive")
        self._columns = list(columns)
        self._by_key = {column.key: column for column in self._columns}
        self._search_fields = search_fields
        self._row_id = row_id
        self._can_add = can_add

        self._rows: list[R] = []
        self._search = ""
        self._sorting: list[tuple[str, SortDirection]] = []
        self._filters: dict[str, Any] = {}
        self._hidden: set[str] = set()
        self._selected: set[str] = set()
        self._page_index = 0
        self._page_size = page_size
        self.loading = False

    # ── Data ─────────────────────────────────────────────────────────

    def set_rows(self, rows: Iterable[R]) -> None:
        """Replace the loaded rows. Selection is kept."""
        self._rows = list(rows)
        self.loading = False
        self._clamp_page()

    def set_loading(self, loading: bool) -> None:
        self.loading = loading

    @property
    def rows(self) -> list[R]:
        return list(self._rows)

    # ── Global and column filters ────────────────────────────────────

    @property
    def search(self) -> str:
        return self._search

    def set_search(self, term: str | None) -> None:
        self._search = term or ""
        self._page_index = 0

    def set_column_filter(self, key: str, value: Any) -> None:
        """Exact match for a scalar, membership for a set/list; None removes the filter."""
        self._column(key)
        if value is None or (isinstance(value, (set, frozenset, list, tuple)) and not value):
            self._filters.pop(key, None)
        else:
            self._filters[key] = value
        self._page_index = 0

    @property
    def column_filters(self) -> dict[str, Any]:
        return dict(self._filters)

    def clear_filters(self) -> None:
        self._search = ""
        self._filters.clear()
        self._page_index = 0

    @property
    def has_active_filters(self) -> bool:
        return bool(normalize_term(self._search)) or bool(self._filters)

    def _passes_column_filters(self, row: R) -> bool:
        for key, wanted in self._filters.items():
            actual = _plain(self._by_key[key].value(row))
            if isinstance(wanted, (set, frozenset, list, tuple)):
                if actual not in {_plain(w) for w in wanted}:
                    return False
            elif actual != _plain(wanted):
                return False
        return True

    # ── Sorting ──────────────────────────────────────────────────────

    @property
    def sorting(self) -> list[tuple[str, SortDirection]]:
        return list(self._sorting)

    def toggle_sort(self, key: str, *, multi: bool = False) -> SortDirection | None:
        """Cycle a column ascending → descending → unsorted."""
        column = self._column(key)
        if not column.sortable:
            raise ValueError(f"Column '{key}' is not sortable")
        current = dict(self._sorting).get(key)
        if current is None:
            following = SortDirection.ASC
        elif current is SortDirection.ASC:
            following = SortDirection.DESC
        else:
            following = None

        if not multi:
            self._sorting = [(key, following)] if following else []
            return following

        if current is None:
            self._sorting.append((key, following))
        elif following is None:
            self._sorting = [(k, d) for k, d in self._sorting if k != key]
        else:
            self._sorting = [(k, following if k == key else d) for k, d in self._sorting]
        return following

    def _sorted(self, rows: list[R]) -> list[R]:
        # Stable sorts applied from the least significant key; None always last.
        for key, direction in reversed(self._sorting):
            column = self._by_key[key]
            present = [r for r in rows if _plain(column.value(r)) is not None]
            missing = [r for r in rows if _plain(column.value(r)) is None]
            present.sort(
                key=lambda r: _sort_key(column.value(r)),
                reverse=direction is SortDirection.DESC,
            )
            rows = present + missing
        return rows

    # ── Derived row sets ─────────────────────────────────────────────

    @property
    def filtered_rows(self) -> list[R]:
        rows = [
            row
            for row in self._rows
            if matches(row, self._search, self._search_fields)
            and self._passes_column_filters(row)
        ]
        return self._sorted(rows)

    @property
    def page_count(self) -> int:
        return math.ceil(len(self.filtered_rows) / self._page_size)

    @property
    def page_index(self) -> int:
        return self._page_index

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def page_rows(self) -> list[R]:
        self._clamp_page()
        start = self._page_index * self._page_size
        return self.filtered_rows[start:start + self._page_size]

    def set_page(self, index: int) -> None:
        self._page_index = index
        self._clamp_page()

    def set_page_size(self, size: int) -> None:
        if size < 1:
            raise ValueError("page_size must be positive")
        self._page_size = size
        self._page_index = 0

    def _clamp_page(self) -> None:
        last = max(self.page_count - 1, 0)
        self._page_index = min(max(self._page_index, 0), last)

    # ── Visibility ───────────────────────────────────────────────────

    def toggle_column(self, key: str) -> bool:
        """Flip a column's visibility and return the new state."""
        column = self._column(key)
        if not column.hideable:
            raise ValueError(f"Column '{key}' cannot be hidden")
        if key in self._hidden:
            self._hidden.discard(key)
            return True
        self._hidden.add(key)
        return False

    @property
    def visible_columns(self) -> list[Column]:
        return [c for c in self._columns if c.key not in self._hidden]

    # ── Selection ────────────────────────────────────────────────────

    def select(self, row_id: str) -> None:
        self._selected.add(row_id)

    def deselect(self, row_id: str) -> None:
        self._selected.discard(row_id)

    def toggle_selection(self, row_id: str) -> bool:
        if row_id in self._selected:
            self._selected.discard(row_id)
            return False
        self._selected.add(row_id)
        return True

    def select_all(self) -> None:
        """Select every row of the filtered view, across all of its pages."""
        self._selected.update(self._row_id(row) for row in self.filtered_rows)

    def clear_selection(self) -> None:
        self._selected.clear()

    @property
    def selected_ids(self) -> set[str]:
        return set(self._selected)

    @property
    def selected_rows(self) -> list[R]:
        return [row for row in self._rows if self._row_id(row) in self._selected]

    # ── Rendering ────────────────────────────────────────────────────

    @property
    def empty_state(self) -> EmptyState:
        if not self._rows:
            return EmptyState.NONE if self.loading else EmptyState.NO_DATA
        if not self.filtered_rows:
            return EmptyState.NO_MATCHES
        return EmptyState.NONE

    def toolbar(self, export_label: str = "Export") -> Toolbar:
        selected = len(self.selected_rows)
        return Toolbar(
            search=self._search,
            columns=[
                ColumnToggle(c.key, c.header, c.key not in self._hidden)
                for c in self._columns
                if c.hideable
            ],
            can_export=selected > 0,
            export_label=f"{export_label} ({selected})" if selected else export_label,
            can_add=self._can_add,
        )

    def render(self) -> TableView[R]:
        """Snapshot of what the table shows now; rows stay visible while loading."""
        return TableView(
            columns=self.visible_columns,
            rows=self.page_rows,
            page_index=self._page_index,
            page_count=self.page_count,
            filtered_count=len(self.filtered_rows),
            selected_ids=self.selected_ids,
            loading=self.loading,
            empty_state=self.empty_state,
            toolbar=self.toolbar(),
            sorting=self.sorting,
        )

    def _column(self, key: str) -> Column:
        try:
            return self._by_key[key]
        except KeyError:
            raise KeyError(f"Unknown column '{key}'") from None
