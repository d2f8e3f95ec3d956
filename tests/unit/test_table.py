"""Unit tests for the client-side DataTable."""

from dataclasses import dataclass

import pytest

from backoffice.dashboard.table import Column, DataTable, EmptyState, SortDirection
from backoffice.domain.entities import StatusActive


@dataclass
class Row:
    id: str
    name: str
    status: StatusActive = StatusActive.ACTIVE
    amount: float | None = None


COLUMNS = [
    Column("name", "Name", hideable=False),
    Column("status", "Status"),
    Column("amount", "Amount"),
    Column("actions", "Actions", accessor=lambda r: None, sortable=False),
]


def _table(rows=None, page_size=10) -> DataTable[Row]:
    table = DataTable(COLUMNS, search_fields=lambda r: (r.name, r.status), page_size=page_size)
    if rows is not None:
        table.set_rows(rows)
    return table


def _rows() -> list[Row]:
    return [
        Row("1", "Cargo Beta", amount=30),
        Row("2", "alpha freight", StatusActive.SUSPENDED, amount=None),
        Row("3", "Delta Lines", amount=10),
    ]


def test_sort_cycles_asc_desc_none():
    table = _table(_rows())
    assert table.toggle_sort("name") is SortDirection.ASC
    assert [r.id for r in table.filtered_rows] == ["2", "1", "3"]
    assert table.toggle_sort("name") is SortDirection.DESC
    assert [r.id for r in table.filtered_rows] == ["3", "1", "2"]
    assert table.toggle_sort("name") is None
    assert [r.id for r in table.filtered_rows] == ["1", "2", "3"]


def test_missing_values_sort_last_both_ways():
    table = _table(_rows())
    table.toggle_sort("amount")
    assert [r.id for r in table.filtered_rows] == ["3", "1", "2"]
    table.toggle_sort("amount")
    assert [r.id for r in table.filtered_rows] == ["1", "3", "2"]


def test_multi_sort_keeps_secondary_key():
    rows = [Row("1", "B", amount=1), Row("2", "A", amount=2), Row("3", "A", amount=1)]
    table = _table(rows)
    table.toggle_sort("name")
    table.toggle_sort("amount", multi=True)
    assert [r.id for r in table.filtered_rows] == ["3", "2", "1"]
    assert table.sorting == [("name", SortDirection.ASC), ("amount", SortDirection.ASC)]


def test_unsortable_and_unknown_columns():
    table = _table(_rows())
    with pytest.raises(ValueError):
        table.toggle_sort("actions")
    with pytest.raises(KeyError):
        table.toggle_sort("colour")


def test_search_filters_and_resets_page():
    table = _table(_rows(), page_size=1)
    table.set_page(2)
    table.set_search("ALPHA")
    assert table.page_index == 0
    assert [r.id for r in table.filtered_rows] == ["2"]


def test_column_filter_scalar_and_set():
    table = _table(_rows())
    table.set_column_filter("status", StatusActive.SUSPENDED)
    assert [r.id for r in table.filtered_rows] == ["2"]
    table.set_column_filter("status", {"ACTIVE"})
    assert [r.id for r in table.filtered_rows] == ["1", "3"]
    table.set_column_filter("status", set())
    assert len(table.filtered_rows) == 3
    assert not table.has_active_filters


def test_selection_survives_sort_filter_and_reload():
    table = _table(_rows())
    table.select("2")
    table.toggle_sort("name")
    table.set_search("delta")
    assert table.selected_ids == {"2"}
    table.set_rows(_rows())
    assert [r.id for r in table.selected_rows] == ["2"]


def test_select_all_covers_filtered_rows_on_every_page():
    table = _table(_rows(), page_size=1)
    table.set_column_filter("status", StatusActive.ACTIVE)
    table.select_all()
    assert table.selected_ids == {"1", "3"}


def test_toggle_selection():
    table = _table(_rows())
    assert table.toggle_selection("1") is True
    assert table.toggle_selection("1") is False
    assert table.selected_ids == set()


def test_pagination_and_clamping():
    table = _table(_rows(), page_size=2)
    assert table.page_count == 2
    table.set_page(5)
    assert table.page_index == 1
    assert [r.id for r in table.page_rows] == ["3"]
    table.set_rows(_rows()[:1])
    assert table.page_index == 0


def test_empty_states():
    table = _table()
    table.set_loading(True)
    assert table.empty_state is EmptyState.NONE
    table.set_rows([])
    assert table.empty_state is EmptyState.NO_DATA
    table.set_rows(_rows())
    table.set_search("nothing like this")
    assert table.empty_state is EmptyState.NO_MATCHES
    table.clear_filters()
    assert table.empty_state is EmptyState.NONE


def test_column_visibility():
    table = _table(_rows())
    assert table.toggle_column("amount") is False
    assert [c.key for c in table.visible_columns] == ["name", "status", "actions"]
    assert table.toggle_column("amount") is True
    with pytest.raises(ValueError):
        table.toggle_column("name")


def test_toolbar_counts_selected_rows():
    table = _table(_rows())
    assert table.toolbar().can_export is False
    table.select("1")
    table.select("3")
    toolbar = table.toolbar()
    assert toolbar.can_export is True
    assert toolbar.export_label == "Export (2)"
    assert "name" not in [c.key for c in toolbar.columns]


def test_render_keeps_rows_while_loading():
    table = _table(_rows())
    table.set_loading(True)
    view = table.render()
    assert view.loading is True
    assert len(view.rows) == 3
    assert view.filtered_count == 3
