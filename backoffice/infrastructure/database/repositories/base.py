"""Query helpers shared by the SQLAlchemy repositories."""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from sqlalchemy import ColumnElement, Select, func, inspect, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.domain.entities import Page

T = TypeVar("T")


def escape_like(term: str) -> str:
    """Make ``%`` and ``_`` in user input match literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def search_clause(term: str | None, *columns: Any) -> ColumnElement[bool] | None:
    """Case-insensitive "contains" over several columns, or None for no filter."""
    if term is None or not term.strip():
        return None
    pattern = f"%{escape_like(term.strip())}%"
    return or_(*(column.ilike(pattern, escape="\\") for column in columns))


async def paginate(
    session: AsyncSession,
    stmt: Select,
    *,
    page: int,
    limit: int,
    convert: Callable[[Any], T],
) -> Page[T]:
    """Run ``stmt`` for one page and count every matching row."""
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = (await session.execute(count_stmt)).scalar_one()
    result = await session.execute(stmt.offset((page - 1) * limit).limit(limit))
    return Page(
        data=[convert(row) for row in result.scalars().all()],
        total=total,
        page=page,
        limit=limit,
    )


def sync_children(
    collection: list[Any],
    entities: Iterable[Any],
    to_model: Callable[[Any], Any],
    apply: Callable[[Any, Any], None],
) -> None:
    """Make an ORM child collection match ``entities`` by id.

    Matching rows are updated in place, new ids are appended and rows that
    are no longer present are removed (delete-orphan takes care of the DELETE).
    """
    existing = {model.id: model for model in collection}
    wanted: set[str] = set()
    for entity in entities:
        wanted.add(entity.id)
        model = existing.get(entity.id)
        if model is None:
            collection.append(to_model(entity))
        else:
            apply(model, entity)
    for model in list(collection):
        if model.id not in wanted:
            collection.remove(model)


def copy_attributes(target: Any, source: Any, names: Iterable[str]) -> None:
    for name in names:
        setattr(target, name, getattr(source, name))


def loaded_or_none(model: Any, relationship: str) -> Any:
    """Return a relationship value only if it is already loaded (no lazy IO)."""
    if relationship in inspect(model).unloaded:
        return None
    return getattr(model, relationship)
