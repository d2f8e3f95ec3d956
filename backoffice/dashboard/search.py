"""Global search predicate for table rows."""

from collections.abc import Callable, Iterable
from typing import Any

SearchFields = Callable[[Any], Iterable[Any]]


def normalize_term(term: str | None) -> str:
    return (term or "").strip().lower()


def matches(entity: Any, term: str | None, fields: SearchFields) -> bool:
    """True when any searchable field contains ``term`` case-insensitively.

    ``fields`` yields the values to search for one entity; ``None`` values
    count as empty strings. An empty term matches everything.
    """
    needle = normalize_term(term)
    if not needle:
        return True
    for value in fields(entity):
        if value is None:
            continue
        text = value.value if hasattr(value, "value") else value
        if needle in str(text).lower():
            return True
    return False
