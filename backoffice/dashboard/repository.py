"""Typed repository with an explicit read cache.

Fetches populate the cache; nothing but ``invalidate_list`` and
``invalidate_by_id`` removes entries, and callers invoke those only after
a mutation has succeeded.
"""

import logging
from typing import Any

from .client import EntityEndpoint, MutationResult, RemotePage

logger = logging.getLogger(__name__)


def _cache_key(params: dict[str, Any]) -> tuple:
    return tuple(sorted((k, repr(v)) for k, v in params.items()))


class EntityRepository:
    """Cached access to one API collection."""

    def __init__(self, endpoint: EntityEndpoint):
        self._endpoint = endpoint
        self._lists: dict[tuple, RemotePage] = {}
        self._entities: dict[str, dict[str, Any]] = {}

    @property
    def name(self) -> str:
        return self._endpoint.path

    async def list(self, params: dict[str, Any], *, refresh: bool = False) -> RemotePage:
        key = _cache_key(params)
        if not refresh and key in self._lists:
            return self._lists[key]
        page = await self._endpoint.list(params)
        self._lists[key] = page
        return page

    async def get(self, entity_id: str, *, refresh: bool = False) -> dict[str, Any]:
        if not refresh and entity_id in self._entities:
            return self._entities[entity_id]
        entity = await self._endpoint.get_by_id(entity_id)
        self._entities[entity_id] = entity
        return entity

    async def create(self, payload: dict[str, Any]) -> MutationResult:
        return await self._endpoint.create(payload)

    async def update(self, entity_id: str, payload: dict[str, Any]) -> MutationResult:
        return await self._endpoint.update(entity_id, payload)

    async def delete(self, entity_id: str) -> MutationResult:
        return await self._endpoint.delete(entity_id)

    def invalidate_list(self) -> None:
        if self._lists:
            logger.debug("Invalidating %d cached %s pages", len(self._lists), self.name)
        self._lists.clear()

    def invalidate_by_id(self, entity_id: str) -> None:
        self._entities.pop(entity_id, None)

    def cached_entity(self, entity_id: str) -> dict[str, Any] | None:
        return self._entities.get(entity_id)
