"""Read-only detail dialog that fetches only while open."""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import ValidationError

from backoffice.domain.exceptions import RemoteNotFoundError, RemoteRequestError
from backoffice.reporting import PLACEHOLDER

from .client import GENERIC_ERROR_MESSAGE
from .repository import EntityRepository

logger = logging.getLogger(__name__)

Presenter = Callable[[dict[str, Any]], dict[str, str]]
UNREADABLE_MESSAGE = "This record could not be displayed."


class DetailState(str, Enum):
    CLOSED = "closed"
    LOADING = "loading"
    ERROR = "error"
    NOT_FOUND = "not_found"
    SUCCESS = "success"


class DetailView:

    def __init__(
        self,
        repository: EntityRepository,
        presenter: Presenter,
        on_back: Callable[[], None] | None = None,
    ):
        self._repository = repository
        self._presenter = presenter
        self._on_back = on_back
        self._generation = 0
        self.entity_id: str | None = None
        self.is_open = False
        self.state = DetailState.CLOSED
        self.error: str | None = None
        self.entity: dict[str, Any] | None = None
        self.fields: dict[str, str] = {}

    async def open(self, entity_id: str) -> DetailState:
        self.entity_id = entity_id
        self.is_open = True
        return await self._fetch()

    async def retry(self) -> DetailState:
        if not self.is_open:
            return self.state
        return await self._fetch()

    def close(self) -> None:
        """Stop fetching; a response that lands after this is dropped."""
        self.is_open = False
        self._generation += 1
        self.state = DetailState.CLOSED

    def go_back(self) -> None:
        self.close()
        if self._on_back is not None:
            self._on_back()

    async def _fetch(self) -> DetailState:
        self._generation += 1
        generation = self._generation
        self.state = DetailState.LOADING
        self.error = None
        try:
            entity = await self._repository.get(self.entity_id)
        except RemoteNotFoundError:
            if generation == self._generation:
                self.state = DetailState.NOT_FOUND
            return self.state
        except RemoteRequestError as e:
            if generation == self._generation:
                self.state = DetailState.ERROR
                self.error = e.message or GENERIC_ERROR_MESSAGE
            return self.state

        if generation != self._generation:
            logger.debug("Dropping late detail response for %s", self.entity_id)
            return self.state
        try:
            presented = self._presenter(entity)
        except ValidationError as e:
            logger.warning(
                "Cannot present %s: %d invalid field(s)", self.entity_id, e.error_count()
            )
            self.state = DetailState.ERROR
            self.error = UNREADABLE_MESSAGE
            return self.state
        self.entity = entity
        self.fields = {
            label: value if value not in (None, "") else PLACEHOLDER
            for label, value in presented.items()
        }
        self.state = DetailState.SUCCESS
        return self.state
