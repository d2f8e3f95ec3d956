"""HTTP client for the back-office API.

``ApiClient`` owns transport concerns (base URL, timeout, read retries and
error translation). ``EntityEndpoint`` is the typed per-module surface used
by repositories: ``list``, ``get_by_id``, ``create``, ``update``, ``delete``.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from backoffice.config import get_settings
from backoffice.domain.exceptions import (
    RemoteConflictError,
    RemoteNotFoundError,
    RemoteRequestError,
    RemoteValidationError,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."
_RETRY_DELAY = 0.2


@dataclass
class RemotePage:
    """Raw ``{data, total, page, totalPages}`` envelope returned by list calls."""

    data: list[dict[str, Any]] = field(default_factory=list)
    total: int = 0
    page: int = 1
    total_pages: int = 0

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "RemotePage":
        return cls(
            data=list(payload.get("data") or []),
            total=int(payload.get("total") or 0),
            page=int(payload.get("page") or 1),
            total_pages=int(payload.get("totalPages") or 0),
        )

    @property
    def has_more(self) -> bool:
        return len(self.data) < self.total


@dataclass
class MutationResult:
    message: str
    data: dict[str, Any] | None = None


def _detail_message(response: httpx.Response) -> str:
    """Pull a human-readable message out of a FastAPI error body."""
    try:
        detail = response.json().get("detail")
    except (ValueError, AttributeError):
        return GENERIC_ERROR_MESSAGE
    if isinstance(detail, str) and detail:
        return detail
    if isinstance(detail, list) and detail:
        parts = []
        for error in detail:
            loc = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
            msg = error.get("msg", "")
            parts.append(f"{loc}: {msg}" if loc else msg)
        return "; ".join(parts)
    return GENERIC_ERROR_MESSAGE


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    message = _detail_message(response)
    code = response.status_code
    if code == 404:
        raise RemoteNotFoundError(code, message)
    if code == 409:
        raise RemoteConflictError(code, message)
    if code in (400, 422):
        raise RemoteValidationError(code, message)
    raise RemoteRequestError(code, message)


class ApiClient:
    """Thin async wrapper over httpx with bounded retries on reads.

    Reads retry ``read_retries`` times on transport errors and 5xx
    responses. Mutations are sent exactly once.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        read_retries: int | None = None,
        timeout: float | None = None,
    ):
        settings = get_settings()
        self._base_url = (base_url or settings.api_base_url).rstrip("/")
        self._http_client = http_client
        self._read_retries = settings.read_retries if read_retries is None else read_retries
        self._timeout = settings.request_timeout if timeout is None else timeout

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: Any = None,
        json: Any = None,
    ) -> httpx.Response:
        client = await self._get_client()
        should_close = self._http_client is None
        try:
            response = await client.request(method, self._url(path), params=params, json=json)
        except httpx.HTTPError as e:
            raise RemoteRequestError(None, GENERIC_ERROR_MESSAGE) from e
        finally:
            if should_close:
                await client.aclose()
        _raise_for_status(response)
        return response

    async def read(self, path: str, params: Any = None) -> Any:
        """GET ``path`` and return the decoded JSON body, retrying transient failures."""
        attempt = 0
        while True:
            try:
                response = await self._send("GET", path, params=params)
                return response.json()
            except RemoteRequestError as e:
                transient = e.status_code is None or e.status_code >= 500
                if not transient or attempt >= self._read_retries:
                    raise
                attempt += 1
                logger.warning(
                    "GET %s failed (%s), retry %d/%d", path, e, attempt, self._read_retries
                )
                await asyncio.sleep(_RETRY_DELAY * attempt)

    async def write(self, method: str, path: str, payload: Any = None) -> Any:
        response = await self._send(method, path, json=payload)
        return response.json()

    async def download(self, path: str, params: Any = None) -> httpx.Response:
        """GET a non-JSON resource (CSV export). Not retried."""
        return await self._send("GET", path, params=params)


class EntityEndpoint:
    """Typed remote calls for one API collection, e.g. ``suppliers``."""

    def __init__(self, client: ApiClient, path: str):
        self._client = client
        self.path = path.strip("/")

    async def list(self, params: dict[str, Any]) -> RemotePage:
        payload = await self._client.read(self.path, params=params)
        return RemotePage.from_payload(payload)

    async def get_by_id(self, entity_id: str) -> dict[str, Any]:
        return await self._client.read(f"{self.path}/{entity_id}")

    async def create(self, payload: dict[str, Any]) -> MutationResult:
        body = await self._client.write("POST", self.path, payload)
        return MutationResult(message=body.get("message", ""), data=body.get("data"))

    async def update(self, entity_id: str, payload: dict[str, Any]) -> MutationResult:
        body = await self._client.write("PUT", f"{self.path}/{entity_id}", payload)
        return MutationResult(message=body.get("message", ""), data=body.get("data"))

    async def delete(self, entity_id: str) -> MutationResult:
        body = await self._client.write("DELETE", f"{self.path}/{entity_id}")
        return MutationResult(message=body.get("message", ""))
