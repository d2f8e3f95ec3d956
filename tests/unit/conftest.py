"""Shared fixtures for dashboard tests: an API stubbed with httpx.MockTransport."""

from collections.abc import Callable

import httpx
import pytest

from backoffice.dashboard import ApiClient, EntityEndpoint, EntityRepository, Notifier

BASE_URL = "http://api.test/api/v1"

Handler = Callable[[httpx.Request], httpx.Response]


def make_client(handler: Handler, *, read_retries: int = 0) -> ApiClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ApiClient(BASE_URL, http_client=http_client, read_retries=read_retries)


@pytest.fixture
def notifier() -> Notifier:
    return Notifier()


@pytest.fixture
def repository_for() -> Callable[[str, Handler], EntityRepository]:
    """Build a repository for ``path`` whose HTTP calls go to ``handler``."""

    def build(path: str, handler: Handler) -> EntityRepository:
        return EntityRepository(EntityEndpoint(make_client(handler), path))

    return build


@pytest.fixture
def client_for() -> Callable[..., ApiClient]:
    return make_client
