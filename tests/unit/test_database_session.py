"""Unit tests for database URL and engine option handling."""

import pytest

from backoffice.infrastructure.database.session import engine_options, to_async_url


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("sqlite:///./backoffice.db", "sqlite+aiosqlite:///./backoffice.db"),
        ("postgresql://u:p@db/backoffice", "postgresql+asyncpg://u:p@db/backoffice"),
        ("postgres://u:p@db/backoffice", "postgresql+asyncpg://u:p@db/backoffice"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
    ],
)
def test_to_async_url(url, expected):
    assert to_async_url(url) == expected


def test_postgres_engines_ping_before_use():
    assert engine_options("postgresql+asyncpg://db/x")["pool_pre_ping"] is True
    assert "pool_pre_ping" not in engine_options("sqlite+aiosqlite:///:memory:")
    assert engine_options("sqlite+aiosqlite:///x.db", sql_debug=True)["echo"] is True
