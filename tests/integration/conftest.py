"""Integration fixtures: the real app on a fresh in-memory SQLite database per test."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from backoffice.infrastructure.database import Base, get_db_session
from backoffice.main import app

API = "/api/v1"


@pytest_asyncio.fixture
async def session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncIterator[AsyncClient]:
    async def override_session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()


@pytest.fixture
def supplier_payload():
    def build(name: str = "Acme Corp", **overrides) -> dict:
        payload = {
            "name": name,
            "supplier_type": "MATERIAL",
            "addresses": [
                {
                    "address_type": "HEAD_OFFICE",
                    "address_line1": "Jl. Sudirman 1",
                    "is_primary": True,
                }
            ],
            "contacts": [
                {
                    "contact_type": "PRIMARY",
                    "name": "Budi",
                    "phone_number": "081234567890",
                    "email": "budi@example.com",
                    "is_primary": True,
                }
            ],
        }
        payload.update(overrides)
        return payload

    return build
