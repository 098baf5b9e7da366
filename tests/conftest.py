"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from aabot.api.app import app
from aabot.api.deps import get_db
from aabot.config.encryption import FieldCipher
from aabot.models.base import Base


@pytest.fixture
def cipher() -> FieldCipher:
    """A cipher with a fixed, test-only key identifier."""
    return FieldCipher("test-ident")


@pytest.fixture
def salt(cipher) -> str:
    return cipher.generate_salt()


@pytest.fixture
async def test_engine():
    """Create an async SQLite in-memory engine for tests."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to the test engine."""
    return async_sessionmaker(test_engine, expire_on_commit=False)


@pytest.fixture
async def api_client(test_engine, test_session_factory):
    """Async HTTP client hitting the FastAPI app with test DB."""

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
