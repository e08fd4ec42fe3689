"""Integration test fixtures for database and HTTP client operations.

Each test gets its own SQLite database file with the schema created from
model metadata, and the OX API is served in-process through
``httpx.MockTransport``. Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel

from src.oxhub.api.dependencies import get_db_session
from src.oxhub.core.db import create_engine_for_url, get_session
from src.oxhub.core.ox_client import get_ox_client
from src.oxhub.main import create_app
from src.oxhub.models import User
from tests.helpers import FakeOxApi, create_user


@pytest.fixture
def ox_api() -> FakeOxApi:
    return FakeOxApi()


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Create a throwaway database with every table."""
    test_engine = create_engine_for_url(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for arranging and inspecting data.

    IMPORTANT: commit before issuing requests so the app's own sessions see
    the rows, and call ``db_session.expire_all()`` before reading state the
    app has changed since.
    """
    async with get_session(engine) as session:
        yield session


@pytest.fixture
async def client(engine: AsyncEngine, ox_api: FakeOxApi) -> AsyncGenerator[AsyncClient]:
    """Create test client bound to the test database and the fake OX API."""
    app = create_app()

    async def _get_test_db_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = _get_test_db_session
    app.dependency_overrides[get_ox_client] = ox_api.client

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
async def test_user(db_session: AsyncSession) -> User:
    """A committed user with no companies."""
    user = await create_user(db_session)
    await db_session.commit()
    return user
