"""
Pytest configuration and fixtures for hero slider tests
"""

import os
import sys
from collections.abc import AsyncGenerator
from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

# Settings are read at import time, so configure them before importing the app
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-for-hero-slider"
os.environ["DEBUG"] = "false"
os.environ["DEFAULT_LANGUAGE"] = "tr"
os.environ["SUPPORTED_LANGUAGES"] = '["tr", "en"]'

from app.auth import create_access_token  # noqa: E402
from app.database import Base, get_db  # noqa: E402
from app.i18n.locale import TrackSet  # noqa: E402
from main import app  # noqa: E402


@pytest.fixture
async def test_engine(tmp_path):
    """
    File-backed SQLite database, fresh for every test.

    Each session gets its own connection, so concurrent requests behave
    like they do against a real server.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for tests that talk to services directly."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app, with the database dependency pointed at the test database."""

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth_token() -> str:
    return create_access_token(data={"sub": "editor@example.com", "uid": 7}, expires_delta=timedelta(minutes=30))


@pytest.fixture
def auth_headers(auth_token: str) -> dict:
    """Generate authentication headers for the test editor"""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def tracks() -> TrackSet:
    """Turkish default plus English, the usual admin setup."""
    return TrackSet.from_codes(["tr", "en"], default="tr")
