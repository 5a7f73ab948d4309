"""Pytest configuration and fixtures for the waitlist API test suite.

Provides:
- A throwaway SQLite database per test (aiosqlite, tables created from metadata)
- Session factory and a setup session for factory fixtures
- ASGI test clients with the database dependency overridden
- A WaitlistClient wired to the in-process app
- A Signup model factory
"""

from collections.abc import AsyncGenerator, Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from waitlist.client.api import WaitlistClient
from waitlist.core.database import get_async_session
from waitlist.core.deps import get_db
from waitlist.main import app
from waitlist.models.base import Base
from waitlist.models.signup import Signup

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
TEST_BASE_URL = "http://test"
SIGNUPS_PATH = "/api/v1/signups"

# ---------------------------------------------------------------------------
# Per-test database
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def db_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh SQLite database file with all tables for one test.

    NullPool gives every session its own connection, so concurrent sessions
    contend on the database the way separate requests would.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'waitlist_test.db'}",
        echo=False,
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the per-test engine."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for test setup and assertions."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def count_signups(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[..., Any]:
    """Count stored signups, optionally for one stored email."""

    async def _count(email: str | None = None) -> int:
        stmt = select(func.count()).select_from(Signup)
        if email is not None:
            stmt = stmt.where(Signup.email == email)
        async with session_factory() as session:
            return int(await session.scalar(stmt) or 0)

    return _count


# ---------------------------------------------------------------------------
# App clients (DB dependency overridden)
# ---------------------------------------------------------------------------


@pytest.fixture
def override_db(
    session_factory: async_sessionmaker[AsyncSession],
) -> Generator[None, None, None]:
    """Route the app's session dependencies to the test database."""

    async def _override_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as s:
            yield s

    app.dependency_overrides[get_async_session] = _override_session
    app.dependency_overrides[get_db] = _override_session
    yield
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(override_db: None) -> AsyncGenerator[AsyncClient, None]:  # noqa: ARG001
    """Async test client backed by the test database."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=TEST_BASE_URL,
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def plain_client() -> AsyncGenerator[AsyncClient, None]:
    """Minimal async test client with NO dependency overrides."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=TEST_BASE_URL,
    ) as ac:
        yield ac


@pytest.fixture
def waitlist_client(override_db: None) -> WaitlistClient:  # noqa: ARG001
    """WaitlistClient that talks to the in-process app."""
    return WaitlistClient(TEST_BASE_URL, transport=ASGITransport(app=app))


# ---------------------------------------------------------------------------
# Model Factories
# ---------------------------------------------------------------------------


@pytest.fixture
def signup_factory(db_session: AsyncSession) -> Callable[..., Any]:
    """Factory that inserts Signup rows directly, bypassing the service."""

    async def _create(
        *,
        email: str = "existing@example.com",
        name: str | None = None,
    ) -> Signup:
        signup = Signup(email=email, name=name)
        db_session.add(signup)
        await db_session.commit()
        await db_session.refresh(signup)
        return signup

    return _create
