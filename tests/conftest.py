"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite engine and session factory, tenant ids,
quote/payment builders, mocked async sessions
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from strike_plugin.boundary.db.base import Base
from strike_plugin.boundary.db.models import PaymentModel, QuoteModel


@pytest.fixture
async def test_async_engine():
    """
    Create in-memory SQLite async engine with all tables.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.

    Yields:
        AsyncEngine: Test engine, disposed after the test
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(test_async_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory configured like the production one."""
    return async_sessionmaker(
        test_async_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_async_db(session_factory):
    """
    Provide a single session on the test database.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def tenant_id() -> str:
    """Store id the store under test is bound to."""
    return "7Jq1kN3mZpXrYt2b"


@pytest.fixture
def other_tenant_id() -> str:
    """A second, unrelated store id."""
    return "Hc9fWdLeA4sUvQ0o"


@pytest.fixture
def make_quote():
    """
    Build unsaved QuoteModel instances.

    Returns:
        Callable accepting QuoteModel field overrides
    """
    counter = {"n": 0}

    def _make(**overrides) -> QuoteModel:
        counter["n"] += 1
        n = counter["n"]
        fields = {
            "invoice_id": f"invoice-{n}",
            "payment_hash": f"{n:064x}",
            "observed": False,
            "paid": False,
        }
        fields.update(overrides)
        return QuoteModel(**fields)

    return _make


@pytest.fixture
def make_payment():
    """
    Build unsaved PaymentModel instances.

    Returns:
        Callable accepting PaymentModel field overrides
    """
    counter = {"n": 0}

    def _make(**overrides) -> PaymentModel:
        counter["n"] += 1
        n = counter["n"]
        fields = {
            "payment_hash": f"{n + 1000:064x}",
            "created_at": datetime(2024, 5, 1, n % 24, tzinfo=timezone.utc),
        }
        fields.update(overrides)
        return PaymentModel(**fields)

    return _make
