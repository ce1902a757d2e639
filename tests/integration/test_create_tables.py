"""
Test suite for schema bootstrap.

Tests table creation and removal on a fresh SQLite engine.

System role: Verification of database schema initialization
"""

import pytest
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from strike_plugin.boundary.db.create_tables import create_all_tables, drop_all_tables


@pytest.fixture
async def empty_engine():
    """Provide an in-memory engine without any tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    yield engine
    await engine.dispose()


async def _table_names(engine) -> set[str]:
    async with engine.connect() as conn:
        return set(await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names()))


class TestCreateTables:
    """Test suite for create_all_tables/drop_all_tables."""

    @pytest.mark.asyncio
    async def test_create_all_tables_should_create_plugin_tables(self, empty_engine) -> None:
        """Test both plugin tables exist after creation, twice in a row."""
        # Act
        await create_all_tables(empty_engine)
        await create_all_tables(empty_engine)

        # Assert
        assert {"strike_quotes", "strike_payments"} <= await _table_names(empty_engine)

    @pytest.mark.asyncio
    async def test_drop_all_tables_should_remove_plugin_tables(self, empty_engine) -> None:
        """Test dropping removes the plugin tables."""
        # Arrange
        await create_all_tables(empty_engine)

        # Act
        await drop_all_tables(empty_engine)

        # Assert
        assert await _table_names(empty_engine) == set()
