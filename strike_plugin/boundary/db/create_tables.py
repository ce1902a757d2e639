"""
Database table creation script.

Creates the plugin tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, strike_plugin.configs
System role: Database schema initialization

Usage:
    python -m strike_plugin.boundary.db.create_tables
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncEngine

from strike_plugin.boundary.db.base import Base
from strike_plugin.boundary.db.connection import get_async_engine
from strike_plugin.observability.logger import configure_logging, get_logger

# Import all models to register them with Base.metadata
from strike_plugin.boundary.db.models.quote_model import QuoteModel  # noqa: F401
from strike_plugin.boundary.db.models.payment_model import PaymentModel  # noqa: F401

logger = get_logger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all plugin tables from registered ORM models.

    Idempotent: issues CREATE TABLE only for missing tables, so safe
    to run multiple times. Existing tables remain unchanged.

    Args:
        engine: Engine to use; defaults to the configured engine

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Created tables: %s", ", ".join(Base.metadata.tables))


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all plugin tables and their data.

    WARNING: Destructive operation. Only use in development/testing.

    Args:
        engine: Engine to use; defaults to the configured engine

    Raises:
        SQLAlchemyError: If database connection fails or drop fails
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("Dropped tables: %s", ", ".join(Base.metadata.tables))


async def _main() -> None:
    engine = get_async_engine()
    try:
        await create_all_tables(engine)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    configure_logging()
    asyncio.run(_main())
