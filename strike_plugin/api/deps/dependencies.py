"""
Dependency injection container.

Factory functions for FastAPI dependencies. Each request gets its own
TenantScopedStore bound to the store id from the route, so a store
instance is never shared across requests.

Dependencies: fastapi, strike_plugin.boundary, strike_plugin.application
System role: DI container for request-scoped stores
"""

from typing import AsyncGenerator

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from strike_plugin.application.services import TenantScopedStore
from strike_plugin.boundary.db import get_async_db


async def get_tenant_store(
    store_id: str = Path(..., min_length=1, description="Payment server store id"),
    db: AsyncSession = Depends(get_async_db),
) -> AsyncGenerator[TenantScopedStore, None]:
    """
    Get a store bound to the request's store id.

    The session comes from get_async_db, which closes it after the
    response; the store closes it as well when the request finishes,
    even if the route raised.

    Args:
        store_id: Tenant id taken from the ``{store_id}`` path parameter
        db: Async database session (injected via Depends)

    Yields:
        TenantScopedStore: Store scoped to the request
    """
    async with TenantScopedStore(db, store_id) as store:
        yield store
