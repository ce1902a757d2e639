"""
Base tenant-filtered read operations for SQLAlchemy models.

Provides generic queries that always carry a tenant filter and can be
inherited and extended by model-specific CRUD classes. Writes go
through TenantScopedStore, which owns the tenant ownership checks.

Dependencies: sqlalchemy
System role: Foundation for all tenant-scoped database queries
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from strike_plugin.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for tenant-filtered queries.

    Every statement built here is restricted to one tenant id. Models must
    carry a ``tenant_id`` column (see TenantMixin).

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    def tenant_select(self, tenant_id: str, *criteria: Any) -> Select:
        """
        Build a SELECT over the model restricted to one tenant.

        Args:
            tenant_id: Owning store identifier
            *criteria: Extra WHERE clauses, combined with AND

        Returns:
            Select statement
        """
        return select(self.model).where(self.model.tenant_id == tenant_id, *criteria)

    async def find_first(
        self,
        session: AsyncSession,
        tenant_id: str,
        *criteria: Any,
    ) -> ModelT | None:
        """
        Retrieve the first record of a tenant matching the criteria.

        Args:
            session: Async database session
            tenant_id: Owning store identifier
            *criteria: Extra WHERE clauses

        Returns:
            Model instance if found, None otherwise
        """
        stmt = self.tenant_select(tenant_id, *criteria).limit(1)
        result = await session.execute(stmt)
        return result.scalars().first()

    async def find_all(
        self,
        session: AsyncSession,
        tenant_id: str,
        *criteria: Any,
        order_by: Any = None,
        offset: int = 0,
    ) -> Sequence[ModelT]:
        """
        Retrieve all records of a tenant matching the criteria.

        Args:
            session: Async database session
            tenant_id: Owning store identifier
            *criteria: Extra WHERE clauses
            order_by: Optional ORDER BY clause
            offset: Number of records to skip

        Returns:
            Sequence of model instances
        """
        stmt = self.tenant_select(tenant_id, *criteria)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        if offset:
            stmt = stmt.offset(offset)
        result = await session.execute(stmt)
        return result.scalars().all()
