"""
Tenant-scoped store for Strike quotes and payments.

Mediates every read and write of the plugin tables so that it is
confined to one store (tenant) of the payment server. Reads are
filtered by the tenant id; writes stamp new entities with it and
reject entities owned by another tenant.

Dependencies: sqlalchemy, strike_plugin.boundary.db, strike_plugin.observability
System role: Tenant isolation guard in front of the plugin database
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Sequence, TypeVar

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import InstanceState

from strike_plugin.boundary.db.base import TenantMixin
from strike_plugin.boundary.db.connection import get_async_session_factory
from strike_plugin.boundary.db.CRUD.payment_crud import payment_crud
from strike_plugin.boundary.db.CRUD.quote_crud import quote_crud
from strike_plugin.boundary.db.models.payment_model import PaymentModel
from strike_plugin.boundary.db.models.quote_model import QuoteModel
from strike_plugin.core.exceptions import CrossTenantError, PreconditionError
from strike_plugin.observability.log_utils import log_exception_with_context
from strike_plugin.observability.logger import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", QuoteModel, PaymentModel)


class TenantScopedStore:
    """
    Data access for one tenant over one database session.

    The tenant id is fixed at construction. A store is meant to live for a
    single request or operation and owns its session: leaving the
    ``async with`` block (or calling ``close``) closes it.

    Attributes:
        tenant_id: Store identifier every operation is confined to
        session: Underlying async session
    """

    def __init__(self, session: AsyncSession, tenant_id: str) -> None:
        """
        Initialize store.

        Args:
            session: AsyncSession owned by this store from now on
            tenant_id: Store identifier; a blank value makes the guarded
                       operations raise PreconditionError
        """
        self._session = session
        self._tenant_id = tenant_id

    @property
    def tenant_id(self) -> str:
        return self._tenant_id

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def __aenter__(self) -> "TenantScopedStore":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying session, releasing its connection."""
        await self._session.close()

    async def get_unobserved(
        self,
        timeout: float | None = None,
    ) -> Sequence[QuoteModel]:
        """
        Get the tenant's quotes that were never reconciled against Strike.

        Args:
            timeout: Seconds to wait for the query; None waits indefinitely

        Returns:
            Sequence of unobserved QuoteModels, in no particular order

        Raises:
            PreconditionError: If the tenant id is blank
            asyncio.TimeoutError: If the query exceeds ``timeout``
        """
        self._validate_tenant_id("get_unobserved")

        return await asyncio.wait_for(
            quote_crud.get_unobserved(self._session, self._tenant_id),
            timeout,
        )

    async def get_paid_quotes_to_convert(
        self,
        timeout: float | None = None,
    ) -> Sequence[QuoteModel]:
        """
        Get the tenant's observed and paid quotes that have a conversion target.

        Args:
            timeout: Seconds to wait for the query; None waits indefinitely

        Returns:
            Sequence of QuoteModels awaiting conversion

        Raises:
            PreconditionError: If the tenant id is blank
            asyncio.TimeoutError: If the query exceeds ``timeout``
        """
        self._validate_tenant_id("get_paid_quotes_to_convert")

        return await asyncio.wait_for(
            quote_crud.get_paid_to_convert(self._session, self._tenant_id),
            timeout,
        )

    async def find_quote_by_invoice_id(self, invoice_id: str) -> QuoteModel | None:
        # Not guarded: a blank tenant id simply matches no rows.
        return await quote_crud.get_by_invoice_id(
            self._session, self._tenant_id, invoice_id
        )

    async def find_quote_by_payment_hash(self, payment_hash: str) -> QuoteModel | None:
        return await quote_crud.get_by_payment_hash(
            self._session, self._tenant_id, payment_hash
        )

    async def find_payment_by_payment_hash(
        self,
        payment_hash: str,
    ) -> PaymentModel | None:
        return await payment_crud.get_by_payment_hash(
            self._session, self._tenant_id, payment_hash
        )

    async def get_payments(
        self,
        only_completed: bool,
        offset: int = 0,
    ) -> Sequence[PaymentModel]:
        """
        Get the tenant's payments, newest first.

        Args:
            only_completed: Restrict to payments with a completion timestamp
            offset: Number of payments to skip

        Returns:
            Sequence of PaymentModels ordered by created_at descending
        """
        return await payment_crud.get_payments(
            self._session, self._tenant_id, only_completed, offset
        )

    async def store(self, entity: ModelT) -> ModelT:
        """
        Insert or update a quote or payment and commit.

        A new entity is stamped with the store's tenant id and added. An
        entity that already exists must belong to this tenant; entities
        loaded through another session are merged into this one. Before
        committing, every tenant-owned object pending in the session is
        checked, so a reassigned tenant id can never be flushed. A rejected
        object's pending changes are discarded.

        Args:
            entity: QuoteModel or PaymentModel instance

        Returns:
            The instance attached to this store's session. For a merged
            entity this is a different object: the one passed in stays
            detached and does not receive values set on commit
            (e.g. updated_at).

        Raises:
            PreconditionError: If the tenant id is blank
            CrossTenantError: If the entity, or any other object pending in
                              the session, belongs to another tenant
            SQLAlchemyError: If the commit fails (re-raised unchanged)
        """
        try:
            self._validate_tenant_id("store")

            state = inspect(entity)
            if not state.has_identity:
                entity.tenant_id = self._tenant_id
                self._session.add(entity)
            else:
                await self._check_owner(entity)
                if entity not in self._session:
                    entity = await self._session.merge(entity)

            for pending in (*self._session.new, *self._session.dirty):
                if isinstance(pending, TenantMixin):
                    await self._check_owner(pending)

            await self._session.commit()
            return entity
        except Exception as exc:
            log_exception_with_context(
                logger,
                "Failed to store entity into the DB",
                exc,
                entity_type=type(entity).__name__,
                tenant_id=self._tenant_id,
            )
            raise

    def _validate_tenant_id(self, operation: str) -> None:
        if not self._tenant_id or not self._tenant_id.strip():
            raise PreconditionError(operation)

    async def _check_owner(self, entity: TenantMixin) -> None:
        # Both the loaded owner and any in-memory reassignment must match.
        state = inspect(entity)
        history = state.attrs.tenant_id.history
        for owner in (*history.deleted, entity.tenant_id):
            if owner != self._tenant_id:
                await self._discard(entity, state)
                raise CrossTenantError(owner, self._tenant_id, type(entity).__name__)

    async def _discard(self, entity: TenantMixin, state: InstanceState) -> None:
        """Drop an object's pending changes from the session."""
        if state.persistent:
            await self._session.refresh(entity)
        elif state.pending:
            self._session.expunge(entity)


@asynccontextmanager
async def open_tenant_store(
    tenant_id: str,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncIterator[TenantScopedStore]:
    """
    Open a store bound to a tenant on a fresh session.

    The session is closed when the block exits, whether it succeeded or not.

    Args:
        tenant_id: Store identifier
        session_factory: Session factory; defaults to the configured one

    Yields:
        TenantScopedStore: Store bound to ``tenant_id``

    Usage:
        async with open_tenant_store(store_id) as store:
            quotes = await store.get_unobserved()
    """
    factory = session_factory or get_async_session_factory()
    async with TenantScopedStore(factory(), tenant_id) as store:
        yield store
