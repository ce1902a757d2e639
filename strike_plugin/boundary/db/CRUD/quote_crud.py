"""
Quote CRUD operations.

Tenant-filtered queries for QuoteModel used by the observation and
conversion passes and by invoice/payment-hash lookups.

Dependencies: sqlalchemy, strike_plugin.boundary.db.models.quote_model
System role: Quote persistence queries
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from strike_plugin.boundary.db.models.quote_model import QuoteModel
from strike_plugin.boundary.db.CRUD.base_crud import BaseCRUD


class QuoteCRUD(BaseCRUD[QuoteModel]):
    """
    CRUD operations for QuoteModel.

    Extends BaseCRUD with quote-specific queries.
    """

    def __init__(self) -> None:
        """Initialize QuoteCRUD with QuoteModel."""
        super().__init__(QuoteModel)

    async def get_unobserved(
        self,
        session: AsyncSession,
        tenant_id: str,
    ) -> Sequence[QuoteModel]:
        """
        Retrieve quotes not yet reconciled against Strike.

        Args:
            session: Async database session
            tenant_id: Owning store identifier

        Returns:
            Sequence of QuoteModels with observed == False
        """
        return await self.find_all(
            session, tenant_id, QuoteModel.observed.is_(False)
        )

    async def get_paid_to_convert(
        self,
        session: AsyncSession,
        tenant_id: str,
    ) -> Sequence[QuoteModel]:
        """
        Retrieve observed, paid quotes that still carry a conversion target.

        Args:
            session: Async database session
            tenant_id: Owning store identifier

        Returns:
            Sequence of QuoteModels matching all three conditions
        """
        return await self.find_all(
            session,
            tenant_id,
            QuoteModel.paid_convert_to.is_not(None),
            QuoteModel.observed.is_(True),
            QuoteModel.paid.is_(True),
        )

    async def get_by_invoice_id(
        self,
        session: AsyncSession,
        tenant_id: str,
        invoice_id: str,
    ) -> QuoteModel | None:
        """
        Retrieve a tenant's quote by payment server invoice id.

        Args:
            session: Async database session
            tenant_id: Owning store identifier
            invoice_id: Invoice identifier

        Returns:
            QuoteModel if found, None otherwise
        """
        return await self.find_first(
            session, tenant_id, QuoteModel.invoice_id == invoice_id
        )

    async def get_by_payment_hash(
        self,
        session: AsyncSession,
        tenant_id: str,
        payment_hash: str,
    ) -> QuoteModel | None:
        """
        Retrieve a tenant's quote by Lightning payment hash.

        Args:
            session: Async database session
            tenant_id: Owning store identifier
            payment_hash: Payment hash of the quote's invoice

        Returns:
            QuoteModel if found, None otherwise
        """
        return await self.find_first(
            session, tenant_id, QuoteModel.payment_hash == payment_hash
        )


quote_crud = QuoteCRUD()
