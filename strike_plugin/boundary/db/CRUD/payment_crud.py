"""
Payment CRUD operations.

Tenant-filtered queries for PaymentModel: lookup by payment hash and
the newest-first payment listing.

Dependencies: sqlalchemy, strike_plugin.boundary.db.models.payment_model
System role: Payment persistence queries
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from strike_plugin.boundary.db.models.payment_model import PaymentModel
from strike_plugin.boundary.db.CRUD.base_crud import BaseCRUD


class PaymentCRUD(BaseCRUD[PaymentModel]):
    """
    CRUD operations for PaymentModel.

    Extends BaseCRUD with payment-specific queries.
    """

    def __init__(self) -> None:
        """Initialize PaymentCRUD with PaymentModel."""
        super().__init__(PaymentModel)

    async def get_by_payment_hash(
        self,
        session: AsyncSession,
        tenant_id: str,
        payment_hash: str,
    ) -> PaymentModel | None:
        """
        Retrieve a tenant's payment by Lightning payment hash.

        Args:
            session: Async database session
            tenant_id: Owning store identifier
            payment_hash: Lightning payment hash

        Returns:
            PaymentModel if found, None otherwise
        """
        return await self.find_first(
            session, tenant_id, PaymentModel.payment_hash == payment_hash
        )

    async def get_payments(
        self,
        session: AsyncSession,
        tenant_id: str,
        only_completed: bool,
        offset: int = 0,
    ) -> Sequence[PaymentModel]:
        """
        Retrieve a tenant's payments, newest first.

        With only_completed the listing is restricted to payments that have
        a completion timestamp; otherwise no completion filter applies.
        There is no page size: everything after ``offset`` is returned.

        Args:
            session: Async database session
            tenant_id: Owning store identifier
            only_completed: Restrict to completed payments
            offset: Number of payments to skip

        Returns:
            Sequence of PaymentModels ordered by created_at descending
        """
        criteria = []
        if only_completed:
            criteria.append(PaymentModel.completed_at.is_not(None))

        return await self.find_all(
            session,
            tenant_id,
            *criteria,
            order_by=PaymentModel.created_at.desc(),
            offset=offset,
        )


payment_crud = PaymentCRUD()
