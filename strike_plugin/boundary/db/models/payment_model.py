"""
Payment ORM model.

Stores outgoing Lightning payments made through Strike (payouts).

Dependencies: sqlalchemy, strike_plugin.boundary.db.base
System role: Payment persistence for payout tracking
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from strike_plugin.boundary.db.base import Base, TenantMixin, TimestampMixin, UUIDMixin


class PaymentModel(Base, UUIDMixin, TimestampMixin, TenantMixin):
    """
    Payment ORM model for an in-flight or completed Lightning payment.

    Attributes:
        id: UUID primary key (auto-generated)
        tenant_id: Owning store identifier
        payment_hash: Lightning payment hash
        payment_id: Strike payment identifier
        amount/currency: Amount sent
        fee: Network fee charged by Strike
        completed_at: Completion timestamp, None while in flight
        created_at: Payment initiation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "strike_payments"

    payment_hash: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
    )

    payment_id: Mapped[str | None] = mapped_column(String(255), nullable=True)

    amount: Mapped[Decimal | None] = mapped_column(Numeric(28, 8), nullable=True)
    fee: Mapped[Decimal | None] = mapped_column(Numeric(28, 8), nullable=True)
    currency: Mapped[str | None] = mapped_column(String(10), nullable=True)

    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        doc="Set when Strike reports the payment as completed",
    )

    @property
    def is_completed(self) -> bool:
        """Whether the payment has a completion timestamp."""
        return self.completed_at is not None
