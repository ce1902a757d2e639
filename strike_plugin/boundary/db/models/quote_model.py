"""
Quote ORM model.

Stores Strike exchange quotes created for payment server invoices.
A quote is observed once it has been reconciled against Strike, and
paid once Strike reports the Lightning invoice as settled.

Dependencies: sqlalchemy, strike_plugin.boundary.db.base
System role: Quote persistence for invoice payment tracking
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from strike_plugin.boundary.db.base import Base, TenantMixin, TimestampMixin, UUIDMixin


class QuoteModel(Base, UUIDMixin, TimestampMixin, TenantMixin):
    """
    Quote ORM model linking a payment server invoice to a Strike quote.

    Attributes:
        id: UUID primary key (auto-generated)
        tenant_id: Owning store identifier
        invoice_id: Payment server invoice identifier
        payment_hash: Lightning payment hash of the quote's invoice
        quote_id: Strike quote identifier
        lightning_invoice: BOLT11 invoice returned by Strike
        source_amount/source_currency: What the payer sends
        target_amount/target_currency: What the store receives
        conversion_rate: Exchange rate locked by the quote
        observed: Reconciled against Strike at least once
        paid: Strike confirmed the payment
        paid_convert_to: Currency the paid amount must be converted into,
                         None when no conversion is wanted
        expires_at: Quote expiry reported by Strike
        created_at: Quote creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Workflow:
        1. Invoice created, quote requested from Strike, row stored
        2. Observation pass marks it observed (and paid when settled)
        3. Paid quotes with paid_convert_to set are picked up for conversion
    """

    __tablename__ = "strike_quotes"

    invoice_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )

    payment_hash: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
    )

    quote_id: Mapped[str | None] = mapped_column(String(255), nullable=True)

    lightning_invoice: Mapped[str | None] = mapped_column(Text, nullable=True)

    source_amount: Mapped[Decimal | None] = mapped_column(Numeric(28, 8), nullable=True)
    source_currency: Mapped[str | None] = mapped_column(String(10), nullable=True)
    target_amount: Mapped[Decimal | None] = mapped_column(Numeric(28, 8), nullable=True)
    target_currency: Mapped[str | None] = mapped_column(String(10), nullable=True)
    conversion_rate: Mapped[Decimal | None] = mapped_column(Numeric(28, 12), nullable=True)

    observed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    paid: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    paid_convert_to: Mapped[str | None] = mapped_column(
        String(10),
        nullable=True,
        doc="Target currency for converting the paid amount",
    )

    expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
