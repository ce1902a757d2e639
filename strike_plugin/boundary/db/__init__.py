"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin, TenantMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - QuoteModel, PaymentModel: Domain entities
  - quote_crud, payment_crud: Tenant-filtered CRUD singletons

Dependencies: sqlalchemy, strike_plugin.configs
System role: Database adapter providing persistent storage for Strike
quotes and payments.
"""

from strike_plugin.boundary.db.base import Base, TenantMixin, TimestampMixin, UUIDMixin
from strike_plugin.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from strike_plugin.boundary.db.models import PaymentModel, QuoteModel
from strike_plugin.boundary.db.CRUD import (
    BaseCRUD,
    PaymentCRUD,
    QuoteCRUD,
    payment_crud,
    quote_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TenantMixin",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "QuoteModel",
    "PaymentModel",
    # CRUD classes
    "BaseCRUD",
    "QuoteCRUD",
    "PaymentCRUD",
    # CRUD singletons
    "quote_crud",
    "payment_crud",
]
