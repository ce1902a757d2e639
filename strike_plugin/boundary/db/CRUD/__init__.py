"""
CRUD operations for database models.

Exports the tenant-filtered base class and model-specific CRUD
implementations with pre-instantiated singletons for direct use.

Usage:
    from strike_plugin.boundary.db.CRUD import quote_crud, payment_crud

    quotes = await quote_crud.get_unobserved(db, tenant_id)
"""

from strike_plugin.boundary.db.CRUD.base_crud import BaseCRUD
from strike_plugin.boundary.db.CRUD.quote_crud import QuoteCRUD, quote_crud
from strike_plugin.boundary.db.CRUD.payment_crud import PaymentCRUD, payment_crud

__all__ = [
    "BaseCRUD",
    "QuoteCRUD",
    "quote_crud",
    "PaymentCRUD",
    "payment_crud",
]
