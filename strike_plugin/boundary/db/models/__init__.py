"""
Database models package.

Exports:
  - QuoteModel: Strike quote ORM model
  - PaymentModel: Strike payment ORM model

Dependencies: sqlalchemy, strike_plugin.boundary.db.base
System role: Database model definitions for domain entities
"""

from strike_plugin.boundary.db.models.payment_model import PaymentModel
from strike_plugin.boundary.db.models.quote_model import QuoteModel

__all__ = [
    "QuoteModel",
    "PaymentModel",
]
