"""
Test suite for QuoteCRUD database operations.

Tests tenant-filtered quote queries against an in-memory SQLite database.

System role: Verification of quote persistence queries
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from strike_plugin.boundary.db.CRUD.quote_crud import QuoteCRUD, quote_crud
from strike_plugin.boundary.db.models.quote_model import QuoteModel


async def _seed(session: AsyncSession, *quotes: QuoteModel) -> None:
    session.add_all(quotes)
    await session.commit()


class TestQuoteCRUDInit:
    """Test suite for QuoteCRUD initialization."""

    def test_init_should_set_model_to_quote_model(self) -> None:
        """Test QuoteCRUD initializes with QuoteModel."""
        # Act
        crud = QuoteCRUD()

        # Assert
        assert crud.model == QuoteModel


class TestQuoteCRUDQueries:
    """Test suite for QuoteCRUD tenant queries."""

    @pytest.mark.asyncio
    async def test_get_unobserved_should_filter_tenant_and_flag(
        self, test_async_db: AsyncSession, tenant_id, other_tenant_id, make_quote
    ) -> None:
        """Test only unobserved quotes of the tenant are returned."""
        # Arrange
        target = make_quote(tenant_id=tenant_id, observed=False)
        await _seed(
            test_async_db,
            target,
            make_quote(tenant_id=tenant_id, observed=True),
            make_quote(tenant_id=other_tenant_id, observed=False),
        )

        # Act
        result = await quote_crud.get_unobserved(test_async_db, tenant_id)

        # Assert
        assert [q.id for q in result] == [target.id]

    @pytest.mark.asyncio
    async def test_get_paid_to_convert_should_need_every_condition(
        self, test_async_db: AsyncSession, tenant_id, make_quote
    ) -> None:
        """Test convert target, observed and paid are all required."""
        # Arrange
        target = make_quote(
            tenant_id=tenant_id, paid_convert_to="USD", observed=True, paid=True
        )
        await _seed(
            test_async_db,
            target,
            make_quote(tenant_id=tenant_id, paid_convert_to="USD", observed=True, paid=False),
            make_quote(tenant_id=tenant_id, observed=True, paid=True),
        )

        # Act
        result = await quote_crud.get_paid_to_convert(test_async_db, tenant_id)

        # Assert
        assert [q.id for q in result] == [target.id]

    @pytest.mark.asyncio
    async def test_get_by_invoice_id_should_return_none_when_not_found(
        self, test_async_db: AsyncSession, tenant_id
    ) -> None:
        """Test lookup of an unknown invoice returns None."""
        # Act
        result = await quote_crud.get_by_invoice_id(test_async_db, tenant_id, "missing")

        # Assert
        assert result is None

    @pytest.mark.asyncio
    async def test_get_by_payment_hash_should_return_match(
        self, test_async_db: AsyncSession, tenant_id, make_quote
    ) -> None:
        """Test lookup by payment hash returns the tenant's quote."""
        # Arrange
        target = make_quote(tenant_id=tenant_id, payment_hash="9f" * 32)
        await _seed(test_async_db, target, make_quote(tenant_id=tenant_id))

        # Act
        result = await quote_crud.get_by_payment_hash(test_async_db, tenant_id, "9f" * 32)

        # Assert
        assert result is not None
        assert result.id == target.id
