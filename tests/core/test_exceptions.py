"""
Test suite for the exception hierarchy.

System role: Verification of error messages and context details
"""

from strike_plugin.core.exceptions import (
    CrossTenantError,
    PreconditionError,
    StrikePluginException,
)


class TestStrikePluginException:
    """Test suite for the base exception."""

    def test_str_should_include_details(self) -> None:
        """Test details are appended to the message."""
        exc = StrikePluginException("boom", {"key": "value"})

        assert str(exc) == "boom | Details: {'key': 'value'}"

    def test_str_should_be_message_without_details(self) -> None:
        """Test plain message when no details are given."""
        assert str(StrikePluginException("boom")) == "boom"


class TestPreconditionError:
    """Test suite for PreconditionError."""

    def test_should_record_operation(self) -> None:
        """Test the refused operation is kept in details."""
        exc = PreconditionError("get_unobserved")

        assert isinstance(exc, StrikePluginException)
        assert exc.message == "StoreId is not set, cannot perform any DB operation"
        assert exc.details == {"operation": "get_unobserved"}


class TestCrossTenantError:
    """Test suite for CrossTenantError."""

    def test_should_name_both_tenants(self) -> None:
        """Test both tenant ids appear in message and details."""
        exc = CrossTenantError("store-a", "store-b", "QuoteModel")

        assert "(store-a vs. store-b)" in exc.message
        assert exc.entity_tenant_id == "store-a"
        assert exc.tenant_id == "store-b"
        assert exc.details["entity_type"] == "QuoteModel"
