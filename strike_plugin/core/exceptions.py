"""
Exception hierarchy for the Strike plugin.

Provides layered exception structure for tenant-guard failures.
All exceptions include context for observability and debugging.
Database failures are not wrapped here: SQLAlchemy errors reach the
caller unchanged.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the plugin
"""

from typing import Any


class StrikePluginException(Exception):
    """Base exception for all Strike plugin errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class PreconditionError(StrikePluginException):
    """Raised when an operation needs a tenant id and the store has none."""

    def __init__(
        self,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize precondition error.

        Args:
            operation: Name of the store operation that was refused
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(
            "StoreId is not set, cannot perform any DB operation", details
        )


class CrossTenantError(StrikePluginException):
    """Raised when a write targets an entity owned by another tenant."""

    def __init__(
        self,
        entity_tenant_id: str | None,
        tenant_id: str,
        entity_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize cross-tenant error.

        Args:
            entity_tenant_id: Tenant id carried by the entity
            tenant_id: Tenant id the store is bound to
            entity_type: Class name of the rejected entity
            details: Additional context
        """
        details = details or {}
        details["entity_tenant_id"] = entity_tenant_id
        details["tenant_id"] = tenant_id
        if entity_type:
            details["entity_type"] = entity_type
        self.entity_tenant_id = entity_tenant_id
        self.tenant_id = tenant_id
        super().__init__(
            f"The updated entity doesn't belong to this tenant "
            f"({entity_tenant_id} vs. {tenant_id}), cannot continue",
            details,
        )
