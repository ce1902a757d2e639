"""
Strike plugin persistence package.

Tenant-scoped storage for Strike Lightning quotes and payments.
Every read and write goes through TenantScopedStore, which confines
the operation to a single store (tenant) of the payment server.
"""

from strike_plugin.application.services.tenant_store import (
    TenantScopedStore,
    open_tenant_store,
)

__all__ = ["TenantScopedStore", "open_tenant_store"]
