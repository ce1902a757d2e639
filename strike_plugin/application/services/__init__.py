"""Service orchestrators."""

from .tenant_store import TenantScopedStore, open_tenant_store

__all__ = [
    "TenantScopedStore",
    "open_tenant_store",
]
