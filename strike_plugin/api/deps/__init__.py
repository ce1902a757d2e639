"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import get_tenant_store

__all__ = [
    "get_tenant_store",
]
