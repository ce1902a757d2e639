"""
Core domain module.

Contains the exception hierarchy shared by the storage and service layers.
"""

from strike_plugin.core.exceptions import (
    CrossTenantError,
    PreconditionError,
    StrikePluginException,
)

__all__ = [
    "StrikePluginException",
    "PreconditionError",
    "CrossTenantError",
]
