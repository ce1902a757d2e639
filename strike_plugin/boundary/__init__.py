"""
Boundary layer for external system integrations.

Handles all interactions with the plugin database.
"""
