"""Request-scoped wiring for web hosts of the plugin."""
