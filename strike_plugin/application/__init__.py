"""Application layer: services orchestrating the database boundary."""
