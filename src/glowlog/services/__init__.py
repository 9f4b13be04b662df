"""Core check-in services."""
