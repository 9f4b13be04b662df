"""Web API for glowlog."""

from .app import create_app

__all__ = ["create_app"]
