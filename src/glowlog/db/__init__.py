"""Database layer for glowlog."""

from .engine import get_db_path, init_db
from .repositories import CheckInStore

__all__ = [
    "CheckInStore",
    "get_db_path",
    "init_db",
]
