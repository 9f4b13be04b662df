"""CLI commands for glowlog."""

from .calendar import calendar, streak
from .checkin import checkin
from .init import init
from .serve import serve
from .timelapse import timelapse
from .tip import tip

__all__ = [
    "calendar",
    "checkin",
    "init",
    "serve",
    "streak",
    "timelapse",
    "tip",
]
