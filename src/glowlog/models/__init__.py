"""Data models for glowlog."""

from .calendar import CalendarDay, StreakState
from .checkin import (
    UNKNOWN_ROUTINE,
    CheckInImages,
    CheckInRecord,
    FrontAndSide,
    FrontOnly,
    LegacyOnly,
    ViewMode,
    images_from_payload,
)

__all__ = [
    "CalendarDay",
    "CheckInImages",
    "CheckInRecord",
    "FrontAndSide",
    "FrontOnly",
    "images_from_payload",
    "LegacyOnly",
    "StreakState",
    "UNKNOWN_ROUTINE",
    "ViewMode",
]
