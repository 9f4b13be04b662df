"""Derived calendar and streak models."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class CalendarDay:
    """One day cell in the month grid."""

    day_key: date
    is_completed: bool = False
    is_today: bool = False

    @property
    def day(self) -> int:
        return self.day_key.day

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "date": self.day_key.isoformat(),
            "day": self.day,
            "is_completed": self.is_completed,
            "is_today": self.is_today,
        }


@dataclass(frozen=True)
class StreakState:
    """Current streak with today's completion flag."""

    count: int
    is_today_done: bool
    total_check_ins: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "count": self.count,
            "is_today_done": self.is_today_done,
            "total_check_ins": self.total_check_ins,
        }

    def get_status_display(self) -> str:
        """Get a human-readable status line."""
        if self.is_today_done:
            return "Done for today, great job!"
        return "No check-in yet today"
