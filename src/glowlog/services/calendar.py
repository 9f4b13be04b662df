"""Streak calculation and month grid for the check-in calendar."""

import calendar
from collections.abc import Iterable
from datetime import date, timedelta, tzinfo

from ..models.calendar import CalendarDay, StreakState
from ..models.checkin import CheckInRecord
from .dates import day_key, local_today

WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def completed_day_keys(
    records: Iterable[CheckInRecord], tz: tzinfo | None = None
) -> frozenset[date]:
    """Deduplicated set of local days that have at least one check-in."""
    return frozenset(day_key(record.date, tz) for record in records)


def current_streak(completed: set[date] | frozenset[date], today: date) -> int:
    """Count consecutive checked-in days ending today or yesterday.

    A missing today is tolerated as long as yesterday is checked in, so a
    user who has not checked in yet today keeps their run. Any older gap
    ends the streak.
    """
    check_day = today
    if check_day not in completed:
        check_day -= timedelta(days=1)
        if check_day not in completed:
            return 0

    streak = 0
    while check_day in completed:
        streak += 1
        check_day -= timedelta(days=1)
    return streak


def first_weekday_offset(year: int, month: int) -> int:
    """Column of the 1st in a Sunday-first week (Sunday = 0)."""
    return (date(year, month, 1).weekday() + 1) % 7


def build_month_grid(
    completed: set[date] | frozenset[date],
    year: int | None = None,
    month: int | None = None,
    today: date | None = None,
) -> list[CalendarDay | None]:
    """Build the cells of a 7-column month view.

    Leading ``None`` cells pad the first week; there is no trailing
    padding. Defaults to the month containing ``today``.
    """
    if today is None:
        today = local_today()
    if year is None:
        year = today.year
    if month is None:
        month = today.month

    cells: list[CalendarDay | None] = [None] * first_weekday_offset(year, month)
    _, days_in_month = calendar.monthrange(year, month)
    for day_number in range(1, days_in_month + 1):
        key = date(year, month, day_number)
        cells.append(
            CalendarDay(
                day_key=key,
                is_completed=key in completed,
                is_today=key == today,
            )
        )
    return cells


def summarize(
    records: Iterable[CheckInRecord],
    today: date | None = None,
    tz: tzinfo | None = None,
) -> StreakState:
    """Compute the streak view for a record collection."""
    records = list(records)
    if today is None:
        today = local_today(tz)
    completed = completed_day_keys(records, tz)
    return StreakState(
        count=current_streak(completed, today),
        is_today_done=today in completed,
        total_check_ins=len(records),
    )


def weekday_labels() -> tuple[str, ...]:
    """Column headers for the month grid."""
    return WEEKDAY_LABELS
