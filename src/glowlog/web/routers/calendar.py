"""Calendar and streak routes."""

from fastapi import APIRouter, Depends, Query

from ...services.calendar import weekday_labels
from ...services.checkins import CheckInService
from ..dependencies import get_service

router = APIRouter(prefix="/calendar", tags=["calendar"])


@router.get("")
async def month_view(
    year: int | None = Query(None, ge=1, le=9999),
    month: int | None = Query(None, ge=1, le=12),
    service: CheckInService = Depends(get_service),
):
    """Month grid with the current streak."""
    cells = service.month_grid(year=year, month=month)
    first_day = next(cell for cell in cells if cell is not None)
    return {
        "year": first_day.day_key.year,
        "month": first_day.day_key.month,
        "weekdays": list(weekday_labels()),
        "cells": [cell.to_dict() if cell else None for cell in cells],
        "streak": service.summary().to_dict(),
    }
