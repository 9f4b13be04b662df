"""Timelapse routes."""

from fastapi import APIRouter, Depends

from ...models.checkin import ViewMode
from ...services.checkins import CheckInService
from ..dependencies import get_service

router = APIRouter(prefix="/timeline", tags=["timeline"])


@router.get("")
async def timeline_frame(
    mode: ViewMode = ViewMode.FRONT,
    index: int = 0,
    service: CheckInService = Depends(get_service),
):
    """Frame at a (clamped) timeline position."""
    sequencer = service.timeline(mode)
    sequencer.seek(index)
    frame = sequencer.frame()
    return {
        "total": len(sequencer),
        "frame": frame.to_dict() if frame else None,
    }
