"""Check-in routes."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ...models.checkin import ViewMode
from ...services.checkins import Capture, CheckInService, SaveResult
from ..dependencies import get_service

router = APIRouter(prefix="/checkins", tags=["checkins"])


class CaptureRequest(BaseModel):
    """Photos from a completed capture."""

    front: str = Field(min_length=1)
    side: str = Field(min_length=1)
    routine_id: str | None = None


def _save_response(result: SaveResult) -> dict:
    return {
        "record": result.record.to_dict() if result.record else None,
        "persisted": result.persisted,
        "warning": result.warning,
    }


@router.get("")
async def list_checkins(
    mode: ViewMode = ViewMode.FRONT,
    service: CheckInService = Depends(get_service),
):
    """Gallery frames, most recent first."""
    frames = service.gallery(mode)
    return {"count": len(frames), "items": [frame.to_dict() for frame in frames]}


@router.post("", status_code=201)
async def create_checkin(
    body: CaptureRequest,
    service: CheckInService = Depends(get_service),
):
    """Record a check-in from captured photos."""
    result = await service.record_capture(
        Capture(front=body.front, side=body.side), routine_id=body.routine_id
    )
    return _save_response(result)


@router.get("/{record_id}")
async def get_checkin(record_id: str, service: CheckInService = Depends(get_service)):
    record = service.get(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Check-in not found")
    return record.to_dict()


@router.delete("/{record_id}")
async def delete_checkin(record_id: str, service: CheckInService = Depends(get_service)):
    """Delete a check-in. Unknown ids succeed with no record."""
    result = await service.delete(record_id)
    return _save_response(result)
