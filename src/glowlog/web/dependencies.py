"""FastAPI dependencies."""

from fastapi import HTTPException, Request

from ..services.checkins import CheckInService


def get_service(request: Request) -> CheckInService:
    """Get the check-in service from app state."""
    service = getattr(request.app.state, "service", None)
    if service is None:
        error = getattr(request.app.state, "load_error", None)
        raise HTTPException(
            status_code=503,
            detail=f"Check-ins unavailable: {error or 'not loaded'}",
        )
    return service
