"""Admin endpoints: meeting overview and participant commands.

These endpoints are unauthenticated.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse

from src.api.responses import error_response
from src.meetings.admin import AdminQueryService
from src.meetings.relay import AdminActionRelay
from src.meetings.schemas import SwitchCameraRequest

router = APIRouter(prefix="/admin", tags=["admin"])


def get_admin_query_service(request: Request) -> AdminQueryService:
    """Dependency to get AdminQueryService from app state."""
    return request.app.state.admin_query_service


def get_action_relay(request: Request) -> AdminActionRelay:
    """Dependency to get AdminActionRelay from app state."""
    return request.app.state.action_relay


@router.get("/meetings", response_model=None)
async def list_meetings(
    service: AdminQueryService = Depends(get_admin_query_service),
) -> list[dict[str, Any]] | Response:
    """List all meetings with a customerWaiting flag."""
    try:
        return await service.list_meetings()
    except Exception as e:
        return error_response("Error fetching meeting details", e)


@router.post("/switch-camera", response_class=PlainTextResponse)
async def switch_camera(
    body: SwitchCameraRequest,
    relay: AdminActionRelay = Depends(get_action_relay),
) -> Response:
    """Ask a participant's client to switch camera."""
    try:
        await relay.switch_camera(body.room_name, body.participant_id)
    except Exception as e:
        return error_response("Error sending switch camera command", e)
    return PlainTextResponse("Switch camera command sent")
