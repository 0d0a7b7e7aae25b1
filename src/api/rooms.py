"""Customer-facing room endpoints: assignment, join and leave."""

from fastapi import APIRouter, Depends, Header, Request, Response
from fastapi.responses import PlainTextResponse

from src.api.responses import error_response
from src.meetings.assignment import MeetingAssignmentService
from src.meetings.lifecycle import ParticipantLifecycleService
from src.meetings.schemas import (
    RoomParticipantRequest,
    SubmitDetailsRequest,
    SubmitDetailsResponse,
)

router = APIRouter(tags=["rooms"])


def get_assignment_service(request: Request) -> MeetingAssignmentService:
    """Dependency to get MeetingAssignmentService from app state."""
    return request.app.state.assignment_service


def get_lifecycle_service(request: Request) -> ParticipantLifecycleService:
    """Dependency to get ParticipantLifecycleService from app state."""
    return request.app.state.lifecycle_service


@router.post("/submit-details", response_model=SubmitDetailsResponse)
async def submit_details(
    details: SubmitDetailsRequest,
    service: MeetingAssignmentService = Depends(get_assignment_service),
) -> SubmitDetailsResponse | Response:
    """Place the customer in a meeting and return its link.

    Reuses a meeting with a free seat or creates a new room.
    """
    try:
        return await service.submit_details(details)
    except Exception as e:
        return error_response("Error creating or joining meeting room", e)


@router.post("/join-room", response_class=PlainTextResponse)
async def join_room(
    body: RoomParticipantRequest,
    user_agent: str | None = Header(default=None),
    service: ParticipantLifecycleService = Depends(get_lifecycle_service),
) -> Response:
    """Record the joining participant's device and browser.

    Succeeds even when the participant is not in the meeting.
    """
    try:
        await service.join_room(body.room_name, body.email, user_agent)
    except Exception as e:
        return error_response("Error joining the room", e)
    return PlainTextResponse("Device and browser information updated")


@router.post("/leave-room", response_class=PlainTextResponse)
async def leave_room(
    body: RoomParticipantRequest,
    service: ParticipantLifecycleService = Depends(get_lifecycle_service),
) -> Response:
    """Remove a participant from a meeting."""
    try:
        await service.leave_room(body.room_name, body.email)
    except Exception as e:
        return error_response("Error leaving the room", e)
    return PlainTextResponse("Participant removed from the room")
