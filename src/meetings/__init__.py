"""Meeting services: room assignment, admin listing, participant lifecycle.

- MeetingAssignmentService: Find or create a room with a free seat
- AdminQueryService: List meetings with the customerWaiting flag
- ParticipantLifecycleService: Record joins and leaves
- AdminActionRelay: Forward admin device commands to the provider
"""

from src.meetings.admin import AdminQueryService
from src.meetings.assignment import MeetingAssignmentService, generate_room_id
from src.meetings.lifecycle import ParticipantLifecycleService
from src.meetings.relay import AdminActionRelay

__all__ = [
    "AdminActionRelay",
    "AdminQueryService",
    "MeetingAssignmentService",
    "ParticipantLifecycleService",
    "generate_room_id",
]
