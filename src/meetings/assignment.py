"""Meeting assignment: place a customer in a room with a free seat.

An existing meeting with fewer than two participants is reused. When
none is left, a new provider room is created and its meeting record is
stored. If storing fails, the freshly created room is deleted again on
a best-effort basis.
"""

import secrets
import string
from collections.abc import Callable

import structlog
from pymongo.errors import PyMongoError

from src.adapters.daily_adapter import DailyAdapter
from src.config import settings
from src.errors import MeetingPersistenceError, ProviderError, StoreError
from src.meetings.schemas import SubmitDetailsRequest, SubmitDetailsResponse
from src.models.meeting import Meeting
from src.models.participant import Participant
from src.repositories.meeting_repo import MeetingRepository

logger = structlog.get_logger()

ROOM_ID_ALPHABET = string.digits + string.ascii_lowercase
ROOM_ID_LENGTH = 9
ROOM_NAME_PREFIX = "room-"


def generate_room_id() -> str:
    """Generate a random 9-character base-36 id."""
    return "".join(secrets.choice(ROOM_ID_ALPHABET) for _ in range(ROOM_ID_LENGTH))


class MeetingAssignmentService:
    """Finds or creates a meeting for each customer submission."""

    def __init__(
        self,
        repo: MeetingRepository,
        daily: DailyAdapter,
        meeting_base_url: str | None = None,
        agent_id: str | None = None,
        id_factory: Callable[[], str] = generate_room_id,
    ):
        """Initialize with store and provider collaborators.

        Args:
            repo: Meeting repository
            daily: Provider adapter used to create rooms
            meeting_base_url: Prefix for returned links. Defaults to settings.
            agent_id: Agent assigned to new meetings. Defaults to settings.
            id_factory: Produces the random part of new room names
        """
        self._repo = repo
        self._daily = daily
        self._base_url = (
            meeting_base_url
            if meeting_base_url is not None
            else settings.daily_base_url
        )
        self._agent_id = agent_id or settings.default_agent_id
        self._id_factory = id_factory

    async def submit_details(
        self, details: SubmitDetailsRequest
    ) -> SubmitDetailsResponse:
        """Assign the submitting customer to a meeting.

        Args:
            details: Submitted customer details

        Returns:
            SubmitDetailsResponse with the meeting link

        Raises:
            StoreError: If the store query or insert failed
            ProviderError: If the provider room could not be created
        """
        participant = Participant(email=details.email)

        try:
            meeting = await self._repo.claim_open_seat(participant)
        except PyMongoError as e:
            raise StoreError(f"Failed to look up an open meeting: {e!s}") from e

        if meeting is not None:
            logger.info(
                "Participant joined existing meeting",
                room_name=meeting.room_name,
                email=participant.email,
                participant_count=meeting.participant_count,
            )
        else:
            meeting = await self._open_meeting(participant)

        return SubmitDetailsResponse(link=self._base_url + meeting.room_name)

    async def _open_meeting(self, participant: Participant) -> Meeting:
        """Create a provider room and store its meeting record."""
        room_name = ROOM_NAME_PREFIX + self._id_factory()

        await self._daily.create_room(
            room_name,
            enable_chat=True,
            enable_screenshare=True,
        )

        meeting = Meeting(
            room_name=room_name,
            customer_id=participant.email,
            agent_id=self._agent_id,
            participants=[participant],
        )
        try:
            meeting = await self._repo.insert(meeting)
        except PyMongoError as e:
            compensated = await self._discard_room(room_name)
            raise MeetingPersistenceError(room_name, compensated) from e

        logger.info(
            "Meeting created",
            room_name=room_name,
            customer_id=meeting.customer_id,
            agent_id=meeting.agent_id,
        )
        return meeting

    async def _discard_room(self, room_name: str) -> bool:
        """Delete a room whose meeting could not be stored.

        Returns:
            True if the provider confirmed the deletion
        """
        try:
            await self._daily.delete_room(room_name)
        except ProviderError as e:
            logger.warning(
                "Failed to delete orphaned room",
                room_name=room_name,
                error=str(e),
            )
            return False
        return True
