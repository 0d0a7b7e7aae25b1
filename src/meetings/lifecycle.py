"""Participant join and leave handling."""

import structlog
from pymongo.errors import PyMongoError

from src.errors import StoreError
from src.repositories.meeting_repo import MeetingRepository
from src.services.user_agent import classify_user_agent

logger = structlog.get_logger()


class ParticipantLifecycleService:
    """Records device details on join and removes participants on leave.

    Neither operation fails when nothing matches: a join for an unknown
    participant or a repeated leave is reported as success.
    """

    def __init__(self, repo: MeetingRepository):
        self._repo = repo

    async def join_room(
        self, room_name: str, email: str, user_agent: str | None
    ) -> bool:
        """Store the joining participant's device and browser.

        Only updates an existing participant entry; never adds one.

        Args:
            room_name: Meeting room name
            email: Participant email
            user_agent: Raw User-Agent header

        Returns:
            True if the participant was found in the meeting

        Raises:
            StoreError: If the store update failed
        """
        client = classify_user_agent(user_agent)
        try:
            matched = await self._repo.update_participant_device(
                room_name, email, client.device, client.browser
            )
        except PyMongoError as e:
            raise StoreError(f"Failed to update participant: {e!s}") from e

        if not matched:
            logger.info(
                "Join for unknown participant ignored",
                room_name=room_name,
                email=email,
            )
        return matched

    async def leave_room(self, room_name: str, email: str) -> bool:
        """Remove a participant from a meeting.

        Args:
            room_name: Meeting room name
            email: Participant email

        Returns:
            True if a participant entry was removed

        Raises:
            StoreError: If the store update failed
        """
        try:
            removed = await self._repo.remove_participant(room_name, email)
        except PyMongoError as e:
            raise StoreError(f"Failed to remove participant: {e!s}") from e

        logger.info(
            "Participant left room",
            room_name=room_name,
            email=email,
            removed=removed,
        )
        return removed
