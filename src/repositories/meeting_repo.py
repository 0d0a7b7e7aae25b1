"""Repository for meeting documents.

Every method is a single MongoDB operation against the meetings
collection. Update methods report whether a document matched; callers
decide whether a miss matters.
"""

from typing import Any

from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection

from src.models.meeting import MAX_PARTICIPANTS, Meeting
from src.models.participant import Participant

# Matches meetings that can still take another participant
HAS_CAPACITY = {"$expr": {"$lt": [{"$size": "$participants"}, MAX_PARTICIPANTS]}}


class MeetingRepository:
    """Repository for meeting records.

    Wraps the meetings collection so services never build queries
    themselves.
    """

    def __init__(self, collection: AsyncCollection[dict[str, Any]]):
        """Initialize repository with the meetings collection.

        Args:
            collection: Async collection holding meeting documents
        """
        self._collection = collection

    async def claim_open_seat(self, participant: Participant) -> Meeting | None:
        """Append a participant to the first meeting with capacity.

        The capacity filter and the push run as one atomic update, so two
        concurrent claims cannot overfill the same meeting.

        Args:
            participant: Participant to append

        Returns:
            The meeting after the append, or None if no meeting had room
        """
        doc = await self._collection.find_one_and_update(
            HAS_CAPACITY,
            {"$push": {"participants": participant.model_dump()}},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            return None
        return Meeting.model_validate(doc)

    async def insert(self, meeting: Meeting) -> Meeting:
        """Insert a new meeting.

        Args:
            meeting: Meeting without an id

        Returns:
            Copy of the meeting carrying the store-assigned id
        """
        result = await self._collection.insert_one(meeting.to_document())
        return meeting.model_copy(update={"id": str(result.inserted_id)})

    async def list_all(self) -> list[Meeting]:
        """Get every meeting in natural store order."""
        cursor = self._collection.find()
        return [Meeting.model_validate(doc) async for doc in cursor]

    async def update_participant_device(
        self,
        room_name: str,
        email: str,
        device: str,
        browser: str | None,
    ) -> bool:
        """Set device and browser on an existing participant entry.

        Never inserts a participant.

        Args:
            room_name: Meeting room name
            email: Participant email
            device: Device type label
            browser: Browser name, may be None

        Returns:
            True if a meeting with that participant was found
        """
        result = await self._collection.update_one(
            {"roomName": room_name, "participants.email": email},
            {
                "$set": {
                    "participants.$.device": device,
                    "participants.$.browser": browser,
                }
            },
        )
        return result.matched_count > 0

    async def remove_participant(self, room_name: str, email: str) -> bool:
        """Pull a participant out of a meeting.

        The meeting itself is kept even when it becomes empty.

        Args:
            room_name: Meeting room name
            email: Participant email

        Returns:
            True if a participant entry was removed
        """
        result = await self._collection.update_one(
            {"roomName": room_name},
            {"$pull": {"participants": {"email": email}}},
        )
        return result.modified_count > 0
