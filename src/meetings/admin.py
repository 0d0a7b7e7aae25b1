"""Admin view of all meetings."""

from typing import Any

from pymongo.errors import PyMongoError

from src.errors import StoreError
from src.repositories.meeting_repo import MeetingRepository


class AdminQueryService:
    """Lists meetings for the admin dashboard."""

    def __init__(self, repo: MeetingRepository):
        self._repo = repo

    async def list_meetings(self) -> list[dict[str, Any]]:
        """Get every meeting with its derived customerWaiting flag.

        Returns:
            Serialized meetings in store order

        Raises:
            StoreError: If the store query failed
        """
        try:
            meetings = await self._repo.list_all()
        except PyMongoError as e:
            raise StoreError(f"Failed to list meetings: {e!s}") from e
        return [meeting.to_admin_view() for meeting in meetings]
