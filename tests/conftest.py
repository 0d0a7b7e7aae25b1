"""Pytest configuration and fixtures."""

import asyncio
from collections.abc import AsyncIterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo.errors import PyMongoError

from src.adapters.daily_adapter import DailyAdapter
from src.main import app
from src.meetings import (
    AdminActionRelay,
    AdminQueryService,
    MeetingAssignmentService,
    ParticipantLifecycleService,
)
from src.models.meeting import MAX_PARTICIPANTS, Meeting
from src.models.participant import Participant

BASE_URL = "https://example.daily.co/"


class InMemoryMeetingRepository:
    """MeetingRepository double keeping meetings in a list.

    Each method yields to the event loop once, like a network round trip,
    then applies its change without further suspension, matching the
    single-operation atomicity of the MongoDB-backed repository.
    Set ``fail_with`` to make every call raise.
    """

    def __init__(self) -> None:
        self.meetings: list[Meeting] = []
        self.fail_with: Exception | None = None

    async def _round_trip(self) -> None:
        await asyncio.sleep(0)
        if self.fail_with is not None:
            raise self.fail_with

    def find(self, room_name: str) -> Meeting | None:
        return next((m for m in self.meetings if m.room_name == room_name), None)

    async def claim_open_seat(self, participant: Participant) -> Meeting | None:
        await self._round_trip()
        for meeting in self.meetings:
            if len(meeting.participants) < MAX_PARTICIPANTS:
                meeting.participants.append(participant.model_copy())
                return meeting.model_copy(deep=True)
        return None

    async def insert(self, meeting: Meeting) -> Meeting:
        await self._round_trip()
        stored = meeting.model_copy(deep=True, update={"id": str(ObjectId())})
        self.meetings.append(stored)
        return stored.model_copy(deep=True)

    async def list_all(self) -> list[Meeting]:
        await self._round_trip()
        return [m.model_copy(deep=True) for m in self.meetings]

    async def update_participant_device(
        self, room_name: str, email: str, device: str, browser: str | None
    ) -> bool:
        await self._round_trip()
        meeting = self.find(room_name)
        if meeting is None:
            return False
        for participant in meeting.participants:
            if participant.email == email:
                participant.device = device
                participant.browser = browser
                return True
        return False

    async def remove_participant(self, room_name: str, email: str) -> bool:
        await self._round_trip()
        meeting = self.find(room_name)
        if meeting is None:
            return False
        before = len(meeting.participants)
        meeting.participants = [p for p in meeting.participants if p.email != email]
        return len(meeting.participants) < before


@pytest.fixture
def meeting_repo() -> InMemoryMeetingRepository:
    """Create an empty in-memory meeting repository."""
    return InMemoryMeetingRepository()


@pytest.fixture
def store_error() -> PyMongoError:
    """A store failure to inject into the repository."""
    return PyMongoError("connection refused")


@pytest.fixture
def mock_daily() -> MagicMock:
    """Create mock DailyAdapter."""
    daily = MagicMock(spec=DailyAdapter)

    async def create_room(name: str, **properties) -> dict:
        await asyncio.sleep(0)
        return {"name": name}

    daily.create_room = AsyncMock(side_effect=create_room)
    daily.delete_room = AsyncMock(return_value=None)
    daily.send_participant_action = AsyncMock(return_value=None)
    daily.is_configured = True
    return daily


@pytest.fixture
def room_ids() -> list[str]:
    """Predictable room ids handed out in order."""
    return ["abc123xyz", "def456uvw", "ghi789rst"]


@pytest.fixture
def assignment_service(
    meeting_repo: InMemoryMeetingRepository,
    mock_daily: MagicMock,
    room_ids: list[str],
) -> MeetingAssignmentService:
    """Create MeetingAssignmentService with predictable room ids."""
    ids = iter(room_ids)
    return MeetingAssignmentService(
        repo=meeting_repo,  # type: ignore[arg-type]
        daily=mock_daily,
        meeting_base_url=BASE_URL,
        agent_id="agent1",
        id_factory=lambda: next(ids),
    )


@pytest.fixture
async def client(
    meeting_repo: InMemoryMeetingRepository,
    mock_daily: MagicMock,
    assignment_service: MeetingAssignmentService,
) -> AsyncIterator[AsyncClient]:
    """Create async test client for FastAPI app with in-memory store."""
    app.state.daily = mock_daily
    app.state.assignment_service = assignment_service
    app.state.admin_query_service = AdminQueryService(meeting_repo)  # type: ignore[arg-type]
    app.state.lifecycle_service = ParticipantLifecycleService(meeting_repo)  # type: ignore[arg-type]
    app.state.action_relay = AdminActionRelay(mock_daily)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Clean up app state
    del app.state.daily
    del app.state.assignment_service
    del app.state.admin_query_service
    del app.state.lifecycle_service
    del app.state.action_relay
