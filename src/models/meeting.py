"""Meeting model representing one video room and its participants."""

from datetime import UTC, datetime
from typing import Any

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.models.participant import Participant

MAX_PARTICIPANTS = 2


class Meeting(BaseModel):
    """A meeting record as persisted in the meetings collection.

    Documents use camelCase keys (roomName, customerId, ...). The store
    assigns ``_id`` on insert; it is exposed here as a string.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    id: str | None = Field(default=None, alias="_id", description="Store identifier")
    room_name: str = Field(description="Provider room name, room-<id>")
    customer_id: str = Field(description="Email of the customer who opened the room")
    agent_id: str = Field(description="Statically assigned support agent")
    start_time: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the meeting was created",
    )
    duration: int | float = Field(default=0, description="Always zero, never updated")
    participants: list[Participant] = Field(
        default_factory=list,
        description="Participants in join order",
    )

    @field_validator("id", mode="before")
    @classmethod
    def stringify_object_id(cls, v: Any) -> Any:
        """Accept raw ObjectIds coming back from the store."""
        if isinstance(v, ObjectId):
            return str(v)
        return v

    @property
    def participant_count(self) -> int:
        """Get number of participants."""
        return len(self.participants)

    @property
    def customer_waiting(self) -> bool:
        """A lone participant is a customer waiting for an agent."""
        return self.participant_count == 1

    @property
    def has_capacity(self) -> bool:
        """Check if another participant can be auto-assigned here."""
        return self.participant_count < MAX_PARTICIPANTS

    def to_document(self) -> dict[str, Any]:
        """Serialize for insertion, leaving ``_id`` to the store."""
        return self.model_dump(by_alias=True, exclude={"id"})

    def to_admin_view(self) -> dict[str, Any]:
        """Serialize for the admin listing with the derived waiting flag."""
        data = self.model_dump(mode="json", by_alias=True)
        data["customerWaiting"] = self.customer_waiting
        return data
