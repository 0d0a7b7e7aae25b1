"""Request and response schemas for the meeting endpoints.

Bodies use camelCase keys on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class SubmitDetailsRequest(_CamelModel):
    """Customer details submitted to get a meeting link.

    Only the email is used; any other keys are accepted and kept.
    """

    model_config = ConfigDict(extra="allow")

    email: str = Field(min_length=1, description="Customer email")


class SubmitDetailsResponse(BaseModel):
    """Link to the assigned meeting room."""

    link: str = Field(description="Meeting base URL followed by the room name")


class RoomParticipantRequest(_CamelModel):
    """Identifies a participant inside a room."""

    room_name: str = Field(min_length=1, description="Meeting room name")
    email: str = Field(min_length=1, description="Participant email")


class SwitchCameraRequest(_CamelModel):
    """Admin request to flip a participant's camera."""

    room_name: str = Field(min_length=1, description="Meeting room name")
    participant_id: str = Field(min_length=1, description="Provider participant id")
