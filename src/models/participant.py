"""Participant model for meeting attendees."""

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN = "unknown"


class Participant(BaseModel):
    """A customer or agent inside a meeting.

    Embedded in the meeting document, keyed by email. Device and browser
    stay "unknown" until the participant joins the room.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(description="Participant identifier within the meeting")
    device: str = Field(default=UNKNOWN, description="Device type label")
    browser: str | None = Field(default=UNKNOWN, description="Browser name")
