"""Exceptions raised by meeting operations."""


class MeetingError(Exception):
    """Base class for meeting operation failures."""


class StoreError(MeetingError):
    """The meeting store was unavailable or rejected a query."""


class ProviderError(MeetingError):
    """The video room provider call failed.

    Covers both network failures and non-2xx responses.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MeetingPersistenceError(StoreError):
    """A provider room was created but its meeting record was not stored."""

    def __init__(self, room_name: str, compensated: bool):
        state = "deleted" if compensated else "left orphaned"
        super().__init__(f"Failed to store meeting for {room_name}; room {state}")
        self.room_name = room_name
        self.compensated = compensated
