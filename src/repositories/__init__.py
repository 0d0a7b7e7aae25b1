"""Repository layer for data persistence.

Repositories encapsulate data access logic and provide a clean interface
for the service layer.
"""

from src.repositories.meeting_repo import MeetingRepository

__all__ = [
    "MeetingRepository",
]
