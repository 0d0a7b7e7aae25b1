"""Canonical data models for Support Meet.

This module exports the persisted domain models:
- Meeting: A video room and its participants
- Participant: A customer or agent embedded in a meeting
"""

from src.models.meeting import MAX_PARTICIPANTS, Meeting
from src.models.participant import UNKNOWN, Participant

__all__ = [
    "MAX_PARTICIPANTS",
    "Meeting",
    "Participant",
    "UNKNOWN",
]
