"""Relay of admin commands to participants through the provider."""

import structlog

from src.adapters.daily_adapter import DailyAdapter

logger = structlog.get_logger()

SWITCH_CAMERA_ACTION = "switch-camera"


class AdminActionRelay:
    """Forwards admin-issued device commands to the provider.

    Keeps no local state and does not check that the participant
    belongs to the room.
    """

    def __init__(self, daily: DailyAdapter):
        self._daily = daily

    async def switch_camera(self, room_name: str, participant_id: str) -> None:
        """Ask a participant's client to switch camera.

        Raises:
            ProviderError: If the provider rejected or missed the call
        """
        await self._daily.send_participant_action(
            room_name, participant_id, SWITCH_CAMERA_ACTION
        )
        logger.info(
            "Switch camera command sent",
            room_name=room_name,
            participant_id=participant_id,
        )
