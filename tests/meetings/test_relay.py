"""Tests for AdminActionRelay."""

import pytest

from src.errors import ProviderError
from src.meetings.relay import SWITCH_CAMERA_ACTION, AdminActionRelay


@pytest.mark.asyncio
async def test_switch_camera_forwards_action(mock_daily):
    """Relay posts the switch-camera action for the participant."""
    relay = AdminActionRelay(mock_daily)

    await relay.switch_camera("room-1", "p-1")

    mock_daily.send_participant_action.assert_awaited_once_with(
        "room-1", "p-1", "switch-camera"
    )
    assert SWITCH_CAMERA_ACTION == "switch-camera"


@pytest.mark.asyncio
async def test_provider_error_propagates(mock_daily):
    """Provider failures reach the caller."""
    mock_daily.send_participant_action.side_effect = ProviderError("down", 503)
    relay = AdminActionRelay(mock_daily)

    with pytest.raises(ProviderError):
        await relay.switch_camera("room-1", "p-1")
