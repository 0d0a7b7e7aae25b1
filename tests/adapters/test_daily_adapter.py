"""Tests for DailyAdapter."""

import json

import httpx
import pytest

from src.adapters.daily_adapter import DailyAdapter
from src.errors import ProviderError

API_URL = "https://api.daily.test/v1"


class RecordingHandler:
    """httpx MockTransport handler that records requests."""

    def __init__(self, status_code: int = 200, body: dict | None = None):
        self.status_code = status_code
        self.body = body if body is not None else {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)


def make_adapter(handler) -> DailyAdapter:
    return DailyAdapter(
        api_key="test-key",
        api_url=API_URL,
        transport=httpx.MockTransport(handler),
    )


class TestDailyAdapterInit:
    """Tests for DailyAdapter configuration."""

    def test_is_configured_with_key(self):
        """Adapter with a key reports configured."""
        assert DailyAdapter(api_key="k").is_configured is True

    def test_falls_back_to_settings(self, monkeypatch):
        """Missing key falls back to DAILY_API_KEY setting."""
        monkeypatch.setattr("src.adapters.daily_adapter.settings.daily_api_key", None)
        assert DailyAdapter().is_configured is False

    def test_no_key_raises_value_error(self, monkeypatch):
        """Building the client without a key fails clearly."""
        monkeypatch.setattr("src.adapters.daily_adapter.settings.daily_api_key", None)
        adapter = DailyAdapter()

        with pytest.raises(ValueError, match="No Daily API key"):
            adapter._get_client()


class TestCreateRoom:
    """Tests for create_room."""

    async def test_posts_room_with_chat_and_screenshare(self):
        """Room is created with bearer auth and feature flags."""
        handler = RecordingHandler(body={"name": "room-abc"})
        adapter = make_adapter(handler)

        result = await adapter.create_room("room-abc")

        assert result == {"name": "room-abc"}
        request = handler.requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{API_URL}/rooms"
        assert request.headers["Authorization"] == "Bearer test-key"
        assert json.loads(request.content) == {
            "name": "room-abc",
            "properties": {"enable_chat": True, "enable_screenshare": True},
        }
        await adapter.close()

    async def test_non_2xx_raises_provider_error(self):
        """HTTP errors become ProviderError with the status code."""
        adapter = make_adapter(RecordingHandler(status_code=400))

        with pytest.raises(ProviderError) as exc_info:
            await adapter.create_room("room-abc")

        assert exc_info.value.status_code == 400
        await adapter.close()

    async def test_network_failure_raises_provider_error(self):
        """Transport failures become ProviderError without a status."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        adapter = make_adapter(handler)

        with pytest.raises(ProviderError) as exc_info:
            await adapter.create_room("room-abc")

        assert exc_info.value.status_code is None
        await adapter.close()


class TestDeleteRoom:
    """Tests for delete_room."""

    async def test_deletes_room_by_name(self):
        """DELETE is sent to the room's URL."""
        handler = RecordingHandler(body={"deleted": True})
        adapter = make_adapter(handler)

        await adapter.delete_room("room-abc")

        request = handler.requests[0]
        assert request.method == "DELETE"
        assert str(request.url) == f"{API_URL}/rooms/room-abc"
        await adapter.close()

    async def test_not_found_raises_provider_error(self):
        """Missing rooms surface as ProviderError."""
        adapter = make_adapter(RecordingHandler(status_code=404))

        with pytest.raises(ProviderError):
            await adapter.delete_room("room-abc")
        await adapter.close()

    async def test_room_name_is_one_path_segment(self):
        """Slashes in a room name are escaped, not treated as path separators."""
        handler = RecordingHandler()
        adapter = make_adapter(handler)

        await adapter.delete_room("room/../x")

        assert handler.requests[0].url.raw_path.endswith(b"/rooms/room%2F..%2Fx")
        await adapter.close()


class TestSendParticipantAction:
    """Tests for send_participant_action."""

    async def test_posts_action_to_participant(self):
        """Action is posted to the per-participant endpoint."""
        handler = RecordingHandler(body={"ignored": "body"})
        adapter = make_adapter(handler)

        result = await adapter.send_participant_action(
            "room-abc", "p-1", "switch-camera"
        )

        assert result is None
        request = handler.requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{API_URL}/rooms/room-abc/participants/p-1/actions"
        assert json.loads(request.content) == {"action": "switch-camera"}
        await adapter.close()

    async def test_server_error_raises_provider_error(self):
        """5xx responses are not retried."""
        handler = RecordingHandler(status_code=503)
        adapter = make_adapter(handler)

        with pytest.raises(ProviderError):
            await adapter.send_participant_action("room-abc", "p-1", "switch-camera")

        assert len(handler.requests) == 1
        await adapter.close()

    @pytest.mark.parametrize(
        ("participant_id", "expected"),
        [
            ("a/b", b"/participants/a%2Fb/actions"),
            ("..", b"/participants/%2E%2E/actions"),
        ],
    )
    async def test_participant_id_is_one_path_segment(self, participant_id, expected):
        """Participant ids cannot reach other endpoints."""
        handler = RecordingHandler()
        adapter = make_adapter(handler)

        await adapter.send_participant_action(
            "room-abc", participant_id, "switch-camera"
        )

        raw_path = handler.requests[0].url.raw_path
        assert raw_path.startswith(b"/v1/rooms/room-abc/")
        assert raw_path.endswith(expected)
        await adapter.close()
