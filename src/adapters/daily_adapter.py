"""Daily REST API adapter for video rooms.

Creates and deletes rooms and posts in-room participant actions.
Calls are made once; failures surface as ProviderError without retry.
"""

from urllib.parse import quote

import httpx
import structlog

from src.config import settings
from src.errors import ProviderError

logger = structlog.get_logger()


def _segment(value: str) -> str:
    """Percent-encode a value for use as a single URL path segment."""
    encoded = quote(value, safe="")
    if encoded in (".", ".."):
        return encoded.replace(".", "%2E")
    return encoded


class DailyAdapter:
    """Adapter for the Daily video room API.

    Wraps a single shared httpx.AsyncClient authenticated with the
    account's bearer token.
    """

    def __init__(
        self,
        api_key: str | None = None,
        api_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize with API credentials.

        Args:
            api_key: Daily API key. Falls back to DAILY_API_KEY setting.
            api_url: API base URL. Falls back to DAILY_API_URL setting.
            timeout: Seconds before a call is abandoned. None waits forever.
            transport: Optional httpx transport, used by tests.
        """
        self._api_key = api_key or settings.daily_api_key
        self._api_url = (api_url or settings.daily_api_url).rstrip("/")
        self._timeout = (
            timeout if timeout is not None else settings.daily_timeout_seconds
        )
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def is_configured(self) -> bool:
        """Check if an API key is available."""
        return bool(self._api_key)

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            if not self._api_key:
                raise ValueError(
                    "No Daily API key. Set DAILY_API_KEY env var "
                    "or pass api_key to constructor."
                )
            self._client = httpx.AsyncClient(
                base_url=self._api_url,
                headers={"Authorization": f"Bearer {self._api_key}"},
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def _request(
        self, method: str, path: str, payload: dict | None = None
    ) -> httpx.Response:
        """Send one request, mapping httpx failures to ProviderError."""
        try:
            response = await self._get_client().request(method, path, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"Daily API returned {e.response.status_code} for {method} {path}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(f"Daily API {method} {path} failed: {e!s}") from e
        return response

    async def create_room(
        self,
        name: str,
        *,
        enable_chat: bool = True,
        enable_screenshare: bool = True,
    ) -> dict:
        """Create a room.

        Args:
            name: Room name, unique within the account
            enable_chat: Turn on in-call chat
            enable_screenshare: Turn on screen sharing

        Returns:
            Room object returned by Daily

        Raises:
            ProviderError: On network failure or non-2xx response
        """
        response = await self._request(
            "POST",
            "/rooms",
            {
                "name": name,
                "properties": {
                    "enable_chat": enable_chat,
                    "enable_screenshare": enable_screenshare,
                },
            },
        )
        logger.info("Daily room created", room_name=name)
        return response.json()

    async def delete_room(self, name: str) -> None:
        """Delete a room.

        Args:
            name: Room name

        Raises:
            ProviderError: On network failure or non-2xx response
        """
        await self._request("DELETE", f"/rooms/{_segment(name)}")
        logger.info("Daily room deleted", room_name=name)

    async def send_participant_action(
        self,
        room_name: str,
        participant_id: str,
        action: str,
    ) -> None:
        """Send an action to one participant in a room.

        The response body is ignored.

        Args:
            room_name: Room the participant is in
            participant_id: Daily session id of the participant
            action: Action identifier, e.g. "switch-camera"

        Raises:
            ProviderError: On network failure or non-2xx response
        """
        await self._request(
            "POST",
            f"/rooms/{_segment(room_name)}/participants/{_segment(participant_id)}"
            "/actions",
            {"action": action},
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
