"""User-agent classification into device and browser labels."""

from dataclasses import dataclass

from user_agents import parse

DEFAULT_DEVICE = "Desktop"


@dataclass(frozen=True)
class ClientInfo:
    """Device type and browser name derived from a User-Agent header."""

    device: str
    browser: str | None


_KEYWORD_DEVICES = (
    (
        "smarttv",
        (
            "smart-tv",
            "smarttv",
            "googletv",
            "appletv",
            "hbbtv",
            "netcast",
            "web0s",
            "bravia",
            "roku",
            "crkey",
        ),
    ),
    ("console", ("playstation", "xbox", "nintendo", "ouya")),
    ("wearable", ("watch", "glass")),
)


def _device_type(ua) -> str | None:
    haystack = f"{ua.device.family} {ua.ua_string}".lower()
    for device, keywords in _KEYWORD_DEVICES:
        if any(keyword in haystack for keyword in keywords):
            return device
    if ua.is_tablet:
        return "tablet"
    if ua.is_mobile:
        return "mobile"
    return None


def classify_user_agent(user_agent: str | None) -> ClientInfo:
    """Classify a raw User-Agent header.

    TVs, consoles and wearables are matched by keyword before the tablet
    and mobile checks. Desktop browsers and unrecognized agents report the
    "Desktop" device.
    The browser is None when the library cannot name it.

    Args:
        user_agent: Raw header value, may be None or empty

    Returns:
        ClientInfo with device and browser labels
    """
    ua = parse(user_agent or "")
    browser = ua.browser.family
    return ClientInfo(
        device=_device_type(ua) or DEFAULT_DEVICE,
        browser=None if browser in ("", "Other") else browser,
    )
