"""Runtime settings for the SoftLayer adapter, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_ENDPOINT = "https://api.softlayer.com/rest/v3.1"
DEFAULT_TIMEZONE = "America/Chicago"
DEFAULT_TICKET_LIMIT = 100
DEFAULT_PROVIDER = "softlayer"


@dataclass(frozen=True)
class SoftLayerSettings:
    """Endpoint, zone and query limits used by the SoftLayer provider."""

    endpoint: str = DEFAULT_ENDPOINT
    timezone: str = DEFAULT_TIMEZONE
    ticket_limit: int = DEFAULT_TICKET_LIMIT
    request_timeout_s: float | None = None
    provider: str = DEFAULT_PROVIDER

    @classmethod
    def from_env(cls, env: dict[str, str] | None = None) -> "SoftLayerSettings":
        source = os.environ if env is None else env
        endpoint = (source.get("SL_API_ENDPOINT") or DEFAULT_ENDPOINT).strip().rstrip("/")
        timezone = (source.get("SL_TIMEZONE") or DEFAULT_TIMEZONE).strip()
        provider = (source.get("HONCHEONUI_PROVIDER") or DEFAULT_PROVIDER).strip().lower()
        return cls(
            endpoint=endpoint,
            timezone=timezone,
            ticket_limit=_parse_positive_int(
                source.get("SL_TICKET_LIMIT"), DEFAULT_TICKET_LIMIT, "SL_TICKET_LIMIT"
            ),
            request_timeout_s=_parse_timeout(source.get("SL_REQUEST_TIMEOUT")),
            provider=provider,
        )

    def zone(self) -> ZoneInfo:
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {self.timezone}") from exc


def _parse_positive_int(raw: str | None, default: int, name: str) -> int:
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _parse_timeout(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw.strip())
    except ValueError as exc:
        raise ValueError(f"SL_REQUEST_TIMEOUT must be a number, got {raw!r}") from exc
    return value if value > 0 else None
