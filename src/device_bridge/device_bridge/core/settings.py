from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType, ModuleType
from typing import Mapping

from .constants import ATTENDANCE_PATH, SYNC_PATH


def parse_device_keys(value: str | Mapping[str, str] | None) -> Mapping[str, str]:
    """Parse `SN1:key1,SN2:key2` into a read-only mapping.

    Blank entries are skipped; an entry without ':' is a configuration error.
    """

    if not value:
        return MappingProxyType({})
    if isinstance(value, Mapping):
        return MappingProxyType({str(k).strip(): str(v) for k, v in value.items()})

    keys: dict[str, str] = {}
    for entry in str(value).split(","):
        entry = entry.strip()
        if not entry:
            continue
        serial, sep, key = entry.partition(":")
        if not sep or not serial.strip() or not key.strip():
            raise ValueError(f"Invalid DEVICE_KEYS entry: {entry!r}")
        keys[serial.strip()] = key.strip()
    return MappingProxyType(keys)


@dataclass(frozen=True)
class BridgeSettings:
    """Process-wide configuration, assembled once at start and passed to constructors."""

    api_token: str
    public_base_url: str
    device_keys: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    require_auth_for_snapshot: bool = False
    embed_token_in_snapshot: bool = True
    debug: bool = False
    log_level: str = "INFO"

    @property
    def sync_url(self) -> str:
        return self.public_base_url.rstrip("/") + SYNC_PATH

    @property
    def attendance_url(self) -> str:
        return self.public_base_url.rstrip("/") + ATTENDANCE_PATH

    @classmethod
    def from_module(cls, settings: ModuleType) -> "BridgeSettings":
        token = getattr(settings, "ATTENDANCE_API_TOKEN", "")
        if not token:
            raise ValueError("ATTENDANCE_API_TOKEN must not be empty")

        return cls(
            api_token=str(token),
            public_base_url=str(getattr(settings, "PUBLIC_BASE_URL", "http://localhost:5000")),
            device_keys=parse_device_keys(getattr(settings, "DEVICE_KEYS", "")),
            require_auth_for_snapshot=bool(getattr(settings, "REQUIRE_AUTH_FOR_SNAPSHOT", False)),
            embed_token_in_snapshot=bool(getattr(settings, "EMBED_TOKEN_IN_SNAPSHOT", True)),
            debug=bool(getattr(settings, "DEBUG", False)),
            log_level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        )
