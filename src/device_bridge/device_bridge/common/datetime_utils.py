from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Optional

from ..core.constants import HIRE_DATE_FORMAT, LOG_DATETIME_FORMAT, LOG_TIME_FORMAT


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a `Z` suffix."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_log_datetime(value: datetime) -> str:
    return value.strftime(LOG_DATETIME_FORMAT)


def format_log_time(value: datetime) -> str:
    return value.strftime(LOG_TIME_FORMAT)


def parse_log_datetime(value: str) -> Optional[datetime]:
    """Parse a device timestamp into a naive datetime, or None if unparseable.

    Accepts `YYYY-MM-DD HH:MM:SS` and ISO-8601 variants (`T` separator,
    fractional seconds, `Z` or numeric offset). An offset is dropped, not
    converted: terminals report wall-clock time.
    """

    text = value.strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1]
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return parsed.replace(tzinfo=None, microsecond=0)


def format_date(value: Any) -> Optional[str]:
    """Render a DATE column value as YYYY-MM-DD; strings pass through."""
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return value.strftime(HIRE_DATE_FORMAT)
    return str(value)
