from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import format_log_datetime, format_log_time, parse_log_datetime
from .model import AttendancePunch

# Vendor spellings seen from terminals and middleware, mapped to canonical names.
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "employee_code": ("EmployeeCode", "employeeCode", "emp_code", "EmpCode", "user_id", "UserId"),
    "log_datetime": ("LogDateTime", "logDateTime", "punch_time", "PunchTime", "timestamp"),
    "log_time": ("LogTime", "logTime"),
    "device_sn": ("DeviceNo", "DeviceSN", "deviceSn", "device_id", "serial_number", "SerialNumber"),
    "downloaded_at": ("DownloadedAt", "downloadedAt", "download_time"),
}


def _text(value: Any) -> Optional[str]:
    """Stringify a payload value; None and blank strings count as missing."""
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def pick_field(payload: Mapping[str, Any], name: str) -> Optional[str]:
    """Read a canonical field, falling back to its vendor aliases in order."""
    value = _text(payload.get(name))
    if value is not None:
        return value
    for alias in FIELD_ALIASES.get(name, ()):
        value = _text(payload.get(alias))
        if value is not None:
            return value
    return None


class PunchNormalizer:
    """Turn a possibly-partial device payload into an AttendancePunch.

    Missing timestamps default to `now`. `log_datetime` in any ISO-8601 form
    is rewritten to `YYYY-MM-DD HH:MM:SS`; a value that does not parse is kept
    as sent. A missing `log_time` comes from the parsed `log_datetime`, or
    from `now` when there is nothing to derive it from.
    """

    def normalize(
        self,
        payload: Mapping[str, Any],
        *,
        now: datetime,
        default_employee_code: Optional[str] = None,
        default_device_sn: Optional[str] = None,
        default_downloaded_at: Optional[str] = None,
    ) -> AttendancePunch:
        raw_datetime = pick_field(payload, "log_datetime")
        if raw_datetime is None:
            parsed: Optional[datetime] = now.replace(microsecond=0)
            log_datetime = format_log_datetime(now)
        else:
            parsed = parse_log_datetime(raw_datetime)
            log_datetime = format_log_datetime(parsed) if parsed else raw_datetime

        log_time = pick_field(payload, "log_time") or format_log_time(parsed or now)

        return AttendancePunch(
            employee_code=pick_field(payload, "employee_code") or default_employee_code,
            log_datetime=log_datetime,
            log_time=log_time,
            device_sn=pick_field(payload, "device_sn") or default_device_sn,
            downloaded_at=pick_field(payload, "downloaded_at") or default_downloaded_at,
            raw_payload=dict(payload),
        )
