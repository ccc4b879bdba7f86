from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class AttendancePunch:
    """Domain entity: one clock-in/out event as reported by a terminal.

    Built per request by the normalizer and never mutated afterwards.
    """

    employee_code: Optional[str]
    log_datetime: str
    log_time: str
    device_sn: Optional[str]
    downloaded_at: Optional[str] = None
    raw_payload: Optional[Mapping[str, Any]] = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict:
        data = {
            "employee_code": self.employee_code,
            "log_datetime": self.log_datetime,
            "log_time": self.log_time,
            "device_sn": self.device_sn,
        }
        if self.downloaded_at is not None:
            data["downloaded_at"] = self.downloaded_at
        return data


@dataclass(frozen=True)
class AppendResult:
    """What the store reports back for one append."""

    punch_id: Optional[int]
    created: bool


@dataclass(frozen=True)
class IngestionResult:
    punch: AttendancePunch
    punch_id: Optional[int]
    duplicate: bool = False

    @property
    def message(self) -> str:
        if self.duplicate:
            return "Duplicate punch ignored"
        return "Attendance punch recorded"

    def to_dict(self) -> dict:
        data = self.punch.to_dict()
        data["downloaded_at"] = self.punch.downloaded_at
        data["punch_id"] = self.punch_id
        data["duplicate"] = self.duplicate
        return data


@dataclass(frozen=True)
class BatchResult:
    results: tuple[IngestionResult, ...]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def duplicates(self) -> int:
        return sum(1 for r in self.results if r.duplicate)

    @property
    def recorded(self) -> int:
        return self.total - self.duplicates

    @property
    def message(self) -> str:
        return f"Processed {self.total} punches ({self.recorded} recorded, {self.duplicates} duplicates)"
