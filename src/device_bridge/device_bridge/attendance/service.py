from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Callable, Optional, Sequence

from ..common.datetime_utils import format_log_datetime, now_local
from ..core.constants import PLACEHOLDER_EMPLOYEE_CODE, TEST_DEVICE_SN
from ..core.exceptions import MalformedPayload, StoreWriteFailure
from .model import AttendancePunch, BatchResult, IngestionResult
from .normalizer import PunchNormalizer
from .repository import PunchRepository


class AttendanceIngestionService:
    """Use case: accept punches pushed by terminals.

    `simulate` is the diagnostic path: it fills placeholders and never writes.
    `record` normalizes without inventing an employee code and appends
    exactly one row. Employee codes are not checked against the directory.
    """

    def __init__(
        self,
        punches: PunchRepository,
        *,
        normalizer: Optional[PunchNormalizer] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._punches = punches
        self._normalizer = normalizer or PunchNormalizer()
        self._clock = clock or now_local

    def simulate(self, payload: Any) -> AttendancePunch:
        if not isinstance(payload, Mapping):
            payload = {}
        return self._normalizer.normalize(
            payload,
            now=self._clock(),
            default_employee_code=PLACEHOLDER_EMPLOYEE_CODE,
            default_device_sn=TEST_DEVICE_SN,
        )

    def record(self, payload: Any) -> IngestionResult:
        if not isinstance(payload, Mapping):
            raise MalformedPayload("Invalid attendance data format: expected a JSON object")
        return self._append(payload, now=self._clock())

    def record_batch(self, payloads: Sequence[Any]) -> BatchResult:
        if not payloads:
            raise MalformedPayload("No attendance entries found")
        for index, payload in enumerate(payloads):
            if not isinstance(payload, Mapping):
                raise MalformedPayload(f"Invalid attendance entry at index {index}: expected a JSON object")

        now = self._clock()
        return BatchResult(results=tuple(self._append(p, now=now) for p in payloads))

    def _append(self, payload: Mapping[str, Any], *, now: datetime) -> IngestionResult:
        punch = self._normalizer.normalize(
            payload,
            now=now,
            default_downloaded_at=format_log_datetime(now),
        )
        try:
            result = self._punches.append(punch)
        except Exception as e:
            raise StoreWriteFailure("Internal server error processing attendance data") from e
        return IngestionResult(punch=punch, punch_id=result.punch_id, duplicate=not result.created)
