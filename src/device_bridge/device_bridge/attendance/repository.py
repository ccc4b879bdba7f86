from __future__ import annotations

from typing import Protocol

from .model import AppendResult, AttendancePunch


class PunchRepository(Protocol):
    def append(self, punch: AttendancePunch) -> AppendResult:
        """Durably append one punch.

        A punch whose (employee_code, device_sn, log_datetime) already exists
        is not stored again; the result then has created=False.
        """

        raise NotImplementedError
