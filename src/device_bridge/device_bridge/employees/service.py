from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from ..common.datetime_utils import format_date, utc_timestamp
from ..core.enums import EmployeeStatus
from ..core.exceptions import StoreReadFailure
from ..core.settings import BridgeSettings
from .model import Employee, EmployeeProjection, MachineInstructions, Snapshot
from .repository import EmployeeRepository


class EmployeeSnapshotProvider:
    """Use case: hand a terminal the full list of active employee codes."""

    def __init__(
        self,
        employees: EmployeeRepository,
        settings: BridgeSettings,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._employees = employees
        self._settings = settings
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def get_active_employees(self) -> Snapshot:
        try:
            rows = self._employees.list_by_status(EmployeeStatus.ACTIVE.value)
        except Exception as e:
            raise StoreReadFailure("Failed to fetch employee data") from e

        # The store is asked for Active rows in order; keep the snapshot contract even if it is not.
        active = sorted(
            (r for r in rows if r.status == EmployeeStatus.ACTIVE.value),
            key=lambda r: r.employee_id,
        )
        projected = tuple(self.project(r) for r in active)

        return Snapshot(
            success=True,
            message=f"Retrieved {len(projected)} active employees",
            timestamp=utc_timestamp(self._clock()),
            total_employees=len(projected),
            employees=projected,
            machine_instructions=self.machine_instructions(),
        )

    def machine_instructions(self) -> MachineInstructions:
        return MachineInstructions(
            sync_url=self._settings.sync_url,
            attendance_url=self._settings.attendance_url,
            auth_token=self._settings.api_token if self._settings.embed_token_in_snapshot else None,
        )

    @staticmethod
    def project(employee: Employee) -> EmployeeProjection:
        return EmployeeProjection(
            employee_code=employee.employee_id,
            employee_name=f"{employee.first_name} {employee.last_name}",
            first_name=employee.first_name,
            last_name=employee.last_name,
            email=employee.email,
            department=employee.department,
            designation=employee.designation,
            phone=employee.phone,
            hire_date=format_date(employee.hire_date),
            status=employee.status,
        )
