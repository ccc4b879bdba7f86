from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import pytest

from src.device_bridge.device_bridge.attendance.model import AppendResult, AttendancePunch
from src.device_bridge.device_bridge.container import assemble_container
from src.device_bridge.device_bridge.core.settings import BridgeSettings
from src.device_bridge.device_bridge.employees.model import Employee
from src.device_bridge.device_bridge.main import build_app

API_TOKEN = "test-token"


class InMemoryEmployees:
    """Directory fake: filters by status but returns rows in insertion order."""

    def __init__(self, employees: list[Employee]):
        self._employees = list(employees)
        self.fail_with: Optional[Exception] = None

    def list_by_status(self, status: str):
        if self.fail_with:
            raise self.fail_with
        return [e for e in self._employees if e.status == status]


class InMemoryPunches:
    """Punch store fake enforcing the (employee_code, device_sn, log_datetime) unique key."""

    def __init__(self):
        self.rows: dict[int, AttendancePunch] = {}
        self._keys: dict[tuple, int] = {}
        self._id = 0
        self.fail_with: Optional[Exception] = None

    def append(self, punch: AttendancePunch) -> AppendResult:
        if self.fail_with:
            raise self.fail_with
        key = (punch.employee_code, punch.device_sn, punch.log_datetime)
        if None not in key and key in self._keys:
            return AppendResult(punch_id=self._keys[key], created=False)
        self._id += 1
        self.rows[self._id] = punch
        self._keys[key] = self._id
        return AppendResult(punch_id=self._id, created=True)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 11, 1, 9, 0, 0)


@pytest.fixture
def settings() -> BridgeSettings:
    return BridgeSettings(api_token=API_TOKEN, public_base_url="https://bridge.example.com")


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees(
        [
            Employee(employee_id="E003", first_name="Meera", last_name="Iyer", status="Active", department="Finance"),
            Employee(
                employee_id="E001",
                first_name="Asha",
                last_name="Rao",
                status="Active",
                email="asha.rao@example.com",
                department="HR",
                designation="Manager",
                phone="9000000001",
                hire_date=date(2021, 4, 1),
            ),
            Employee(employee_id="E002", first_name="Vikram", last_name="Nair", status="Inactive"),
        ]
    )


@pytest.fixture
def punches_repo() -> InMemoryPunches:
    return InMemoryPunches()


@pytest.fixture
def container(settings, employees_repo, punches_repo):
    return assemble_container(settings=settings, employees_repo=employees_repo, punches_repo=punches_repo)


@pytest.fixture
def client(container):
    app = build_app(container)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def auth_header() -> dict[str, str]:
    return {"Authorization": f"Bearer {API_TOKEN}"}
