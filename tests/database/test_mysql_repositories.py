from __future__ import annotations

from datetime import date

import pytest
from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from src.device_bridge.device_bridge.attendance.model import AttendancePunch
from src.device_bridge.device_bridge.attendance.mysql_punch_repository import MySQLPunchRepository
from src.device_bridge.device_bridge.employees.mysql_employee_repository import MySQLEmployeeRepository


class FakeCursor:
    def __init__(self, *, rows=None, fail_first_with=None, lastrowid=1):
        self.executed: list[tuple[str, tuple]] = []
        self._rows = rows or []
        self._fail = fail_first_with
        self.lastrowid = lastrowid

    def execute(self, sql, params=()):
        self.executed.append((sql, params))
        if self._fail is not None:
            exc, self._fail = self._fail, None
            raise exc

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return self._rows

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeFactory:
    def __init__(self, conn: FakeConnection):
        self._conn = conn

    def connect(self):
        return self._conn


PUNCH = AttendancePunch(
    employee_code="E001",
    log_datetime="2025-11-01 09:00:00",
    log_time="09:00:00",
    device_sn="RS9W-001",
    raw_payload={"EmployeeCode": "E001"},
)


def test_append_inserts_and_returns_new_id():
    cur = FakeCursor(lastrowid=42)
    conn = FakeConnection(cur)

    result = MySQLPunchRepository(FakeFactory(conn)).append(PUNCH)

    assert (result.punch_id, result.created) == (42, True)
    sql, params = cur.executed[0]
    assert "INSERT INTO attendance_punches" in sql
    assert params[:4] == ("E001", "2025-11-01 09:00:00", "09:00:00", "RS9W-001")
    assert params[5] == '{"EmployeeCode": "E001"}'
    assert conn.committed


def test_append_duplicate_key_returns_existing_row():
    cur = FakeCursor(rows=[{"punch_id": 7}], fail_first_with=IntegrityError(msg="Duplicate entry", errno=errorcode.ER_DUP_ENTRY))
    conn = FakeConnection(cur)

    result = MySQLPunchRepository(FakeFactory(conn)).append(PUNCH)

    assert (result.punch_id, result.created) == (7, False)
    assert "SELECT punch_id" in cur.executed[1][0]
    assert not conn.rolled_back


def test_append_other_integrity_errors_propagate():
    cur = FakeCursor(fail_first_with=IntegrityError(msg="Column cannot be null", errno=errorcode.ER_BAD_NULL_ERROR))
    conn = FakeConnection(cur)

    with pytest.raises(IntegrityError):
        MySQLPunchRepository(FakeFactory(conn)).append(PUNCH)
    assert conn.rolled_back


def test_employee_rows_map_nulls_to_empty_names():
    cur = FakeCursor(
        rows=[
            {
                "employee_id": "E001",
                "first_name": None,
                "last_name": "Rao",
                "email": None,
                "department": "HR",
                "designation": None,
                "phone": None,
                "status": "Active",
                "hire_date": date(2021, 4, 1),
            }
        ]
    )

    [emp] = MySQLEmployeeRepository(FakeFactory(FakeConnection(cur))).list_by_status("Active")

    assert emp.first_name == ""
    assert emp.hire_date == date(2021, 4, 1)
    assert cur.executed[0][1] == ("Active",)
    assert "ORDER BY employee_id ASC" in cur.executed[0][0]
