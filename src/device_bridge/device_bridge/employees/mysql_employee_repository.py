from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_by_status(self, status: str) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, first_name, last_name, email, department,
                       designation, phone, status, hire_date
                FROM employees
                WHERE status=%s
                ORDER BY employee_id ASC
                """,
                (status,),
            )
            rows = fetchall(cur)
            return [
                Employee(
                    employee_id=str(r["employee_id"]),
                    first_name=r.get("first_name") or "",
                    last_name=r.get("last_name") or "",
                    status=r["status"],
                    email=r.get("email"),
                    department=r.get("department"),
                    designation=r.get("designation"),
                    phone=r.get("phone"),
                    hire_date=r.get("hire_date"),
                )
                for r in rows
            ]
