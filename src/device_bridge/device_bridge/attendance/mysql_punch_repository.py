from __future__ import annotations

import json

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import AppendResult, AttendancePunch
from .repository import PunchRepository


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(self, punch: AttendancePunch) -> AppendResult:
        raw = json.dumps(dict(punch.raw_payload), default=str) if punch.raw_payload is not None else None

        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO attendance_punches(employee_code, log_datetime, log_time, device_sn, downloaded_at, raw_payload)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        punch.employee_code,
                        punch.log_datetime,
                        punch.log_time,
                        punch.device_sn,
                        punch.downloaded_at,
                        raw,
                    ),
                )
                return AppendResult(punch_id=int(cur.lastrowid), created=True)
            except IntegrityError as e:
                if e.errno != errorcode.ER_DUP_ENTRY:
                    raise

            cur.execute(
                """
                SELECT punch_id
                FROM attendance_punches
                WHERE employee_code=%s AND device_sn=%s AND log_datetime=%s
                """,
                (punch.employee_code, punch.device_sn, punch.log_datetime),
            )
            row = fetchone(cur)
            return AppendResult(punch_id=int(row["punch_id"]) if row else None, created=False)
