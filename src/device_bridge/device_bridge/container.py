from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .attendance.mysql_punch_repository import MySQLPunchRepository
from .attendance.repository import PunchRepository
from .attendance.service import AttendanceIngestionService
from .auth.guard import CredentialGuard
from .core.settings import BridgeSettings
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeSnapshotProvider


@dataclass(frozen=True)
class Container:
    settings: BridgeSettings
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    punches_repo: PunchRepository

    guard: CredentialGuard
    snapshot_provider: EmployeeSnapshotProvider
    ingestion_service: AttendanceIngestionService


def assemble_container(
    *,
    settings: BridgeSettings,
    employees_repo: EmployeeRepository,
    punches_repo: PunchRepository,
    conn: Optional[DatabaseConnection] = None,
    snapshot_provider: Optional[EmployeeSnapshotProvider] = None,
    ingestion_service: Optional[AttendanceIngestionService] = None,
) -> Container:
    return Container(
        settings=settings,
        conn=conn,
        employees_repo=employees_repo,
        punches_repo=punches_repo,
        guard=CredentialGuard(settings.api_token, settings.device_keys),
        snapshot_provider=snapshot_provider or EmployeeSnapshotProvider(employees_repo, settings),
        ingestion_service=ingestion_service or AttendanceIngestionService(punches_repo),
    )


def build_container(*, db_config: Mapping[str, Any], settings: BridgeSettings) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))
    return assemble_container(
        settings=settings,
        employees_repo=MySQLEmployeeRepository(conn),
        punches_repo=MySQLPunchRepository(conn),
        conn=conn,
    )
