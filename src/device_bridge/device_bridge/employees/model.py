from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: a directory record as read from the store.

    Note: read-only from the bridge's point of view.
    """

    employee_id: str
    first_name: str
    last_name: str
    status: str
    email: Optional[str] = None
    department: Optional[str] = None
    designation: Optional[str] = None
    phone: Optional[str] = None
    hire_date: Optional[date] = None


@dataclass(frozen=True)
class EmployeeProjection:
    """Device-facing shape of one employee in the snapshot."""

    employee_code: str
    employee_name: str
    first_name: str
    last_name: str
    email: Optional[str]
    department: Optional[str]
    designation: Optional[str]
    phone: Optional[str]
    hire_date: Optional[str]
    status: str


@dataclass(frozen=True)
class MachineInstructions:
    sync_url: str
    attendance_url: str
    auth_token: Optional[str]


@dataclass(frozen=True)
class Snapshot:
    success: bool
    message: str
    timestamp: str
    total_employees: int
    employees: tuple[EmployeeProjection, ...]
    machine_instructions: MachineInstructions
