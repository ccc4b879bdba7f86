from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for the employee directory.

    Note (DIP): the snapshot provider depends on this interface, not on a concrete DB.
    """

    def list_by_status(self, status: str) -> Sequence[Employee]:
        """Employees with the given status, ordered by employee_id ascending."""

        raise NotImplementedError
