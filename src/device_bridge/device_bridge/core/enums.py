from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Employee status values as stored in the directory."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


class AuthOutcome(str, Enum):
    """Decision returned by the credential guard."""

    AUTHORIZED = "AUTHORIZED"
    # No header on a path where auth is optional.
    ANONYMOUS = "ANONYMOUS"
    INVALID_AUTH_FORMAT = "INVALID_AUTH_FORMAT"
    INVALID_TOKEN = "INVALID_TOKEN"

    @property
    def allowed(self) -> bool:
        return self in (AuthOutcome.AUTHORIZED, AuthOutcome.ANONYMOUS)
