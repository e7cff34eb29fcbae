from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles used for access checks in the service layer."""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    EMPLOYEE = "EMPLOYEE"


class AttendanceStatus(str, Enum):
    """Status recorded alongside the hours of an attendance entry."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    HALF_DAY = "HALF_DAY"
    LEAVE = "LEAVE"


class DayType(str, Enum):
    """How a single attendance record counts towards pay."""

    FULL = "FULL"
    HALF = "HALF"
    ABSENT = "ABSENT"


PAYROLL_ADMIN_ROLES = frozenset({Role.ADMIN, Role.MANAGER})
