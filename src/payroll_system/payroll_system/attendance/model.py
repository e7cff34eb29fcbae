from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: hours logged by an employee on one day.

    A day without a record is an absence; a record with zero hours is
    treated the same way.
    """

    work_date: date
    hours_worked: float
    status: AttendanceStatus = AttendanceStatus.PRESENT


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model: day buckets and hours of one employee over a month."""

    employee_id: int
    month: int
    year: int
    full_days: int
    half_days: int
    absent_days: int
    total_hours: float
