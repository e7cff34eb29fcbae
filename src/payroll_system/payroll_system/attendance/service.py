from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import month_bounds
from ..common.permissions import require_self_or_payroll_admin
from ..common.validators import require_period, require_positive_int
from ..core.constants import FULL_DAY_HOURS
from ..core.enums import DayType, Role
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..payroll.calculator.standard_calculator import classify_hours
from .model import AttendanceSummary
from .repository import AttendanceRepository


class AttendanceService:
    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        full_day_hours: float = FULL_DAY_HOURS,
    ):
        self._employees = employees
        self._attendance = attendance
        self._full_day_hours = full_day_hours

    def get_monthly_summary(
        self,
        *,
        current_role: Role,
        current_employee_id: Optional[int],
        employee_id: int,
        month: int,
        year: int,
    ) -> AttendanceSummary:
        """Count days the same way the salary calculator buckets them.

        Zero-hour records count as absent days here; days with no record at
        all are not counted.
        """
        require_self_or_payroll_admin(current_role, current_employee_id, employee_id, "attendance summary")
        require_period(month, year)
        if not self._employees.get_by_id(require_positive_int(employee_id, "employee_id")):
            raise NotFoundError("Employee not found")

        start, end = month_bounds(year, month)
        counts = {DayType.FULL: 0, DayType.HALF: 0, DayType.ABSENT: 0}
        total_hours = 0.0
        for record in self._attendance.get_for_employee_between(employee_id, start, end):
            counts[classify_hours(record.hours_worked, self._full_day_hours)] += 1
            total_hours += record.hours_worked

        return AttendanceSummary(
            employee_id=employee_id,
            month=month,
            year=year,
            full_days=counts[DayType.FULL],
            half_days=counts[DayType.HALF],
            absent_days=counts[DayType.ABSENT],
            total_hours=total_hours,
        )
