from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds, today_local
from ..common.permissions import require_payroll_admin, require_self_or_payroll_admin
from ..common.validators import require_non_negative, require_period, require_positive_int
from ..core.enums import Role
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator
from .model import PayrollEntry, PayrollSummary, SalaryCalculation
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollHistory:
    entries: list[PayrollEntry]
    summary: PayrollSummary


def summarize(entries: Sequence[PayrollEntry]) -> PayrollSummary:
    return PayrollSummary(
        total_entries=len(entries),
        total_gross_salary=sum(e.gross_salary for e in entries),
        total_net_salary=sum(e.net_salary for e in entries),
        total_tax_deductions=sum(e.tax_deductions for e in entries),
        total_pf_deductions=sum(e.pf_deductions for e in entries),
        total_other_deductions=sum(e.other_deductions for e in entries),
        total_full_days=sum(e.full_days for e in entries),
        total_half_days=sum(e.half_days for e in entries),
    )


def _newest_first(entries: Sequence[PayrollEntry]) -> list[PayrollEntry]:
    return sorted(entries, key=lambda e: (e.year, e.month), reverse=True)


class SalaryService:
    """Use case: compute an employee's salary for a calendar month."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[SalaryCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._calculator = calculator or StandardSalaryCalculator()

    def get_active_employee(self, employee_id: int, *, inactive_message: str = "Employee is not active") -> Employee:
        employee = self._employees.get_by_id(require_positive_int(employee_id, "employee_id"))
        if not employee:
            raise NotFoundError("Employee not found")
        if not employee.is_active:
            raise ValidationError(inactive_message)
        return employee

    def calculate_employee_salary(
        self,
        employee_id: int,
        month: int,
        year: int,
        other_deductions: float = 0,
        *,
        current_role: Role,
    ) -> SalaryCalculation:
        require_payroll_admin(current_role, "salary calculation")
        return self.calculate_for_period(employee_id, month, year, other_deductions)

    def calculate_for_period(
        self,
        employee_id: int,
        month: int,
        year: int,
        other_deductions: float = 0,
    ) -> SalaryCalculation:
        """Ungated calculation, for callers that already checked access."""
        require_period(month, year)
        other_deductions = require_non_negative(other_deductions, "other_deductions")
        employee = self.get_active_employee(employee_id)

        start, end = month_bounds(year, month)
        records = self._attendance.get_for_employee_between(employee.employee_id, start, end)

        compensation = employee.compensation()
        breakdown = self._calculator.calculate(compensation, records, other_deductions)
        return SalaryCalculation(
            employee_id=employee.employee_id,
            month=month,
            year=year,
            compensation=compensation,
            breakdown=breakdown,
        )


class PayrollService:
    """Use cases around the payroll ledger: generate, distribute, report."""

    def __init__(self, payrolls: PayrollRepository, salaries: SalaryService):
        self._payrolls = payrolls
        self._salaries = salaries

    def generate_payroll(
        self,
        *,
        current_role: Role,
        employee_id: int,
        month: int,
        year: int,
        other_deductions: float = 0,
        payment_date: Optional[date] = None,
    ) -> PayrollEntry:
        require_payroll_admin(current_role, "payroll generation")
        require_period(month, year)

        if self._payrolls.get_for_period(employee_id=employee_id, month=month, year=year):
            raise ConflictError("Payroll already exists for this month and year")

        calc = self._salaries.calculate_for_period(employee_id, month, year, other_deductions)
        b = calc.breakdown
        entry = PayrollEntry(
            employee_id=employee_id,
            month=month,
            year=year,
            gross_salary=b.gross_monthly,
            deductions=b.total_deductions,
            tax_deductions=b.tax,
            pf_deductions=b.pf,
            other_deductions=b.other_deductions,
            net_salary=b.net_salary,
            payment_date=payment_date or today_local(),
            full_days=b.full_days,
            half_days=b.half_days,
        )
        saved = self._payrolls.create(entry)
        logger.info("Generated payroll for employee %s (%02d/%d): net=%.2f", employee_id, month, year, b.net_salary)
        return saved

    def distribute_payroll(
        self,
        *,
        current_role: Role,
        employee_id: int,
        month: int,
        year: int,
        payment_date: date,
    ) -> PayrollEntry:
        require_payroll_admin(current_role, "payroll distribution")
        require_period(month, year)

        entry = self._payrolls.get_for_period(employee_id=employee_id, month=month, year=year)
        if not entry:
            raise NotFoundError("Payroll record not found. Please generate salary first.")

        self._salaries.get_active_employee(
            employee_id, inactive_message="Cannot distribute payroll to inactive employee"
        )

        updated = self._payrolls.update(replace(entry, payment_date=payment_date))
        if not updated:
            # Repository lost the row between read and write.
            raise NotFoundError("Payroll record not found. Please generate salary first.")
        logger.info("Distributed payroll for employee %s (%02d/%d) on %s", employee_id, month, year, payment_date)
        return updated

    def update_payroll(
        self,
        *,
        current_role: Role,
        payroll_id: int,
        payment_date: Optional[date] = None,
        other_deductions: Optional[float] = None,
    ) -> PayrollEntry:
        """Change the payment date and/or other deductions of a stored entry.

        Net salary keeps the attendance-weighted pay it was generated from;
        only the other-deductions part of it moves.
        """
        require_payroll_admin(current_role, "payroll update")
        entry = self._payrolls.get_by_id(require_positive_int(payroll_id, "payroll_id"))
        if not entry:
            raise NotFoundError("Payroll record not found")
        if payment_date is None and other_deductions is None:
            raise ValidationError("Nothing to update: give a payment date or other deductions")

        changed = entry
        if payment_date is not None:
            changed = replace(changed, payment_date=payment_date)
        if other_deductions is not None:
            other = require_non_negative(other_deductions, "other_deductions")
            changed = replace(
                changed,
                other_deductions=other,
                deductions=entry.tax_deductions + entry.pf_deductions + other,
                net_salary=entry.net_salary + entry.other_deductions - other,
            )

        updated = self._payrolls.update(changed)
        if not updated:
            raise NotFoundError("Payroll record not found")
        logger.info("Updated payroll %s for employee %s", payroll_id, entry.employee_id)
        return updated

    def get_payroll_entry(
        self,
        *,
        current_role: Role,
        current_employee_id: Optional[int],
        employee_id: int,
        month: int,
        year: int,
    ) -> PayrollEntry:
        require_self_or_payroll_admin(current_role, current_employee_id, employee_id, "payroll entry")
        require_period(month, year)
        entry = self._payrolls.get_for_period(employee_id=employee_id, month=month, year=year)
        if not entry:
            raise NotFoundError("Payroll record not found for the specified month and year")
        return entry

    def get_employee_history(
        self,
        *,
        current_role: Role,
        current_employee_id: Optional[int],
        employee_id: int,
        year: Optional[int] = None,
    ) -> PayrollHistory:
        require_self_or_payroll_admin(current_role, current_employee_id, employee_id, "payroll history")

        entries = _newest_first(self._payrolls.list_for_employee(employee_id=employee_id, year=year))
        return PayrollHistory(entries=entries, summary=summarize(entries))

    def get_payroll_history(
        self,
        *,
        current_role: Role,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> PayrollHistory:
        """All employees' entries, newest period first."""
        require_payroll_admin(current_role, "payroll history")
        if month is not None:
            if year is None:
                raise ValidationError("month filter needs a year")
            require_period(month, year)
        elif year is not None:
            require_period(1, year)

        entries = _newest_first(self._payrolls.list_entries(month=month, year=year))
        return PayrollHistory(entries=entries, summary=summarize(entries))

    def get_period_summary(self, *, current_role: Role, month: int, year: int) -> PayrollSummary:
        require_payroll_admin(current_role, "payroll summary")
        require_period(month, year)
        return summarize(self._payrolls.list_entries(month=month, year=year))
