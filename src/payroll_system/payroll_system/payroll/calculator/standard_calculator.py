from __future__ import annotations

from typing import Sequence

from ...attendance.model import AttendanceRecord
from ...core.constants import FULL_DAY_HOURS, MONTHS_PER_YEAR, PF_RATE
from ...core.enums import DayType
from ...core.exceptions import InvalidPeriodError
from ..model import CompensationStructure, SalaryBreakdown
from ..tax import DEFAULT_TAX_SLABS, TaxSlab, compute_annual_tax
from .base import SalaryCalculator


def classify_hours(hours_worked: float, full_day_hours: float = FULL_DAY_HOURS) -> DayType:
    if hours_worked >= full_day_hours:
        return DayType.FULL
    if hours_worked > 0:
        return DayType.HALF
    return DayType.ABSENT


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rule: pay per attended day, tax on contractual gross.

    Days are bucketed, not pro-rated: any positive number of hours below a
    full day earns half the daily wage. Tax is always assessed on the full
    monthly gross annualized, regardless of attendance. Net salary is not
    floored at zero.
    """

    def __init__(
        self,
        *,
        slabs: Sequence[TaxSlab] = DEFAULT_TAX_SLABS,
        pf_rate: float = PF_RATE,
        full_day_hours: float = FULL_DAY_HOURS,
    ):
        self._slabs = tuple(slabs)
        self._pf_rate = float(pf_rate)
        self._full_day_hours = full_day_hours

    @property
    def slabs(self) -> tuple[TaxSlab, ...]:
        return self._slabs

    @property
    def pf_rate(self) -> float:
        return self._pf_rate

    @property
    def full_day_hours(self) -> float:
        return self._full_day_hours

    def calculate(
        self,
        structure: CompensationStructure,
        attendance: Sequence[AttendanceRecord],
        other_deductions: float = 0,
    ) -> SalaryBreakdown:
        if structure.working_days_in_period <= 0:
            raise InvalidPeriodError(
                f"working days in period must be positive, got {structure.working_days_in_period}"
            )

        gross = structure.gross_monthly
        pf = structure.basic * self._pf_rate

        full_days = 0
        half_days = 0
        for record in attendance:
            day_type = classify_hours(record.hours_worked, self._full_day_hours)
            if day_type is DayType.FULL:
                full_days += 1
            elif day_type is DayType.HALF:
                half_days += 1

        daily_wage = gross / structure.working_days_in_period
        full_day_salary = daily_wage
        half_day_salary = daily_wage / 2
        total_salary = full_days * full_day_salary + half_days * half_day_salary

        annual_tax = compute_annual_tax(gross * MONTHS_PER_YEAR, self._slabs)
        monthly_tax = annual_tax / MONTHS_PER_YEAR

        net_salary = total_salary - monthly_tax - pf - other_deductions

        return SalaryBreakdown(
            gross_monthly=gross,
            full_days=full_days,
            half_days=half_days,
            daily_wage=daily_wage,
            total_salary=total_salary,
            tax=monthly_tax,
            pf=pf,
            other_deductions=other_deductions,
            net_salary=net_salary,
        )


_DEFAULT_CALCULATOR = StandardSalaryCalculator()


def compute_monthly_salary(
    structure: CompensationStructure,
    attendance: Sequence[AttendanceRecord],
    other_deductions: float = 0,
) -> SalaryBreakdown:
    return _DEFAULT_CALCULATOR.calculate(structure, attendance, other_deductions)
