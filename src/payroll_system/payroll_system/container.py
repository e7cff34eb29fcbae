from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import FULL_DAY_HOURS, PF_RATE
from .employees.repository import EmployeeRepository
from .payroll.calculator.standard_calculator import StandardSalaryCalculator
from .payroll.repository import PayrollRepository
from .payroll.service import PayrollService, SalaryService
from .payroll.tax import TaxSlab, get_regime, slabs_from_config


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    payrolls_repo: PayrollRepository

    calculator: StandardSalaryCalculator
    attendance_service: AttendanceService
    salary_service: SalaryService
    payroll_service: PayrollService


def resolve_tax_slabs(settings: Any) -> tuple[TaxSlab, ...]:
    """Explicit TAX_SLABS rows win over the named TAX_REGIME."""
    rows: Optional[list] = getattr(settings, "TAX_SLABS", None)
    if rows:
        return slabs_from_config(rows)
    return get_regime(getattr(settings, "TAX_REGIME", "default"))


def build_container(
    *,
    employees: EmployeeRepository,
    attendance: AttendanceRepository,
    payrolls: PayrollRepository,
    settings: Any = None,
) -> Container:
    calculator = StandardSalaryCalculator(
        slabs=resolve_tax_slabs(settings),
        pf_rate=float(getattr(settings, "PF_RATE", PF_RATE)),
        full_day_hours=float(getattr(settings, "FULL_DAY_HOURS", FULL_DAY_HOURS)),
    )
    attendance_service = AttendanceService(employees, attendance, full_day_hours=calculator.full_day_hours)
    salary_service = SalaryService(employees, attendance, calculator=calculator)
    payroll_service = PayrollService(payrolls, salary_service)

    return Container(
        employees_repo=employees,
        attendance_repo=attendance,
        payrolls_repo=payrolls,
        calculator=calculator,
        attendance_service=attendance_service,
        salary_service=salary_service,
        payroll_service=payroll_service,
    )
