from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class CompensationStructure:
    """Fixed monthly pay components of one employee for a period."""

    basic: float
    hra: float
    allowances: float
    working_days_in_period: int

    @property
    def gross_monthly(self) -> float:
        return self.basic + self.hra + self.allowances


@dataclass(frozen=True)
class SalaryBreakdown:
    """Result of a monthly salary calculation. `tax` is the monthly share."""

    gross_monthly: float
    full_days: int
    half_days: int
    daily_wage: float
    total_salary: float
    tax: float
    pf: float
    other_deductions: float
    net_salary: float

    @property
    def full_day_salary(self) -> float:
        return self.daily_wage

    @property
    def half_day_salary(self) -> float:
        return self.daily_wage / 2

    @property
    def total_deductions(self) -> float:
        return self.tax + self.pf + self.other_deductions


@dataclass(frozen=True)
class SalaryCalculation:
    """A breakdown bound to the employee and month it was computed for."""

    employee_id: int
    month: int
    year: int
    compensation: CompensationStructure
    breakdown: SalaryBreakdown

    def to_dict(self) -> dict:
        b = self.breakdown
        c = self.compensation
        return {
            "employeeId": self.employee_id,
            "month": self.month,
            "year": self.year,
            "grossSalary": b.gross_monthly,
            "fullDays": b.full_days,
            "halfDays": b.half_days,
            "dailyWage": b.daily_wage,
            "totalSalary": b.total_salary,
            "taxDeductions": b.tax,
            "pfDeductions": b.pf,
            "otherDeductions": b.other_deductions,
            "netSalary": b.net_salary,
            "breakdown": {
                "basicSalary": c.basic,
                "hra": c.hra,
                "allowances": c.allowances,
                "grossMonthly": b.gross_monthly,
                "fullDaySalary": b.full_day_salary,
                "halfDaySalary": b.half_day_salary,
                "monthlyTax": b.tax,
            },
        }


@dataclass(frozen=True)
class PayrollEntry:
    """Payroll ledger row, unique per employee + month + year."""

    employee_id: int
    month: int
    year: int
    gross_salary: float
    deductions: float
    tax_deductions: float
    pf_deductions: float
    other_deductions: float
    net_salary: float
    payment_date: date
    full_days: int
    half_days: int
    payroll_id: Optional[int] = None


@dataclass(frozen=True)
class PayrollSummary:
    total_entries: int
    total_gross_salary: float
    total_net_salary: float
    total_tax_deductions: float
    total_pf_deductions: float
    total_other_deductions: float
    total_full_days: int
    total_half_days: int

    @property
    def average_gross_salary(self) -> float:
        return self.total_gross_salary / self.total_entries if self.total_entries else 0.0

    @property
    def average_net_salary(self) -> float:
        return self.total_net_salary / self.total_entries if self.total_entries else 0.0

    @property
    def average_tax_deductions(self) -> float:
        return self.total_tax_deductions / self.total_entries if self.total_entries else 0.0

    @property
    def average_pf_deductions(self) -> float:
        return self.total_pf_deductions / self.total_entries if self.total_entries else 0.0
