from datetime import date, timedelta

import pytest

from src.payroll_system.payroll_system.attendance.model import AttendanceRecord
from src.payroll_system.payroll_system.core.enums import DayType
from src.payroll_system.payroll_system.core.exceptions import InvalidPeriodError
from src.payroll_system.payroll_system.payroll.calculator.standard_calculator import (
    StandardSalaryCalculator,
    classify_hours,
    compute_monthly_salary,
)
from src.payroll_system.payroll_system.payroll.model import CompensationStructure
from src.payroll_system.payroll_system.payroll.tax import TaxSlab


def _days(hours):
    start = date(2025, 3, 3)
    return [AttendanceRecord(work_date=start + timedelta(days=i), hours_worked=h) for i, h in enumerate(hours)]


STRUCTURE = CompensationStructure(basic=50_000, hra=10_000, allowances=5_000, working_days_in_period=22)


def test_end_to_end_month():
    attendance = _days([8] * 20 + [4, 6])

    b = compute_monthly_salary(STRUCTURE, attendance, other_deductions=1_000)

    assert b.gross_monthly == 65_000
    assert b.pf == pytest.approx(6_000)
    assert b.full_days == 20
    assert b.half_days == 2
    assert b.daily_wage == pytest.approx(2954.545, abs=1e-3)
    assert b.total_salary == pytest.approx(62_045.4545, abs=1e-3)
    assert b.tax == pytest.approx(68_500 / 12)
    assert b.other_deductions == 1_000
    assert b.net_salary == pytest.approx(49_337.12, abs=1e-2)
    assert b.half_day_salary == pytest.approx(b.daily_wage / 2)


@pytest.mark.parametrize(
    "hours, expected",
    [(8, DayType.FULL), (12, DayType.FULL), (7.999, DayType.HALF), (0.5, DayType.HALF), (0, DayType.ABSENT)],
)
def test_classify_hours_boundaries(hours, expected):
    assert classify_hours(hours) is expected


def test_partial_hours_are_not_prorated():
    one = compute_monthly_salary(STRUCTURE, _days([1]))
    six = compute_monthly_salary(STRUCTURE, _days([6]))
    assert one.total_salary == six.total_salary == pytest.approx(STRUCTURE.gross_monthly / 22 / 2)


def test_zero_hour_records_count_as_absent():
    b = compute_monthly_salary(STRUCTURE, _days([0, 0, 8, 3]))
    assert (b.full_days, b.half_days) == (1, 1)
    assert b.full_days + b.half_days <= 2


def test_empty_attendance_gives_negative_net():
    b = compute_monthly_salary(STRUCTURE, [], other_deductions=500)

    assert b.full_days == 0
    assert b.half_days == 0
    assert b.total_salary == 0
    assert b.net_salary == pytest.approx(-(68_500 / 12) - 6_000 - 500)


def test_tax_ignores_attendance():
    full = compute_monthly_salary(STRUCTURE, _days([8] * 22))
    none = compute_monthly_salary(STRUCTURE, [])
    assert full.tax == none.tax
    assert full.total_salary == pytest.approx(STRUCTURE.gross_monthly)


def test_negative_other_deductions_are_not_clamped():
    b = compute_monthly_salary(STRUCTURE, [], other_deductions=-100)
    assert b.other_deductions == -100


@pytest.mark.parametrize("working_days", [0, -5])
def test_invalid_period_is_rejected(working_days):
    structure = CompensationStructure(basic=1, hra=0, allowances=0, working_days_in_period=working_days)
    with pytest.raises(InvalidPeriodError):
        compute_monthly_salary(structure, _days([8]))


def test_same_inputs_same_output():
    attendance = _days([8, 7.5, 0, 9])
    assert compute_monthly_salary(STRUCTURE, attendance, 250) == compute_monthly_salary(STRUCTURE, attendance, 250)


def test_custom_calculator_settings():
    calc = StandardSalaryCalculator(
        slabs=(TaxSlab(upper_bound=None, rate=0.1),),
        pf_rate=0.1,
        full_day_hours=6,
    )
    b = calc.calculate(STRUCTURE, _days([6, 5]))

    assert (b.full_days, b.half_days) == (1, 1)
    assert b.pf == pytest.approx(5_000)
    assert b.tax == pytest.approx(6_500)
