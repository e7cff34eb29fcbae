from __future__ import annotations

import math
from numbers import Real

from ..core.constants import MAX_PAYROLL_YEAR, MIN_PAYROLL_YEAR
from ..core.exceptions import ValidationError


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def require_positive_int(value: int, field_name: str) -> int:
    if not _is_int(value) or value <= 0:
        raise ValidationError(f"{field_name} must be a positive integer")
    return value


def require_non_negative(value: float, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(value):
        raise ValidationError(f"{field_name} must be a finite number")
    if value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return float(value)


def require_period(month: int, year: int) -> tuple[int, int]:
    if not _is_int(month) or not 1 <= month <= 12:
        raise ValidationError("month must be between 1 and 12")
    if not _is_int(year) or not MIN_PAYROLL_YEAR <= year <= MAX_PAYROLL_YEAR:
        raise ValidationError(f"year must be between {MIN_PAYROLL_YEAR} and {MAX_PAYROLL_YEAR}")
    return month, year
