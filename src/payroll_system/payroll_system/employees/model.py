from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.constants import DEFAULT_WORKING_DAYS
from ..payroll.model import CompensationStructure


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee master data.

    Plain data object, it carries no database access code.
    """

    employee_id: int
    first_name: str
    last_name: str
    email: str
    join_date: date
    basic_salary: float
    hra: float
    allowances: float
    working_days: int = DEFAULT_WORKING_DAYS
    phone: Optional[str] = None
    is_active: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def compensation(self) -> CompensationStructure:
        return CompensationStructure(
            basic=self.basic_salary,
            hra=self.hra,
            allowances=self.allowances,
            working_days_in_period=self.working_days,
        )
