from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import AttendanceRecord
from ..model import CompensationStructure, SalaryBreakdown


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(
        self,
        structure: CompensationStructure,
        attendance: Sequence[AttendanceRecord],
        other_deductions: float = 0,
    ) -> SalaryBreakdown:
        raise NotImplementedError
