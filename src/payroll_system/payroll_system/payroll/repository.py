from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PayrollEntry


class PayrollRepository(Protocol):
    def get_by_id(self, payroll_id: int) -> Optional[PayrollEntry]:
        raise NotImplementedError

    def get_for_period(self, *, employee_id: int, month: int, year: int) -> Optional[PayrollEntry]:
        raise NotImplementedError

    def create(self, entry: PayrollEntry) -> PayrollEntry:
        """Persist a new entry and return it with its payroll_id set."""

        raise NotImplementedError

    def update(self, entry: PayrollEntry) -> Optional[PayrollEntry]:
        """Overwrite the stored row with the same payroll_id; None if it is gone."""

        raise NotImplementedError

    def list_for_employee(self, *, employee_id: int, year: Optional[int] = None) -> Sequence[PayrollEntry]:
        raise NotImplementedError

    def list_entries(self, *, month: Optional[int] = None, year: Optional[int] = None) -> Sequence[PayrollEntry]:
        """All employees' entries, filtered by whichever of month/year is given."""

        raise NotImplementedError
