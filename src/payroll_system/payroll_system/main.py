from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .attendance.repository import AttendanceRepository
from .container import Container, build_container
from .employees.repository import EmployeeRepository
from .payroll.repository import PayrollRepository


def load_settings():
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def configure_logging(settings) -> None:
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(levelname)s:%(name)s:%(message)s",
    )


def create_container(
    *,
    employees: EmployeeRepository,
    attendance: AttendanceRepository,
    payrolls: PayrollRepository,
) -> Container:
    """Entry point for callers that own storage and request handling."""
    settings = load_settings()
    configure_logging(settings)

    container = build_container(employees=employees, attendance=attendance, payrolls=payrolls, settings=settings)
    logging.getLogger(__name__).debug(
        "payroll-system ready (settings=%s, regime=%s)",
        settings.__name__,
        getattr(settings, "TAX_REGIME", "default"),
    )
    return container
