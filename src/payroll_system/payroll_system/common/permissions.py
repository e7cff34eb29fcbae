from __future__ import annotations

import logging
from typing import Optional

from ..core.enums import PAYROLL_ADMIN_ROLES, Role
from ..core.exceptions import AuthorizationError

logger = logging.getLogger(__name__)


def require_payroll_admin(current_role: Role, action: str) -> None:
    if current_role not in PAYROLL_ADMIN_ROLES:
        logger.warning("Rejected %s for role %s", action, current_role.value)
        raise AuthorizationError("Only HR/Admin can perform this action")


def require_self_or_payroll_admin(
    current_role: Role,
    current_employee_id: Optional[int],
    employee_id: int,
    action: str,
) -> None:
    """HR/Admin may act on anyone; an employee only on their own data."""
    if current_role in PAYROLL_ADMIN_ROLES:
        return
    if current_role == Role.EMPLOYEE and current_employee_id == employee_id:
        return
    logger.warning("Rejected %s of employee %s for role %s", action, employee_id, current_role.value)
    raise AuthorizationError("You can only access your own data")
