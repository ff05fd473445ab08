from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_all_non_empty
from ..core.constants import MSG_FIELDS_REQUIRED, MSG_GENERIC_FAILURE
from ..core.exceptions import IdentityResolutionError, RecordNotFoundError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class IdentityResolver:
    """Use case: identify an employee by (id, name, department), registering on first visit.

    There is no credential check. The three fields are matched exactly as submitted.
    """

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def resolve(self, employee_id: str, name: str, department: str) -> Employee:
        require_all_non_empty(employee_id, name, department, message=MSG_FIELDS_REQUIRED)

        try:
            existing = self._lookup(employee_id, name, department)
            if existing is not None:
                return existing

            created = self._employees.insert(
                Employee(id=employee_id, name=name, department=department, qr_code_url=employee_id)
            )
            logger.info("Registered employee %s (%s)", created.id, created.department)
            return created
        except Exception as e:
            logger.exception("Identity resolution failed for employee %r", employee_id)
            raise IdentityResolutionError(MSG_GENERIC_FAILURE) from e

    def _lookup(self, employee_id: str, name: str, department: str) -> Optional[Employee]:
        try:
            return self._employees.find_one(employee_id=employee_id, name=name, department=department)
        except RecordNotFoundError:
            return None
