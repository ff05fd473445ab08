from __future__ import annotations

from typing import Optional, Protocol

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, not on a concrete database.
    """

    def find_one(self, *, employee_id: str, name: str, department: str) -> Optional[Employee]:
        """Return the employee matching all three fields exactly, or None.

        Implementations may raise RecordNotFoundError instead of returning None.
        """
        raise NotImplementedError

    def insert(self, employee: Employee) -> Employee:
        """Persist the employee and return the stored row."""
        raise NotImplementedError
