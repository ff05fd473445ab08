from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def find_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        """All records of the employee, most recent date first."""
        raise NotImplementedError
