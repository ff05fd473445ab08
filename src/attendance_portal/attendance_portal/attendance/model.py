from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: attendance record (read-only for the portal)."""

    id: int
    employee_id: str
    date: date
    status: Optional[str]


@dataclass(frozen=True)
class AttendanceRowUI:
    """Display row for the history list."""

    key: int
    date: str
    status: str
    css_class: str
