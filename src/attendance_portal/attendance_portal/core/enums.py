from __future__ import annotations

from enum import Enum


class View(str, Enum):
    """Screen currently shown to the employee."""

    AUTH = "auth"
    DASHBOARD = "dashboard"


class AttendanceStatus(str, Enum):
    """Attendance status values stored in the database."""

    PRESENT = "present"
    ABSENT = "absent"
