from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Tuple

from ..attendance.model import AttendanceRecord
from ..core.enums import View
from ..employees.model import Employee


@dataclass
class IdentityForm:
    """In-progress identity form fields."""

    FIELDS: ClassVar[Tuple[str, ...]] = ("id", "name", "department")

    id: str = ""
    name: str = ""
    department: str = ""


@dataclass
class PortalSession:
    """Per-visitor session state: one explicit object, never persisted.

    `epoch` increases on every logout. Work started under an older epoch must
    not touch the session when it completes.
    """

    view: View = View.AUTH
    form: IdentityForm = field(default_factory=IdentityForm)
    employee: Optional[Employee] = None
    history: List[AttendanceRecord] = field(default_factory=list)
    error: str = ""
    loading: bool = False
    epoch: int = 0
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def is_current(self, epoch: int) -> bool:
        return epoch == self.epoch

    def update_form(self, name: str, value: Optional[str]) -> None:
        if name not in IdentityForm.FIELDS:
            raise KeyError(name)
        with self.lock:
            setattr(self.form, name, value or "")
            self.error = ""

    def begin_submit(self) -> Optional[int]:
        """Mark the session busy. Returns the epoch to finish with, or None if already busy."""
        with self.lock:
            if self.loading:
                return None
            self.loading = True
            self.error = ""
            return self.epoch

    def enter_dashboard(self, epoch: int, employee: Employee, history: List[AttendanceRecord]) -> bool:
        with self.lock:
            if not self.is_current(epoch):
                return False
            self.employee = employee
            self.history = list(history)
            self.view = View.DASHBOARD
            return True

    def fail(self, epoch: int, message: str) -> bool:
        with self.lock:
            if not self.is_current(epoch):
                return False
            self.error = message
            return True

    def finish_submit(self, epoch: int) -> None:
        with self.lock:
            if self.is_current(epoch):
                self.loading = False

    def logout(self) -> None:
        with self.lock:
            self.epoch += 1
            self.view = View.AUTH
            self.employee = None
            self.history = []
            self.form = IdentityForm()
            self.error = ""
            self.loading = False
