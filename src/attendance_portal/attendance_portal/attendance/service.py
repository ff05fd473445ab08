from __future__ import annotations

import logging
from typing import Iterable, List

from ..common.datetime_utils import format_short_date
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceRowUI
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

CSS_PRESENT = "status-present"
CSS_ABSENT = "status-absent"


class HistoryPresenter:
    """Use case: read an employee's attendance history and format it for display."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def load_history(self, employee_id: str) -> List[AttendanceRecord]:
        """Records ordered by date, most recent first.

        A failed query is treated as "no history": the error is logged and an
        empty list is returned, exactly as for an employee without records.
        """
        try:
            rows = list(self._attendance.find_for_employee(employee_id))
        except Exception:
            logger.exception("Could not load attendance history for employee %r", employee_id)
            return []
        # Stable sort: equal dates keep the store's order.
        return sorted(rows, key=lambda r: r.date, reverse=True)

    def to_ui(self, records: Iterable[AttendanceRecord]) -> List[AttendanceRowUI]:
        return [self._to_ui(r) for r in records]

    def _to_ui(self, r: AttendanceRecord) -> AttendanceRowUI:
        raw = r.status or ""
        css = CSS_PRESENT if raw == AttendanceStatus.PRESENT.value else CSS_ABSENT
        return AttendanceRowUI(
            key=r.id,
            date=format_short_date(r.date),
            status=raw.upper(),
            css_class=css,
        )
