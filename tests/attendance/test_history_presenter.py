from __future__ import annotations

from datetime import date

import pytest

from src.attendance_portal.attendance_portal.attendance.model import AttendanceRecord
from src.attendance_portal.attendance_portal.attendance.service import HistoryPresenter


class FakeAttendanceRepo:
    def __init__(self, rows=(), *, error=None):
        self._rows = list(rows)
        self._error = error
        self.last_employee_id = None

    def find_for_employee(self, employee_id: str):
        self.last_employee_id = employee_id
        if self._error:
            raise self._error
        return [r for r in self._rows if r.employee_id == employee_id]


def rec(rec_id: int, day: date, status="present", employee_id="E1") -> AttendanceRecord:
    return AttendanceRecord(id=rec_id, employee_id=employee_id, date=day, status=status)


def test_most_recent_first():
    repo = FakeAttendanceRepo([rec(1, date(2024, 5, 1)), rec(2, date(2024, 5, 10))])

    history = HistoryPresenter(repo).load_history("E1")

    assert [r.date for r in history] == [date(2024, 5, 10), date(2024, 5, 1)]
    assert repo.last_employee_id == "E1"


def test_same_date_keeps_store_order():
    repo = FakeAttendanceRepo(
        [
            rec(7, date(2024, 5, 2)),
            rec(3, date(2024, 5, 2), status="absent"),
            rec(9, date(2024, 5, 3)),
        ]
    )

    history = HistoryPresenter(repo).load_history("E1")

    assert [r.id for r in history] == [9, 7, 3]


def test_only_requested_employee():
    repo = FakeAttendanceRepo([rec(1, date(2024, 5, 1)), rec(2, date(2024, 5, 2), employee_id="E2")])

    assert [r.id for r in HistoryPresenter(repo).load_history("E1")] == [1]


def test_store_error_and_empty_result_look_the_same():
    failing = HistoryPresenter(FakeAttendanceRepo(error=RuntimeError("timeout")))
    empty = HistoryPresenter(FakeAttendanceRepo())

    assert failing.load_history("E1") == []
    assert empty.load_history("E1") == []


@pytest.mark.parametrize(
    "status, label, css",
    [
        ("present", "PRESENT", "status-present"),
        ("absent", "ABSENT", "status-absent"),
        ("late", "LATE", "status-absent"),
        ("Present", "PRESENT", "status-absent"),
        (None, "", "status-absent"),
    ],
)
def test_status_label_and_treatment(status, label, css):
    row = HistoryPresenter(FakeAttendanceRepo()).to_ui([rec(1, date(2024, 5, 10), status=status)])[0]

    assert row.status == label
    assert row.css_class == css


def test_short_date_format():
    rows = HistoryPresenter(FakeAttendanceRepo()).to_ui(
        [rec(1, date(2024, 5, 10)), rec(2, date(2024, 1, 5)), rec(3, date(2023, 12, 31))]
    )

    assert [r.date for r in rows] == ["May 10, 2024", "Jan 5, 2024", "Dec 31, 2023"]
    assert [r.key for r in rows] == [1, 2, 3]
