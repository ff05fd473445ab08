from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest

from src.attendance_portal.attendance_portal.attendance.model import AttendanceRecord
from src.attendance_portal.attendance_portal.container import assemble_container
from src.attendance_portal.attendance_portal.employees.model import Employee


class InMemoryEmployees:
    def __init__(self, rows=()):
        self.rows: list[Employee] = list(rows)
        self.find_calls = 0
        self.insert_calls = 0

    def find_one(self, *, employee_id: str, name: str, department: str) -> Optional[Employee]:
        self.find_calls += 1
        for e in self.rows:
            if (e.id, e.name, e.department) == (employee_id, name, department):
                return e
        return None

    def insert(self, employee: Employee) -> Employee:
        self.insert_calls += 1
        stored = replace(employee)
        self.rows.append(stored)
        return stored


class InMemoryAttendance:
    def __init__(self, rows=()):
        self.rows: list[AttendanceRecord] = list(rows)

    def add(self, employee_id: str, day: date, status: str) -> AttendanceRecord:
        rec = AttendanceRecord(id=len(self.rows) + 1, employee_id=employee_id, date=day, status=status)
        self.rows.append(rec)
        return rec

    def find_for_employee(self, employee_id: str):
        items = [r for r in self.rows if r.employee_id == employee_id]
        items.sort(key=lambda r: r.date, reverse=True)
        return items


@pytest.fixture
def employees_repo():
    return InMemoryEmployees()


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def container(employees_repo, attendance_repo):
    return assemble_container(employees_repo=employees_repo, attendance_repo=attendance_repo)


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.attendance_portal.attendance_portal.main import create_app

    app = create_app(container)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
