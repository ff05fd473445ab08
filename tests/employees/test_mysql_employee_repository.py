from __future__ import annotations

import pytest

from src.attendance_portal.attendance_portal.core.exceptions import RecordNotFoundError
from src.attendance_portal.attendance_portal.employees.model import Employee
from src.attendance_portal.attendance_portal.employees.mysql_employee_repository import MySQLEmployeeRepository


def squash(sql: str) -> str:
    return " ".join(sql.split())


class FakeCursor:
    def __init__(self, rows):
        self.rows = list(rows)
        self.executed: list[tuple[str, tuple]] = []
        self.closed = False

    def execute(self, sql, params=()):
        self.executed.append((squash(sql), params))

    def fetchone(self):
        return self.rows.pop(0) if self.rows else None

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, rows=()):
        self.cur = FakeCursor(rows)
        self.dictionary = None
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        self.dictionary = dictionary
        return self.cur

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, conn: FakeConnection):
        self.conn = conn

    def connect(self):
        return self.conn


def make_repo(*rows):
    conn = FakeConnection(rows)
    return MySQLEmployeeRepository(FakeConnFactory(conn)), conn


def test_find_one_matches_all_three_fields():
    repo, conn = make_repo({"id": "E1", "name": "Alice", "department": "Eng", "qr_code_url": "E1"})

    found = repo.find_one(employee_id="E1", name="Alice", department="Eng")

    assert found == Employee(id="E1", name="Alice", department="Eng", qr_code_url="E1")
    [(sql, params)] = conn.cur.executed
    assert sql == (
        "SELECT id, name, department, qr_code_url FROM employees "
        "WHERE id=%s AND name=%s AND department=%s LIMIT 1"
    )
    assert params == ("E1", "Alice", "Eng")
    assert conn.dictionary is True
    assert conn.committed and conn.cur.closed and conn.closed


def test_find_one_passes_values_untrimmed():
    repo, conn = make_repo()

    repo.find_one(employee_id=" E1", name="Alice ", department="Eng")

    assert conn.cur.executed[0][1] == (" E1", "Alice ", "Eng")


def test_find_one_without_row_returns_none():
    repo, conn = make_repo()

    assert repo.find_one(employee_id="E9", name="Nobody", department="Ops") is None
    assert conn.closed


def test_find_one_converts_numeric_id_to_str():
    repo, _ = make_repo({"id": 42, "name": "Bob", "department": "Ops", "qr_code_url": None})

    found = repo.find_one(employee_id="42", name="Bob", department="Ops")

    assert found.id == "42"
    assert found.qr_code_url is None


def test_insert_writes_then_reads_back():
    repo, conn = make_repo({"id": "E2", "name": "Bob", "department": "Ops", "qr_code_url": "E2"})

    stored = repo.insert(Employee(id="E2", name="Bob", department="Ops", qr_code_url="E2"))

    assert stored == Employee(id="E2", name="Bob", department="Ops", qr_code_url="E2")
    (insert_sql, insert_params), (select_sql, select_params) = conn.cur.executed
    assert insert_sql == "INSERT INTO employees(id, name, department, qr_code_url) VALUES(%s,%s,%s,%s)"
    assert insert_params == ("E2", "Bob", "Ops", "E2")
    assert select_sql == "SELECT id, name, department, qr_code_url FROM employees WHERE id=%s"
    assert select_params == ("E2",)
    assert conn.committed and not conn.rolled_back


def test_insert_without_read_back_raises_and_rolls_back():
    repo, conn = make_repo()

    with pytest.raises(RecordNotFoundError):
        repo.insert(Employee(id="E3", name="Cara", department="HR", qr_code_url="E3"))

    assert conn.rolled_back
    assert not conn.committed
    assert conn.cur.closed and conn.closed
