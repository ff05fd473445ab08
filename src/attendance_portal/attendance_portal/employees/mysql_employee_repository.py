from __future__ import annotations

from typing import Optional

from ..core.exceptions import RecordNotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(row: dict) -> Employee:
    return Employee(
        id=str(row["id"]),
        name=row["name"],
        department=row["department"],
        qr_code_url=row.get("qr_code_url"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_one(self, *, employee_id: str, name: str, department: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, department, qr_code_url
                FROM employees
                WHERE id=%s AND name=%s AND department=%s
                LIMIT 1
                """,
                (employee_id, name, department),
            )
            row = fetchone(cur)
            if not row:
                return None
            return _to_employee(row)

    def insert(self, employee: Employee) -> Employee:
        # employees.id is the primary key: a second row with the same id fails here.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(id, name, department, qr_code_url)
                VALUES(%s,%s,%s,%s)
                """,
                (employee.id, employee.name, employee.department, employee.qr_code_url),
            )
            cur.execute(
                "SELECT id, name, department, qr_code_url FROM employees WHERE id=%s",
                (employee.id,),
            )
            row = fetchone(cur)
            if not row:
                raise RecordNotFoundError(f"Inserted employee {employee.id!r} could not be read back")
            return _to_employee(row)
