from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import coerce_date
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, date, status
                FROM attendance
                WHERE employee_id=%s
                ORDER BY date DESC
                """,
                (employee_id,),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    id=int(r["id"]),
                    employee_id=str(r["employee_id"]),
                    date=coerce_date(r["date"]),
                    status=r.get("status"),
                )
                for r in rows
            ]
