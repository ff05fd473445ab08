from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import HistoryPresenter
from .core.constants import DEFAULT_QR_SIZE, DEFAULT_SESSION_LIMIT
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import IdentityResolver
from .portal.registry import SessionRegistry
from .portal.service import PortalService
from .qr.service import QrCodeGenerator


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository

    identity_resolver: IdentityResolver
    history_presenter: HistoryPresenter
    qr_generator: QrCodeGenerator
    portal_service: PortalService
    sessions: SessionRegistry


def assemble_container(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    conn: Optional[DatabaseConnection] = None,
    qr_size: int = DEFAULT_QR_SIZE,
    max_sessions: int = DEFAULT_SESSION_LIMIT,
) -> Container:
    """Wire services on top of the given repositories (tests pass in-memory ones)."""
    identity_resolver = IdentityResolver(employees_repo)
    history_presenter = HistoryPresenter(attendance_repo)
    qr_generator = QrCodeGenerator()
    portal_service = PortalService(identity_resolver, history_presenter, qr_generator, qr_size=qr_size)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        identity_resolver=identity_resolver,
        history_presenter=history_presenter,
        qr_generator=qr_generator,
        portal_service=portal_service,
        sessions=SessionRegistry(max_sessions=max_sessions),
    )


def build_container(
    *, db_config: dict, qr_size: int = DEFAULT_QR_SIZE, max_sessions: int = DEFAULT_SESSION_LIMIT
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return assemble_container(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        conn=conn,
        qr_size=qr_size,
        max_sessions=max_sessions,
    )
