from __future__ import annotations

from dataclasses import dataclass

from .core.constants import MAX_DAILY_REPORT_DAYS, MAX_REPORT_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .reports.service import AttendanceReportService
from .scans.mysql_scan_repository import MySQLScanRepository
from .shifts.mysql_shift_repository import MySQLShiftRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    scans_repo: MySQLScanRepository
    shifts_repo: MySQLShiftRepository
    employees_repo: MySQLEmployeeRepository

    report_service: AttendanceReportService


def build_container(
    *,
    db_config: dict,
    max_report_days: int = MAX_REPORT_DAYS,
    max_daily_days: int = MAX_DAILY_REPORT_DAYS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    scans_repo = MySQLScanRepository(conn)
    shifts_repo = MySQLShiftRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn)

    report_service = AttendanceReportService(
        scans_repo,
        shifts_repo,
        employees_repo,
        max_report_days=max_report_days,
        max_daily_days=max_daily_days,
    )

    return Container(
        conn=conn,
        scans_repo=scans_repo,
        shifts_repo=shifts_repo,
        employees_repo=employees_repo,
        report_service=report_service,
    )
