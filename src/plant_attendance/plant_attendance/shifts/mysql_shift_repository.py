from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

from ..core.constants import DEFAULT_TOLERANCE_MINUTES
from ..core.enums import AssignmentSource
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Shift, ShiftAssignment
from .parsing import parse_end_overrides, parse_time, parse_workdays
from .repository import ShiftRepository


def _shift_from_row(r: dict[str, Any]) -> Shift:
    tolerance = r.get("tolerance_minutes")
    return Shift(
        shift_id=int(r["shift_id"]) if r.get("shift_id") is not None else None,
        name=r["shift_name"],
        start_time=parse_time(r["start_time"]),
        end_time=parse_time(r["end_time"]),
        tolerance_minutes=int(tolerance) if tolerance is not None else DEFAULT_TOLERANCE_MINUTES,
        workdays=parse_workdays(r.get("days")),
        end_overrides=parse_end_overrides(r.get("custom_hours")),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, default_shift_id: int = 1):
        self._conn_factory = conn_factory
        self._default_shift_id = int(default_shift_id)

    def get_default_shift(self) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                SELECT id AS shift_id, name AS shift_name, start_time, end_time,
                       tolerance_minutes, days, custom_hours
                FROM shifts
                WHERE id=%s
                """,
                (self._default_shift_id,),
            )
            r = fetchone(cur)
            return _shift_from_row(r) if r else None

    def list_assignments(self, *, start: date, end: date, employee_id: Optional[str] = None) -> Sequence[ShiftAssignment]:
        sql = """
            SELECT sa.employee_number, sa.shift_id, sa.shift_name, sa.start_time, sa.end_time,
                   sa.days, sa.start_date, sa.end_date, sa.source_plant_id, sa.is_manual,
                   s.tolerance_minutes, s.custom_hours
            FROM shift_assignments sa
            LEFT JOIN shifts s
                   ON s.remote_shift_id = sa.shift_id AND s.source_plant_id = sa.source_plant_id
            WHERE sa.active = 1
              AND (sa.end_date IS NULL OR sa.end_date >= %s)
              AND (sa.start_date IS NULL OR sa.start_date <= %s)
        """
        params: list = [start, end]
        if employee_id:
            sql += " AND sa.employee_number = %s"
            params.append(employee_id)
        sql += " ORDER BY sa.id DESC"

        with db_cursor(self._conn_factory) as cur:
            cur.execute(sql, tuple(params))
            return [
                ShiftAssignment(
                    employee_id=str(r["employee_number"]),
                    shift=_shift_from_row(r),
                    source=AssignmentSource.MANUAL if r.get("is_manual") else AssignmentSource.PLANT,
                    plant_id=r.get("source_plant_id"),
                    start_date=normalize_mysql_date(r.get("start_date")),
                    end_date=normalize_mysql_date(r.get("end_date")),
                )
                for r in fetchall(cur)
            ]
