from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_datetime
from .model import Scan
from .repository import ScanRepository


class MySQLScanRepository(ScanRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_between(self, *, start: date, end: date, employee_id: Optional[str] = None) -> Sequence[Scan]:
        # No filter on the clock's action column: entry/exit is inferred later.
        sql = """
            SELECT pe.employee_number, pe.timestamp, pe.plant_id, p.name AS plant_name
            FROM plant_entries pe
            INNER JOIN plants p ON pe.plant_id = p.id
            WHERE DATE(pe.timestamp) BETWEEN %s AND %s
        """
        params: list = [start, end]
        if employee_id:
            sql += " AND pe.employee_number = %s"
            params.append(employee_id)
        sql += " ORDER BY pe.employee_number ASC, pe.timestamp ASC"

        with db_cursor(self._conn_factory) as cur:
            cur.execute(sql, tuple(params))
            return [
                Scan(
                    employee_id=str(r["employee_number"]),
                    timestamp=normalize_mysql_datetime(r["timestamp"]),
                    plant_id=int(r["plant_id"]),
                    plant_name=r.get("plant_name"),
                )
                for r in fetchall(cur)
            ]
