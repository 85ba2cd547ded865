from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _employee_from_row(r: dict[str, Any]) -> Employee:
    return Employee(
        employee_id=str(r["employee_number"]),
        name=r.get("employee_name") or f"Empleado #{r['employee_number']}",
        role=r.get("employee_role"),
        department=r.get("department"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                SELECT employee_number, employee_name, employee_role, department
                FROM employee_names
                ORDER BY employee_number
                """
            )
            return [_employee_from_row(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                SELECT employee_number, employee_name, employee_role, department
                FROM employee_names
                WHERE employee_number=%s
                """,
                (employee_id,),
            )
            r = fetchone(cur)
            return _employee_from_row(r) if r else None
