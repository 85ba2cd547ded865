from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee registered at one of the plants."""

    employee_id: str
    name: str
    role: Optional[str] = None
    department: Optional[str] = None

    @classmethod
    def unknown(cls, employee_id: str) -> "Employee":
        """Placeholder for badge numbers that scanned but are not registered."""
        return cls(employee_id=employee_id, name=f"Empleado #{employee_id}")
