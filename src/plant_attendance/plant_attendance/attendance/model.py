from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..core.enums import DayStatus
from ..sessions.model import Session


@dataclass(frozen=True)
class DayRecord:
    """Domain entity: one employee on one logical workday."""

    work_date: date
    employee_id: str
    status: DayStatus
    is_workday: bool
    sessions: tuple[Session, ...] = ()
    first_entry: Optional[datetime] = None
    last_exit: Optional[datetime] = None
    hours: float = 0.0
    exact_hours: float = 0.0
    late_minutes: int = 0
    overtime_hours: float = 0.0
    entries_count: int = 0
    exits_count: int = 0
    unpaired_entries: int = 0
    unpaired_exits: int = 0
    plants_used: tuple[str, ...] = ()
    shift_name: Optional[str] = None
    shift_start: Optional[time] = None
    shift_end: Optional[time] = None

    @property
    def is_present(self) -> bool:
        return self.entries_count > 0

    @property
    def is_late(self) -> bool:
        return self.late_minutes > 0
