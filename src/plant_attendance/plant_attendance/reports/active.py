from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import hours_between
from ..core.constants import HOURS_DECIMALS, MAX_SESSION_HOURS
from ..employees.model import Employee
from ..scans.inference import infer_entry_exit, is_active
from ..scans.model import Scan
from ..sessions.pairer import pair_sessions
from .model import ActiveEmployeeRow


def build_active_row(
    *,
    employee: Employee,
    work_date: date,
    scans: Sequence[Scan],
    now: datetime,
) -> Optional[ActiveEmployeeRow]:
    """Row for an employee still on shift at `now`, or None once they have left.

    Hours so far are the closed sessions plus the open one, measured from the
    last entry. An open session longer than a whole shift cycle counts as 0.
    """

    inferred = infer_entry_exit(s.timestamp for s in scans)
    if not is_active(inferred):
        return None

    pairing = pair_sessions(inferred.entries, inferred.exits)
    open_hours = hours_between(inferred.entries[-1], now)
    if not 0 <= open_hours <= MAX_SESSION_HOURS:
        open_hours = 0.0

    return ActiveEmployeeRow(
        employee=employee,
        work_date=work_date,
        first_entry=inferred.entries[0],
        last_activity=max(s.timestamp for s in scans),
        current_hours=round(pairing.raw_total_hours + open_hours, HOURS_DECIMALS),
        total_entries=len(inferred.entries),
        total_exits=len(inferred.exits),
        plants_used=tuple(sorted({s.plant_name or str(s.plant_id) for s in scans})),
    )
