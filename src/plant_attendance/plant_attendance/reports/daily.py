from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import PresenceStatus
from ..employees.model import Employee
from ..scans.inference import InferredScans, infer_entry_exit, is_active
from ..scans.model import Scan
from ..sessions.model import PairingResult
from ..sessions.pairer import pair_sessions
from .model import DailyPresenceRow


def presence_status(inferred: InferredScans, pairing: PairingResult) -> PresenceStatus:
    entries = len(inferred.entries)
    exits = len(inferred.exits)
    if is_active(inferred):
        return PresenceStatus.ON_SHIFT
    if pairing.has_sessions:
        return PresenceStatus.COMPLETED
    if entries > 0 and exits > 0:
        return PresenceStatus.INCOMPLETE_RECORDS
    if exits > entries:
        return PresenceStatus.EXTRA_EXITS
    return PresenceStatus.NO_VALID_RECORDS


def build_daily_row(*, employee: Employee, work_date: date, scans: Sequence[Scan]) -> DailyPresenceRow:
    inferred = infer_entry_exit(s.timestamp for s in scans)
    pairing = pair_sessions(inferred.entries, inferred.exits)

    return DailyPresenceRow(
        work_date=work_date,
        employee=employee,
        status=presence_status(inferred, pairing),
        first_entry=inferred.entries[0] if inferred.entries else None,
        last_exit=inferred.exits[-1] if inferred.exits else None,
        total_entries=len(inferred.entries),
        total_exits=len(inferred.exits),
        sessions=pairing.sessions,
        unpaired_entries=pairing.unpaired_entries,
        unpaired_exits=pairing.unpaired_exits,
        total_hours=pairing.total_hours,
        plants_used=tuple(sorted({s.plant_name or str(s.plant_id) for s in scans})),
    )
