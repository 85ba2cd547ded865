from __future__ import annotations

import math
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from ..core.constants import (
    COMPLETE_SHIFT_RATIO,
    HOURS_DECIMALS,
    MAX_LATE_MINUTES,
    MIN_WORKED_HOURS,
    OVERTIME_NOISE_MINUTES,
)
from ..core.enums import DayStatus
from ..scans.inference import InferredScans
from ..sessions.model import PairingResult
from ..shifts.model import ResolvedShift, Shift
from .model import DayRecord
from .overtime.factory import OvertimeCalculatorFactory


def decide_status(*, entries_count: int, exits_count: int, pairing: PairingResult, shift_hours: float) -> DayStatus:
    if entries_count == 0 and exits_count == 0:
        return DayStatus.ABSENT

    if pairing.has_sessions:
        threshold = max(COMPLETE_SHIFT_RATIO * shift_hours, MIN_WORKED_HOURS)
        if pairing.total_hours >= threshold:
            return DayStatus.COMPLETE
        if pairing.total_hours >= MIN_WORKED_HOURS:
            return DayStatus.PARTIAL

    if entries_count > 0 and exits_count == 0:
        return DayStatus.NO_EXIT
    return DayStatus.INCOMPLETE


def nominal_start(shift: Shift, work_date: date, first_entry: datetime) -> datetime:
    """Scheduled start the entry is measured against.

    Overnight shifts may be entered on either side of midnight, so the
    start is moved a day back or forward to the occurrence within 12 hours
    of the entry.
    """

    start = shift.start_at(work_date)
    if not shift.is_overnight:
        return start

    window = timedelta(minutes=MAX_LATE_MINUTES)
    candidates = [start, start - timedelta(days=1), start + timedelta(days=1)]
    near = [c for c in candidates if abs(first_entry - c) <= window]
    if not near:
        return start
    return min(near, key=lambda c: abs(first_entry - c))


def late_minutes(*, shift: Shift, work_date: date, first_entry: Optional[datetime], is_workday: bool) -> int:
    if first_entry is None or not is_workday:
        return 0

    start = nominal_start(shift, work_date, first_entry)
    minutes = math.floor((first_entry - start).total_seconds() / 60)
    if minutes <= shift.tolerance_minutes:
        return 0
    if minutes > MAX_LATE_MINUTES:
        # A half-day gap means the wrong shift occurrence, not lateness.
        return 0
    return minutes


class DayClassifier:
    def __init__(self, *, overtime_factory: Optional[OvertimeCalculatorFactory] = None):
        self._overtime_factory = overtime_factory or OvertimeCalculatorFactory()

    def overtime_hours(self, *, pairing: PairingResult, resolved: ResolvedShift) -> float:
        calculator = self._overtime_factory.for_day(is_workday=resolved.is_workday)
        hours = calculator.overtime_hours(
            sessions=pairing.sessions,
            shift=resolved.shift,
            work_date=resolved.work_date,
        )
        if hours * 60 < OVERTIME_NOISE_MINUTES:
            return 0.0
        return round(hours, HOURS_DECIMALS)

    def classify(
        self,
        *,
        employee_id: str,
        inferred: InferredScans,
        pairing: PairingResult,
        resolved: ResolvedShift,
        plants_used: Iterable[str] = (),
    ) -> DayRecord:
        shift = resolved.shift
        work_date = resolved.work_date
        entries_count = len(inferred.entries)
        exits_count = len(inferred.exits)
        first_entry = inferred.entries[0] if inferred.entries else None

        status = decide_status(
            entries_count=entries_count,
            exits_count=exits_count,
            pairing=pairing,
            shift_hours=shift.hours_on(work_date),
        )

        return DayRecord(
            work_date=work_date,
            employee_id=employee_id,
            status=status,
            is_workday=resolved.is_workday,
            sessions=pairing.sessions,
            first_entry=first_entry,
            last_exit=inferred.exits[-1] if inferred.exits else None,
            hours=pairing.total_hours,
            exact_hours=pairing.raw_total_hours,
            late_minutes=late_minutes(
                shift=shift,
                work_date=work_date,
                first_entry=first_entry,
                is_workday=resolved.is_workday,
            ),
            overtime_hours=self.overtime_hours(pairing=pairing, resolved=resolved),
            entries_count=entries_count,
            exits_count=exits_count,
            unpaired_entries=pairing.unpaired_entries,
            unpaired_exits=pairing.unpaired_exits,
            plants_used=tuple(sorted(set(plants_used))),
            shift_name=shift.name,
            shift_start=shift.start_time,
            shift_end=resolved.end_time,
        )

    def absent(self, *, employee_id: str, resolved: ResolvedShift) -> DayRecord:
        return DayRecord(
            work_date=resolved.work_date,
            employee_id=employee_id,
            status=DayStatus.ABSENT,
            is_workday=resolved.is_workday,
            shift_name=resolved.shift.name,
            shift_start=resolved.shift.start_time,
            shift_end=resolved.end_time,
        )
