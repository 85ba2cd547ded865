from __future__ import annotations

from datetime import date
from typing import Sequence

from ...common.datetime_utils import hours_between
from ...sessions.model import Session
from ...shifts.model import Shift
from .base import OvertimeCalculator


class ShiftEndOvertimeCalculator(OvertimeCalculator):
    """Workday: only the part of each session after the shift end counts."""

    def overtime_hours(self, *, sessions: Sequence[Session], shift: Shift, work_date: date) -> float:
        shift_end = shift.end_at(work_date)
        total = 0.0
        for s in sessions:
            if s.exit <= shift_end:
                continue
            total += hours_between(max(s.entry, shift_end), s.exit)
        return total
