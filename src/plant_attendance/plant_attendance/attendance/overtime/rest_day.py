from __future__ import annotations

from datetime import date
from typing import Sequence

from ...sessions.model import Session
from ...shifts.model import Shift
from .base import OvertimeCalculator


class RestDayOvertimeCalculator(OvertimeCalculator):
    """Non-workday: every worked hour is overtime."""

    def overtime_hours(self, *, sessions: Sequence[Session], shift: Shift, work_date: date) -> float:
        return sum(s.exact_hours for s in sessions)
