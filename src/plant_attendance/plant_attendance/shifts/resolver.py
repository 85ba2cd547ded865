from __future__ import annotations

import logging
from datetime import date, time
from typing import Iterable, Optional, Sequence

from ..core.constants import (
    DEFAULT_SHIFT_END,
    DEFAULT_SHIFT_NAME,
    DEFAULT_SHIFT_START,
    DEFAULT_TOLERANCE_MINUTES,
    DEFAULT_WORKDAYS,
    SPECIFIC_SHIFT_KEYWORDS,
)
from ..core.enums import AssignmentSource
from .model import ResolvedShift, Shift, ShiftAssignment

logger = logging.getLogger(__name__)

SYSTEM_DEFAULT_SHIFT = Shift(
    name=DEFAULT_SHIFT_NAME,
    start_time=DEFAULT_SHIFT_START,
    end_time=DEFAULT_SHIFT_END,
    tolerance_minutes=DEFAULT_TOLERANCE_MINUTES,
    workdays=DEFAULT_WORKDAYS,
    shift_id=1,
)


class ShiftResolver:
    """Pick the shift in force for an employee on a date.

    Priority: manual admin assignment, then the most specific plant
    assignment, then any plant assignment, then the default shift.
    """

    def __init__(self, default_shift: Optional[Shift] = None, *, default_start: Optional[time] = None):
        self._default_shift = default_shift or SYSTEM_DEFAULT_SHIFT
        self._default_start = default_start or DEFAULT_SHIFT_START

    @property
    def default_shift(self) -> Shift:
        return self._default_shift

    def is_specific(self, shift: Shift) -> bool:
        name = shift.name.lower()
        return shift.start_time != self._default_start or any(k in name for k in SPECIFIC_SHIFT_KEYWORDS)

    def resolve(self, *, employee_id: str, work_date: date, assignments: Iterable[ShiftAssignment]) -> ResolvedShift:
        candidates = [a for a in assignments if a.employee_id == employee_id and a.covers(work_date)]

        chosen = self._choose(candidates)
        if len(candidates) > 1:
            logger.debug(
                "Employee %s has %d assignments on %s, using %s (%s)",
                employee_id,
                len(candidates),
                work_date,
                chosen.shift.name,
                chosen.source.value,
            )
        if chosen is None:
            return ResolvedShift(shift=self._default_shift, source=AssignmentSource.DEFAULT, work_date=work_date)
        return ResolvedShift(shift=chosen.shift, source=chosen.source, work_date=work_date)

    def _choose(self, candidates: Sequence[ShiftAssignment]) -> Optional[ShiftAssignment]:
        if not candidates:
            return None

        best = min(a.source.priority for a in candidates)
        tier = [a for a in candidates if a.source.priority == best]
        source = tier[0].source

        if source == AssignmentSource.MANUAL:
            # Latest admin decision wins when several manual rows overlap.
            return max(tier, key=lambda a: a.start_date or date.min)
        if source == AssignmentSource.PLANT:
            for assignment in tier:
                if self.is_specific(assignment.shift):
                    return assignment
        return tier[0]
