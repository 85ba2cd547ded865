"""Night-shift day boundary.

Employees on an overnight shift (start hour after end hour) get a boundary
hour in the middle of their off-duty window. Reads before that hour belong
to the shift that started the previous evening.

Shifts can change from one day to the next, so the boundary is looked up
per read: a read on day D is checked against the shift in force on D - 1.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Callable, Iterable, Optional

from ..shifts.model import Shift
from .model import Scan

logger = logging.getLogger(__name__)

# (employee_id, workday) -> boundary hour of the shift in force that day, if overnight.
BoundaryLookup = Callable[[str, date], Optional[int]]


def night_shift_boundary(shift: Optional[Shift]) -> Optional[int]:
    if shift is None or not shift.is_overnight:
        return None
    return (shift.start_time.hour + shift.end_time.hour) // 2


def logical_date(timestamp: datetime, boundary: Optional[int]) -> date:
    """Workday a read belongs to, which may be the day before its calendar date."""

    if boundary is not None and timestamp.hour < boundary:
        return timestamp.date() - timedelta(days=1)
    return timestamp.date()


def workday_of(employee_id: str, timestamp: datetime, boundary_on: BoundaryLookup) -> date:
    previous = timestamp.date() - timedelta(days=1)
    return logical_date(timestamp, boundary_on(employee_id, previous))


def extend_window(start: date, end: date) -> tuple[date, date]:
    """Query window for a report range, one day wider on each side."""
    return start - timedelta(days=1), end + timedelta(days=1)


def group_by_workday(
    scans: Iterable[Scan],
    boundary_on: BoundaryLookup,
    *,
    start: date,
    end: date,
) -> dict[str, dict[date, list[Scan]]]:
    """Bucket reads per employee and logical workday, keeping only days in [start, end]."""

    grouped: dict[str, dict[date, list[Scan]]] = defaultdict(lambda: defaultdict(list))
    dropped = 0
    for scan in scans:
        workday = workday_of(scan.employee_id, scan.timestamp, boundary_on)
        if workday < start or workday > end:
            dropped += 1
            continue
        grouped[scan.employee_id][workday].append(scan)

    if dropped:
        logger.debug("Skipped %d scans outside %s..%s after remapping", dropped, start, end)
    return {emp: dict(days) for emp, days in grouped.items()}
