"""Attendance engine: raw scans in, classified days and period reports out.

Pure and synchronous. Every call works only on its arguments, so the same
scans and shifts always give the same report.
"""

from __future__ import annotations

import logging
import re
from collections import defaultdict
from datetime import date
from typing import Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import iter_dates
from ..employees.model import Employee
from ..reports.aggregator import PeriodAggregator
from ..reports.model import PeriodReport
from ..scans.inference import infer_entry_exit
from ..scans.model import Scan
from ..scans.night_shift import BoundaryLookup, group_by_workday, night_shift_boundary
from ..sessions.pairer import pair_sessions
from ..shifts.model import ShiftAssignment
from ..shifts.resolver import ShiftResolver
from .classifier import DayClassifier
from .model import DayRecord

logger = logging.getLogger(__name__)


def natural_key(employee_id: str) -> list:
    """Sort '2' before '10' the way badge numbers are listed."""
    return [int(part) if part.isdigit() else part for part in re.split(r"(\d+)", employee_id)]


def index_assignments(assignments: Iterable[ShiftAssignment]) -> dict[str, list[ShiftAssignment]]:
    by_employee: dict[str, list[ShiftAssignment]] = defaultdict(list)
    for assignment in assignments:
        by_employee[assignment.employee_id].append(assignment)
    return by_employee


class AttendanceEngine:
    def __init__(
        self,
        resolver: Optional[ShiftResolver] = None,
        *,
        classifier: Optional[DayClassifier] = None,
        aggregator: Optional[PeriodAggregator] = None,
    ):
        self._resolver = resolver or ShiftResolver()
        self._classifier = classifier or DayClassifier()
        self._aggregator = aggregator or PeriodAggregator()

    @property
    def resolver(self) -> ShiftResolver:
        return self._resolver

    @property
    def aggregator(self) -> PeriodAggregator:
        return self._aggregator

    def boundary_lookup(self, assignments: Mapping[str, Sequence[ShiftAssignment]]) -> BoundaryLookup:
        """Night-shift boundary of the shift each employee works on a given day."""

        cache: dict[tuple[str, date], Optional[int]] = {}

        def boundary_on(employee_id: str, day: date) -> Optional[int]:
            key = (employee_id, day)
            if key not in cache:
                resolved = self._resolver.resolve(
                    employee_id=employee_id, work_date=day, assignments=assignments.get(employee_id, ())
                )
                cache[key] = night_shift_boundary(resolved.shift)
            return cache[key]

        return boundary_on

    def classify_day(
        self,
        *,
        employee_id: str,
        work_date: date,
        scans: Sequence[Scan],
        assignments: Sequence[ShiftAssignment],
    ) -> DayRecord:
        resolved = self._resolver.resolve(employee_id=employee_id, work_date=work_date, assignments=assignments)
        if not scans:
            return self._classifier.absent(employee_id=employee_id, resolved=resolved)

        inferred = infer_entry_exit(s.timestamp for s in scans)
        pairing = pair_sessions(inferred.entries, inferred.exits)
        return self._classifier.classify(
            employee_id=employee_id,
            inferred=inferred,
            pairing=pairing,
            resolved=resolved,
            plants_used=(s.plant_name or str(s.plant_id) for s in scans),
        )

    def process(
        self,
        *,
        employees: Sequence[Employee],
        scans: Sequence[Scan],
        assignments: Sequence[ShiftAssignment],
        start: date,
        end: date,
    ) -> list[PeriodReport]:
        """One report per known employee plus every badge that scanned in range.

        `scans` should cover [start - 1 day, end + 1 day] so night-shift reads
        crossing the range edges are not lost.
        """

        known = {e.employee_id: e for e in employees}
        by_employee = index_assignments(assignments)
        ids = set(known) | {s.employee_id for s in scans}

        grouped = group_by_workday(scans, self.boundary_lookup(by_employee), start=start, end=end)

        reports = []
        for employee_id in sorted(ids, key=natural_key):
            employee = known.get(employee_id) or Employee.unknown(employee_id)
            days_scans = grouped.get(employee_id, {})
            emp_assignments = by_employee.get(employee_id, [])

            records = [
                self.classify_day(
                    employee_id=employee_id,
                    work_date=day,
                    scans=days_scans.get(day, []),
                    assignments=emp_assignments,
                )
                for day in iter_dates(start, end)
            ]
            period_shift = self._resolver.resolve(
                employee_id=employee_id, work_date=start, assignments=emp_assignments
            ).shift
            reports.append(
                self._aggregator.aggregate(employee=employee, shift=period_shift, days=records, start=start, end=end)
            )

        logger.debug("Processed %d employees, %d scans, %s..%s", len(reports), len(scans), start, end)
        return reports

    def process_employee(
        self,
        *,
        employee: Employee,
        scans: Sequence[Scan],
        assignments: Sequence[ShiftAssignment],
        start: date,
        end: date,
    ) -> PeriodReport:
        own_scans = [s for s in scans if s.employee_id == employee.employee_id]
        return self.process(employees=[employee], scans=own_scans, assignments=assignments, start=start, end=end)[0]
