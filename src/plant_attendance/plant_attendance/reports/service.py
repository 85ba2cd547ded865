from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Optional

from ..attendance.service import AttendanceEngine, index_assignments, natural_key
from ..common.validators import resolve_date_range
from ..core.constants import MAX_DAILY_REPORT_DAYS, MAX_REPORT_DAYS
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..scans.night_shift import extend_window, group_by_workday, workday_of
from ..scans.repository import ScanRepository
from ..shifts.repository import ShiftRepository
from ..shifts.resolver import ShiftResolver
from .active import build_active_row
from .daily import build_daily_row
from .model import ActiveReportData, DailyReportData, PeriodReportData, ValidationReportData
from .validation import validate_day

logger = logging.getLogger(__name__)


class AttendanceReportService:
    """Loads collaborator data, validates the range and runs the engine."""

    def __init__(
        self,
        scans: ScanRepository,
        shifts: ShiftRepository,
        employees: EmployeeRepository,
        *,
        engine: Optional[AttendanceEngine] = None,
        max_report_days: int = MAX_REPORT_DAYS,
        max_daily_days: int = MAX_DAILY_REPORT_DAYS,
    ):
        self._scans = scans
        self._shifts = shifts
        self._employees = employees
        self._engine = engine
        self._max_report_days = int(max_report_days)
        self._max_daily_days = int(max_daily_days)

    def _engine_for_request(self) -> AttendanceEngine:
        if self._engine is not None:
            return self._engine
        return AttendanceEngine(ShiftResolver(self._shifts.get_default_shift()))

    def _known_employees(self, employee_id: Optional[str]) -> list[Employee]:
        if employee_id:
            employee = self._employees.get_by_id(employee_id)
            return [employee or Employee.unknown(employee_id)]
        return list(self._employees.list_all())

    def period_report(
        self,
        *,
        start: Optional[date],
        end: Optional[date] = None,
        employee_id: Optional[str] = None,
    ) -> PeriodReportData:
        start, end = resolve_date_range(start, end, max_days=self._max_report_days)
        engine = self._engine_for_request()

        window_start, window_end = extend_window(start, end)
        scans = self._scans.list_between(start=window_start, end=window_end, employee_id=employee_id)
        assignments = self._shifts.list_assignments(start=window_start, end=window_end, employee_id=employee_id)
        employees = self._known_employees(employee_id)

        reports = engine.process(employees=employees, scans=scans, assignments=assignments, start=start, end=end)
        summary = engine.aggregator.summarize(reports, total_days=(end - start).days + 1)

        logger.info("Period report %s..%s: %d employees from %d scans", start, end, len(reports), len(scans))
        return PeriodReportData(
            start=start,
            end=end,
            employees=reports,
            summary=summary,
            total_records=len(scans),
            generated_at=datetime.now(),
        )

    def daily_report(
        self,
        *,
        start: Optional[date],
        end: Optional[date] = None,
        employee_id: Optional[str] = None,
    ) -> DailyReportData:
        start, end = resolve_date_range(start, end or start, max_days=self._max_daily_days)
        engine = self._engine_for_request()

        window_start, window_end = extend_window(start, end)
        scans = self._scans.list_between(start=window_start, end=window_end, employee_id=employee_id)
        assignments = index_assignments(
            self._shifts.list_assignments(start=window_start, end=window_end, employee_id=employee_id)
        )
        grouped = group_by_workday(scans, engine.boundary_lookup(assignments), start=start, end=end)
        names = {e.employee_id: e for e in self._employees.list_all()}

        rows = []
        for emp in grouped:
            employee = names.get(emp) or Employee.unknown(emp)
            for work_date, day_scans in grouped[emp].items():
                rows.append(build_daily_row(employee=employee, work_date=work_date, scans=day_scans))
        rows.sort(key=lambda r: (r.work_date, natural_key(r.employee.employee_id)))

        return DailyReportData(
            start=start,
            end=end,
            rows=rows,
            total_employees=len(grouped),
            employees_active=sum(1 for r in rows if r.total_entries > r.total_exits),
            total_hours=round(sum(r.total_hours for r in rows), 2),
        )

    def validation_report(self, *, work_date: date) -> ValidationReportData:
        engine = self._engine_for_request()

        window_start, window_end = extend_window(work_date, work_date)
        scans = self._scans.list_between(start=window_start, end=window_end)
        assignments = index_assignments(self._shifts.list_assignments(start=window_start, end=window_end))
        grouped = group_by_workday(scans, engine.boundary_lookup(assignments), start=work_date, end=work_date)
        names = {e.employee_id: e for e in self._employees.list_all()}

        results = [
            validate_day(employee=names.get(emp) or Employee.unknown(emp), work_date=work_date, scans=days[work_date])
            for emp, days in grouped.items()
        ]
        # Invalid rows first so supervisors see them on top.
        results.sort(key=lambda r: (r.is_valid, natural_key(r.employee.employee_id)))

        return ValidationReportData(
            work_date=work_date,
            results=results,
            total_records=sum(len(days[work_date]) for days in grouped.values()),
        )

    def active_report(self, *, now: Optional[datetime] = None) -> ActiveReportData:
        """Employees on shift at `now`, judged on each one's current logical workday."""

        now = now or datetime.now()
        engine = self._engine_for_request()
        today = now.date()
        yesterday = today - timedelta(days=1)

        scans = self._scans.list_between(start=yesterday, end=today)
        assignments = index_assignments(self._shifts.list_assignments(start=yesterday, end=today))
        boundary_on = engine.boundary_lookup(assignments)
        grouped = group_by_workday(scans, boundary_on, start=yesterday, end=today)
        names = {e.employee_id: e for e in self._employees.list_all()}

        rows = []
        seen = 0
        records = 0
        for emp in sorted(grouped, key=natural_key):
            # A night-shift employee at 02:00 is still on yesterday's workday.
            workday = workday_of(emp, now, boundary_on)
            day_scans = [s for s in grouped[emp].get(workday, []) if s.timestamp <= now]
            if not day_scans:
                continue
            seen += 1
            records += len(day_scans)
            row = build_active_row(
                employee=names.get(emp) or Employee.unknown(emp),
                work_date=workday,
                scans=day_scans,
                now=now,
            )
            if row is not None:
                rows.append(row)

        logger.info("Active report at %s: %d of %d employees on shift", now, len(rows), seen)
        return ActiveReportData(as_of=now, rows=rows, total_employees_today=seen, total_records_today=records)
