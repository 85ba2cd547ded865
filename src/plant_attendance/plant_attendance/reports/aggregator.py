from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Sequence

from ..attendance.model import DayRecord
from ..core.constants import HOURS_DECIMALS
from ..core.enums import DayStatus
from ..employees.model import Employee
from ..shifts.model import Shift
from .model import PeriodReport, ReportSummary


def sum_rounded(values: Sequence[float]) -> float:
    """Exact sum of already-rounded figures, free of float drift."""
    return float(sum((Decimal(str(v)) for v in values), Decimal("0")))


class PeriodAggregator:
    def aggregate(
        self,
        *,
        employee: Employee,
        shift: Shift,
        days: Sequence[DayRecord],
        start: date,
        end: date,
    ) -> PeriodReport:
        ordered = tuple(sorted(days, key=lambda d: d.work_date))

        scheduled = sum(1 for d in ordered if d.is_workday)
        present = sum(1 for d in ordered if d.is_present)
        late_days = [d for d in ordered if d.is_late]

        return PeriodReport(
            employee=employee,
            start=start,
            end=end,
            shift_name=shift.name,
            shift_start=shift.start_time,
            shift_end=shift.end_time,
            workdays=tuple(sorted(shift.workdays)),
            days=ordered,
            total_hours=round(sum(d.exact_hours for d in ordered), HOURS_DECIMALS),
            total_overtime_hours=sum_rounded([d.overtime_hours for d in ordered]),
            days_present=present,
            days_complete=sum(1 for d in ordered if d.status == DayStatus.COMPLETE),
            days_late=len(late_days),
            total_late_minutes=sum(d.late_minutes for d in late_days),
            scheduled_workdays=scheduled,
            expected_daily_hours=round(shift.scheduled_hours, HOURS_DECIMALS),
            attendance_rate=(present / scheduled) if scheduled else 0.0,
        )

    def summarize(self, reports: Sequence[PeriodReport], *, total_days: int) -> ReportSummary:
        count = len(reports)
        total_hours = sum(r.total_hours for r in reports)
        return ReportSummary(
            total_employees=count,
            total_days=total_days,
            total_employee_workdays=sum(r.scheduled_workdays for r in reports),
            total_hours=round(total_hours, HOURS_DECIMALS),
            average_hours_per_employee=round(total_hours / count, HOURS_DECIMALS) if count else 0.0,
            employees_with_perfect_attendance=sum(1 for r in reports if r.is_perfect),
            employees_with_issues=sum(1 for r in reports if r.has_issues),
            average_attendance_rate=(
                round(sum(r.attendance_percent for r in reports) / count, HOURS_DECIMALS) if count else 0.0
            ),
        )
