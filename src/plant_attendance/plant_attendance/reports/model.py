from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..attendance.model import DayRecord
from ..core.enums import PresenceStatus
from ..employees.model import Employee
from ..sessions.model import Session


@dataclass(frozen=True)
class PeriodReport:
    """Read-model: attendance of one employee over a date range."""

    employee: Employee
    start: date
    end: date
    shift_name: str
    shift_start: time
    shift_end: time
    workdays: tuple[int, ...]
    days: tuple[DayRecord, ...]
    total_hours: float
    total_overtime_hours: float
    days_present: int
    days_complete: int
    days_late: int
    total_late_minutes: int
    scheduled_workdays: int
    expected_daily_hours: float
    attendance_rate: float

    @property
    def employee_id(self) -> str:
        return self.employee.employee_id

    @property
    def days_incomplete(self) -> int:
        return self.days_present - self.days_complete

    @property
    def attendance_percent(self) -> int:
        return round(self.attendance_rate * 100)

    @property
    def has_issues(self) -> bool:
        return self.days_incomplete > 0 or self.days_present < self.scheduled_workdays or self.days_late > 0

    @property
    def is_perfect(self) -> bool:
        return (
            self.days_complete == self.scheduled_workdays
            and self.days_present == self.scheduled_workdays
            and self.days_late == 0
        )


@dataclass(frozen=True)
class ReportSummary:
    total_employees: int
    total_days: int
    total_employee_workdays: int
    total_hours: float
    average_hours_per_employee: float
    employees_with_perfect_attendance: int
    employees_with_issues: int
    average_attendance_rate: float


@dataclass(frozen=True)
class PeriodReportData:
    start: date
    end: date
    employees: list[PeriodReport]
    summary: ReportSummary
    total_records: int
    generated_at: datetime


@dataclass(frozen=True)
class DailyPresenceRow:
    """One employee on one logical workday, as shown by the daily report."""

    work_date: date
    employee: Employee
    status: PresenceStatus
    first_entry: Optional[datetime]
    last_exit: Optional[datetime]
    total_entries: int
    total_exits: int
    sessions: tuple[Session, ...]
    unpaired_entries: int
    unpaired_exits: int
    total_hours: float
    plants_used: tuple[str, ...]


@dataclass(frozen=True)
class DailyReportData:
    start: date
    end: date
    rows: list[DailyPresenceRow]
    total_employees: int
    employees_active: int
    total_hours: float


@dataclass(frozen=True)
class DayValidation:
    work_date: date
    employee: Employee
    is_valid: bool
    total_hours: float
    total_entries: int
    total_exits: int
    issues: tuple[str, ...]
    plants_used: tuple[str, ...]


@dataclass(frozen=True)
class ValidationReportData:
    work_date: date
    results: list[DayValidation]
    total_records: int

    @property
    def valid_count(self) -> int:
        return sum(1 for r in self.results if r.is_valid)

    @property
    def invalid_count(self) -> int:
        return len(self.results) - self.valid_count


@dataclass(frozen=True)
class ActiveEmployeeRow:
    """Employee whose current workday has an entry without a matching exit."""

    employee: Employee
    work_date: date
    first_entry: datetime
    last_activity: datetime
    current_hours: float
    total_entries: int
    total_exits: int
    plants_used: tuple[str, ...]


@dataclass(frozen=True)
class ActiveReportData:
    as_of: datetime
    rows: list[ActiveEmployeeRow]
    total_employees_today: int
    total_records_today: int

    @property
    def active_count(self) -> int:
        return len(self.rows)
