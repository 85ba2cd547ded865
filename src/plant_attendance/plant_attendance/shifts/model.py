from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Mapping, Optional

from ..common.datetime_utils import weekday_of
from ..core.constants import DEFAULT_TOLERANCE_MINUTES, DEFAULT_WORKDAYS
from ..core.enums import AssignmentSource, Weekday


def _crosses_midnight(start: time, end: time) -> bool:
    return start.hour > end.hour


@dataclass(frozen=True)
class Shift:
    """Domain entity: a work shift.

    `workdays` uses Sunday-first numbering (0 = Sunday). `end_overrides`
    replaces `end_time` on specific weekdays only.
    """

    name: str
    start_time: time
    end_time: time
    tolerance_minutes: int = DEFAULT_TOLERANCE_MINUTES
    workdays: frozenset[int] = DEFAULT_WORKDAYS
    end_overrides: Mapping[Weekday, time] = field(default_factory=dict)
    shift_id: Optional[int] = None

    @property
    def is_overnight(self) -> bool:
        return _crosses_midnight(self.start_time, self.end_time)

    def is_workday(self, day: date) -> bool:
        return int(weekday_of(day)) in self.workdays

    def end_time_on(self, day: date) -> time:
        return self.end_overrides.get(weekday_of(day), self.end_time)

    def start_at(self, day: date) -> datetime:
        return datetime.combine(day, self.start_time)

    def end_at(self, day: date) -> datetime:
        """Shift end instant for the workday starting on `day`."""

        end = self.end_time_on(day)
        instant = datetime.combine(day, end)
        if _crosses_midnight(self.start_time, end):
            instant += timedelta(days=1)
        return instant

    def hours_on(self, day: date) -> float:
        return (self.end_at(day) - self.start_at(day)).total_seconds() / 3600

    @property
    def scheduled_hours(self) -> float:
        start = self.start_time.hour + self.start_time.minute / 60
        end = self.end_time.hour + self.end_time.minute / 60
        if end < start:
            end += 24
        return end - start


@dataclass(frozen=True)
class ShiftAssignment:
    """Binds an employee to a shift for an (open-ended) date range."""

    employee_id: str
    shift: Shift
    source: AssignmentSource = AssignmentSource.PLANT
    plant_id: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def covers(self, day: date) -> bool:
        if self.start_date and day < self.start_date:
            return False
        if self.end_date and day > self.end_date:
            return False
        return True


@dataclass(frozen=True)
class ResolvedShift:
    """Shift in force for one employee on one date."""

    shift: Shift
    source: AssignmentSource
    work_date: date

    @property
    def end_time(self) -> time:
        return self.shift.end_time_on(self.work_date)

    @property
    def is_workday(self) -> bool:
        return self.shift.is_workday(self.work_date)
