from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator

from ..core.enums import Weekday

_DAY_NAMES = ("Dom", "Lun", "Mar", "Mié", "Jue", "Vie", "Sáb")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def weekday_of(day: date) -> Weekday:
    """Weekday in the Sunday-first numbering used by shift workday lists."""
    return Weekday(day.isoweekday() % 7)


def day_name(day: date) -> str:
    return _DAY_NAMES[weekday_of(day)]


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Every calendar day from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def hours_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 3600


def format_local_datetime(value: datetime | None) -> str | None:
    return value.strftime("%Y-%m-%d %H:%M:%S") if value else None
