from __future__ import annotations

from datetime import date, datetime, time

import pytest

from plant_attendance.core.enums import PresenceStatus
from plant_attendance.core.exceptions import ValidationError
from plant_attendance.employees.model import Employee
from plant_attendance.reports.service import AttendanceReportService
from plant_attendance.scans.model import Scan
from plant_attendance.shifts.model import Shift, ShiftAssignment

DEFAULT_SHIFT = Shift(name="Turno Matutino", start_time=time(6, 0), end_time=time(15, 30), shift_id=1)


class FakeScanRepo:
    def __init__(self, scans):
        self._scans = scans
        self.last_args = None

    def list_between(self, *, start: date, end: date, employee_id=None):
        self.last_args = {"start": start, "end": end, "employee_id": employee_id}
        return [s for s in self._scans if employee_id is None or s.employee_id == employee_id]


class FakeShiftRepo:
    def __init__(self, assignments=()):
        self._assignments = list(assignments)

    def get_default_shift(self):
        return DEFAULT_SHIFT

    def list_assignments(self, *, start: date, end: date, employee_id=None):
        return [a for a in self._assignments if employee_id is None or a.employee_id == employee_id]


class FakeEmployeeRepo:
    def __init__(self, employees):
        self._employees = {e.employee_id: e for e in employees}

    def list_all(self):
        return list(self._employees.values())

    def get_by_id(self, employee_id: str):
        return self._employees.get(employee_id)


def _scan(emp: str, *args, plant_id: int = 1, plant_name: str = "Planta Norte") -> Scan:
    return Scan(employee_id=emp, timestamp=datetime(*args), plant_id=plant_id, plant_name=plant_name)


def _service(scans=(), assignments=(), employees=()):
    scan_repo = FakeScanRepo(list(scans))
    svc = AttendanceReportService(scan_repo, FakeShiftRepo(assignments), FakeEmployeeRepo(employees))
    return svc, scan_repo


def test_period_report_rejects_reversed_range():
    svc, _ = _service()

    with pytest.raises(ValidationError):
        svc.period_report(start=date(2025, 3, 7), end=date(2025, 3, 3))


def test_period_report_rejects_oversized_range():
    svc, _ = _service()

    with pytest.raises(ValidationError):
        svc.period_report(start=date(2025, 1, 1), end=date(2025, 4, 1))


def test_period_report_requires_start():
    svc, _ = _service()

    with pytest.raises(ValidationError):
        svc.period_report(start=None)


def test_period_report_defaults_to_five_days_and_widens_query():
    svc, repo = _service()

    data = svc.period_report(start=date(2025, 3, 3))

    assert data.end == date(2025, 3, 7)
    assert repo.last_args == {"start": date(2025, 3, 2), "end": date(2025, 3, 8), "employee_id": None}


def test_period_report_includes_known_and_unknown_employees():
    scans = [
        _scan("1", 2025, 3, 3, 6, 0),
        _scan("1", 2025, 3, 3, 15, 30),
        _scan("25", 2025, 3, 4, 6, 10),
    ]
    svc, _ = _service(scans=scans, employees=[Employee(employee_id="1", name="Ana"), Employee("3", "Luis")])

    data = svc.period_report(start=date(2025, 3, 3), end=date(2025, 3, 7))

    assert [r.employee_id for r in data.employees] == ["1", "3", "25"]
    assert data.employees[2].employee.name == "Empleado #25"
    assert data.employees[0].total_hours == 9.5
    assert data.employees[0].attendance_percent == 20
    assert data.employees[1].days_present == 0
    assert data.summary.total_employees == 3
    assert data.summary.total_days == 5
    assert data.total_records == 3


def test_period_report_for_one_employee_forwards_filter():
    svc, repo = _service(scans=[_scan("1", 2025, 3, 3, 6, 0)], employees=[Employee("1", "Ana")])

    data = svc.period_report(start=date(2025, 3, 3), end=date(2025, 3, 3), employee_id="1")

    assert repo.last_args["employee_id"] == "1"
    assert [r.employee_id for r in data.employees] == ["1"]


def test_period_report_is_deterministic():
    scans = [_scan("1", 2025, 3, 3, 6, 0), _scan("1", 2025, 3, 3, 6, 10), _scan("1", 2025, 3, 3, 16, 0)]
    svc, _ = _service(scans=scans, employees=[Employee("1", "Ana")])

    first = svc.period_report(start=date(2025, 3, 3), end=date(2025, 3, 7))
    second = svc.period_report(start=date(2025, 3, 3), end=date(2025, 3, 7))

    assert first.employees == second.employees
    assert first.summary == second.summary


def test_daily_report_rows_and_statuses():
    scans = [
        _scan("1", 2025, 3, 3, 8, 0),
        _scan("1", 2025, 3, 3, 17, 0, plant_id=2, plant_name="Planta Sur"),
        _scan("2", 2025, 3, 3, 9, 0),
    ]
    svc, _ = _service(scans=scans, employees=[Employee("1", "Ana")])

    data = svc.daily_report(start=date(2025, 3, 3))

    assert [r.employee.employee_id for r in data.rows] == ["1", "2"]
    done, active = data.rows
    assert done.status == PresenceStatus.COMPLETED
    assert done.total_hours == 9.0
    assert done.plants_used == ("Planta Norte", "Planta Sur")
    assert active.status == PresenceStatus.ON_SHIFT
    assert active.employee.name == "Empleado #2"
    assert data.employees_active == 1
    assert data.total_employees == 2
    assert data.total_hours == 9.0


def test_daily_report_moves_night_reads_to_previous_day(night_shift):
    scans = [_scan("7", 2025, 3, 3, 22, 0), _scan("7", 2025, 3, 4, 6, 0)]
    svc, _ = _service(scans=scans, assignments=[ShiftAssignment("7", night_shift)])

    data = svc.daily_report(start=date(2025, 3, 3), end=date(2025, 3, 4))

    assert len(data.rows) == 1
    assert data.rows[0].work_date == date(2025, 3, 3)
    assert data.rows[0].total_hours == 8.0


def test_daily_report_range_limit():
    svc, _ = _service()

    with pytest.raises(ValidationError):
        svc.daily_report(start=date(2025, 3, 1), end=date(2025, 4, 15))


def test_validation_report_lists_invalid_first():
    scans = [
        _scan("1", 2025, 3, 3, 8, 0),
        _scan("1", 2025, 3, 3, 17, 0),
        _scan("2", 2025, 3, 3, 9, 0),
        _scan("2", 2025, 3, 3, 9, 2),
        _scan("2", 2025, 3, 3, 9, 4),
    ]
    svc, _ = _service(scans=scans, employees=[Employee("1", "Ana"), Employee("2", "Luis")])

    data = svc.validation_report(work_date=date(2025, 3, 3))

    assert [r.employee.employee_id for r in data.results] == ["2", "1"]
    issues = data.results[0].issues
    assert "Solo un registro (sin salida inferible)" in issues
    assert "Empleado aún en turno (sin salida registrada)" in issues
    assert "2 registro(s) duplicados filtrados" in issues
    assert data.valid_count == 1
    assert data.invalid_count == 1
    assert data.total_records == 5


def test_validation_flags_several_plants():
    scans = [_scan("1", 2025, 3, 3, 8, 0), _scan("1", 2025, 3, 3, 17, 0, plant_id=2, plant_name="Planta Sur")]
    svc, _ = _service(scans=scans)

    data = svc.validation_report(work_date=date(2025, 3, 3))

    assert data.results[0].issues == ("Registros en múltiples plantas: Planta Norte, Planta Sur",)


def test_active_report_lists_employees_still_on_shift():
    scans = [
        _scan("1", 2025, 3, 5, 8, 0),
        _scan("1", 2025, 3, 5, 11, 0),
        _scan("2", 2025, 3, 5, 6, 0),
        _scan("2", 2025, 3, 5, 9, 0),
        _scan("3", 2025, 3, 5, 6, 0),
        _scan("3", 2025, 3, 5, 9, 0),
        _scan("3", 2025, 3, 5, 9, 30, plant_id=2, plant_name="Planta Sur"),
        _scan("4", 2025, 3, 4, 8, 0),
    ]
    svc, _ = _service(scans=scans, employees=[Employee("1", "Ana")])

    data = svc.active_report(now=datetime(2025, 3, 5, 10, 0))

    assert [r.employee.employee_id for r in data.rows] == ["1", "3"]
    ana, third = data.rows
    assert ana.employee.name == "Ana"
    assert ana.current_hours == 2.0
    assert (ana.total_entries, ana.total_exits) == (1, 0)
    assert third.current_hours == 3.5
    assert third.first_entry == datetime(2025, 3, 5, 6, 0)
    assert third.last_activity == datetime(2025, 3, 5, 9, 30)
    assert third.plants_used == ("Planta Norte", "Planta Sur")
    assert data.active_count == 2
    assert data.total_employees_today == 3
    assert data.total_records_today == 6


def test_active_report_keeps_night_shift_on_its_evening(night_shift):
    scans = [_scan("7", 2025, 3, 4, 22, 0)]
    svc, repo = _service(scans=scans, assignments=[ShiftAssignment("7", night_shift)])

    data = svc.active_report(now=datetime(2025, 3, 5, 2, 0))

    assert repo.last_args == {"start": date(2025, 3, 4), "end": date(2025, 3, 5), "employee_id": None}
    assert len(data.rows) == 1
    assert data.rows[0].work_date == date(2025, 3, 4)
    assert data.rows[0].current_hours == 4.0
