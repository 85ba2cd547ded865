from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time

from flask import Flask

from plant_attendance.core.exceptions import ValidationError
from plant_attendance.employees.model import Employee
from plant_attendance.reports.controller import register
from plant_attendance.reports.service import AttendanceReportService
from plant_attendance.scans.model import Scan
from plant_attendance.shifts.model import Shift


@dataclass
class FakeContainer:
    report_service: object


class FakeScanRepo:
    def list_between(self, *, start, end, employee_id=None):
        return [
            Scan(employee_id="1", timestamp=datetime(2025, 3, 3, 6, 0), plant_id=1),
            Scan(employee_id="1", timestamp=datetime(2025, 3, 3, 15, 30), plant_id=1),
        ]


class FakeShiftRepo:
    def get_default_shift(self):
        return Shift(name="Turno Matutino", start_time=time(6, 0), end_time=time(15, 30))

    def list_assignments(self, *, start, end, employee_id=None):
        return []


class FakeEmployeeRepo:
    def list_all(self):
        return [Employee(employee_id="1", name="Ana")]

    def get_by_id(self, employee_id):
        return None


class BrokenReportService:
    def active_report(self, **kwargs):
        raise RuntimeError("db down")

    def period_report(self, **kwargs):
        raise RuntimeError("db down")

    def daily_report(self, **kwargs):
        raise ValidationError("El rango máximo es de 31 días")

    def validation_report(self, **kwargs):
        raise RuntimeError("db down")


def _client(service):
    app = Flask(__name__)
    register(app, FakeContainer(report_service=service))
    return app.test_client()


def _working_client():
    return _client(AttendanceReportService(FakeScanRepo(), FakeShiftRepo(), FakeEmployeeRepo()))


def test_period_endpoint_renders_report():
    resp = _working_client().get("/api/reports/period?startDate=2025-03-03&endDate=2025-03-07")

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["success"] is True
    assert body["startDate"] == "2025-03-03"
    assert body["totalRecords"] == 2
    employee = body["employees"][0]
    assert employee["employeeNumber"] == "1"
    assert employee["attendanceRate"] == 20
    assert employee["dailyData"]["2025-03-03"]["status"] == "Completo"
    assert employee["dailyData"]["2025-03-04"]["status"] == "Ausente"


def test_daily_endpoint_renders_rows():
    resp = _working_client().get("/api/reports/daily?date=2025-03-03")

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["employees"][0]["status"] == "Completado"
    assert body["employees"][0]["totalWorkedHours"] == 9.5


def test_bad_range_is_bad_request():
    resp = _working_client().get("/api/reports/period?startDate=2025-03-07&endDate=2025-03-03")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_malformed_date_is_bad_request():
    resp = _working_client().get("/api/reports/period?startDate=03/03/2025")

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "startDate inválido"


def test_validation_error_from_service_is_bad_request():
    resp = _client(BrokenReportService()).get("/api/reports/daily?date=2025-03-03")

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "El rango máximo es de 31 días"


def test_unexpected_error_is_server_error():
    resp = _client(BrokenReportService()).get("/api/reports/validation?date=2025-03-03")

    assert resp.status_code == 500
    assert resp.get_json()["success"] is False


def test_active_endpoint_renders_summary():
    resp = _working_client().get("/api/reports/active")

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["success"] is True
    assert set(body["summary"]) == {"activeEmployees", "totalEmployeesToday", "totalRecordsToday"}


def test_active_endpoint_failure_is_server_error():
    resp = _client(BrokenReportService()).get("/api/reports/active")

    assert resp.status_code == 500
    assert resp.get_json()["error"] == "Error al obtener empleados activos"
