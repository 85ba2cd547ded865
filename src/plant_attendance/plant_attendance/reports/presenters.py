"""Plain-dict views of report read-models for JSON responses and exports."""

from __future__ import annotations

from datetime import time
from typing import Optional

from ..attendance.model import DayRecord
from ..common.datetime_utils import day_name, format_local_datetime
from ..employees.model import Employee
from ..sessions.model import Session
from .model import (
    ActiveEmployeeRow,
    ActiveReportData,
    DailyPresenceRow,
    DailyReportData,
    DayValidation,
    PeriodReport,
    PeriodReportData,
    ValidationReportData,
)


def _hhmm(value: Optional[time]) -> Optional[str]:
    return value.strftime("%H:%M") if value else None


def _employee(e: Employee) -> dict:
    return {
        "employeeNumber": e.employee_id,
        "employeeName": e.name,
        "employeeRole": e.role or "N/A",
        "department": e.department or "N/A",
    }


def session_to_dict(s: Session) -> dict:
    return {"entry": format_local_datetime(s.entry), "exit": format_local_datetime(s.exit), "hours": s.hours}


def day_to_dict(d: DayRecord) -> dict:
    return {
        "date": d.work_date.strftime("%Y-%m-%d"),
        "dayName": day_name(d.work_date),
        "status": d.status.value,
        "hours": d.hours,
        "firstEntry": format_local_datetime(d.first_entry),
        "lastExit": format_local_datetime(d.last_exit),
        "sessions": [session_to_dict(s) for s in d.sessions],
        "isWorkday": d.is_workday,
        "plantsUsed": list(d.plants_used),
        "entriesCount": d.entries_count,
        "exitsCount": d.exits_count,
        "lateMinutes": d.late_minutes,
        "overtimeHours": d.overtime_hours,
        "shiftStartTime": _hhmm(d.shift_start),
        "shiftEndTime": _hhmm(d.shift_end),
    }


def period_report_to_dict(r: PeriodReport) -> dict:
    return {
        **_employee(r.employee),
        "shift": r.shift_name,
        "shiftStartTime": _hhmm(r.shift_start),
        "shiftEndTime": _hhmm(r.shift_end),
        "shiftWorkDays": list(r.workdays),
        "employeeWorkdaysCount": r.scheduled_workdays,
        "expectedDailyHours": r.expected_daily_hours,
        "dailyData": {d.work_date.strftime("%Y-%m-%d"): day_to_dict(d) for d in r.days},
        "totalHours": r.total_hours,
        "totalOvertimeHours": r.total_overtime_hours,
        "daysPresent": r.days_present,
        "daysComplete": r.days_complete,
        "daysIncomplete": r.days_incomplete,
        "totalLateMinutes": r.total_late_minutes,
        "daysLate": r.days_late,
        "attendanceRate": r.attendance_percent,
    }


def period_data_to_dict(data: PeriodReportData) -> dict:
    s = data.summary
    return {
        "success": True,
        "startDate": data.start.strftime("%Y-%m-%d"),
        "endDate": data.end.strftime("%Y-%m-%d"),
        "summary": {
            "totalEmployees": s.total_employees,
            "totalWorkdays": s.total_days,
            "totalEmployeeWorkdays": s.total_employee_workdays,
            "totalHours": s.total_hours,
            "averageHoursPerEmployee": s.average_hours_per_employee,
            "employeesWithPerfectAttendance": s.employees_with_perfect_attendance,
            "employeesWithIssues": s.employees_with_issues,
            "averageAttendanceRate": s.average_attendance_rate,
        },
        "employees": [period_report_to_dict(r) for r in data.employees],
        "generatedAt": format_local_datetime(data.generated_at),
        "totalRecords": data.total_records,
    }


def daily_row_to_dict(r: DailyPresenceRow) -> dict:
    return {
        "date": r.work_date.strftime("%Y-%m-%d"),
        **_employee(r.employee),
        "firstEntry": format_local_datetime(r.first_entry),
        "lastExit": format_local_datetime(r.last_exit),
        "totalEntries": r.total_entries,
        "totalExits": r.total_exits,
        "validSessions": len(r.sessions),
        "unpairedEntries": r.unpaired_entries,
        "unpairedExits": r.unpaired_exits,
        "totalWorkedHours": r.total_hours,
        "status": r.status.value,
        "plantsUsed": list(r.plants_used),
        "workSessions": [session_to_dict(s) for s in r.sessions],
    }


def daily_data_to_dict(data: DailyReportData) -> dict:
    return {
        "success": True,
        "startDate": data.start.strftime("%Y-%m-%d"),
        "endDate": data.end.strftime("%Y-%m-%d"),
        "summary": {
            "totalEmployees": data.total_employees,
            "employeesPresent": data.total_employees,
            "employeesActive": data.employees_active,
            "totalHoursWorked": data.total_hours,
            "totalDays": (data.end - data.start).days + 1,
        },
        "employees": [daily_row_to_dict(r) for r in data.rows],
    }


def validation_to_dict(v: DayValidation) -> dict:
    return {
        **_employee(v.employee),
        "date": v.work_date.strftime("%Y-%m-%d"),
        "isValid": v.is_valid,
        "totalHours": v.total_hours,
        "totalEntries": v.total_entries,
        "totalExits": v.total_exits,
        "issues": list(v.issues),
        "plantsUsed": list(v.plants_used),
    }


def validation_data_to_dict(data: ValidationReportData) -> dict:
    return {
        "success": True,
        "validationResults": [validation_to_dict(v) for v in data.results],
        "summary": {
            "totalEmployees": len(data.results),
            "validEmployees": data.valid_count,
            "invalidEmployees": data.invalid_count,
            "totalRecords": data.total_records,
        },
    }


def active_row_to_dict(r: ActiveEmployeeRow) -> dict:
    return {
        **_employee(r.employee),
        "workDate": r.work_date.strftime("%Y-%m-%d"),
        "currentWorkHours": r.current_hours,
        "firstEntry": format_local_datetime(r.first_entry),
        "lastActivity": format_local_datetime(r.last_activity),
        "totalEntries": r.total_entries,
        "totalExits": r.total_exits,
        "plantsToday": list(r.plants_used),
    }


def active_data_to_dict(data: ActiveReportData) -> dict:
    return {
        "success": True,
        "activeEmployees": [active_row_to_dict(r) for r in data.rows],
        "summary": {
            "activeEmployees": data.active_count,
            "totalEmployeesToday": data.total_employees_today,
            "totalRecordsToday": data.total_records_today,
        },
        "generatedAt": format_local_datetime(data.as_of),
    }
