"""Example: running the engine directly, without Flask or MySQL.

Controllers and repositories are thin; everything below is the same code
path the period report uses.
"""

from datetime import date, datetime, time

from plant_attendance.attendance.service import AttendanceEngine
from plant_attendance.employees.model import Employee
from plant_attendance.reports.presenters import period_report_to_dict
from plant_attendance.scans.model import Scan
from plant_attendance.shifts.model import Shift, ShiftAssignment
from plant_attendance.shifts.parsing import parse_end_overrides, parse_workdays


def main():
    night = Shift(
        name="Turno Nocturno",
        start_time=time(22, 0),
        end_time=time(6, 0),
        tolerance_minutes=10,
        workdays=parse_workdays("[1, 2, 3, 4, 5]"),
        end_overrides=parse_end_overrides('{"viernes": "04:00"}'),
    )
    scans = [
        Scan("0042", datetime(2025, 3, 3, 21, 58), 1, "Planta Norte"),
        Scan("0042", datetime(2025, 3, 3, 22, 3), 1, "Planta Norte"),
        Scan("0042", datetime(2025, 3, 4, 6, 5), 1, "Planta Norte"),
    ]

    report = AttendanceEngine().process_employee(
        employee=Employee("0042", "Rosa"),
        scans=scans,
        assignments=[ShiftAssignment("0042", night)],
        start=date(2025, 3, 3),
        end=date(2025, 3, 7),
    )
    for day, data in period_report_to_dict(report)["dailyData"].items():
        print(day, data["status"], data["hours"], data["lateMinutes"], data["overtimeHours"])


if __name__ == "__main__":
    main()
