"""Plant Attendance package.

Turns raw badge scans collected from several plants into classified
attendance: work sessions, daily status, lateness and overtime.

The engine (scans, sessions, shifts, attendance, reports) is pure and does
no I/O. Repositories and the Flask controller are thin adapters around it.
"""
