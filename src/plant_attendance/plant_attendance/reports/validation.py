from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.constants import EXCESSIVE_DAILY_HOURS
from ..employees.model import Employee
from ..scans.inference import infer_entry_exit, is_active
from ..scans.model import Scan
from ..sessions.pairer import pair_sessions
from .model import DayValidation


def validate_day(*, employee: Employee, work_date: date, scans: Sequence[Scan]) -> DayValidation:
    """Flag a day's reads that a supervisor should look at."""

    inferred = infer_entry_exit(s.timestamp for s in scans)
    pairing = pair_sessions(inferred.entries, inferred.exits)
    plants = tuple(sorted({s.plant_name or str(s.plant_id) for s in scans}))

    issues: list[str] = []
    if pairing.oversized_sessions:
        issues.append("Sesión con duración mayor a 24 horas detectada")

    if pairing.total_hours == 0 and scans:
        if len(inferred.deduped) == 1:
            issues.append("Solo un registro (sin salida inferible)")
        else:
            issues.append("Sin horas calculadas a pesar de tener registros")

    if pairing.total_hours > EXCESSIVE_DAILY_HOURS:
        issues.append(f"Horas excesivas: {pairing.total_hours}h (más de {EXCESSIVE_DAILY_HOURS:g}h)")

    if is_active(inferred):
        issues.append("Empleado aún en turno (sin salida registrada)")

    if len(plants) > 1:
        issues.append(f"Registros en múltiples plantas: {', '.join(plants)}")

    duplicates = len(scans) - len(inferred.deduped)
    if len(scans) > len(inferred.deduped) + 1:
        issues.append(f"{duplicates} registro(s) duplicados filtrados")

    return DayValidation(
        work_date=work_date,
        employee=employee,
        is_valid=not issues,
        total_hours=pairing.total_hours,
        total_entries=len(inferred.entries),
        total_exits=len(inferred.exits),
        issues=tuple(issues),
        plants_used=plants,
    )
