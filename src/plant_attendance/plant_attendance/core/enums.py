from __future__ import annotations

from enum import Enum, IntEnum


class DayStatus(str, Enum):
    """Daily attendance status, one per employee and logical workday."""

    ABSENT = "Ausente"
    COMPLETE = "Completo"
    PARTIAL = "Parcial"
    NO_EXIT = "Sin salida"
    INCOMPLETE = "Incompleto"


class PresenceStatus(str, Enum):
    """Status shown by the daily presence report."""

    ON_SHIFT = "En turno"
    COMPLETED = "Completado"
    INCOMPLETE_RECORDS = "Registros incompletos"
    EXTRA_EXITS = "Salidas extras"
    NO_VALID_RECORDS = "Sin registros válidos"


class AssignmentSource(str, Enum):
    """Where a shift assignment came from; lower priority value wins."""

    MANUAL = "manual"
    PLANT = "plant-specific"
    DEFAULT = "default-fallback"

    @property
    def priority(self) -> int:
        return _SOURCE_PRIORITY[self]


_SOURCE_PRIORITY = {
    AssignmentSource.MANUAL: 0,
    AssignmentSource.PLANT: 1,
    AssignmentSource.DEFAULT: 2,
}


class Weekday(IntEnum):
    """Day of week as stored by the shift tables (Sunday first)."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
