from __future__ import annotations

from datetime import date, time

import pytest

from plant_attendance.shifts.model import Shift

# 2025-03-03 is a Monday.
MONDAY = date(2025, 3, 3)


@pytest.fixture
def monday() -> date:
    return MONDAY


@pytest.fixture
def day_shift() -> Shift:
    return Shift(name="Turno Oficina", start_time=time(8, 0), end_time=time(17, 0), tolerance_minutes=10)


@pytest.fixture
def night_shift() -> Shift:
    return Shift(name="Turno Nocturno", start_time=time(22, 0), end_time=time(6, 0), tolerance_minutes=10)
