from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Sequence

from ...sessions.model import Session
from ...shifts.model import Shift


class OvertimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for overtime)."""

    @abstractmethod
    def overtime_hours(self, *, sessions: Sequence[Session], shift: Shift, work_date: date) -> float:
        """Unrounded overtime hours for one workday."""

        raise NotImplementedError
