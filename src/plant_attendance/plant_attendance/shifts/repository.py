from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Shift, ShiftAssignment


class ShiftRepository(Protocol):
    def get_default_shift(self) -> Optional[Shift]:
        raise NotImplementedError

    def list_assignments(self, *, start: date, end: date, employee_id: Optional[str] = None) -> Sequence[ShiftAssignment]:
        """Active assignments whose effective range overlaps [start, end]."""

        raise NotImplementedError
