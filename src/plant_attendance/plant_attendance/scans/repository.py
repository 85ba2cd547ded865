from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Scan


class ScanRepository(Protocol):
    def list_between(self, *, start: date, end: date, employee_id: Optional[str] = None) -> Sequence[Scan]:
        """Raw reads whose calendar date is within [start, end], any plant."""

        raise NotImplementedError
