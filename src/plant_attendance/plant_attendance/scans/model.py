from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Scan:
    """Domain entity: one raw badge read.

    The action code reported by the clock hardware is deliberately not part
    of the entity: entry/exit is inferred from the order of the reads.
    """

    employee_id: str
    timestamp: datetime
    plant_id: int
    plant_name: Optional[str] = None
