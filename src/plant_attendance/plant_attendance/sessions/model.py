from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Session:
    """A paired (entry, exit) interval of continuous presence.

    `hours` is the display value (2 decimals); `exact_hours` keeps the
    unrounded duration for totals.
    """

    entry: datetime
    exit: datetime
    hours: float
    exact_hours: float


@dataclass(frozen=True)
class PairingResult:
    sessions: tuple[Session, ...]
    raw_total_hours: float
    total_hours: float
    unpaired_entries: int
    unpaired_exits: int
    oversized_sessions: int = 0

    @property
    def has_sessions(self) -> bool:
        return bool(self.sessions)
