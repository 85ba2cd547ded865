"""Entry/exit inference shared by every report.

1. Sort the reads of one employee on one logical workday.
2. Drop reads closer than DEDUP_GAP_MINUTES to the previous kept read.
3. Alternate: even positions are entries, odd positions are exits.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Sequence

from ..core.constants import DEDUP_GAP_MINUTES


@dataclass(frozen=True)
class InferredScans:
    deduped: tuple[datetime, ...]
    entries: tuple[datetime, ...]
    exits: tuple[datetime, ...]


def dedupe_scans(timestamps: Iterable[datetime], *, gap_minutes: int = DEDUP_GAP_MINUTES) -> list[datetime]:
    """Sorted reads, keeping one only if it is `gap_minutes` after the last kept one."""

    gap = timedelta(minutes=gap_minutes)
    kept: list[datetime] = []
    for ts in sorted(timestamps):
        if not kept or ts - kept[-1] >= gap:
            kept.append(ts)
    return kept


def alternate_entry_exit(deduped: Sequence[datetime]) -> tuple[list[datetime], list[datetime]]:
    entries = [ts for i, ts in enumerate(deduped) if i % 2 == 0]
    exits = [ts for i, ts in enumerate(deduped) if i % 2 == 1]
    return entries, exits


def infer_entry_exit(timestamps: Iterable[datetime]) -> InferredScans:
    deduped = dedupe_scans(timestamps)
    entries, exits = alternate_entry_exit(deduped)
    return InferredScans(deduped=tuple(deduped), entries=tuple(entries), exits=tuple(exits))


def is_active(inferred: InferredScans) -> bool:
    """Still on shift: an entry without its matching exit."""
    return len(inferred.entries) > len(inferred.exits)
