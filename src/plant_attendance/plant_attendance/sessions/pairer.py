from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..common.datetime_utils import hours_between
from ..core.constants import HOURS_DECIMALS, MAX_SESSION_HOURS, MIN_SESSION_HOURS
from .model import PairingResult, Session


def pair_sessions(entries: Sequence[datetime], exits: Sequence[datetime]) -> PairingResult:
    """Greedy two-pointer pairing of entries with the next later exit.

    Exits at or before the current entry are skipped as stale. A pair whose
    duration is outside [MIN_SESSION_HOURS, MAX_SESSION_HOURS] drops the
    entry but leaves the exit available for the next entry.
    """

    sorted_entries = sorted(entries)
    sorted_exits = sorted(exits)

    sessions: list[Session] = []
    raw_total = 0.0
    oversized = 0
    exit_index = 0

    for entry in sorted_entries:
        while exit_index < len(sorted_exits) and sorted_exits[exit_index] <= entry:
            exit_index += 1
        if exit_index >= len(sorted_exits):
            break

        exit_time = sorted_exits[exit_index]
        hours = hours_between(entry, exit_time)
        if MIN_SESSION_HOURS <= hours <= MAX_SESSION_HOURS:
            sessions.append(
                Session(entry=entry, exit=exit_time, hours=round(hours, HOURS_DECIMALS), exact_hours=hours)
            )
            raw_total += hours
            exit_index += 1
        elif hours > MAX_SESSION_HOURS:
            oversized += 1

    return PairingResult(
        sessions=tuple(sessions),
        raw_total_hours=raw_total,
        total_hours=round(raw_total, HOURS_DECIMALS),
        unpaired_entries=max(0, len(sorted_entries) - len(sessions)),
        unpaired_exits=max(0, len(sorted_exits) - len(sessions)),
        oversized_sessions=oversized,
    )
