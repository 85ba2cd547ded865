"""Parsing of shift configuration stored as JSON text.

Both parsers fail soft: a malformed value is logged and replaced by a
documented default, never raised to the caller.
"""

from __future__ import annotations

import json
import logging
import unicodedata
from datetime import time, timedelta
from typing import Any, Mapping, Optional

from ..core.constants import DEFAULT_WORKDAYS
from ..core.enums import Weekday

logger = logging.getLogger(__name__)

WEEKDAY_ALIASES: dict[str, Weekday] = {}
for _day, _names in (
    (Weekday.SUNDAY, ("sunday", "sun", "domingo", "dom", "do")),
    (Weekday.MONDAY, ("monday", "mon", "lunes", "lun", "lu")),
    (Weekday.TUESDAY, ("tuesday", "tue", "tues", "martes", "mar", "ma")),
    (Weekday.WEDNESDAY, ("wednesday", "wed", "miercoles", "mie", "mi")),
    (Weekday.THURSDAY, ("thursday", "thu", "thur", "thurs", "jueves", "jue", "ju")),
    (Weekday.FRIDAY, ("friday", "fri", "viernes", "vie", "vi")),
    (Weekday.SATURDAY, ("saturday", "sat", "sabado", "sab", "sa")),
):
    WEEKDAY_ALIASES[str(int(_day))] = _day
    for _name in _names:
        WEEKDAY_ALIASES[_name] = _day


def _strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def weekday_from_alias(value: Any) -> Optional[Weekday]:
    """Map '3', 3, 'Wednesday', 'miércoles', 'Mié' ... to a Weekday."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return Weekday(value) if 0 <= value <= 6 else None
    key = _strip_accents(str(value)).strip().lower().rstrip(".")
    return WEEKDAY_ALIASES.get(key)


def parse_time(value: Any) -> Optional[time]:
    """Accept time objects, timedelta (MySQL TIME) and 'HH:MM[:SS]' strings."""

    if value is None:
        return None
    if isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        return time(total_seconds // 3600, (total_seconds % 3600) // 60, total_seconds % 60)
    if isinstance(value, str):
        parts = value.strip().split(":")
        if len(parts) < 2:
            raise ValueError(f"Invalid time string: {value!r}")
        seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
        return time(int(parts[0]), int(parts[1]), seconds)
    raise TypeError(f"Unsupported time value type: {type(value)!r}")


def _load_json(raw: Any) -> Any:
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if isinstance(raw, str):
        return json.loads(raw)
    return raw


def parse_workdays(raw: Any) -> frozenset[int]:
    """Workday numbers (0 = Sunday) from '[1,2,3,4,5]' or a list; Mon-Fri on bad input."""

    if raw is None or raw == "":
        return DEFAULT_WORKDAYS

    try:
        data = _load_json(raw)
        if not isinstance(data, (list, tuple, set, frozenset)):
            raise ValueError(f"workdays must be a list, got {type(data).__name__}")
        days = set()
        for item in data:
            day = weekday_from_alias(item)
            if day is None:
                raise ValueError(f"unknown weekday {item!r}")
            days.add(int(day))
        return frozenset(days)
    except (ValueError, TypeError) as exc:
        logger.warning("Malformed workdays %r, using Monday-Friday: %s", raw, exc)
        return DEFAULT_WORKDAYS


def parse_end_overrides(raw: Any) -> dict[Weekday, time]:
    """Per-weekday end time overrides keyed by any weekday alias.

    Values may be 'HH:MM' strings or objects carrying an 'end'/'end_time'
    key. Null values mean "no override". Unknown keys are skipped.
    """

    if raw is None or raw == "":
        return {}

    try:
        data = _load_json(raw)
    except ValueError as exc:
        logger.warning("Malformed end-time overrides %r, ignoring: %s", raw, exc)
        return {}

    if not isinstance(data, Mapping):
        logger.warning("End-time overrides must be an object, got %r", raw)
        return {}

    overrides: dict[Weekday, time] = {}
    for key, value in data.items():
        day = weekday_from_alias(key)
        if day is None:
            logger.warning("Unknown weekday %r in end-time overrides", key)
            continue
        if isinstance(value, Mapping):
            value = value.get("end") or value.get("end_time")
        try:
            end = parse_time(value)
        except (ValueError, TypeError) as exc:
            logger.warning("Invalid end time %r for %s: %s", value, day.name, exc)
            continue
        if end is not None:
            overrides[day] = end
    return overrides
