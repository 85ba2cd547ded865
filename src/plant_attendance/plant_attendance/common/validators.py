from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from ..core.constants import DEFAULT_WEEK_DAYS, MAX_REPORT_DAYS
from ..core.exceptions import ValidationError


def resolve_date_range(
    start: Optional[date],
    end: Optional[date],
    *,
    max_days: int = MAX_REPORT_DAYS,
) -> tuple[date, date]:
    """Validate a report range before it reaches the engine.

    A missing end date means a Monday-to-Friday style week starting at `start`.
    """

    if start is None:
        raise ValidationError("startDate es requerido")

    if end is None:
        end = start + timedelta(days=DEFAULT_WEEK_DAYS - 1)

    if end < start:
        raise ValidationError("La fecha de fin no puede ser anterior a la de inicio")

    if (end - start).days + 1 > max_days:
        raise ValidationError(f"El rango máximo es de {max_days} días")

    return start, end
