from __future__ import annotations

from dataclasses import dataclass

from .base import OvertimeCalculator
from .rest_day import RestDayOvertimeCalculator
from .shift_end import ShiftEndOvertimeCalculator


@dataclass
class OvertimeCalculatorFactory:
    """Factory Pattern: choose the overtime rule for a day."""

    def for_day(self, *, is_workday: bool) -> OvertimeCalculator:
        if is_workday:
            return ShiftEndOvertimeCalculator()
        return RestDayOvertimeCalculator()
