from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DayClassification
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import DayContext, DayStatusStrategy
from .strategies.future_strategy import FutureStrategy
from .strategies.non_working_strategy import NonWorkingDayStrategy
from .strategies.working_day_strategy import IncompleteStrategy, WorkingDayStrategy


@dataclass
class DayStatusStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_day(self, ctx: DayContext) -> DayStatusStrategy:
        if ctx.day > ctx.today:
            return FutureStrategy()

        if ctx.calendar_day.classification != DayClassification.WORKING_DAY:
            return NonWorkingDayStrategy()

        record = ctx.record
        if record is None or (not record.has_clock_in and not record.has_clock_out):
            return AbsentStrategy()
        if not (record.has_clock_in and record.has_clock_out):
            return IncompleteStrategy()
        return WorkingDayStrategy()
