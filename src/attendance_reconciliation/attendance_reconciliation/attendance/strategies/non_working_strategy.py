from __future__ import annotations

from ...core.enums import DayClassification, DayStatus
from ..model import ResolvedDayStatus
from .base import DayContext, DayStatusStrategy

_STATUS_BY_CLASSIFICATION = {
    DayClassification.HOLIDAY: DayStatus.HOLIDAY,
    DayClassification.WEEKEND: DayStatus.WEEKEND,
    DayClassification.LEAVE: DayStatus.LEAVE,
}


class NonWorkingDayStrategy(DayStatusStrategy):
    """Holiday, weekend or leave: the calendar decides, punches are informational."""

    def decide(self, ctx: DayContext) -> ResolvedDayStatus:
        classification = ctx.calendar_day.classification
        return ResolvedDayStatus(
            date=ctx.day,
            status=_STATUS_BY_CLASSIFICATION[classification],
            classification=classification,
            reason=ctx.calendar_day.reason,
            source_record=ctx.record,
        )
