from __future__ import annotations

from ...core.enums import DayStatus
from ..model import ResolvedDayStatus
from .base import DayContext, DayStatusStrategy


class AbsentStrategy(DayStatusStrategy):
    """Working day without any attendance record."""

    def decide(self, ctx: DayContext) -> ResolvedDayStatus:
        return ResolvedDayStatus(
            date=ctx.day,
            status=DayStatus.ABSENT,
            classification=ctx.calendar_day.classification,
            reason="No punches recorded on a working day",
            source_record=ctx.record,
        )
