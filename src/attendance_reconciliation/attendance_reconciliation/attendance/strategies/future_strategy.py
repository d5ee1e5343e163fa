from __future__ import annotations

from ...core.enums import DayStatus
from ..model import ResolvedDayStatus
from .base import DayContext, DayStatusStrategy


class FutureStrategy(DayStatusStrategy):
    """Date after today: nothing is expected yet."""

    def decide(self, ctx: DayContext) -> ResolvedDayStatus:
        return ResolvedDayStatus(
            date=ctx.day,
            status=DayStatus.FUTURE,
            classification=ctx.calendar_day.classification,
            reason="Not yet due",
            source_record=ctx.record,
        )
