from __future__ import annotations

from ...core import constants
from ...core.enums import DayStatus, HalfDayType, LateStatusMode
from ..calculation import calculate_early_exit, calculate_late, calculate_overtime
from ..model import ResolvedDayStatus
from .base import DayContext, DayStatusStrategy


def _hours(minutes: int) -> float:
    return round(minutes / constants.MINUTES_PER_HOUR, 2)


class IncompleteStrategy(DayStatusStrategy):
    """Working day where one of the two punches is missing."""

    def decide(self, ctx: DayContext) -> ResolvedDayStatus:
        record = ctx.record
        missing = "clock-out" if record and record.has_clock_in else "clock-in"
        return ResolvedDayStatus(
            date=ctx.day,
            status=DayStatus.INCOMPLETE,
            classification=ctx.calendar_day.classification,
            worked_minutes=ctx.calculator.worked_minutes(record) if record else 0,
            break_minutes=ctx.calculator.break_minutes(record) if record else 0,
            reason=f"Missing {missing}",
            source_record=record,
        )


class WorkingDayStrategy(DayStatusStrategy):
    """Both punches present: grade the day by worked time against the shift."""

    def decide(self, ctx: DayContext) -> ResolvedDayStatus:
        record = ctx.record
        rule = ctx.rule
        worked = ctx.calculator.worked_minutes(record)
        late = calculate_late(record.clock_in, rule, ctx.day)
        early = calculate_early_exit(record.clock_out, rule, ctx.day)

        full_day = rule.effective_full_day_minutes
        half_day = rule.effective_half_day_minutes

        if worked >= full_day:
            status = DayStatus.PRESENT
            half_day_type = HalfDayType.FULL_DAY
            reason = f"Worked {_hours(worked)} hours (>= {_hours(full_day)} required for full day)"
            if late.is_late and ctx.late_status_mode == LateStatusMode.BUCKET:
                status = DayStatus.LATE
        elif worked >= half_day:
            status = DayStatus.HALF_DAY
            if record.clock_in.hour < constants.HALF_DAY_NOON_HOUR:
                half_day_type = HalfDayType.FIRST_HALF
            else:
                half_day_type = HalfDayType.SECOND_HALF
            reason = (
                f"Worked {_hours(worked)} hours (>= {_hours(half_day)} for half day, "
                f"< {_hours(full_day)} for full day)"
            )
        else:
            status = DayStatus.INCOMPLETE
            half_day_type = None
            reason = f"Worked {_hours(worked)} hours (< {_hours(half_day)} required for half day)"

        return ResolvedDayStatus(
            date=ctx.day,
            status=status,
            classification=ctx.calendar_day.classification,
            is_late=late.is_late,
            late_minutes=late.late_minutes,
            is_early_departure=early.is_early_departure,
            early_exit_minutes=early.early_exit_minutes,
            worked_minutes=worked,
            break_minutes=ctx.calculator.break_minutes(record),
            overtime_minutes=calculate_overtime(worked, rule),
            half_day_type=half_day_type,
            reason=reason,
            source_record=record,
        )
