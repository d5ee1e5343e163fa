from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import iter_dates, month_dates, weekday_index
from ..core.enums import DayClassification
from ..shifts.model import ShiftRule
from .model import CalendarDay, Holiday, LeaveInterval, LeaveValidation, NonWorkingBreakdown


def _holiday_name(day: date, holidays: Iterable[Holiday]) -> Optional[str]:
    for h in holidays:
        if h.holiday_date == day:
            return h.name
    return None


def _covering_leave(day: date, leave_intervals: Iterable[LeaveInterval]) -> Optional[LeaveInterval]:
    for leave in leave_intervals:
        if leave.covers(day):
            return leave
    return None


def classify_day(
    day: date,
    holidays: Iterable[Holiday],
    weekly_off_days: Iterable[int],
    leave_intervals: Iterable[LeaveInterval],
    *,
    active_rule_name: str = "default",
) -> CalendarDay:
    """Classify a date from calendar data alone.

    Precedence is HOLIDAY > WEEKEND > LEAVE > WORKING_DAY; anything unknown is
    a working day. Weekday indices use 0 = Sunday.
    """
    name = _holiday_name(day, holidays)
    if name is not None:
        return CalendarDay(
            date=day,
            classification=DayClassification.HOLIDAY,
            holiday_name=name,
            active_rule_name=active_rule_name,
            reason=name,
        )

    if weekday_index(day) in set(weekly_off_days or ()):
        return CalendarDay(
            date=day,
            classification=DayClassification.WEEKEND,
            active_rule_name=active_rule_name,
            reason="Weekend day",
        )

    leave = _covering_leave(day, leave_intervals)
    if leave is not None:
        return CalendarDay(
            date=day,
            classification=DayClassification.LEAVE,
            active_rule_name=active_rule_name,
            reason=f"{leave.leave_type.title()} Leave",
        )

    return CalendarDay(date=day, classification=DayClassification.WORKING_DAY, active_rule_name=active_rule_name)


class CalendarDayClassifier:
    """Calendar of one employee: holidays, their leave and their weekly-off rule."""

    def __init__(
        self,
        holidays: Iterable[Holiday],
        leave_intervals: Iterable[LeaveInterval],
        shift_rule_provider: Callable[[date], ShiftRule],
    ):
        self._holidays: dict[date, Holiday] = {}
        for h in holidays:
            self._holidays.setdefault(h.holiday_date, h)
        self._leaves = tuple(leave_intervals)
        self._rule_for = shift_rule_provider

    def classify(self, day: date) -> CalendarDay:
        rule = self._rule_for(day)
        holiday = self._holidays.get(day)
        return classify_day(
            day,
            (holiday,) if holiday else (),
            rule.weekly_off_days,
            self._leaves,
            active_rule_name=rule.name,
        )

    __call__ = classify

    def classify_range(self, start: date, end: date) -> list[CalendarDay]:
        return [self.classify(d) for d in iter_dates(start, end)]

    def monthly_calendar(self, year: int, month: int) -> list[CalendarDay]:
        return [self.classify(d) for d in month_dates(year, month)]

    def working_days_count(self, start: date, end: date) -> int:
        return sum(1 for d in self.classify_range(start, end) if d.attendance_required)

    def non_working_breakdown(self, start: date, end: date) -> NonWorkingBreakdown:
        days = self.classify_range(start, end)
        return NonWorkingBreakdown(
            weekends=sum(1 for d in days if d.classification == DayClassification.WEEKEND),
            holidays=sum(1 for d in days if d.classification == DayClassification.HOLIDAY),
            leaves=sum(1 for d in days if d.classification == DayClassification.LEAVE),
        )

    def is_attendance_required(self, day: date) -> bool:
        return self.classify(day).attendance_required

    def validate_leave_application(self, start: date, end: date) -> LeaveValidation:
        """Check a requested leave range against the calendar.

        Weekends and holidays inside the range are warnings; days already on
        approved leave make the request invalid.
        """
        days = self.classify_range(start, end)
        non_working = tuple(
            d for d in days if d.classification in (DayClassification.WEEKEND, DayClassification.HOLIDAY)
        )
        overlapping = [d for d in days if d.classification == DayClassification.LEAVE]

        warnings: list[str] = []
        errors: list[str] = []
        if non_working:
            warnings.append(f"Leave request includes {len(non_working)} non-working days")
        if overlapping:
            dates = ", ".join(d.date.isoformat() for d in overlapping)
            errors.append(f"Leave request overlaps with existing approved leave on {dates}")

        return LeaveValidation(
            is_valid=not errors,
            working_days_requested=sum(1 for d in days if d.attendance_required),
            total_days_requested=len(days),
            non_working_days=non_working,
            warnings=tuple(warnings),
            errors=tuple(errors),
        )
