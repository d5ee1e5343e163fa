from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional

from ..core import constants


@dataclass(frozen=True)
class ShiftRule:
    """Domain entity: timing rules of one shift.

    ``end_time < start_time`` means the shift ends on the next calendar day.
    """

    start_time: time
    end_time: time
    full_day_hours: float = constants.DEFAULT_FULL_DAY_HOURS
    half_day_hours: float = constants.DEFAULT_HALF_DAY_HOURS
    grace_period_minutes: int = constants.DEFAULT_GRACE_MINUTES
    late_threshold_minutes: int = constants.DEFAULT_LATE_THRESHOLD_MINUTES
    early_departure_threshold_minutes: int = constants.DEFAULT_EARLY_DEPARTURE_THRESHOLD_MINUTES
    overtime_enabled: bool = False
    overtime_threshold_minutes: int = constants.DEFAULT_OVERTIME_THRESHOLD_MINUTES
    weekly_off_days: frozenset[int] = constants.DEFAULT_WEEKLY_OFF_DAYS
    default_break_minutes: int = constants.DEFAULT_BREAK_MINUTES
    max_break_minutes: int = constants.DEFAULT_MAX_BREAK_MINUTES
    name: str = "default"
    shift_id: Optional[int] = None

    @property
    def is_overnight(self) -> bool:
        return self.end_time < self.start_time

    @property
    def full_day_minutes(self) -> int:
        return int(round(max(0.0, self.full_day_hours or 0.0) * 60))

    @property
    def half_day_minutes(self) -> int:
        return int(round(max(0.0, self.half_day_hours or 0.0) * 60))

    @property
    def effective_full_day_minutes(self) -> int:
        """Full-day minutes used for grading; 8h when the rule leaves it at 0."""
        return self.full_day_minutes or int(constants.DEFAULT_FULL_DAY_HOURS * 60)

    @property
    def effective_half_day_minutes(self) -> int:
        half_day = self.half_day_minutes or int(constants.DEFAULT_HALF_DAY_HOURS * 60)
        return min(half_day, self.effective_full_day_minutes)


@dataclass(frozen=True)
class ShiftWindow:
    """Concrete start/end instants of a shift on one work date."""

    start: datetime
    end: datetime

    @property
    def duration_minutes(self) -> int:
        return int((self.end - self.start).total_seconds() // 60)


def shift_window(rule: ShiftRule, work_date: date) -> ShiftWindow:
    start = datetime.combine(work_date, rule.start_time)
    end = datetime.combine(work_date, rule.end_time)
    if rule.is_overnight:
        end += timedelta(days=1)
    return ShiftWindow(start=start, end=end)


def shift_duration_minutes(rule: ShiftRule) -> int:
    """Scheduled length of the shift, wrapping past midnight when needed."""
    return shift_window(rule, date(2000, 1, 3)).duration_minutes
