from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ...calendars.model import CalendarDay
from ...core.enums import LateStatusMode
from ...shifts.model import ShiftRule
from ..calculator.base import WorkedMinutesCalculator
from ..model import AttendanceRecord, ResolvedDayStatus


@dataclass(frozen=True)
class DayContext:
    """Everything known about one date when its status is decided."""

    day: date
    calendar_day: CalendarDay
    record: Optional[AttendanceRecord]
    rule: ShiftRule
    today: date
    late_status_mode: LateStatusMode
    calculator: WorkedMinutesCalculator


class DayStatusStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide the status of a day."""

    @abstractmethod
    def decide(self, ctx: DayContext) -> ResolvedDayStatus:
        raise NotImplementedError
