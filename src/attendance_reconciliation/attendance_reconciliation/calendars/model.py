from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import DayClassification


@dataclass(frozen=True)
class Holiday:
    holiday_date: date
    name: str


@dataclass(frozen=True)
class LeaveInterval:
    """Leave request of one employee; only approved intervals affect the calendar."""

    start_date: date
    end_date: date
    leave_type: str = "casual"
    approved: bool = True
    employee_id: Optional[int] = None

    def covers(self, d: date) -> bool:
        return self.approved and self.start_date <= d <= self.end_date


@dataclass(frozen=True)
class CalendarDay:
    """Contextual classification of a date, computed without looking at punches."""

    date: date
    classification: DayClassification
    holiday_name: Optional[str] = None
    active_rule_name: str = "default"
    reason: str = "Regular working day"

    @property
    def attendance_required(self) -> bool:
        return self.classification == DayClassification.WORKING_DAY


@dataclass(frozen=True)
class NonWorkingBreakdown:
    weekends: int = 0
    holidays: int = 0
    leaves: int = 0

    @property
    def total(self) -> int:
        return self.weekends + self.holidays + self.leaves


@dataclass(frozen=True)
class LeaveValidation:
    is_valid: bool
    working_days_requested: int
    total_days_requested: int
    non_working_days: tuple[CalendarDay, ...] = ()
    warnings: tuple[str, ...] = ()
    errors: tuple[str, ...] = ()
