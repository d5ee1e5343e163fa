from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import DayClassification, DayStatus, HalfDayType


@dataclass(frozen=True)
class BreakSession:
    start: Optional[datetime]
    end: Optional[datetime]
    duration_minutes: int = 0


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's punches for one work date.

    Owned by the capture subsystem; the engine only reads it.
    """

    employee_id: Optional[int]
    date: date
    clock_in: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    break_sessions: tuple[BreakSession, ...] = ()
    total_worked_minutes: int = 0
    total_break_minutes: int = 0
    work_mode: Optional[str] = None

    @property
    def has_clock_in(self) -> bool:
        return self.clock_in is not None

    @property
    def has_clock_out(self) -> bool:
        return self.clock_out is not None


@dataclass(frozen=True)
class ResolvedDayStatus:
    """Read-model: the single status of a date plus the figures behind it."""

    date: date
    status: DayStatus
    classification: Optional[DayClassification] = None
    is_late: bool = False
    late_minutes: int = 0
    is_early_departure: bool = False
    early_exit_minutes: int = 0
    worked_minutes: int = 0
    break_minutes: int = 0
    overtime_minutes: int = 0
    half_day_type: Optional[HalfDayType] = None
    reason: Optional[str] = None
    source_record: Optional[AttendanceRecord] = None

    @property
    def counts_as_present(self) -> bool:
        return self.status in (DayStatus.PRESENT, DayStatus.LATE)

    @property
    def has_worked_time(self) -> bool:
        return self.status in (DayStatus.PRESENT, DayStatus.LATE, DayStatus.HALF_DAY, DayStatus.INCOMPLETE)
