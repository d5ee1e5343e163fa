from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..attendance.model import ResolvedDayStatus
from ..core import constants
from ..core.data_quality import DataWarning


@dataclass(frozen=True)
class PeriodSummary:
    """Aggregate attendance statistics for a reporting window.

    ``total_worked_minutes`` is the raw sum; derived figures
    (``capped_total_hours`` and everything computed from it) use the value
    capped at 24 hours per worked day.
    """

    total_days: int = 0
    working_days: int = 0
    weekends: int = 0
    holidays: int = 0
    leaves: int = 0
    present_days: int = 0
    absent_days: int = 0
    late_days: int = 0
    half_days: int = 0
    incomplete_days: int = 0
    future_days: int = 0
    early_departures: int = 0
    total_late_minutes: int = 0
    total_early_exit_minutes: int = 0
    total_worked_minutes: int = 0
    total_break_minutes: int = 0
    overtime_hours: float = 0.0
    capped_total_hours: float = 0.0
    average_hours_per_day: float = 0.0
    work_hours_percentage: float = 0.0
    average_late_minutes: int = 0
    average_early_exit_minutes: int = 0
    data_warnings: tuple[DataWarning, ...] = ()
    days: tuple[ResolvedDayStatus, ...] = ()

    @property
    def leave_days(self) -> int:
        return self.leaves

    @property
    def total_worked_hours(self) -> float:
        return round(self.total_worked_minutes / constants.MINUTES_PER_HOUR, 2)

    def as_dict(self) -> dict[str, Any]:
        """Plain JSON-friendly mapping for report/UI consumers."""
        return {
            "totalDays": self.total_days,
            "workingDays": self.working_days,
            "weekends": self.weekends,
            "holidays": self.holidays,
            "leaves": self.leaves,
            "presentDays": self.present_days,
            "absentDays": self.absent_days,
            "lateDays": self.late_days,
            "halfDays": self.half_days,
            "incompleteDays": self.incomplete_days,
            "futureDays": self.future_days,
            "earlyDepartures": self.early_departures,
            "totalLateMinutes": self.total_late_minutes,
            "totalEarlyExitMinutes": self.total_early_exit_minutes,
            "averageLateMinutes": self.average_late_minutes,
            "averageEarlyExitMinutes": self.average_early_exit_minutes,
            "totalWorkedMinutes": self.total_worked_minutes,
            "totalWorkedHours": self.total_worked_hours,
            "totalBreakMinutes": self.total_break_minutes,
            "overtimeHours": self.overtime_hours,
            "cappedTotalHours": self.capped_total_hours,
            "averageHoursPerDay": self.average_hours_per_day,
            "workHoursPercentage": self.work_hours_percentage,
            "dataWarnings": [
                {
                    "code": w.code.value,
                    "message": w.message,
                    "date": w.date.isoformat() if w.date else None,
                }
                for w in self.data_warnings
            ],
            "days": [
                {
                    "date": d.date.isoformat(),
                    "status": d.status.value,
                    "isLate": d.is_late,
                    "lateMinutes": d.late_minutes,
                    "isEarlyDeparture": d.is_early_departure,
                    "earlyExitMinutes": d.early_exit_minutes,
                    "workedMinutes": d.worked_minutes,
                    "overtimeMinutes": d.overtime_minutes,
                }
                for d in self.days
            ],
        }
