from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Iterable, Optional

from ..attendance.calculator.base import WorkedMinutesCalculator
from ..attendance.matcher import AttendanceMatcher
from ..attendance.model import ResolvedDayStatus
from ..attendance.resolver import FALLBACK_SHIFT_RULE, StatusResolver
from ..calendars.model import CalendarDay
from ..core import constants
from ..core.data_quality import DataWarning
from ..core.enums import DayClassification, DayStatus, LateStatusMode
from ..shifts.model import ShiftRule
from .consistency import cap_worked_hours, count_warnings
from .model import PeriodSummary

logger = logging.getLogger(__name__)

CalendarDayProvider = Callable[[date], Optional[CalendarDay]]
AttendanceProvider = Callable[[date], Any]
ShiftRuleProvider = Callable[[date], Optional[ShiftRule]]


@dataclass
class _Tally:
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
    overtime_minutes: int = 0
    expected_minutes: int = 0

    def add(self, day: ResolvedDayStatus, rule: ShiftRule) -> None:
        if day.status == DayStatus.FUTURE:
            self.future_days += 1
            return

        self.total_days += 1
        if day.classification == DayClassification.WORKING_DAY:
            self.working_days += 1
            self.expected_minutes += rule.effective_full_day_minutes

        if day.status == DayStatus.WEEKEND:
            self.weekends += 1
        elif day.status == DayStatus.HOLIDAY:
            self.holidays += 1
        elif day.status == DayStatus.LEAVE:
            self.leaves += 1
        elif day.status == DayStatus.ABSENT:
            self.absent_days += 1
        elif day.status in (DayStatus.PRESENT, DayStatus.LATE):
            self.present_days += 1
        elif day.status == DayStatus.HALF_DAY:
            self.half_days += 1
        elif day.status == DayStatus.INCOMPLETE:
            self.incomplete_days += 1

        # Late is a modifier of present days; late half days stay half days.
        if day.is_late and day.counts_as_present:
            self.late_days += 1
            self.total_late_minutes += day.late_minutes
        if day.is_early_departure:
            self.early_departures += 1
            self.total_early_exit_minutes += day.early_exit_minutes

        if day.has_worked_time:
            self.total_worked_minutes += day.worked_minutes
            self.total_break_minutes += day.break_minutes
            self.overtime_minutes += day.overtime_minutes


def _attendance_lookup(attendance_provider: Any) -> tuple[AttendanceProvider, tuple[DataWarning, ...]]:
    """Accept a callable provider or a plain collection of records."""
    if callable(attendance_provider):
        return attendance_provider, tuple(getattr(attendance_provider, "warnings", ()))
    matcher = AttendanceMatcher(attendance_provider or ())
    return matcher.find, matcher.warnings


def aggregate_period(
    dates: Iterable[date],
    calendar_day_provider: CalendarDayProvider,
    attendance_provider: Any,
    shift_rule_provider: ShiftRuleProvider,
    today: date,
    *,
    late_status_mode: LateStatusMode = LateStatusMode.FLAG,
    calculator: Optional[WorkedMinutesCalculator] = None,
    max_workers: Optional[int] = None,
) -> PeriodSummary:
    """Resolve every date of a period once and roll the results up.

    Data problems never raise: they are returned in ``data_warnings``.
    ``max_workers`` > 1 resolves days on a thread pool; results are the same.
    """
    ordered = list(dict.fromkeys(dates))
    find_record, matcher_warnings = _attendance_lookup(attendance_provider)
    resolver = StatusResolver(late_status_mode=late_status_mode, calculator=calculator)

    def _resolve(day: date) -> tuple[ResolvedDayStatus, ShiftRule]:
        rule = shift_rule_provider(day) or FALLBACK_SHIFT_RULE
        status = resolver.resolve(day, calendar_day_provider(day), find_record(day), rule, today)
        return status, rule

    if max_workers and max_workers > 1 and len(ordered) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            resolved = list(pool.map(_resolve, ordered))
    else:
        resolved = [_resolve(d) for d in ordered]

    tally = _Tally()
    for status, rule in resolved:
        tally.add(status, rule)

    warnings: list[DataWarning] = list(matcher_warnings)
    warnings.extend(
        count_warnings(
            working_days=tally.working_days,
            present_days=tally.present_days,
            absent_days=tally.absent_days,
            leave_days=tally.leaves,
            half_days=tally.half_days,
            late_days=tally.late_days,
        )
    )
    capped = cap_worked_hours(tally.total_worked_minutes, tally.present_days)
    if capped.warning:
        warnings.append(capped.warning)

    expected_hours = tally.expected_minutes / constants.MINUTES_PER_HOUR
    summary = PeriodSummary(
        total_days=tally.total_days,
        working_days=tally.working_days,
        weekends=tally.weekends,
        holidays=tally.holidays,
        leaves=tally.leaves,
        present_days=tally.present_days,
        absent_days=tally.absent_days,
        late_days=tally.late_days,
        half_days=tally.half_days,
        incomplete_days=tally.incomplete_days,
        future_days=tally.future_days,
        early_departures=tally.early_departures,
        total_late_minutes=tally.total_late_minutes,
        total_early_exit_minutes=tally.total_early_exit_minutes,
        total_worked_minutes=tally.total_worked_minutes,
        total_break_minutes=tally.total_break_minutes,
        overtime_hours=round(tally.overtime_minutes / constants.MINUTES_PER_HOUR, 2),
        capped_total_hours=round(capped.capped_hours, 2),
        average_hours_per_day=round(capped.capped_hours / tally.present_days, 2) if tally.present_days else 0.0,
        work_hours_percentage=round(capped.capped_hours / expected_hours * 100, 2) if expected_hours else 0.0,
        average_late_minutes=round(tally.total_late_minutes / tally.late_days) if tally.late_days else 0,
        average_early_exit_minutes=(
            round(tally.total_early_exit_minutes / tally.early_departures) if tally.early_departures else 0
        ),
        data_warnings=tuple(warnings),
        days=tuple(status for status, _ in resolved),
    )

    logger.info(
        "period_aggregated",
        extra={
            "days": len(ordered),
            "working_days": summary.working_days,
            "present_days": summary.present_days,
            "warnings": len(summary.data_warnings),
        },
    )
    return summary
