from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, time
from typing import Any, Optional

from ..calendars.model import CalendarDay
from ..core.enums import DayClassification, DayStatus, LateStatusMode
from ..core.exceptions import MalformedDateError
from ..shifts.model import ShiftRule
from .calculator.base import WorkedMinutesCalculator
from .calculator.standard_calculator import StandardWorkedMinutesCalculator
from .factory import DayStatusStrategyFactory
from .model import AttendanceRecord, ResolvedDayStatus
from .normalizer import normalize_record
from .strategies.base import DayContext

logger = logging.getLogger(__name__)

FALLBACK_SHIFT_RULE = ShiftRule(start_time=time(9, 0), end_time=time(17, 0), name="fallback")


class StatusResolver:
    """Decide the one status of a date from calendar, punches and shift rule.

    Resolution never raises on bad data: missing pieces are replaced by safe
    defaults and an unexpected failure degrades the day to ``incomplete``
    (punches exist) or ``absent`` (they do not).
    """

    def __init__(
        self,
        *,
        late_status_mode: LateStatusMode = LateStatusMode.FLAG,
        calculator: Optional[WorkedMinutesCalculator] = None,
        strategy_factory: Optional[DayStatusStrategyFactory] = None,
    ):
        self._late_status_mode = LateStatusMode(late_status_mode)
        self._calculator = calculator or StandardWorkedMinutesCalculator()
        self._factory = strategy_factory or DayStatusStrategyFactory()

    def resolve(
        self,
        day: date,
        calendar_day: Optional[CalendarDay],
        attendance_record: Any,
        shift_rule: Optional[ShiftRule],
        today: date,
    ) -> ResolvedDayStatus:
        calendar_day = self._coerce_calendar_day(day, calendar_day)
        record = self._coerce_record(day, attendance_record)
        ctx = DayContext(
            day=day,
            calendar_day=calendar_day,
            record=record,
            rule=shift_rule or FALLBACK_SHIFT_RULE,
            today=today,
            late_status_mode=self._late_status_mode,
            calculator=self._calculator,
        )

        strategy = self._factory.for_day(ctx)
        try:
            return strategy.decide(ctx)
        except (TypeError, ValueError, AttributeError, OverflowError):
            logger.exception("day_status_degraded", extra={"date": day.isoformat()})
            has_punch = record is not None and (record.has_clock_in or record.has_clock_out)
            return ResolvedDayStatus(
                date=day,
                status=DayStatus.INCOMPLETE if has_punch else DayStatus.ABSENT,
                classification=calendar_day.classification,
                reason="Attendance data could not be evaluated",
                source_record=record,
            )

    @staticmethod
    def _coerce_calendar_day(day: date, calendar_day: Optional[CalendarDay]) -> CalendarDay:
        if calendar_day is None:
            return CalendarDay(date=day, classification=DayClassification.WORKING_DAY)
        if isinstance(calendar_day.classification, DayClassification):
            return calendar_day
        try:
            return replace(calendar_day, classification=DayClassification(calendar_day.classification))
        except ValueError:
            logger.warning(
                "calendar_classification_unknown",
                extra={"date": day.isoformat(), "classification": str(calendar_day.classification)},
            )
            return CalendarDay(date=day, classification=DayClassification.WORKING_DAY)

    @staticmethod
    def _coerce_record(day: date, attendance_record: Any) -> Optional[AttendanceRecord]:
        if attendance_record is None:
            return None
        try:
            return normalize_record(attendance_record)
        except MalformedDateError:
            logger.warning("attendance_date_malformed", extra={"date": day.isoformat()})
            return None


def resolve_day_status(
    day: date,
    calendar_day: Optional[CalendarDay],
    attendance_record: Any,
    shift_rule: Optional[ShiftRule],
    today: date,
    *,
    late_status_mode: LateStatusMode = LateStatusMode.FLAG,
    calculator: Optional[WorkedMinutesCalculator] = None,
) -> ResolvedDayStatus:
    return StatusResolver(late_status_mode=late_status_mode, calculator=calculator).resolve(
        day, calendar_day, attendance_record, shift_rule, today
    )
