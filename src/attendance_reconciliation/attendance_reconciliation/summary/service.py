from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Optional

from ..attendance.calculator.base import WorkedMinutesCalculator
from ..attendance.matcher import AttendanceMatcher
from ..attendance.repository import AttendanceRepository
from ..calendars.classifier import CalendarDayClassifier
from ..calendars.repository import HolidayRepository, LeaveRepository
from ..common.datetime_utils import iter_dates, month_bounds, today_local
from ..core.enums import LateStatusMode
from ..core.exceptions import ValidationError
from ..shifts.service import ShiftRuleResolver
from .aggregator import aggregate_period
from .model import PeriodSummary

logger = logging.getLogger(__name__)


class PeriodReportService:
    """Load one employee's period inputs and aggregate them.

    Calendar data and attendance come from independent sources, so they are
    fetched concurrently and joined before aggregation starts.
    """

    def __init__(
        self,
        holidays: HolidayRepository,
        leaves: LeaveRepository,
        attendance: AttendanceRepository,
        shift_rules: ShiftRuleResolver,
        *,
        late_status_mode: LateStatusMode = LateStatusMode.FLAG,
        calculator: Optional[WorkedMinutesCalculator] = None,
        aggregation_workers: int = 1,
    ):
        self._holidays = holidays
        self._leaves = leaves
        self._attendance = attendance
        self._shift_rules = shift_rules
        self._late_status_mode = LateStatusMode(late_status_mode)
        self._calculator = calculator
        self._aggregation_workers = int(aggregation_workers)

    def build_summary(
        self,
        *,
        employee_id: int,
        start: date,
        end: date,
        today: Optional[date] = None,
    ) -> PeriodSummary:
        if end < start:
            raise ValidationError("end date must not be before start date")
        today = today or today_local()

        with ThreadPoolExecutor(max_workers=3) as pool:
            holidays_f = pool.submit(self._holidays.list_range, start=start, end=end)
            leaves_f = pool.submit(self._leaves.list_for_employee, employee_id=employee_id, start=start, end=end)
            records_f = pool.submit(
                self._attendance.list_for_employee, employee_id=employee_id, start_date=start, end_date=end
            )
            holidays = holidays_f.result()
            leaves = leaves_f.result()
            records = records_f.result()

        rule_for = self._shift_rules.provider_for(employee_id)
        classifier = CalendarDayClassifier(holidays, leaves, rule_for)
        matcher = AttendanceMatcher(records)

        logger.info(
            "period_inputs_loaded",
            extra={
                "employee_id": employee_id,
                "start": start.isoformat(),
                "end": end.isoformat(),
                "holidays": len(holidays),
                "leaves": len(leaves),
                "records": len(matcher),
            },
        )

        return aggregate_period(
            iter_dates(start, end),
            classifier,
            matcher,
            rule_for,
            today,
            late_status_mode=self._late_status_mode,
            calculator=self._calculator,
            max_workers=self._aggregation_workers,
        )

    def monthly_summary(self, *, employee_id: int, year: int, month: int, today: Optional[date] = None) -> PeriodSummary:
        start, end = month_bounds(year, month)
        return self.build_summary(employee_id=employee_id, start=start, end=end, today=today)
