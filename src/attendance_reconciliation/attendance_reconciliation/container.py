from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from .attendance.calculator.standard_calculator import StandardWorkedMinutesCalculator
from .attendance.repository import AttendanceRepository
from .attendance.resolver import StatusResolver
from .calendars.repository import HolidayRepository, LeaveRepository
from .settings import EngineSettings
from .shifts.model import ShiftRule
from .shifts.repository import ShiftRepository
from .shifts.service import ShiftRuleResolver, build_resolver, validate_shift_rule
from .summary.service import PeriodReportService


@dataclass(frozen=True)
class Container:
    settings: EngineSettings

    holidays_repo: HolidayRepository
    leaves_repo: LeaveRepository
    attendance_repo: AttendanceRepository
    shifts_repo: ShiftRepository

    shift_rule_resolver: ShiftRuleResolver
    status_resolver: StatusResolver
    period_report_service: PeriodReportService


def build_container(
    *,
    settings: EngineSettings,
    holidays_repo: HolidayRepository,
    leaves_repo: LeaveRepository,
    attendance_repo: AttendanceRepository,
    shifts_repo: ShiftRepository,
) -> Container:
    fallback = ShiftRule(
        start_time=time(9, 0),
        end_time=time(17, 0),
        grace_period_minutes=settings.default_grace_minutes,
        name="standard",
    )
    shift_rule_resolver = build_resolver(shifts_repo, fallback=fallback)
    validate_shift_rule(shift_rule_resolver.default_rule)

    calculator = StandardWorkedMinutesCalculator()
    status_resolver = StatusResolver(late_status_mode=settings.late_status_mode, calculator=calculator)
    period_report_service = PeriodReportService(
        holidays_repo,
        leaves_repo,
        attendance_repo,
        shift_rule_resolver,
        late_status_mode=settings.late_status_mode,
        calculator=calculator,
        aggregation_workers=settings.aggregation_workers,
    )

    return Container(
        settings=settings,
        holidays_repo=holidays_repo,
        leaves_repo=leaves_repo,
        attendance_repo=attendance_repo,
        shifts_repo=shifts_repo,
        shift_rule_resolver=shift_rule_resolver,
        status_resolver=status_resolver,
        period_report_service=period_report_service,
    )
