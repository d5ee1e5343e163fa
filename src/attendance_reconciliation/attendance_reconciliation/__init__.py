"""Attendance reconciliation engine.

Feature modules (calendars, shifts, attendance, summary) hold pure domain
logic; repositories are Protocols implemented by the host application.
"""

from .attendance.matcher import AttendanceMatcher, match_record
from .attendance.resolver import StatusResolver, resolve_day_status
from .calendars.classifier import CalendarDayClassifier, classify_day
from .shifts.service import ShiftRuleResolver
from .summary.aggregator import aggregate_period
from .summary.service import PeriodReportService

__all__ = [
    "AttendanceMatcher",
    "CalendarDayClassifier",
    "PeriodReportService",
    "ShiftRuleResolver",
    "StatusResolver",
    "aggregate_period",
    "classify_day",
    "match_record",
    "resolve_day_status",
]
