"""Work-time arithmetic shared by the resolver and the calculators.

Every function here is total: bad or missing input yields zeros rather than
an exception, so one broken record can never fail a whole period.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Optional

from ..common.datetime_utils import minutes_between
from ..core.enums import AttendanceState
from ..shifts.model import ShiftRule, shift_duration_minutes, shift_window
from .model import BreakSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkTime:
    work_minutes: int
    break_minutes: int


@dataclass(frozen=True)
class LateResult:
    is_late: bool
    late_minutes: int


@dataclass(frozen=True)
class EarlyExitResult:
    is_early_departure: bool
    early_exit_minutes: int


def normalize_break_sessions(value: Any) -> list:
    """Break sessions arrive as a list, a JSON string or nothing at all."""
    if not value:
        return []
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            logger.debug("break_sessions_unparseable", extra={"raw": value[:200]})
            return []
    if not isinstance(value, (list, tuple)):
        return []
    return list(value)


def break_duration_minutes(session: BreakSession) -> int:
    if session.start is not None and session.end is not None:
        return max(0, minutes_between(session.start, session.end))
    return max(0, int(session.duration_minutes or 0))


def calculate_work_minutes(
    clock_in: Optional[datetime],
    clock_out: Optional[datetime],
    break_sessions: Iterable[BreakSession] = (),
) -> WorkTime:
    """Net minutes between the punches after breaks, never negative."""
    if clock_in is None or clock_out is None:
        return WorkTime(work_minutes=0, break_minutes=0)

    total = minutes_between(clock_in, clock_out)
    breaks = sum(break_duration_minutes(s) for s in break_sessions)
    return WorkTime(work_minutes=max(0, total - breaks), break_minutes=breaks)


def calculate_late(clock_in: Optional[datetime], rule: ShiftRule, work_date) -> LateResult:
    """Minutes past shift start plus grace; late only beyond the late threshold."""
    if clock_in is None:
        return LateResult(is_late=False, late_minutes=0)

    window = shift_window(rule, work_date)
    grace = max(0, int(rule.grace_period_minutes or 0))
    late_minutes = max(0, minutes_between(window.start, clock_in) - grace)
    threshold = max(0, int(rule.late_threshold_minutes or 0))
    return LateResult(is_late=late_minutes > threshold, late_minutes=late_minutes)


def calculate_early_exit(clock_out: Optional[datetime], rule: ShiftRule, work_date) -> EarlyExitResult:
    if clock_out is None:
        return EarlyExitResult(is_early_departure=False, early_exit_minutes=0)

    window = shift_window(rule, work_date)
    early = max(0, minutes_between(clock_out, window.end))
    threshold = max(0, int(rule.early_departure_threshold_minutes or 0))
    return EarlyExitResult(is_early_departure=early > threshold, early_exit_minutes=early)


def calculate_overtime(worked_minutes: int, rule: ShiftRule) -> int:
    if not rule.overtime_enabled:
        return 0
    threshold = max(0, int(rule.overtime_threshold_minutes or 0))
    return max(0, int(worked_minutes or 0) - (shift_duration_minutes(rule) + threshold))


def determine_current_state(has_clock_in: bool, has_clock_out: bool, has_active_break: bool) -> AttendanceState:
    if not has_clock_in:
        return AttendanceState.NOT_CLOCKED_IN
    if has_clock_out:
        return AttendanceState.CLOCKED_OUT
    if has_active_break:
        return AttendanceState.ON_BREAK
    return AttendanceState.WORKING
