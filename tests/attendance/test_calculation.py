from datetime import date, datetime, time

from attendance_reconciliation.attendance.calculation import (
    break_duration_minutes,
    calculate_early_exit,
    calculate_late,
    calculate_overtime,
    calculate_work_minutes,
    determine_current_state,
    normalize_break_sessions,
)
from attendance_reconciliation.attendance.calculator.standard_calculator import (
    StandardWorkedMinutesCalculator,
    StoredTotalsCalculator,
)
from attendance_reconciliation.attendance.model import AttendanceRecord, BreakSession
from attendance_reconciliation.core.enums import AttendanceState
from attendance_reconciliation.shifts.model import ShiftRule


def test_work_minutes_subtract_breaks():
    breaks = [BreakSession(start=datetime(2026, 1, 21, 12, 0), end=datetime(2026, 1, 21, 12, 30))]

    result = calculate_work_minutes(datetime(2026, 1, 21, 9, 0), datetime(2026, 1, 21, 17, 30), breaks)

    assert result.work_minutes == 480
    assert result.break_minutes == 30


def test_work_minutes_zero_without_both_punches():
    assert calculate_work_minutes(datetime(2026, 1, 21, 9, 0), None).work_minutes == 0


def test_work_minutes_never_negative():
    breaks = [BreakSession(start=None, end=None, duration_minutes=600)]

    assert calculate_work_minutes(datetime(2026, 1, 21, 9, 0), datetime(2026, 1, 21, 10, 0), breaks).work_minutes == 0


def test_break_duration_prefers_timestamps():
    session = BreakSession(start=datetime(2026, 1, 21, 12, 0), end=datetime(2026, 1, 21, 12, 45), duration_minutes=5)

    assert break_duration_minutes(session) == 45


def test_normalize_break_sessions_inputs():
    assert normalize_break_sessions(None) == []
    assert normalize_break_sessions("not json") == []
    assert normalize_break_sessions('{"a": 1}') == []
    assert normalize_break_sessions('[{"breakIn": "x"}]') == [{"breakIn": "x"}]


def test_late_and_early_exit_against_overnight_shift():
    night = ShiftRule(start_time=time(22, 0), end_time=time(6, 0), grace_period_minutes=5, late_threshold_minutes=10)
    work_date = date(2026, 1, 21)

    late = calculate_late(datetime(2026, 1, 21, 22, 20), night, work_date)
    early = calculate_early_exit(datetime(2026, 1, 22, 5, 0), night, work_date)

    assert late.late_minutes == 15
    assert late.is_late is True
    assert early.early_exit_minutes == 60


def test_overtime_threshold_applies():
    rule = ShiftRule(start_time=time(9, 0), end_time=time(17, 0), overtime_enabled=True, overtime_threshold_minutes=30)

    assert calculate_overtime(500, rule) == 0
    assert calculate_overtime(540, rule) == 30


def test_current_state():
    assert determine_current_state(False, False, False) == AttendanceState.NOT_CLOCKED_IN
    assert determine_current_state(True, False, True) == AttendanceState.ON_BREAK
    assert determine_current_state(True, False, False) == AttendanceState.WORKING
    assert determine_current_state(True, True, False) == AttendanceState.CLOCKED_OUT


def test_standard_calculator_falls_back_to_punches():
    rec = AttendanceRecord(
        employee_id=1,
        date=date(2026, 1, 21),
        clock_in=datetime(2026, 1, 21, 8, 0),
        clock_out=datetime(2026, 1, 21, 17, 0),
        break_sessions=(BreakSession(start=None, end=None, duration_minutes=60),),
    )

    assert StandardWorkedMinutesCalculator().worked_minutes(rec) == 8 * 60
    assert StandardWorkedMinutesCalculator().break_minutes(rec) == 60
    assert StoredTotalsCalculator().worked_minutes(rec) == 0
