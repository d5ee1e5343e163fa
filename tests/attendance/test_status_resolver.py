from __future__ import annotations

from datetime import date, datetime, time

from attendance_reconciliation.attendance.model import AttendanceRecord
from attendance_reconciliation.attendance.resolver import resolve_day_status
from attendance_reconciliation.calendars.classifier import classify_day
from attendance_reconciliation.calendars.model import CalendarDay, Holiday
from attendance_reconciliation.core.enums import DayClassification, DayStatus, HalfDayType, LateStatusMode
from attendance_reconciliation.shifts.model import ShiftRule

TODAY = date(2026, 10, 18)
WED = date(2026, 1, 21)

DAY_SHIFT = ShiftRule(
    start_time=time(9, 0),
    end_time=time(17, 0),
    full_day_hours=8,
    half_day_hours=4,
    grace_period_minutes=10,
    late_threshold_minutes=10,
    early_departure_threshold_minutes=15,
)


def _working(d: date = WED) -> CalendarDay:
    return CalendarDay(date=d, classification=DayClassification.WORKING_DAY)


def _record(clock_in=None, clock_out=None, *, worked=0, d: date = WED) -> AttendanceRecord:
    return AttendanceRecord(employee_id=7, date=d, clock_in=clock_in, clock_out=clock_out, total_worked_minutes=worked)


def test_holiday_without_record_is_holiday_not_absent():
    holidays = [Holiday(holiday_date=date(2026, 1, 26), name="Republic Day")]
    cal = classify_day(date(2026, 1, 26), holidays, {0, 6}, [])

    result = resolve_day_status(date(2026, 1, 26), cal, None, DAY_SHIFT, TODAY)

    assert result.status == DayStatus.HOLIDAY
    assert result.reason == "Republic Day"


def test_holiday_punches_do_not_override_status():
    cal = CalendarDay(date=WED, classification=DayClassification.HOLIDAY, holiday_name="Founders Day")
    rec = _record(datetime(2026, 1, 21, 9, 0), datetime(2026, 1, 21, 17, 0), worked=480)

    result = resolve_day_status(WED, cal, rec, DAY_SHIFT, TODAY)

    assert result.status == DayStatus.HOLIDAY
    assert result.source_record is rec


def test_weekend_and_leave_statuses():
    weekend = CalendarDay(date=WED, classification=DayClassification.WEEKEND)
    leave = CalendarDay(date=WED, classification=DayClassification.LEAVE)

    assert resolve_day_status(WED, weekend, None, DAY_SHIFT, TODAY).status == DayStatus.WEEKEND
    assert resolve_day_status(WED, leave, None, DAY_SHIFT, TODAY).status == DayStatus.LEAVE


def test_late_arrival_counts_minutes_after_grace():
    rec = _record(datetime(2026, 1, 21, 9, 25), datetime(2026, 1, 21, 17, 30))

    result = resolve_day_status(WED, _working(), rec, DAY_SHIFT, TODAY)

    assert result.is_late is True
    assert result.late_minutes == 15
    assert result.status == DayStatus.PRESENT


def test_late_within_threshold_is_not_flagged():
    rule = ShiftRule(start_time=time(9, 0), end_time=time(17, 0), grace_period_minutes=10, late_threshold_minutes=15)
    rec = _record(datetime(2026, 1, 21, 9, 20), datetime(2026, 1, 21, 18, 0))

    result = resolve_day_status(WED, _working(), rec, rule, TODAY)

    assert result.late_minutes == 10
    assert result.is_late is False


def test_late_bucket_mode_reports_late_status():
    rec = _record(datetime(2026, 1, 21, 9, 40), datetime(2026, 1, 21, 18, 0))

    result = resolve_day_status(WED, _working(), rec, DAY_SHIFT, TODAY, late_status_mode=LateStatusMode.BUCKET)

    assert result.status == DayStatus.LATE
    assert result.is_late is True


def test_no_record_on_past_working_day_is_absent():
    assert resolve_day_status(WED, _working(), None, DAY_SHIFT, TODAY).status == DayStatus.ABSENT


def test_tomorrow_is_future():
    tomorrow = date(2026, 10, 19)

    result = resolve_day_status(tomorrow, _working(tomorrow), None, DAY_SHIFT, TODAY)

    assert result.status == DayStatus.FUTURE


def test_clock_in_without_clock_out_is_incomplete():
    rec = _record(datetime(2026, 1, 21, 9, 0))

    result = resolve_day_status(WED, _working(), rec, DAY_SHIFT, TODAY)

    assert result.status == DayStatus.INCOMPLETE
    assert result.reason == "Missing clock-out"


def test_exact_full_day_threshold_is_present():
    rec = _record(datetime(2026, 1, 21, 9, 0), datetime(2026, 1, 21, 17, 0), worked=480)

    result = resolve_day_status(WED, _working(), rec, DAY_SHIFT, TODAY)

    assert result.status == DayStatus.PRESENT
    assert result.half_day_type == HalfDayType.FULL_DAY


def test_one_minute_below_full_day_is_half_day():
    rec = _record(datetime(2026, 1, 21, 9, 0), datetime(2026, 1, 21, 16, 59), worked=479)

    result = resolve_day_status(WED, _working(), rec, DAY_SHIFT, TODAY)

    assert result.status == DayStatus.HALF_DAY
    assert result.half_day_type == HalfDayType.FIRST_HALF


def test_one_minute_below_full_day_is_incomplete_when_half_day_equals_full_day():
    rule = ShiftRule(start_time=time(9, 0), end_time=time(17, 0), full_day_hours=8, half_day_hours=8)
    rec = _record(datetime(2026, 1, 21, 9, 0), datetime(2026, 1, 21, 16, 59), worked=479)

    assert resolve_day_status(WED, _working(), rec, rule, TODAY).status == DayStatus.INCOMPLETE


def test_afternoon_half_day_is_second_half():
    rec = _record(datetime(2026, 1, 21, 13, 0), datetime(2026, 1, 21, 17, 0), worked=240)

    result = resolve_day_status(WED, _working(), rec, DAY_SHIFT, TODAY)

    assert result.status == DayStatus.HALF_DAY
    assert result.half_day_type == HalfDayType.SECOND_HALF
    assert result.is_late is True


def test_early_departure_beyond_threshold():
    rec = _record(datetime(2026, 1, 21, 8, 0), datetime(2026, 1, 21, 16, 30), worked=480)

    result = resolve_day_status(WED, _working(), rec, DAY_SHIFT, TODAY)

    assert result.early_exit_minutes == 30
    assert result.is_early_departure is True
    assert result.status == DayStatus.PRESENT


def test_overnight_shift_overtime_after_shift_end():
    night = ShiftRule(
        start_time=time(22, 0),
        end_time=time(6, 0),
        overtime_enabled=True,
        overtime_threshold_minutes=0,
    )
    rec = _record(datetime(2026, 1, 21, 22, 0), datetime(2026, 1, 22, 6, 10))

    result = resolve_day_status(WED, _working(), rec, night, TODAY)

    assert result.worked_minutes == 490
    assert result.overtime_minutes == 10
    assert result.late_minutes == 0
    assert result.early_exit_minutes == 0
    assert result.status == DayStatus.PRESENT


def test_overtime_disabled_reports_zero():
    rec = _record(datetime(2026, 1, 21, 9, 0), datetime(2026, 1, 21, 20, 0))

    assert resolve_day_status(WED, _working(), rec, DAY_SHIFT, TODAY).overtime_minutes == 0


def test_raw_record_with_malformed_date_degrades_to_absent():
    raw = {"date": "not-a-date", "clockIn": "2026-01-21T09:00:00"}

    result = resolve_day_status(WED, _working(), raw, DAY_SHIFT, TODAY)

    assert result.status == DayStatus.ABSENT


def test_missing_inputs_never_raise():
    result = resolve_day_status(WED, None, {"date": "2026-01-21", "clockIn": "garbage"}, None, TODAY)

    assert result.status == DayStatus.ABSENT
    assert result.classification == DayClassification.WORKING_DAY


def test_string_classification_is_accepted():
    cal = CalendarDay(date=WED, classification="HOLIDAY")

    assert resolve_day_status(WED, cal, None, DAY_SHIFT, TODAY).status == DayStatus.HOLIDAY


def test_status_always_from_closed_enum():
    cases = [
        (None, _working()),
        (_record(datetime(2026, 1, 21, 9, 0)), _working()),
        (_record(datetime(2026, 1, 21, 9, 0), datetime(2026, 1, 21, 10, 0), worked=60), _working()),
        (None, CalendarDay(date=WED, classification=DayClassification.LEAVE)),
    ]
    for rec, cal in cases:
        assert resolve_day_status(WED, cal, rec, DAY_SHIFT, TODAY).status in set(DayStatus)
