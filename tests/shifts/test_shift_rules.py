from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, time

import pytest

from attendance_reconciliation.core.exceptions import ValidationError
from attendance_reconciliation.shifts.model import ShiftRule, shift_duration_minutes, shift_window
from attendance_reconciliation.shifts.service import ShiftRuleResolver, build_resolver, validate_shift_rule

DAY = ShiftRule(start_time=time(9, 0), end_time=time(17, 0), name="day")
NIGHT = ShiftRule(start_time=time(22, 0), end_time=time(6, 0), name="night")


class FakeShiftRepo:
    def __init__(self, default=None, assigned=None):
        self._default = default
        self._assigned = assigned or {}
        self.calls = []

    def get_default(self):
        return self._default

    def get_for_employee_and_date(self, *, employee_id: int, work_date: date):
        self.calls.append((employee_id, work_date))
        return self._assigned.get((employee_id, work_date))


def test_overnight_window_ends_next_day():
    window = shift_window(NIGHT, date(2026, 1, 21))

    assert NIGHT.is_overnight is True
    assert window.start == datetime(2026, 1, 21, 22, 0)
    assert window.end == datetime(2026, 1, 22, 6, 0)
    assert shift_duration_minutes(NIGHT) == 480
    assert shift_duration_minutes(DAY) == 480


def test_valid_rule_passes():
    assert validate_shift_rule(DAY) is DAY


@pytest.mark.parametrize(
    "changes",
    [
        {"full_day_hours": 0},
        {"full_day_hours": 25},
        {"half_day_hours": 9},
        {"grace_period_minutes": -1},
        {"grace_period_minutes": 121},
        {"late_threshold_minutes": 0},
        {"max_break_minutes": 30, "default_break_minutes": 60},
        {"weekly_off_days": frozenset({7})},
        {"name": "  "},
    ],
)
def test_invalid_rules_are_rejected(changes):
    with pytest.raises(ValidationError):
        validate_shift_rule(replace(DAY, **changes))


def test_resolver_prefers_assignment_then_repository_then_default():
    wed, thu, fri = date(2026, 1, 21), date(2026, 1, 22), date(2026, 1, 23)
    repo = FakeShiftRepo(assigned={(7, thu): NIGHT})
    resolver = ShiftRuleResolver(DAY, assignments={(7, wed): NIGHT}, repository=repo)

    assert resolver.resolve(7, wed) is NIGHT
    assert resolver.resolve(7, thu) is NIGHT
    assert resolver.resolve(7, fri) is DAY
    assert resolver.resolve(None, thu) is DAY
    assert repo.calls == [(7, thu), (7, fri)]


def test_provider_for_binds_employee():
    resolver = ShiftRuleResolver(DAY, assignments={(7, date(2026, 1, 21)): NIGHT})

    provider = resolver.provider_for(7)

    assert provider(date(2026, 1, 21)) is NIGHT
    assert provider(date(2026, 1, 22)) is DAY


def test_build_resolver_uses_repository_default_or_fallback():
    assert build_resolver(FakeShiftRepo(default=NIGHT)).default_rule is NIGHT
    assert build_resolver(FakeShiftRepo(), fallback=DAY).default_rule is DAY

    with pytest.raises(ValidationError):
        build_resolver(FakeShiftRepo())


def test_equal_start_and_end_is_not_overnight():
    rule = ShiftRule(start_time=time(9, 0), end_time=time(9, 0))

    assert rule.is_overnight is False
    assert shift_duration_minutes(rule) == 0


def test_zero_hour_rule_grades_against_default_hours():
    rule = ShiftRule(start_time=time(9, 0), end_time=time(17, 0), full_day_hours=0, half_day_hours=0)

    assert rule.effective_full_day_minutes == 480
    assert rule.effective_half_day_minutes == 240
