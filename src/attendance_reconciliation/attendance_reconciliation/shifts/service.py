from __future__ import annotations

import logging
from datetime import date
from typing import Mapping, Optional

from ..common.validators import require_non_empty, require_range, require_weekday_indices
from ..core import constants
from ..core.exceptions import ValidationError
from .model import ShiftRule
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


def validate_shift_rule(rule: ShiftRule) -> ShiftRule:
    """Reject invalid shift configuration.

    Meant for the rule-management layer at load time; resolution itself never
    calls this and tolerates whatever it is given.
    """
    require_non_empty(rule.name, "name")
    require_range(rule.full_day_hours, "full_day_hours", low=0, high=constants.MAX_HOURS_PER_DAY, low_inclusive=False)
    require_range(rule.half_day_hours, "half_day_hours", low=0, high=rule.full_day_hours, low_inclusive=False)
    require_range(rule.grace_period_minutes, "grace_period_minutes", low=0, high=constants.MAX_GRACE_MINUTES)
    require_range(
        rule.late_threshold_minutes,
        "late_threshold_minutes",
        low=0,
        high=constants.MAX_LATE_THRESHOLD_MINUTES,
        low_inclusive=False,
    )
    if rule.early_departure_threshold_minutes < 0:
        raise ValidationError("early_departure_threshold_minutes must not be negative")
    if rule.overtime_threshold_minutes < 0:
        raise ValidationError("overtime_threshold_minutes must not be negative")
    if rule.default_break_minutes < 0:
        raise ValidationError("default_break_minutes must not be negative")
    if rule.max_break_minutes < rule.default_break_minutes:
        raise ValidationError("max_break_minutes cannot be less than default_break_minutes")
    require_weekday_indices(rule.weekly_off_days, "weekly_off_days")
    return rule


class ShiftRuleResolver:
    """Pick the shift rule that applies to an employee on a date.

    Lookup order: explicit assignment map, repository assignment, default rule.
    """

    def __init__(
        self,
        default_rule: ShiftRule,
        *,
        assignments: Optional[Mapping[tuple[int, date], ShiftRule]] = None,
        repository: Optional[ShiftRepository] = None,
    ):
        self._default = default_rule
        self._assignments = dict(assignments or {})
        self._repository = repository

    @property
    def default_rule(self) -> ShiftRule:
        return self._default

    def resolve(self, employee_id: Optional[int], work_date: date) -> ShiftRule:
        if employee_id is not None:
            assigned = self._assignments.get((employee_id, work_date))
            if assigned:
                return assigned

            if self._repository:
                stored = self._repository.get_for_employee_and_date(employee_id=employee_id, work_date=work_date)
                if stored:
                    return stored

        return self._default

    def provider_for(self, employee_id: Optional[int]):
        """Date -> ShiftRule callable for one employee, as the aggregator expects."""

        def _provider(work_date: date) -> ShiftRule:
            return self.resolve(employee_id, work_date)

        return _provider


def build_resolver(repository: ShiftRepository, *, fallback: Optional[ShiftRule] = None) -> ShiftRuleResolver:
    default = repository.get_default() or fallback
    if default is None:
        raise ValidationError("No default shift rule configured")
    logger.info("shift_rule_resolver_ready", extra={"default_rule": default.name})
    return ShiftRuleResolver(default, repository=repository)
