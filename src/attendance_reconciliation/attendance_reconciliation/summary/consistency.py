from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..core import constants
from ..core.data_quality import DataWarning
from ..core.enums import WarningCode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CappedHours:
    raw_hours: float
    capped_hours: float
    warning: Optional[DataWarning] = None


def count_warnings(
    *,
    working_days: int,
    present_days: int,
    absent_days: int,
    leave_days: int,
    half_days: int,
    late_days: int,
) -> list[DataWarning]:
    """Checks that aggregate counts agree with each other.

    Works on any set of counts, including ones built outside the aggregator
    from stored per-record statuses.
    """
    warnings: list[DataWarning] = []

    if late_days > present_days:
        warnings.append(
            DataWarning(
                code=WarningCode.INCONSISTENT_COUNTS,
                message="late count exceeds present count",
                detail={"late_days": late_days, "present_days": present_days},
            )
        )

    accounted = present_days + absent_days + leave_days + half_days
    if accounted > working_days:
        warnings.append(
            DataWarning(
                code=WarningCode.INCONSISTENT_COUNTS,
                message="attendance records exceed working days",
                detail={"accounted_days": accounted, "working_days": working_days},
            )
        )

    for w in warnings:
        logger.warning("period_counts_inconsistent", extra={"reason": w.message, **w.detail})
    return warnings


def cap_worked_hours(total_worked_minutes: int, present_days: int) -> CappedHours:
    """Cap the worked total at 24 hours per present day; the raw total is kept.

    With no present days there is no per-day average to protect, so the
    total passes through unchanged.
    """
    raw_hours = max(0, total_worked_minutes) / constants.MINUTES_PER_HOUR
    limit = float(constants.MAX_HOURS_PER_DAY * max(0, present_days))
    if present_days <= 0 or raw_hours <= limit:
        return CappedHours(raw_hours=raw_hours, capped_hours=raw_hours)

    logger.warning(
        "period_worked_hours_implausible",
        extra={"raw_hours": round(raw_hours, 2), "limit_hours": limit, "present_days": present_days},
    )
    return CappedHours(
        raw_hours=raw_hours,
        capped_hours=limit,
        warning=DataWarning(
            code=WarningCode.IMPLAUSIBLE_DURATION,
            message="implausible total worked hours",
            detail={"raw_hours": round(raw_hours, 2), "capped_hours": limit},
        ),
    )
