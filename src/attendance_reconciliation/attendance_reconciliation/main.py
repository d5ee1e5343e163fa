from __future__ import annotations

import logging
from typing import Optional

from .attendance.repository import AttendanceRepository
from .calendars.repository import HolidayRepository, LeaveRepository
from .container import Container, build_container
from .logging_utils import setup_logging
from .settings import load_settings
from .shifts.repository import ShiftRepository

logger = logging.getLogger(__name__)


def bootstrap(
    *,
    holidays_repo: HolidayRepository,
    leaves_repo: LeaveRepository,
    attendance_repo: AttendanceRepository,
    shifts_repo: ShiftRepository,
    settings_module: Optional[str] = None,
    configure_logging: bool = True,
) -> Container:
    """Load settings, set up logging and wire the engine to the host's repositories."""
    settings = load_settings(settings_module)
    if configure_logging:
        setup_logging(settings.log_level, json_format=settings.log_json)

    container = build_container(
        settings=settings,
        holidays_repo=holidays_repo,
        leaves_repo=leaves_repo,
        attendance_repo=attendance_repo,
        shifts_repo=shifts_repo,
    )
    logger.info(
        "attendance_engine_ready",
        extra={
            "settings_module": settings.settings_module,
            "late_status_mode": settings.late_status_mode.value,
            "default_rule": container.shift_rule_resolver.default_rule.name,
        },
    )
    return container
