from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .core import constants
from .core.enums import LateStatusMode
from .core.exceptions import ValidationError


@dataclass(frozen=True)
class EngineSettings:
    settings_module: str
    log_level: str = "INFO"
    log_json: bool = True
    default_grace_minutes: int = constants.DEFAULT_GRACE_MINUTES
    late_status_mode: LateStatusMode = LateStatusMode.FLAG
    aggregation_workers: int = 1


def load_settings(settings_module: Optional[str] = None) -> EngineSettings:
    """Read the settings module chosen by APP_ENV (after loading .env)."""
    load_dotenv(override=False)
    module_name = settings_module or get_settings_module()
    settings = importlib.import_module(module_name)

    try:
        late_mode = LateStatusMode(str(getattr(settings, "LATE_STATUS_MODE", "flag")).lower())
    except ValueError as exc:
        raise ValidationError(f"LATE_STATUS_MODE must be one of {[m.value for m in LateStatusMode]}") from exc

    return EngineSettings(
        settings_module=module_name,
        log_level=str(getattr(settings, "LOG_LEVEL", "INFO")),
        log_json=bool(getattr(settings, "LOG_JSON", True)),
        default_grace_minutes=int(getattr(settings, "DEFAULT_GRACE_MINUTES", constants.DEFAULT_GRACE_MINUTES)),
        late_status_mode=late_mode,
        aggregation_workers=max(1, int(getattr(settings, "AGGREGATION_WORKERS", 1))),
    )
