from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional

from .enums import WarningCode


@dataclass(frozen=True)
class DataWarning:
    """A data-quality problem the engine absorbed instead of raising."""

    code: WarningCode
    message: str
    date: Optional[date] = None
    detail: Mapping[str, Any] = field(default_factory=dict)
