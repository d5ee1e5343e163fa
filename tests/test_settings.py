from __future__ import annotations

import json
import logging
import sys
import types
from datetime import date

import pytest

from attendance_reconciliation.core.data_quality import DataWarning
from attendance_reconciliation.core.enums import LateStatusMode, WarningCode
from attendance_reconciliation.core.exceptions import ValidationError
from attendance_reconciliation.logging_utils import JsonFormatter
from attendance_reconciliation.settings import load_settings
from config import get_settings_module


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("test", "config.testing"),
        ("development", "config.development"),
        ("anything", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_load_testing_settings():
    settings = load_settings("config.testing")

    assert settings.settings_module == "config.testing"
    assert settings.log_level == "WARNING"
    assert settings.log_json is False
    assert settings.late_status_mode == LateStatusMode.FLAG
    assert settings.aggregation_workers == 1


def test_unknown_late_status_mode_is_rejected(monkeypatch):
    module = types.ModuleType("bad_settings")
    module.LATE_STATUS_MODE = "sometimes"
    monkeypatch.setitem(sys.modules, "bad_settings", module)

    with pytest.raises(ValidationError):
        load_settings("bad_settings")


def test_worker_count_is_at_least_one(monkeypatch):
    module = types.ModuleType("zero_workers")
    module.AGGREGATION_WORKERS = 0
    module.LATE_STATUS_MODE = "BUCKET"
    monkeypatch.setitem(sys.modules, "zero_workers", module)

    settings = load_settings("zero_workers")

    assert settings.aggregation_workers == 1
    assert settings.late_status_mode == LateStatusMode.BUCKET


def test_json_formatter_puts_extras_under_context():
    record = logging.LogRecord("engine", logging.INFO, __file__, 1, "period_aggregated", None, None)
    record.working_days = 14

    payload = json.loads(JsonFormatter().format(record))

    assert payload["event"] == "period_aggregated"
    assert payload["level"] == "INFO"
    assert payload["context"] == {"working_days": 14}


def test_json_formatter_serializes_dates_enums_and_warnings():
    warning = DataWarning(code=WarningCode.AMBIGUOUS_MATCH, message="dup", date=date(2026, 1, 21))
    record = logging.LogRecord("engine", logging.WARNING, __file__, 1, "attendance_duplicate_date", None, None)
    record.date = date(2026, 1, 21)
    record.mode = LateStatusMode.BUCKET
    record.warning = warning

    context = json.loads(JsonFormatter().format(record))["context"]

    assert context["date"] == "2026-01-21"
    assert context["mode"] == "bucket"
    assert context["warning"] == {"code": "AMBIGUOUS_MATCH", "message": "dup", "date": "2026-01-21", "detail": {}}
