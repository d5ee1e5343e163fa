import os


class Config:
    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_JSON = bool(int(os.environ.get("LOG_JSON", "1")))

    # Attendance rules
    DEFAULT_GRACE_MINUTES = int(os.environ.get("DEFAULT_GRACE_MINUTES", "10"))
    # "flag": late present days stay present; "bucket": reported as "late"
    LATE_STATUS_MODE = os.environ.get("LATE_STATUS_MODE", "flag")

    # Thread pool size for per-day resolution (1 = sequential)
    AGGREGATION_WORKERS = int(os.environ.get("AGGREGATION_WORKERS", "1"))


LOG_LEVEL = Config.LOG_LEVEL
LOG_JSON = Config.LOG_JSON
DEFAULT_GRACE_MINUTES = Config.DEFAULT_GRACE_MINUTES
LATE_STATUS_MODE = Config.LATE_STATUS_MODE
AGGREGATION_WORKERS = Config.AGGREGATION_WORKERS
