import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
# Human-readable lines while developing
LOG_JSON = bool(int(os.getenv("LOG_JSON", "0")))

DEFAULT_GRACE_MINUTES = int(os.getenv("DEFAULT_GRACE_MINUTES", "10"))
LATE_STATUS_MODE = os.getenv("LATE_STATUS_MODE", "flag")

AGGREGATION_WORKERS = int(os.getenv("AGGREGATION_WORKERS", "1"))
