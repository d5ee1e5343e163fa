LOG_LEVEL = "WARNING"
LOG_JSON = False

DEFAULT_GRACE_MINUTES = 10
LATE_STATUS_MODE = "flag"

AGGREGATION_WORKERS = 1

TESTING = True
