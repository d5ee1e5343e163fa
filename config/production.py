from config.config import Config

LOG_LEVEL = Config.LOG_LEVEL
LOG_JSON = True

DEFAULT_GRACE_MINUTES = Config.DEFAULT_GRACE_MINUTES
LATE_STATUS_MODE = Config.LATE_STATUS_MODE

AGGREGATION_WORKERS = Config.AGGREGATION_WORKERS
