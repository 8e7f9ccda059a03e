from config.config import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

# Cố định hạn mức để test không phụ thuộc biến môi trường
FRIDAY_EARLY_MINUTES = 60
QUOTA_EARLY_LEAVE_MINUTES = 90
QUOTA_EARLY_LEAVE_COUNT = 2
DEFAULT_SHIFT_ID = "SHIFT_1"
