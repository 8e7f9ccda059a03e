import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "khoa_bi_mat_cua_nhom"

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Ca làm việc (HH:MM), có thể thêm ca mới tại đây
    SHIFTS = [
        {"id": "SHIFT_1", "name": "Ca 1", "start_time": "08:00", "end_time": "18:00", "grace_minutes": 10},
        {"id": "SHIFT_2", "name": "Ca 2", "start_time": "08:30", "end_time": "18:30", "grace_minutes": 10},
        {"id": "SHIFT_3", "name": "Ca 3", "start_time": "09:00", "end_time": "19:00", "grace_minutes": 10},
    ]
    DEFAULT_SHIFT_ID = os.environ.get("DEFAULT_SHIFT_ID", "SHIFT_1")

    # Quy định về sớm
    FRIDAY_EARLY_MINUTES = int(os.environ.get("FRIDAY_EARLY_MINUTES", "60"))
    QUOTA_EARLY_LEAVE_MINUTES = int(os.environ.get("QUOTA_EARLY_LEAVE_MINUTES", "90"))
    QUOTA_EARLY_LEAVE_COUNT = int(os.environ.get("QUOTA_EARLY_LEAVE_COUNT", "2"))


SECRET_KEY = Config.SECRET_KEY
LOG_LEVEL = Config.LOG_LEVEL
SHIFTS = Config.SHIFTS
DEFAULT_SHIFT_ID = Config.DEFAULT_SHIFT_ID
FRIDAY_EARLY_MINUTES = Config.FRIDAY_EARLY_MINUTES
QUOTA_EARLY_LEAVE_MINUTES = Config.QUOTA_EARLY_LEAVE_MINUTES
QUOTA_EARLY_LEAVE_COUNT = Config.QUOTA_EARLY_LEAVE_COUNT

DEBUG = bool(int(os.environ.get("DEBUG", "1")))
