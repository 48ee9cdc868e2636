SECRET_KEY = "test-secret"

ANALYSIS_CONFIG = {
    "half_day_auto_break_minutes": 15,
    "auto_break_cap_minutes": 60,
    "night_work_threshold_minutes": 30,
    "include_today": False,
}

DEBUG = False
TESTING = True
