import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

ANALYSIS_CONFIG = {
    # Vendor auto-inserted break on half-day leave days.
    "half_day_auto_break_minutes": int(os.getenv("HALF_DAY_AUTO_BREAK_MINUTES", "15")),
    "auto_break_cap_minutes": int(os.getenv("AUTO_BREAK_CAP_MINUTES", "60")),
    "night_work_threshold_minutes": int(os.getenv("NIGHT_WORK_THRESHOLD_MINUTES", "30")),
    "include_today": bool(int(os.getenv("INCLUDE_TODAY", "0"))),
}

DEBUG = True
