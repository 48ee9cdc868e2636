"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
All durations are minutes unless the name says otherwise.
"""

# Contracted working day (7h45m) and the statutory day (8h, Labor Standards Act art. 32).
STANDARD_WORK_MINUTES = 7 * 60 + 45
LEGAL_WORK_MINUTES = 8 * 60

# Default start of the working day when no schedule can be resolved.
STANDARD_WORK_START_HOUR = 9
STANDARD_WORK_START_MINUTE = 0

# Clock-out at or before this time counts as a timely departure.
TIMELY_DEPARTURE_HOUR = 17
TIMELY_DEPARTURE_MINUTE = 45

# Night work: clock-out after 22:00 or before 05:00.
NIGHT_WORK_START_HOUR = 22
NIGHT_WORK_END_HOUR = 5

# Break requirements (Labor Standards Act art. 34).
BREAK_THRESHOLD_6H_MINUTES = 6 * 60
BREAK_THRESHOLD_8H_MINUTES = 8 * 60
REQUIRED_BREAK_OVER_6H_MINUTES = 45
REQUIRED_BREAK_OVER_8H_MINUTES = 60

# Break auto-insertion done by the time-clock vendor.
HALF_DAY_AUTO_BREAK_MINUTES = 15
AUTO_BREAK_CAP_MINUTES = 60

DEFAULT_NIGHT_WORK_THRESHOLD_MINUTES = 30
EMPTY_NIGHT_BREAK_MODIFICATION = "0:00"

# Remarks shorter than this are flagged as badly formatted.
MIN_REMARKS_LENGTH = 5

# 36 Agreement (monthly, hours).
OVERTIME_WARNING_HOURS = 35
OVERTIME_LIMIT_HOURS = 45
OVERTIME_CAUTION_HOURS = 55
OVERTIME_SERIOUS_HOURS = 65
OVERTIME_SEVERE_HOURS = 70
OVERTIME_CRITICAL_HOURS = 80
OVERTIME_ILLEGAL_HOURS = 100
ANNUAL_OVERTIME_LIMIT_HOURS = 360
PACE_DAYS_PER_MONTH = 30

UNASSIGNED_DEPARTMENT = "(unassigned)"

# Missing-entry detection.
CONSECUTIVE_DAY_GAP = 3
MISSING_HIGH_URGENCY_DAYS = 5
MISSING_MEDIUM_URGENCY_DAYS = 3
