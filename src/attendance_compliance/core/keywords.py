"""Application phrase allow-lists.

Each set holds formal application names as they appear in the application
column of the time-clock export. Names are looked up inside the text; the
short ones in ``FLEXTIME_EXACT_PHRASES`` and ``FULL_DAY_LEAVE_PHRASES`` must be
a whole item instead (see ``attendance_compliance.common.phrases``).
"""

LATE_APPLICATION_PHRASES = frozenset({
    "遅刻申請",
    "遅刻・早退申請",
    "遅刻・早退",
    "遅刻届",
})

TRAIN_DELAY_PHRASES = frozenset({
    "電車遅延申請",
    "電車遅延届",
})

FLEXTIME_EXACT_PHRASES = frozenset({"時差出勤"})

FLEXTIME_PHRASES = frozenset({
    "時差出勤申請",
    "時差勤務申請",
    "時差出勤届",
})

EARLY_LEAVE_APPLICATION_PHRASES = frozenset({
    "早退申請",
    "遅刻・早退申請",
    "遅刻・早退",
    "早退届",
})

HALF_DAY_APPLICATION_PHRASES = frozenset({
    "午前半休",
    "午後半休",
    "AM半休",
    "PM半休",
    "午前休",
    "午後休",
    "半休申請",
    "半日休暇",
})

EARLY_START_APPLICATION_PHRASES = frozenset({
    "早出申請",
    "早出勤務申請",
    "早出届",
})

BREAK_MODIFICATION_PHRASES = frozenset({
    "休憩時間修正申請",
    "休憩修正申請",
    "深夜休憩修正",
    "休憩時間修正",
})

HOURLY_LEAVE_PHRASES = frozenset({
    "時間有休",
    "時間有休申請",
    "有休時間",
})

SUBSTITUTE_WORK_PHRASES = frozenset({
    "振替出勤",
    "振替出勤申請",
    "振出",
})

HALF_DAY_LEAVE_PHRASES = frozenset({
    "半休",
    "午前半休",
    "午後半休",
    "AM半休",
    "PM半休",
    "半日",
    "午前休",
    "午後休",
    "半休申請",
    "半日休暇",
    "午前有休",
    "午後有休",
    "AM有休",
    "PM有休",
})

FULL_DAY_LEAVE_PHRASES = frozenset({
    "全休",
    "終日",
    "1日",
    "有休",
    "有給",
    "年休",
    "有休申請",
    "有給休暇",
    "振休",
    "振替休日",
    "代休",
    "特休",
    "特別休暇",
    "公休",
    "欠勤",
    "生理休暇",
    "生理休",
    "子の看護休暇",
    "看護休暇",
    "介護休暇",
    "明け休",
    "育休",
    "育児休暇",
    "産休",
    "産前産後休暇",
    "慶弔休暇",
    "年末年始",
})

MORNING_MARKERS = ("午前", "AM")
AFTERNOON_MARKERS = ("午後", "PM")

