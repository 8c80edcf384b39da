"""
=========================Application constants==========================
"""
# Fallback color for activity types without one
DEFAULT_ACTIVITY_COLOR = "#3B82F6"

# Activity type names counted as leisure in the time-usage summary
DEFAULT_LEISURE_CATEGORIES = ("SNS", "여가활동", "휴식", "leisure-activity", "rest")

# Waking hours assumed per day when judging how much time was recorded
EXPECTED_WAKING_HOURS_PER_DAY = 16
# Share of the expected time below which users are asked to record more
RECORD_MORE_THRESHOLD_RATIO = 0.5
# Leisure percentage at or above which a warning is emitted
LEISURE_WARNING_PERCENTAGE = 40
# Share of total time above which the top activity counts as dominant
DOMINANT_ACTIVITY_RATIO = 0.5

# Self-test cooldown (hours)
SELF_TEST_COOLDOWN_HOURS = 24

# Default analysis window when the caller omits startDate (days)
DEFAULT_ANALYSIS_WINDOW_DAYS = 7

# Shared activity types seeded on startup
DEFAULT_ACTIVITY_TYPES = [
    {"name": "업무", "icon": "briefcase", "color": "#4F46E5"},
    {"name": "공부", "icon": "book", "color": "#059669"},
    {"name": "휴식", "icon": "coffee", "color": "#F59E0B"},
    {"name": "수면", "icon": "moon", "color": "#6366F1"},
    {"name": "운동", "icon": "running", "color": "#EF4444"},
    {"name": "식사", "icon": "utensils", "color": "#10B981"},
    {"name": "SNS", "icon": "hashtag", "color": "#3B82F6"},
    {"name": "이동", "icon": "car", "color": "#8B5CF6"},
    {"name": "집안일", "icon": "home", "color": "#EC4899"},
    {"name": "여가활동", "icon": "gamepad", "color": "#F97316"},
]
