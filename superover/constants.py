"""
Game rules and fixed constants for the Super Over
"""

TOTAL_BALLS = 6
MAX_WICKETS = 2
TARGET_RUNS = 20  # Fixed chase target

# Range used when the target is randomised
MIN_RANDOM_TARGET = 8
MAX_RANDOM_TARGET = 20

DEFAULT_TEAM = "INDIA"
DEFAULT_BOWLER = "Brett Lee"

# Batting order: openers first, then the next batters in
BATTING_ORDER = (
    "Rahul Dravid",
    "Sachin Tendulkar",
    "Virat Kohli",
    "MS Dhoni",
)
