"""
Central configuration for the Codeboard leaderboard engine.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

import os
from pathlib import Path

# --- Project Paths ---
PROJECT_ROOT = Path(__file__).parent.parent
DATA_FOLDER = PROJECT_ROOT / "data"
EXPORT_FILENAME = "leaderboard.csv"

# --- Scoring Configuration ---
DEFAULT_EASY_WEIGHT = 5
DEFAULT_MEDIUM_WEIGHT = 10
DEFAULT_HARD_WEIGHT = 20

# --- Column Layout ---
NAME_COLUMN = "Name"
EASY_COLUMN = "Easy"
MEDIUM_COLUMN = "Medium"
HARD_COLUMN = "Hard"
SCORE_COLUMN = "Score"
RANK_COLUMN = "Rank"

INPUT_COLUMNS = (NAME_COLUMN, EASY_COLUMN, MEDIUM_COLUMN, HARD_COLUMN)
EXPORT_COLUMNS = (NAME_COLUMN, EASY_COLUMN, MEDIUM_COLUMN, HARD_COLUMN, SCORE_COLUMN)

# --- Feed Configuration ---
# The published site serves the exported CSV next to the page
FEED_SOURCE = os.environ.get("CODEBOARD_FEED_URL", EXPORT_FILENAME)
FEED_TIMEOUT = float(os.environ.get("CODEBOARD_FEED_TIMEOUT", "10"))

# --- Capability Gate ---
ADMIN_ENV_VAR = "CODEBOARD_ADMIN"
ADMIN_TRUTHY_VALUES = frozenset({"true", "1", "yes"})

# --- Display ---
TOP_N = 10  # Size of the "top participants" view

# --- Input Validation ---
MAX_INPUT_SIZE = 5_000_000  # Maximum feed body size in bytes (~5MB)

# --- Competition Defaults ---
COMPETITION_NAME = "LeetCode Weekly Challenge"
COMPETITION_GOAL = "Improve algorithmic thinking and coding speed"
COMPETITION_DURATION = "1 week"
COMPETITION_TRACKS = (".NET", "MERN")
COMPETITION_RULES = (
    "Languages: C# and JavaScript",
    "Only new problems solved during the competition count",
)
