"""Default values for point allocation and agent output.

The allocation constants define how checks without an explicit point value
are weighted.  Changing them changes every image's maximum score.
"""

# ---------------------------------------------------------------------------
# Point allocation
# ---------------------------------------------------------------------------
TARGET_TOTAL_POINTS = 100  # Sum of positive check values after allocation
FALLBACK_POINTS = 3  # Flat value when even distribution is not possible
MAX_DISTRIBUTED_CHECKS = 100  # Above this many unassigned checks, use fallback

# ---------------------------------------------------------------------------
# Run status
# ---------------------------------------------------------------------------
STATUS_OK = ("green", "OK")
STATUS_NO_CHECKS = ("red", "There were no checks found in the configuration.")

# ---------------------------------------------------------------------------
# Notification messages
# ---------------------------------------------------------------------------
GAINED_POINTS_MESSAGE = "You gained points!"
LOST_POINTS_MESSAGE = "You lost points!"

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------
OUTPUT_DEFAULTS = {
    "data_dir": "~/.scorekeeper",
    "report_dir": "~/.scorekeeper/reports",
    "previous_score_file": "previous.txt",
    "report_file": "ScoringReport.html",
}

# ---------------------------------------------------------------------------
# Condition evaluation
# ---------------------------------------------------------------------------
COMMAND_TIMEOUT_SECONDS = 30.0
NEGATION_SUFFIX = "Not"
