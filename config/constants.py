"""
Centralized constants for the application.
Stores data locations, file names and fixed labels.
"""

# --- Data Directory Paths (relative to project root) ---
DATA_EARNINGS = "data/earnings"       # Per-company insight records (<TICKER>.json)
DATA_MACRO = "data/macro"             # Cross-company macro snapshots
DATA_REPORTS = "generated_reports"    # Human-readable reports

MACRO_LATEST_FILENAME = "latest.json"
EARNINGS_FILE_SUFFIX = ".json"

# Period label used when no quarter can be resolved
UNKNOWN_PERIOD = "Unknown"
