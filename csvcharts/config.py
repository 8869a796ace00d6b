"""
CSV Charts — Configuration: paths, column hints, chart defaults.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths: override with CSVCHARTS_DATA_DIR env var for cloud deployment
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("CSVCHARTS_DATA_DIR", str(Path.home() / "Desktop" / "CSV Charts")))
INBOX_FOLDER = _data_dir / "inbox"
EXPORTS_FOLDER = _data_dir / "exports"

# ---------------------------------------------------------------------------
# Column hints (lowercase substrings, matched against lowercased headers)
# Order matters: earlier hints win over later ones.
# ---------------------------------------------------------------------------
BAR_LABEL_HINTS = ["category", "label", "lga", "name"]
PIE_CATEGORY_HINTS = ["category", "type", "label", "name"]
VALUE_HINTS = ["value", "count", "tests", "amount", "number", "total"]
LINE_DATE_HINTS = ["date", "year", "period", "month"]

# ---------------------------------------------------------------------------
# Chart defaults
# ---------------------------------------------------------------------------
DEFAULT_TOP_N = 12
DEFAULT_THRESHOLD_PCT = 2.0

# Bar value axis gets 8% headroom above the tallest bar
Y_AXIS_HEADROOM = 1.08

# Centred window used for line moving averages
MOVING_AVERAGE_WINDOW = 3

OTHER_LABEL = "Other"
UNKNOWN_LABEL = "Unknown"
