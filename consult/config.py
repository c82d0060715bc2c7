import os
from pathlib import Path

# Paths
BACKEND_ROOT = Path(__file__).resolve().parent          # .../consult
REPO_ROOT = BACKEND_ROOT.parent
from consult.data.snapshots import latest_bench_path
DATA_FILE = latest_bench_path()


# App
APP_TITLE = "Ad Strategy Consult API"
APP_VERSION = "0.3.0"
LOG_LEVEL = os.getenv("CONSULT_LOG_LEVEL", "INFO")

ALLOW_ORIGINS = ["*"]

# Optional algo/version tagging for responses
ALGO_VERSION = "0.3.0-rules"

# Metric directions (up = higher is better)
METRIC_DIRECTIONS = {
    "cpl": "down",
    "ctr": "up",
    "lpCv": "up",
    "roas": "up",
    "cacToLtv": "down",
}

# Industry used as the template when a new industry is added without values
TEMPLATE_INDUSTRY = "Local Service"

# Plan caps
MAX_QUICK_WINS = 6
MAX_TESTS = 6

# Creative / landing page thresholds
MIN_HOOKS = 9
MIN_HOOKS_RISK = 6
MAX_WEEKS_SINCE_REFRESH = 4
MAX_WEEKS_SINCE_REFRESH_RISK = 6
MAX_LP_LOAD_SEC = 3.0
MAX_LP_LOAD_SEC_RISK = 4.0
MAX_CAMPAIGNS = 6
MAX_ADSETS = 12
MIN_CAMPAIGNS = 2

# Confidence score deductions
CONFIDENCE_START = 100
CONFIDENCE_DEDUCTIONS = {
    "pixel_broken": 25,
    "no_dashboard": 15,
    "slow_lp": 10,
    "low_hooks": 10,
    "ctr_below_ok": 10,
    "lpcv_below_ok": 10,
}

# Email export
EMAIL_SIGNATURE = "Vindicated Productions"
