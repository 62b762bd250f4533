# config.py
import os
import sys


def get_data_dir():
    """Get the appropriate data directory for user files."""
    data_dir = os.environ.get("MAINTCAL_DATA_DIR")
    if not data_dir:
        if sys.platform == "win32":
            data_dir = os.path.join(os.path.expanduser('~'), 'AppData', 'Local', 'MaintenanceCalendar')
        else:
            data_dir = os.path.join(os.path.expanduser('~'), '.maintcal')

    os.makedirs(data_dir, exist_ok=True)
    return data_dir

# --- File Paths ---
_DATA_DIR = get_data_dir()
JOBS_DB_FILE = os.path.join(_DATA_DIR, "jobs.db")
SETTINGS_FILE = os.path.join(_DATA_DIR, "settings.json")
ERROR_LOG_FILE = os.path.join(_DATA_DIR, "error.log")

# --- Identifiers ---
LOCAL_PROVIDER_NAME = "LocalJobProvider"
REST_PROVIDER_NAME = "RestJobProvider"
JOBS_TABLE = "maintenance_jobs"

# --- Calendar Defaults ---
DEFAULT_VIEW = "week"  # "day", "week", "month", "year"
DEFAULT_TIMEZONE = "UTC"
DEFAULT_WEEK_START = 6  # 6 = Sunday, 0 = Monday (same convention as date.weekday())
DEFAULT_MONTH_CELL_JOB_CAP = 3
DEFAULT_YEAR_CELL_JOB_CAP = 5

# --- UI Defaults ---
DEFAULT_WINDOW_GEOMETRY = [120, 120, 1100, 760]
DEFAULT_HOUR_HEIGHT = 64  # pixels per hour in day/week views
DEFAULT_THEME = "dark"

# --- Job Repository ---
DEFAULT_JOB_SOURCE = "local"  # "local" or "rest"
DEFAULT_REQUEST_TIMEOUT = 10  # seconds
