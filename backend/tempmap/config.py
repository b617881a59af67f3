"""
TempMap configuration and constants.
"""

import os
from datetime import datetime, timezone
from enum import Enum


class UnitSystem(str, Enum):
    IP = "IP"  # Inch-Pound (°F)
    SI = "SI"  # Metric (°C)


class GridKind(str, Enum):
    REGULAR = "regular"
    SPRING_FORWARD = "spring_forward"
    FALL_BACK = "fall_back"


class RejectionReason(str, Enum):
    BEFORE_RANGE = "before_range"
    AFTER_RANGE = "after_range"
    INCONSISTENT_SLOT = "inconsistent_slot"


# Local civil zone the slots are expressed in
LOCAL_TIMEZONE = "America/New_York"

# Dataset grid: fixed 3-hour UTC spacing starting at 2020-01-01 00:00 UTC
DATASET_START_UTC = datetime(2020, 1, 1, tzinfo=timezone.utc)
GRID_STEP_HOURS = 3

# Header formats of date and time in the CSV files
UTC_KEY_FORMAT = "X%Y.%m.%d.%H.%M.%S"
LOCAL_DATE_KEY_FORMAT = "X%Y.%m.%d"

# Slot grids (hours of day, NY local time), 8 slots each
DST_GRID: tuple[int, ...] = (2, 5, 8, 11, 14, 17, 20, 23)
STANDARD_GRID: tuple[int, ...] = (1, 4, 7, 10, 13, 16, 19, 22)
# DST ends after midnight: local 2 AM stands for the first (DST) occurrence
FALL_BACK_GRID: tuple[int, ...] = (2, 4, 7, 10, 13, 16, 19, 22)
# DST starts after midnight: 1 AM is still standard time, 5 AM is DST
SPRING_FORWARD_GRID: tuple[int, ...] = (1, 5, 8, 11, 14, 17, 20, 23)

# Initial selection, matching the date picker / slider defaults
DEFAULT_DATE = DATASET_START_UTC.date()
DEFAULT_SLOT = 1

# Validation messages shown in place of the map
BEFORE_RANGE_MESSAGE = "Date must be in 2020 or after (by UTC)"
AFTER_RANGE_MESSAGE = "Data is not yet available for this date and time"

# Data files
DATA_DIR = os.environ.get(
    "TEMPMAP_DATA_DIR",
    os.path.join(os.path.dirname(__file__), "data"),
)
EXTRACTED_TEMPS_FILE = "nyc_extracted_temps.csv"
DAILY_MIN_FILE = "nyc_daily_min.csv"
DAILY_MAX_FILE = "nyc_daily_max.csv"
DAILY_AVG_FILE = "nyc_daily_avg.csv"
ZONE_COLUMN = "zipcode"

# Frontend dev servers allowed by CORS
CORS_ORIGINS = [
    "http://localhost:5173",  # Vite default
    "http://localhost:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
]

# Display units
TEMPERATURE_UNITS = {
    "IP": "°F",
    "SI": "°C",
}
