#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime
from pathlib import Path

PACKAGE_NAME = "almanac"
CONFIGS_DIR = "configs"
DEFAULT_CONFIG_NAME = "default.yaml"
WEEKDAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
"""Weekday names in parse order. The index is the day of week (0 = Sunday)."""
MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
"""Three-letter month suffixes. The index plus one is the month number."""
DATE_SEPARATOR = "/"
FIELD_SEPARATOR = ","
SENTINEL_DATE = datetime.date(9999, 12, 31)
"""Returned when a relative entry has no occurrence this year or the next."""
DEFAULT_DATA_DIR = Path("data")
DEFAULT_FILE_PATTERN = "*.csv"
DEFAULT_ENCODING = "utf-8"
DEFAULT_WINDOW = 30
