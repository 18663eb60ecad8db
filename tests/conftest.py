#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime
from pathlib import Path

import pytest

from almanac.entries import (
    Entry,
    FixedAnnualEntry,
    FixedDatedEntry,
    RelativeWeekdayEntry,
)

DATA_DIR = Path(__file__).parent / "data"
# a Monday
REFERENCE_DATE = datetime.date(2026, 10, 19)


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def reference_date() -> datetime.date:
    return REFERENCE_DATE


@pytest.fixture
def entries() -> list[Entry]:
    return [
        FixedAnnualEntry(name="New Year's Day", month=1, day=1),
        FixedAnnualEntry(name="Pi Day", month=3, day=14),
        FixedAnnualEntry(name="Christmas Day", month=12, day=25),
        FixedDatedEntry(name="Afghanistan", month=8, day=19, year=1919),
        FixedDatedEntry(name="Moon Landing", month=7, day=20, year=1969),
        RelativeWeekdayEntry(
            name="Martin Luther King Jr. Day", occurrence=3, day_of_week=1, month=1
        ),
        RelativeWeekdayEntry(
            name="Thanksgiving", occurrence=4, day_of_week=4, month=11
        ),
        RelativeWeekdayEntry(name="Labor Day", occurrence=1, day_of_week=1, month=9),
    ]
