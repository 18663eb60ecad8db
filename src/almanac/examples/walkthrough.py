#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""A tour of the library: load the entries in a data directory, look at what
is coming up and build a few entries by hand.

Run with ``python -m almanac.examples.walkthrough``. Arguments are dotlist
configuration overrides, eg ``reader.data_dir=tests/data``.
"""

import datetime
import logging
import sys
from pathlib import Path

from rich.console import Console

from almanac.config import load_config
from almanac.display import print_occurrences
from almanac.entries import (
    Entry,
    EntryKind,
    FixedAnnualEntry,
    FixedDatedEntry,
    RelativeWeekdayEntry,
)
from almanac.queries import (
    Occurrence,
    entries_by_variant,
    entries_in_next_days,
    entries_in_next_months,
    entries_on_date,
)
from almanac.readers import read_all_entries
from almanac.time_utils import resolve_date

logger = logging.getLogger(__name__)

UPCOMING_DAYS = 30
PLACE_BIRTHDAY_MONTHS = 6
MAX_UPCOMING = 10
MAX_PER_SECTION = 5


def show_upcoming(
    entries: list[Entry], today: datetime.date, console: Console
) -> list[Occurrence]:
    upcoming = entries_in_next_days(entries, UPCOMING_DAYS, today)
    print_occurrences(
        upcoming[:MAX_UPCOMING],
        title=f"Events in the next {UPCOMING_DAYS} days",
        console=console,
    )
    if len(upcoming) > MAX_UPCOMING:
        console.print(f"... and {len(upcoming) - MAX_UPCOMING} more")
    return upcoming


def show_today(
    entries: list[Entry], today: datetime.date, console: Console
) -> list[Entry]:
    todays = entries_on_date(entries, today)
    print_occurrences(
        [Occurrence(entry, today) for entry in todays],
        title="Events today",
        console=console,
    )
    return todays


def show_place_birthdays(
    entries: list[Entry], today: datetime.date, console: Console
) -> list[Occurrence]:
    """Anniversaries of dated entries (eg independence days) over the next
    few months, with the number of years since the original event."""
    places = entries_by_variant(entries, EntryKind.FixedDated)
    birthdays = entries_in_next_months(places, PLACE_BIRTHDAY_MONTHS, today)
    print_occurrences(
        birthdays[:MAX_PER_SECTION],
        title=f"Place birthdays in the next {PLACE_BIRTHDAY_MONTHS} months",
        show_years=True,
        console=console,
    )
    return birthdays


def show_relative_holidays(
    entries: list[Entry], today: datetime.date, console: Console
) -> list[Occurrence]:
    relative = entries_by_variant(entries, EntryKind.RelativeWeekday)
    occurrences = [
        Occurrence(entry, entry.get_next_occurrence(today))
        for entry in relative[:MAX_PER_SECTION]
    ]
    print_occurrences(occurrences, title="Relative date holidays", console=console)
    return occurrences


def show_custom_entries(today: datetime.date, console: Console) -> None:
    pi_day = FixedAnnualEntry(name="Pi Day", month=3, day=14)
    independence = FixedDatedEntry(
        name="USA Independence", month=7, day=4, year=1776
    )
    # 4th Thursday in November
    thanksgiving = RelativeWeekdayEntry(
        name="Thanksgiving", occurrence=4, day_of_week=4, month=11
    )
    console.print("[bold]Custom entries[/bold]")
    console.print(
        f"  {pi_day.name}: next occurrence on "
        f"{pi_day.get_next_occurrence(today).isoformat()}"
    )
    console.print(
        f"  {independence.name}: {independence.get_years_since(today)} years ago"
    )
    console.print(
        f"  {thanksgiving.name}: next occurrence on "
        f"{thanksgiving.get_next_occurrence(today).isoformat()}"
    )


def main(
    data_dir: Path | str,
    today: datetime.date | None = None,
    console: Console | None = None,
) -> list[Entry]:
    """Load every entry under `data_dir` and print a summary of what is coming
    up after `today` (default: the current date)."""
    today = resolve_date(today)
    console = console or Console()
    entries = read_all_entries(data_dir)
    logger.info(f"Walking through {len(entries)} entries from {data_dir}")
    console.print(f"Total entries loaded: {len(entries)}")

    show_upcoming(entries, today, console)
    show_today(entries, today, console)
    show_place_birthdays(entries, today, console)
    show_relative_holidays(entries, today, console)
    show_custom_entries(today, console)
    return entries


if __name__ == "__main__":
    config = load_config(overrides=sys.argv[1:])
    main(config.reader.data_dir)
