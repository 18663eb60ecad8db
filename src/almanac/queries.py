#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Queries over collections of entries.

None of the functions below mutate the entries they are given. Functions
taking a `from_date` resolve it to today when it is omitted, once per call.
"""

import datetime
from collections.abc import Iterable
from enum import StrEnum, auto
from typing import NamedTuple

from almanac.entries import Entry, EntryKind
from almanac.time_utils import (
    add_days,
    add_months,
    add_years,
    as_date,
    resolve_date,
)


class Occurrence(NamedTuple):
    """An entry paired with one date on which it occurs."""

    entry: Entry
    date: datetime.date


class WindowUnit(StrEnum):
    days = auto()
    weeks = auto()
    months = auto()
    years = auto()


def _by_date(occurrence: Occurrence) -> datetime.date:
    return occurrence.date


def entries_within_window(
    entries: Iterable[Entry],
    window_end: datetime.date,
    from_date: datetime.date | None = None,
) -> list[Occurrence]:
    """Pair each entry with its next occurrence after `from_date` and keep
    those falling in [from_date, window_end].

    Returns
    -------
    occurrences
        Sorted by date, ascending. Entries occurring on the same date keep
        their input order.
    """
    from_date = resolve_date(from_date)
    window_end = as_date(window_end)
    occurrences = [
        Occurrence(entry, entry.get_next_occurrence(from_date)) for entry in entries
    ]
    return sorted(
        (o for o in occurrences if from_date <= o.date <= window_end), key=_by_date
    )


def entries_in_next_days(
    entries: Iterable[Entry], days: int, from_date: datetime.date | None = None
) -> list[Occurrence]:
    """Entries occurring within `days` days of `from_date` (default: today)."""
    from_date = resolve_date(from_date)
    return entries_within_window(entries, add_days(from_date, days), from_date)


def entries_in_next_weeks(
    entries: Iterable[Entry], weeks: int, from_date: datetime.date | None = None
) -> list[Occurrence]:
    return entries_in_next_days(entries, weeks * 7, from_date)


def entries_in_next_months(
    entries: Iterable[Entry], months: int, from_date: datetime.date | None = None
) -> list[Occurrence]:
    """Entries occurring within `months` calendar months of `from_date`.

    Notes
    -----
    1. A day missing from the target month rolls over into the next one, so
    one month from Jan 31 ends on Mar 3 (Mar 2 in leap years).
    """
    from_date = resolve_date(from_date)
    return entries_within_window(entries, add_months(from_date, months), from_date)


def entries_in_next_years(
    entries: Iterable[Entry], years: int, from_date: datetime.date | None = None
) -> list[Occurrence]:
    """Entries occurring within `years` calendar years of `from_date`. One
    year from Feb 29 ends on Mar 1."""
    from_date = resolve_date(from_date)
    return entries_within_window(entries, add_years(from_date, years), from_date)


_WINDOW_QUERIES = {
    WindowUnit.days: entries_in_next_days,
    WindowUnit.weeks: entries_in_next_weeks,
    WindowUnit.months: entries_in_next_months,
    WindowUnit.years: entries_in_next_years,
}


def upcoming(
    entries: Iterable[Entry],
    window: int,
    unit: WindowUnit | str = WindowUnit.days,
    from_date: datetime.date | None = None,
) -> list[Occurrence]:
    """Entries occurring within `window` units of `from_date`.

    Raises
    ------
    ValueError
        If `unit` is not one of days, weeks, months or years.
    """
    query = _WINDOW_QUERIES[WindowUnit(unit)]
    return query(entries, window, from_date)


def entries_on_date(entries: Iterable[Entry], date: datetime.date) -> list[Entry]:
    """Entries whose rule is satisfied on `date`. Dated entries only match
    their original date, not its anniversaries."""
    date = as_date(date)
    return [entry for entry in entries if entry.occurs_on(date)]


def entries_on_month_day(
    entries: Iterable[Entry], month: int, day: int
) -> list[Entry]:
    """Fixed-date entries (annual or dated) stored with the given month and
    day. Relative weekday entries never match since they have no fixed day."""
    matches = []
    for entry in entries:
        match entry.kind:
            case EntryKind.FixedAnnual | EntryKind.FixedDated:
                if entry.month == month and entry.day == day:
                    matches.append(entry)
            case _:
                continue
    return matches


def entries_by_variant(
    entries: Iterable[Entry], kind: EntryKind | str
) -> list[Entry]:
    """Entries of the given variant."""
    kind = EntryKind(kind)
    return [entry for entry in entries if entry.kind == kind]


def occurrences_in_range(
    entries: Iterable[Entry], start: datetime.date, end: datetime.date
) -> list[Occurrence]:
    """Every occurrence of every entry within [start, end], sorted by date.
    Entries occurring on the same date keep their input order."""
    start, end = as_date(start), as_date(end)
    occurrences = [
        Occurrence(entry, date)
        for entry in entries
        for date in entry.get_occurrences_in_range(start, end)
    ]
    return sorted(occurrences, key=_by_date)
