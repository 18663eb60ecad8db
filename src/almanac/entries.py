#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Calendar entries: named events recurring according to a date rule.

Three variants share the `BaseEntry` interface:

    FixedAnnualEntry       "New Year's Day,01/01"          every year on 01/01
    FixedDatedEntry        "Afghanistan,08/19,1919"        once, on 1919-08-19
    RelativeWeekdayEntry   "MLK Day,3MondayJan"            3rd Monday of January

Entries are frozen pydantic models. `Entry` is the discriminated union of the
variants on their `kind` tag, so lists of entries validate and serialise
without losing the variant.
"""

import datetime
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from almanac.aliases import (
    DateToken,
    DayOfWeek,
    EntryName,
    Month,
    Source,
    YearToken,
)
from almanac.constants import FIELD_SEPARATOR, SENTINEL_DATE
from almanac.date_spec import (
    AnnualRule,
    DatedRule,
    DateRule,
    ParseFailure,
    RelativeRule,
    parse_date_spec,
    parse_relative_date,
)
from almanac.exceptions import ParseErrorKind
from almanac.time_utils import (
    as_date,
    nth_weekday_day_number,
    nth_weekday_of_month,
    resolve_date,
    sunday_based_weekday,
    today_,
    try_calendar_date,
    years_between,
)

logger = logging.getLogger(__name__)


class EntryKind(StrEnum):
    FixedAnnual = "fixed_annual"
    FixedDated = "fixed_dated"
    RelativeWeekday = "relative_weekday"


def next_anniversary(
    month: Month, day: int, from_date: datetime.date
) -> datetime.date:
    """The first `month`/`day` strictly after `from_date`, or `SENTINEL_DATE`
    when no such date is representable."""
    candidate = try_calendar_date(from_date.year, month, day)
    if candidate is None or candidate <= from_date:
        candidate = try_calendar_date(from_date.year + 1, month, day)
    if candidate is None:
        logger.debug(f"No anniversary of {month}/{day} after {from_date}")
        return SENTINEL_DATE
    return candidate


class BaseEntry(BaseModel, ABC):
    """A named calendar event governed by a single date rule.

    Parameters
    ----------
    name
        Display name of the event.
    source
        Where the entry came from (eg the file it was read from). Not
        interpreted by any query.
    """

    model_config = ConfigDict(frozen=True)

    name: EntryName = Field(min_length=1)
    source: Source | None = None

    @abstractmethod
    def get_next_occurrence(
        self, from_date: datetime.date | None = None
    ) -> datetime.date:
        """The next date strictly after `from_date` (default: today) on which
        the entry recurs."""

    @abstractmethod
    def occurs_on(self, date: datetime.date) -> bool:
        """Whether the entry's rule is satisfied on `date`."""

    @abstractmethod
    def get_occurrences_in_range(
        self, start: datetime.date, end: datetime.date
    ) -> list[datetime.date]:
        """All occurrences within [start, end] (both inclusive), ascending."""


class FixedAnnualEntry(BaseEntry):
    """An event on the same month and day every year.

    Notes
    -----
    1. `day` is not validated against `month`. 02/29 only matches leap years
    in `occurs_on`, while next-occurrence and range queries roll an invalid
    day over into the following month (02/30 in 2026 is 2026-03-02).
    """

    kind: Literal["fixed_annual"] = "fixed_annual"
    month: Month
    day: int

    def get_next_occurrence(
        self, from_date: datetime.date | None = None
    ) -> datetime.date:
        return next_anniversary(self.month, self.day, resolve_date(from_date))

    def occurs_on(self, date: datetime.date) -> bool:
        return date.month == self.month and date.day == self.day

    def get_occurrences_in_range(
        self, start: datetime.date, end: datetime.date
    ) -> list[datetime.date]:
        start, end = as_date(start), as_date(end)
        occurrences = []
        for year in years_between(start, end):
            occurrence = try_calendar_date(year, self.month, self.day)
            if occurrence is not None and start <= occurrence <= end:
                occurrences.append(occurrence)
        return occurrences


class FixedDatedEntry(BaseEntry):
    """A one-time event, such as a founding date.

    Only the original date counts as an occurrence, but the next occurrence
    is the next anniversary of that date.
    """

    kind: Literal["fixed_dated"] = "fixed_dated"
    month: Month
    day: int
    year: int

    @property
    def event_date(self) -> datetime.date | None:
        """The date of the original event, or None when it falls outside the
        range `datetime.date` can represent (eg years before 1)."""
        return try_calendar_date(self.year, self.month, self.day)

    def get_next_occurrence(
        self, from_date: datetime.date | None = None
    ) -> datetime.date:
        # anniversaries recur regardless of the original year
        return next_anniversary(self.month, self.day, resolve_date(from_date))

    def occurs_on(self, date: datetime.date) -> bool:
        return (
            date.year == self.year
            and date.month == self.month
            and date.day == self.day
        )

    def get_occurrences_in_range(
        self, start: datetime.date, end: datetime.date
    ) -> list[datetime.date]:
        event_date = self.event_date
        if event_date is None:
            return []
        if as_date(start) <= event_date <= as_date(end):
            return [event_date]
        return []

    def get_anniversary(self, target_year: int) -> datetime.date | None:
        """The anniversary of the event in `target_year`. Years before the
        event are not rejected. None if the date is not representable."""
        return try_calendar_date(target_year, self.month, self.day)

    def get_years_since(self, date: datetime.date | None = None) -> int:
        """Whole calendar years between the event and `date` (default: today).
        Negative for dates before the event."""
        if date is None:
            date = today_()
        return date.year - self.year


class RelativeWeekdayEntry(BaseEntry):
    """An event on the Nth weekday of a month, eg the 4th Thursday of November.

    Parameters
    ----------
    occurrence
        Which weekday of the month, 1 to 5.
    day_of_week
        0 for Sunday through 6 for Saturday.
    month
        1 for January through 12 for December.

    Notes
    -----
    1. Years whose month has fewer than `occurrence` such weekdays have no
    occurrence at all (eg a 5th Monday of February outside leap years
    starting on a Monday).
    """

    kind: Literal["relative_weekday"] = "relative_weekday"
    occurrence: int
    day_of_week: DayOfWeek
    month: Month

    @classmethod
    def parse(
        cls, token: DateToken, name: EntryName, source: Source | None = None
    ) -> "RelativeWeekdayEntry":
        """Build an entry from a "3MondayJan" style token.

        Raises
        ------
        ParseError
            If the token is not a relative date.
        """
        rule = parse_relative_date(token)
        return cls(name=name, source=source, **rule.model_dump())

    def occurrence_in(self, year: int) -> datetime.date | None:
        """The date of the entry in `year`, if the month has one."""
        return nth_weekday_of_month(
            year, self.month, self.day_of_week, self.occurrence
        )

    def get_next_occurrence(
        self, from_date: datetime.date | None = None
    ) -> datetime.date:
        from_date = resolve_date(from_date)
        date = self.occurrence_in(from_date.year)
        if date is None or date <= from_date:
            date = self.occurrence_in(from_date.year + 1)
        if date is None:
            logger.debug(
                f"{self.name!r} has no occurrence in {from_date.year} or "
                f"{from_date.year + 1}"
            )
            return SENTINEL_DATE
        return date

    def occurs_on(self, date: datetime.date) -> bool:
        if date.month != self.month:
            return False
        if sunday_based_weekday(date) != self.day_of_week:
            return False
        expected_day = nth_weekday_day_number(
            date.year, self.month, self.day_of_week, self.occurrence
        )
        return date.day == expected_day

    def get_occurrences_in_range(
        self, start: datetime.date, end: datetime.date
    ) -> list[datetime.date]:
        start, end = as_date(start), as_date(end)
        occurrences = []
        for year in years_between(start, end):
            occurrence = self.occurrence_in(year)
            if occurrence is not None and start <= occurrence <= end:
                occurrences.append(occurrence)
        return occurrences


Entry = Annotated[
    FixedAnnualEntry | FixedDatedEntry | RelativeWeekdayEntry,
    Field(discriminator="kind"),
]


class RawRecord(BaseModel):
    """A record as produced by an input adapter, before its date token is
    parsed."""

    name: EntryName
    date_token: DateToken
    year_token: YearToken | None = None
    source: Source | None = None


def entry_from_rule(
    name: EntryName, rule: DateRule, source: Source | None = None
) -> Entry:
    """Wrap a parsed date rule into the matching entry variant."""
    match rule:
        case AnnualRule(month=month, day=day):
            return FixedAnnualEntry(name=name, month=month, day=day, source=source)
        case DatedRule(month=month, day=day, year=year):
            return FixedDatedEntry(
                name=name, month=month, day=day, year=year, source=source
            )
        case RelativeRule(occurrence=occurrence, day_of_week=dow, month=month):
            return RelativeWeekdayEntry(
                name=name,
                occurrence=occurrence,
                day_of_week=dow,
                month=month,
                source=source,
            )
        case _:
            raise TypeError(f"Unsupported date rule: {rule!r}")


def parse_record(record: RawRecord) -> Entry | ParseFailure:
    """Parse the date fields of `record` into an entry.

    Returns a `ParseFailure` rather than raising when the record cannot be
    turned into an entry; callers decide whether to log or drop it.
    """
    name = record.name.strip()
    if not name:
        return ParseFailure(
            kind=ParseErrorKind.UnrecognizedFormat,
            token=record.date_token,
            message="Entry name is empty",
        )
    rule = parse_date_spec(record.date_token, record.year_token)
    if isinstance(rule, ParseFailure):
        return rule
    return entry_from_rule(name, rule, source=record.source)


def record_from_fields(
    fields: Sequence[str], source: Source | None = None
) -> RawRecord | None:
    """Build a record from the `name, date[, year]` fields of a CSV row.
    Rows with fewer than two fields or a blank name or date yield `None`."""
    if len(fields) < 2:
        return
    name, date_token = fields[0].strip(), fields[1].strip()
    if not name or not date_token:
        return
    year_token = fields[2].strip() if len(fields) >= 3 else None
    return RawRecord(
        name=name, date_token=date_token, year_token=year_token, source=source
    )


def parse_line(line: str, source: Source | None = None) -> Entry | None:
    """Parse a single `name,date[,year]` line, eg "Afghanistan,08/19,1919".

    Returns `None` for lines which do not describe an entry.
    """
    record = record_from_fields(line.split(FIELD_SEPARATOR), source=source)
    if record is None:
        return
    entry = parse_record(record)
    if isinstance(entry, ParseFailure):
        return
    return entry
