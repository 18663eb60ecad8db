#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""A light wrapper around the `datetime` library with the calendar
construction helpers the entry variants share. All helpers work at whole-day
granularity."""

import datetime
from collections.abc import Iterator

from dateutil.relativedelta import relativedelta

from almanac.aliases import DayOfWeek, Month


def today_() -> datetime.date:
    """Return the current date on the local machine."""
    return datetime.date.today()


def as_date(value: datetime.date) -> datetime.date:
    """Drop the time component of `value`, if any."""
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def resolve_date(value: datetime.date | None) -> datetime.date:
    """Return `value` as a date, defaulting to today when it is not given."""
    if value is None:
        return today_()
    return as_date(value)


def calendar_date(year: int, month: int, day: int) -> datetime.date:
    """Construct a date, rolling out-of-range months and days over instead of
    raising.

    Examples
    --------
        calendar_date(2026, 2, 30) -> 2026-03-02
        calendar_date(2026, 13, 1) -> 2027-01-01
        calendar_date(2026, 3, 0)  -> 2026-02-28

    Notes
    -----
    `datetime.date` rejects such values; entries are not validated against
    month lengths, so an entry for 02/30 still yields a date.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return datetime.date(year, month, 1) + datetime.timedelta(days=day - 1)


def try_calendar_date(year: int, month: int, day: int) -> datetime.date | None:
    """As `calendar_date`, but return `None` when the result falls outside the
    years `datetime.date` can represent (1 to 9999)."""
    try:
        return calendar_date(year, month, day)
    except (ValueError, OverflowError):
        return None


def sunday_based_weekday(date: datetime.date) -> DayOfWeek:
    """Weekday of `date` with Sunday as 0 and Saturday as 6."""
    return (date.weekday() + 1) % 7


def nth_weekday_day_number(
    year: int, month: Month, day_of_week: DayOfWeek, occurrence: int
) -> int:
    """Day of month (1-based) of the `occurrence`-th `day_of_week` in the given
    month. The result may exceed the month length when the occurrence does not
    exist."""
    first_weekday = sunday_based_weekday(calendar_date(year, month, 1))
    offset = (day_of_week - first_weekday + 7) % 7
    return 1 + offset + (occurrence - 1) * 7


def nth_weekday_of_month(
    year: int, month: Month, day_of_week: DayOfWeek, occurrence: int
) -> datetime.date | None:
    """Return the date of the `occurrence`-th `day_of_week` in `month`, or
    `None` if the month has fewer such weekdays (eg a fifth Monday in a month
    with four) or the date cannot be represented."""
    first = try_calendar_date(year, month, 1)
    if first is None:
        return None
    day = nth_weekday_day_number(year, month, day_of_week, occurrence)
    target = try_calendar_date(year, month, day)
    if target is None or target.month != first.month:
        return None
    return target


def add_days(date: datetime.date, days: int) -> datetime.date:
    """Shift `date` by `days`, saturating at the representable range."""
    try:
        return date + datetime.timedelta(days=days)
    except OverflowError:
        return datetime.date.max if days > 0 else datetime.date.min


def _shift(date: datetime.date, delta: relativedelta) -> datetime.date:
    try:
        shifted = date + delta
    except (ValueError, OverflowError):
        if delta.years * 12 + delta.months > 0:
            return datetime.date.max
        return datetime.date.min
    # relativedelta clamps to the end of a shorter month, roll the lost days
    # over instead
    return add_days(shifted, date.day - shifted.day)


def add_months(date: datetime.date, months: int) -> datetime.date:
    """Calendar month arithmetic. A day of month missing from the target month
    rolls over into the following one (Jan 31 + 1 month is Mar 3 in common
    years). Saturates at `datetime.date.max`."""
    return _shift(date, relativedelta(months=months))


def add_years(date: datetime.date, years: int) -> datetime.date:
    """Calendar year arithmetic. Feb 29 + 1 year is Mar 1. Saturates at
    `datetime.date.max`."""
    return _shift(date, relativedelta(years=years))


def years_between(start: datetime.date, end: datetime.date) -> Iterator[int]:
    """Calendar years touched by the range [start, end], ascending."""
    yield from range(start.year, end.year + 1)
