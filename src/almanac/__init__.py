#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
from importlib.metadata import PackageNotFoundError, version  # pragma: no cover

try:
    dist_name = "almanac"
    __version__ = version(dist_name)
except PackageNotFoundError:  # pragma: no cover
    __version__ = "unknown"
finally:
    del version, PackageNotFoundError

from almanac.date_spec import (  # noqa: E402
    AnnualRule,
    DatedRule,
    DateRule,
    ParseFailure,
    RelativeRule,
    parse_date_spec,
)
from almanac.entries import (  # noqa: E402
    BaseEntry,
    Entry,
    EntryKind,
    FixedAnnualEntry,
    FixedDatedEntry,
    RawRecord,
    RelativeWeekdayEntry,
    entry_from_rule,
    parse_line,
    parse_record,
)
from almanac.exceptions import ConfigError, ParseError, ParseErrorKind  # noqa: E402
from almanac.queries import (  # noqa: E402
    Occurrence,
    WindowUnit,
    entries_by_variant,
    entries_in_next_days,
    entries_in_next_months,
    entries_in_next_weeks,
    entries_in_next_years,
    entries_on_date,
    entries_on_month_day,
    entries_within_window,
    occurrences_in_range,
    upcoming,
)

__all__ = [
    "AnnualRule",
    "BaseEntry",
    "ConfigError",
    "DateRule",
    "DatedRule",
    "Entry",
    "EntryKind",
    "FixedAnnualEntry",
    "FixedDatedEntry",
    "Occurrence",
    "ParseError",
    "ParseErrorKind",
    "ParseFailure",
    "RawRecord",
    "RelativeRule",
    "RelativeWeekdayEntry",
    "WindowUnit",
    "entries_by_variant",
    "entries_in_next_days",
    "entries_in_next_months",
    "entries_in_next_weeks",
    "entries_in_next_years",
    "entries_on_date",
    "entries_on_month_day",
    "entries_within_window",
    "entry_from_rule",
    "occurrences_in_range",
    "parse_date_spec",
    "parse_line",
    "parse_record",
    "upcoming",
]
