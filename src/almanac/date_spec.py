#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Parsing of textual date rules.

Three token shapes are recognised:

    "MM/DD"          -> AnnualRule, recurs every year
    "MM/DD" + year   -> DatedRule, a one-time event (the year is a separate field)
    "3MondayJan"     -> RelativeRule, the Nth weekday of a month

Parsing never raises to the caller: `parse_date_spec` returns either a rule
or a `ParseFailure` describing why the token was rejected.
"""

import logging
import string

from pydantic import BaseModel, ConfigDict

from almanac.aliases import DateToken, DayOfWeek, Month, YearToken
from almanac.constants import DATE_SEPARATOR, MONTH_ABBREVIATIONS, WEEKDAY_NAMES
from almanac.exceptions import ParseError, ParseErrorKind

logger = logging.getLogger(__name__)


class AnnualRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: Month
    day: int


class DatedRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: Month
    day: int
    year: int


class RelativeRule(BaseModel):
    """The `occurrence`-th `day_of_week` (0 = Sunday) of `month`."""

    model_config = ConfigDict(frozen=True)

    occurrence: int
    day_of_week: DayOfWeek
    month: Month


DateRule = AnnualRule | DatedRule | RelativeRule


class ParseFailure(BaseModel):
    """Why a date token could not be parsed."""

    model_config = ConfigDict(frozen=True)

    kind: ParseErrorKind
    token: str
    message: str = ""

    @classmethod
    def from_error(cls, error: ParseError) -> "ParseFailure":
        return cls(kind=error.kind, token=error.token, message=error.message)


def _parse_int(text: str, token: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ParseError(
            ParseErrorKind.MalformedNumeric,
            token,
            f"Expected an integer, got {text!r} in {token!r}",
        )


def _parse_year(year_token: YearToken | None) -> int | None:
    if year_token is None or not year_token.strip():
        return
    try:
        return int(year_token.strip())
    except ValueError:
        logger.debug(f"Ignoring non-numeric year {year_token!r}")
        return


def parse_month_day(token: DateToken) -> tuple[Month, int]:
    """Split a `MM/DD` token into its month and day. Ranges are not checked."""
    parts = token.split(DATE_SEPARATOR)
    month_str, day_str = parts[0], parts[1]
    return _parse_int(month_str, token), _parse_int(day_str, token)


def parse_relative_date(token: DateToken) -> RelativeRule:
    """Parse tokens such as "3MondayJan" or "4ThursdayNov".

    The leading digit is the occurrence, the first weekday name found anywhere
    in the token is the weekday and the month abbreviation the token ends with
    is the month. Matching is case-sensitive.

    Raises
    ------
    ParseError
        If any of the three components is missing.
    """
    if not token or token[0] not in string.digits:
        raise ParseError(ParseErrorKind.MissingOccurrence, token)
    occurrence = int(token[0])

    for day_of_week, day_name in enumerate(WEEKDAY_NAMES):
        if day_name in token:
            break
    else:
        raise ParseError(ParseErrorKind.UnknownWeekday, token)

    for idx, month_name in enumerate(MONTH_ABBREVIATIONS):
        if token.endswith(month_name):
            month = idx + 1
            break
    else:
        raise ParseError(ParseErrorKind.UnknownMonth, token)

    return RelativeRule(occurrence=occurrence, day_of_week=day_of_week, month=month)


def parse_date_spec(
    date_token: DateToken, year_token: YearToken | None = None
) -> DateRule | ParseFailure:
    """Turn a date token (and optional year field) into a date rule.

    Parameters
    ----------
    date_token
        Either `MM/DD` or `{N}{Weekday}{Mon}`.
    year_token
        Only consulted for `MM/DD` tokens. When it holds an integer the result
        is a `DatedRule`, otherwise an `AnnualRule`.
    """
    token = date_token.strip()
    try:
        if not token:
            raise ParseError(ParseErrorKind.UnrecognizedFormat, date_token)
        if DATE_SEPARATOR in token:
            month, day = parse_month_day(token)
            year = _parse_year(year_token)
            if year is not None:
                return DatedRule(month=month, day=day, year=year)
            return AnnualRule(month=month, day=day)
        return parse_relative_date(token)
    except ParseError as e:
        logger.debug(f"Could not parse date token: {e.message}")
        return ParseFailure.from_error(e)
