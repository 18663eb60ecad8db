#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
from enum import StrEnum


class ParseErrorKind(StrEnum):
    MalformedNumeric = "MalformedNumeric"
    MissingOccurrence = "MissingOccurrence"
    UnknownWeekday = "UnknownWeekday"
    UnknownMonth = "UnknownMonth"
    UnrecognizedFormat = "UnrecognizedFormat"


class ParseError(Exception):
    """Raised when a date token cannot be turned into a date rule.

    Parameters
    ----------
    kind
        Which stage of parsing failed.
    token
        The offending token, as given.
    """

    def __init__(self, kind: ParseErrorKind, token: str, message: str | None = None):
        self.kind = kind
        self.token = token
        self.message = message or f"{kind}: {token!r}"
        super().__init__(self.message)


class ConfigError(Exception):
    pass
