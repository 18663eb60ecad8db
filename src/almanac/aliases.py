#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
# the display name of an entry, eg "Martin Luther King Jr. Day"
EntryName = str
# an opaque provenance tag, typically the path of the file an entry
# was read from, relative to the data directory
Source = str
# the textual date rule of a record, eg "01/01" or "3MondayJan"
DateToken = str
# the optional year field following a `MM/DD` date token
YearToken = str
# a month number, 1 for January and 12 for December
Month = int
# a weekday number, 0 for Sunday and 6 for Saturday
DayOfWeek = int
