#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Input adapter: reads `name,date[,year]` CSV files into entries.

Files have no header row. Blank lines and rows which do not describe an entry
are dropped; the reason is logged at debug level.
"""

import csv
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from almanac.aliases import Source
from almanac.constants import DEFAULT_ENCODING, DEFAULT_FILE_PATTERN
from almanac.date_spec import ParseFailure
from almanac.entries import Entry, RawRecord, parse_record, record_from_fields

if TYPE_CHECKING:
    from almanac.config import AlmanacConfig

logger = logging.getLogger(__name__)


def _source_tag(path: Path, data_dir: Path | str | None) -> Source:
    """The path of `path` relative to `data_dir`, with `/` separators."""
    if data_dir is None:
        return path.name
    try:
        return path.relative_to(data_dir).as_posix()
    except ValueError:
        return path.as_posix()


def read_records(
    path: Path | str,
    data_dir: Path | str | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> list[RawRecord]:
    """Read the raw records of a single CSV file.

    Parameters
    ----------
    path
        The file to read.
    data_dir
        If given, the `source` of each record is `path` relative to this
        directory. Otherwise it is the file name.
    """
    path = Path(path)
    source = _source_tag(path, data_dir)
    records = []
    with open(path, "r", encoding=encoding, newline="") as f:
        for line_no, row in enumerate(csv.reader(f), start=1):
            if not any(field.strip() for field in row):
                continue
            record = record_from_fields(row, source=source)
            if record is None:
                logger.debug(f"{source}:{line_no}: dropping malformed row {row}")
                continue
            records.append(record)
    return records


def read_entries(
    path: Path | str,
    data_dir: Path | str | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> list[Entry]:
    """Read a single CSV file into entries, skipping records whose date cannot
    be parsed."""
    entries = []
    for record in read_records(path, data_dir=data_dir, encoding=encoding):
        entry = parse_record(record)
        if isinstance(entry, ParseFailure):
            logger.debug(
                f"{record.source}: skipping {record.name!r}, {entry.kind}: "
                f"{entry.token!r}"
            )
            continue
        entries.append(entry)
    return entries


def read_all_entries(
    data_dir: Path | str,
    pattern: str = DEFAULT_FILE_PATTERN,
    encoding: str = DEFAULT_ENCODING,
) -> list[Entry]:
    """Read every file matching `pattern` under `data_dir`, recursively.

    Files are visited in sorted path order. The `source` of each entry is the
    path of its file relative to `data_dir`.

    Raises
    ------
    FileNotFoundError
        If `data_dir` does not exist.
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise FileNotFoundError(f"Data directory {data_dir} does not exist")
    entries = []
    for path in sorted(data_dir.rglob(pattern)):
        if not path.is_file():
            continue
        entries += read_entries(path, data_dir=data_dir, encoding=encoding)
    logger.info(f"Loaded {len(entries)} entries from {data_dir}")
    return entries


def read_configured_entries(config: "AlmanacConfig") -> list[Entry]:
    """Read all entries from the data directory named in `config`."""
    reader = config.reader
    return read_all_entries(
        reader.data_dir, pattern=reader.pattern, encoding=reader.encoding
    )
