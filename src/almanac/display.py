#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from almanac.entries import EntryKind
from almanac.queries import Occurrence

KIND_LABELS = {
    EntryKind.FixedAnnual: "annual",
    EntryKind.FixedDated: "dated",
    EntryKind.RelativeWeekday: "relative",
}


def occurrences_table(
    occurrences: Sequence[Occurrence],
    title: str | None = None,
    show_years: bool = False,
) -> Table:
    """Build a rich table listing occurrences, one per row.

    ┏━━━━━━━━━━━━┳━━━━━━━━━━━━━━━━━┳━━━━━━━━┳━━━━━━━━━━━━━━━━━━━┓
    ┃ Date       ┃ Name            ┃ Kind   ┃ Source            ┃
    ┡━━━━━━━━━━━━╇━━━━━━━━━━━━━━━━━╇━━━━━━━━╇━━━━━━━━━━━━━━━━━━━┩

    Parameters
    ----------
    show_years
        Add a "Years" column showing how many years separate each dated
        entry's original event from its listed occurrence.
    """  # noqa

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Kind", style="dim")
    table.add_column("Source", style="dim")
    if show_years:
        table.add_column("Years", justify="right", style="green")

    for entry, date in occurrences:
        row = [
            date.isoformat(),
            entry.name,
            KIND_LABELS[EntryKind(entry.kind)],
            entry.source or "",
        ]
        if show_years:
            years = ""
            if entry.kind == EntryKind.FixedDated:
                years = str(entry.get_years_since(date))
            row.append(years)
        table.add_row(*row)
    return table


def print_occurrences(
    occurrences: Sequence[Occurrence],
    title: str | None = None,
    show_years: bool = False,
    console: Console | None = None,
) -> None:
    console = console or Console()
    if not occurrences:
        console.print("[dim]No entries found.[/dim]")
        return
    console.print(occurrences_table(occurrences, title=title, show_years=show_years))
