"""Output formatting for listings.

Three formats are supported:

- json: a list of objects keyed by column name, nothing else on stdout
- text: one tab-delimited line per row; with column alignment the columns
  are padded into a borderless rich grid
- table: a bordered rich table with a header row

Text and table output end with a "Total <kind>: N" line. Cells are never
shortened, however narrow the console.
"""

import json
from typing import Any, Optional

from rich.console import Console
from rich.measure import Measurement
from rich.table import Table
from rich.text import Text

from modules.identity_center.domain.models import Listing

OUTPUT_FORMATS = ("text", "json", "table")

# cells are never wrapped or shortened; rows may be as wide as they need
_UNBOUNDED_WIDTH = 100_000


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def to_json(listing: Listing) -> str:
    return json.dumps(listing.as_dicts(), indent=2, ensure_ascii=False)


def to_text(listing: Listing) -> str:
    """Tab-delimited rows, without header."""
    return "\n".join(
        "\t".join(_cell(row[column]) for column in listing.columns)
        for row in listing.as_dicts()
    )


def to_grid(listing: Listing) -> Table:
    grid = Table.grid(padding=(0, 2))
    for _ in listing.columns:
        grid.add_column(no_wrap=True)
    for row in listing.as_dicts():
        grid.add_row(*(Text(_cell(row[column])) for column in listing.columns))
    return grid


def to_table(listing: Listing) -> Table:
    table = Table(show_header=True, header_style="bold magenta")
    for column in listing.columns:
        table.add_column(
            column,
            justify="right" if column == "UserCount" else "left",
            no_wrap=True,
        )
    for row in listing.as_dicts():
        table.add_row(*(Text(_cell(row[column])) for column in listing.columns))
    return table


def _write(console: Console, text: str) -> None:
    # raw write: rich would expand tabs and substitute emoji codes
    console.file.write(text + "\n")


def _print_unclipped(console: Console, renderable: Table) -> None:
    """Print renderable at its natural width.

    A console that is not a terminal defaults to 80 columns, and rich would
    shorten no_wrap cells with an ellipsis to fit. Wider renderables go
    through a console sized to them, writing to the same file.
    """
    needed = Measurement.get(
        console, console.options.update_width(_UNBOUNDED_WIDTH), renderable
    ).maximum
    if needed > console.width:
        console = Console(
            file=console.file,
            width=needed,
            color_system=console.color_system,
            force_terminal=console.is_terminal,
            no_color=console.no_color,
        )
    console.print(renderable, markup=False, highlight=False)


def total_line(listing: Listing) -> str:
    return f"Total {listing.kind}: {listing.total}"


def render(
    listing: Listing,
    output_format: str = "text",
    column_align: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Write listing to console (stdout by default) in output_format."""
    console = console or Console()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format: {output_format}")

    if output_format == "json":
        _write(console, to_json(listing))
        return

    if listing.rows:
        if output_format == "table":
            _print_unclipped(console, to_table(listing))
        elif column_align:
            _print_unclipped(console, to_grid(listing))
        else:
            _write(console, to_text(listing))

    console.print()
    console.print(total_line(listing), markup=False, highlight=False)
