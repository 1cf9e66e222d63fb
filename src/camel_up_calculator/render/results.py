from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

from camel_up_calculator.core.palettes import get_camel_style
from camel_up_calculator.core.types import DISPLAY_NAMES

if TYPE_CHECKING:
    from camel_up_calculator.core.types import Color
    from camel_up_calculator.engine.outcomes import RankTable

COLUMN_WIDTH = 17


def format_cell(camel: Color, count: int, total: int) -> str:
    """``"Red (41.7%)"``"""
    share = count / total if total else 0.0
    return f"{DISPLAY_NAMES[camel]} ({share:.1%})"


def result_rows(table: RankTable) -> list[list[tuple[Color, int]]]:
    """Square grid: row ``i`` holds the ``i``-th most likely camel of every rank."""
    columns = [table.ranked(rank) for rank in table.ranks]
    return [[column[row] for column in columns] for row in table.ranks]


def render_results_text(table: RankTable) -> str:
    total = table.total
    lines = [
        "Results",
        "".join(str(rank + 1).ljust(COLUMN_WIDTH) for rank in table.ranks),
    ]
    lines.extend(
        "".join(
            format_cell(camel, count, total).ljust(COLUMN_WIDTH)
            for camel, count in row
        )
        for row in result_rows(table)
    )
    return "\n".join(lines) + "\n"


def render_results_rich(table: RankTable) -> Table:
    total = table.total
    grid = Table(title="Results", show_lines=False)
    for rank in table.ranks:
        grid.add_column(str(rank + 1), min_width=COLUMN_WIDTH - 2)

    for row in result_rows(table):
        grid.add_row(
            *(
                f"[{get_camel_style(camel)}]{format_cell(camel, count, total)}[/]"
                for camel, count in row
            ),
        )
    return grid
