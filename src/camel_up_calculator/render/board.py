"""
Board pictures for the terminal.

Example::

          R  Y     P
    G     B  U  <  W
    3  4  5  6  7  8
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

from camel_up_calculator.core.palettes import get_camel_style
from camel_up_calculator.core.types import SHORT_CHARS, Color, SpaceKind

if TYPE_CHECKING:
    from camel_up_calculator.engine.board import Board

CELL_WIDTH = 3

# A cell is empty (None), a camel, or a bump delta.
Cell = Color | int | None


def board_rows(board: Board) -> list[list[Cell]]:
    """Grid of cells, top row first, one column per index from min to max."""
    if not board.spaces:
        return []

    rows: list[list[Cell]] = []
    for height in range(board.tallest_stack - 1, -1, -1):
        row: list[Cell] = []
        for index in range(board.min_index, board.max_index + 1):
            space = board.space_at(index)
            if space is None or height > space.height - 1:
                row.append(None)
            elif space.kind is SpaceKind.CAMEL:
                row.append(space.camels[height])
            else:
                row.append(space.delta)
        rows.append(row)
    return rows


def _cell_char(cell: Cell) -> str:
    if cell is None:
        return ""
    if isinstance(cell, Color):
        return SHORT_CHARS[cell]
    return "<" if cell < 0 else ">"


def _index_line(board: Board) -> str:
    return "".join(
        str(index).ljust(CELL_WIDTH)
        for index in range(board.min_index, board.max_index + 1)
    )


def render_board_text(board: Board) -> str:
    if not board.spaces:
        return ""
    lines = [
        "".join(_cell_char(cell).ljust(CELL_WIDTH) for cell in row)
        for row in board_rows(board)
    ]
    lines.append(_index_line(board))
    return "\n".join(lines)


def render_board_rich(board: Board) -> Text:
    """Same layout as ``render_board_text`` with camels on their own colour."""
    text = Text()
    if not board.spaces:
        return text

    for row in board_rows(board):
        for cell in row:
            if isinstance(cell, Color):
                text.append(_cell_char(cell), style=get_camel_style(cell))
                text.append(" " * (CELL_WIDTH - 1))
            else:
                text.append(_cell_char(cell).ljust(CELL_WIDTH))
        text.append("\n")
    text.append(_index_line(board))
    return text
