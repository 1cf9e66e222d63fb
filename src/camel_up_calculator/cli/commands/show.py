"""CLI command printing a board and its current ranking."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path  # cappa needs this at runtime
from typing import Annotated

import cappa
from rich.console import Console

from camel_up_calculator.cli.converters import load_scenario, validate_layout
from camel_up_calculator.core.errors import BoardConsistencyError, LayoutParseError
from camel_up_calculator.core.palettes import get_camel_style
from camel_up_calculator.core.types import DISPLAY_NAMES
from camel_up_calculator.render.board import render_board_rich


@cappa.command(name="show", help="Print a board and its current racing order.")
@dataclass
class ShowCommand:
    config_file: Annotated[
        Path | None,
        cappa.Arg(short="-c", long="--config", help="Path to TOML scenario file."),
    ] = None
    layout: Annotated[
        list[str] | None,
        cappa.Arg(
            short="-l",
            long="--layout",
            parse=validate_layout,
            num_args=-1,
            help="Space separated 'index:camels' entries.",
        ),
    ] = None

    def __call__(self) -> None:
        scenario = load_scenario(self.config_file, self.layout, None, None, None)
        try:
            board = scenario.build_board()
        except (LayoutParseError, BoardConsistencyError) as e:
            raise cappa.Exit(str(e), code=1) from e

        console = Console()
        console.print(render_board_rich(board))
        order = " > ".join(
            f"[{get_camel_style(camel)}]{DISPLAY_NAMES[camel]}[/]"
            for camel in board.racing_order()
        )
        console.print(f"Racing order: {order}")
