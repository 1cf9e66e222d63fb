"""CLI command computing the exact ranking odds for one leg."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path  # cappa needs this at runtime
from typing import Annotated

import cappa
from rich.console import Console

from camel_up_calculator.cli.converters import (
    load_scenario,
    validate_dice_ids,
    validate_layout,
)
from camel_up_calculator.core.errors import BoardConsistencyError, LayoutParseError
from camel_up_calculator.engine.logging import configure_logging
from camel_up_calculator.engine.outcomes import compute_outcomes
from camel_up_calculator.engine.permuter import count_sequences
from camel_up_calculator.render.board import render_board_rich, render_board_text
from camel_up_calculator.render.results import (
    render_results_rich,
    render_results_text,
)


@cappa.command(
    name="calculate",
    help="Compute exact finishing-rank odds for the current leg. Uses the built-in starting scenario if no layout is given.",
)
@dataclass
class CalculateCommand:
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
            help="Space separated 'index:camels' entries, camels top to bottom, '<'/'>' for bumps.",
        ),
    ] = None
    without: Annotated[
        str | None,
        cappa.Arg(
            long="--without",
            parse=validate_dice_ids,
            help="Dice already rolled this leg, e.g. 'gp'.",
        ),
    ] = None
    only: Annotated[
        str | None,
        cappa.Arg(
            long="--only",
            parse=validate_dice_ids,
            help="Dice still in the pyramid, e.g. 'ruyc'. Wins over --without.",
        ),
    ] = None
    ignore_trailing: Annotated[
        int | None,
        cappa.Arg(
            long="--ignore-trailing",
            help="Number of trailing dice per ordering that are never rolled (default 1).",
        ),
    ] = None
    progress: Annotated[
        bool,
        cappa.Arg(long="--progress", help="Show a progress bar while enumerating."),
    ] = False
    plain: Annotated[
        bool,
        cappa.Arg(long="--plain", help="Plain fixed-width text output, no colours."),
    ] = False
    verbose: Annotated[
        bool,
        cappa.Arg(short="-v", long="--verbose", help="Log every applied move."),
    ] = False

    def __call__(self) -> None:
        configure_logging(logging.DEBUG if self.verbose else logging.INFO)
        scenario = load_scenario(
            self.config_file,
            self.layout,
            self.without,
            self.only,
            self.ignore_trailing,
        )

        try:
            board = scenario.build_board()
        except (LayoutParseError, BoardConsistencyError) as e:
            raise cappa.Exit(str(e), code=1) from e
        dice = scenario.build_dice()

        console = Console()
        console.print("Starting scenario:")
        if self.plain:
            console.out(render_board_text(board), highlight=False)
        else:
            console.print(render_board_rich(board))
        console.print(f"Available dice: {', '.join(str(die.id) for die in dice)}")
        console.print(
            f"Sequences: {count_sequences(dice, scenario.ignore_trailing)}",
        )

        # A consistency error propagates: no report from a partial table.
        table = compute_outcomes(
            board,
            dice,
            scenario.ignore_trailing,
            progress=self.progress,
        )
        if self.plain:
            console.out(render_results_text(table), highlight=False)
        else:
            console.print(render_results_rich(table))
