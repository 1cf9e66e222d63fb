from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import polars as pl
from tqdm import tqdm

from camel_up_calculator.core import LOGGER_NAME
from camel_up_calculator.core.errors import BoardConsistencyError
from camel_up_calculator.core.types import DISPLAY_NAMES, Color
from camel_up_calculator.engine.permuter import count_sequences, generate_sequences

if TYPE_CHECKING:
    from collections.abc import Sequence

    from camel_up_calculator.engine.board import Board
    from camel_up_calculator.engine.dice import Die

logger = logging.getLogger(LOGGER_NAME)


@dataclass(slots=True)
class RankTable:
    """Weighted number of rolls putting each camel in each rank (0 = first place)."""

    camels: list[Color]
    counts: dict[tuple[int, Color], int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for rank in range(len(self.camels)):
            for camel in self.camels:
                _ = self.counts.setdefault((rank, camel), 0)

    @property
    def ranks(self) -> range:
        return range(len(self.camels))

    def add(self, order: Sequence[Color], weight: int) -> None:
        for rank, camel in enumerate(order):
            self.counts[(rank, camel)] += weight

    def count(self, rank: int, camel: Color) -> int:
        return self.counts[(rank, camel)]

    def totals(self) -> list[int]:
        return [
            sum(self.counts[(rank, camel)] for camel in self.camels)
            for rank in self.ranks
        ]

    @property
    def total(self) -> int:
        """Weight shared by every rank. Ranks disagreeing means a camel went missing."""
        totals = self.totals()
        if not totals:
            return 0
        if any(t != totals[0] for t in totals):
            msg = f"Rank totals differ: {totals}"
            raise BoardConsistencyError(msg)
        return totals[0]

    def probability(self, rank: int, camel: Color) -> float:
        total = self.total
        if total == 0:
            return 0.0
        return self.counts[(rank, camel)] / total

    def ranked(self, rank: int) -> list[tuple[Color, int]]:
        """Camels for one rank by descending count. Ties keep the starting order."""
        return sorted(
            ((camel, self.counts[(rank, camel)]) for camel in self.camels),
            key=lambda item: item[1],
            reverse=True,
        )

    def to_frame(self) -> pl.DataFrame:
        """Long format: one row per (rank, camel), rank 1-indexed."""
        total = self.total
        rows = [
            {
                "rank": rank + 1,
                "camel": DISPLAY_NAMES[camel],
                "count": self.counts[(rank, camel)],
            }
            for rank in self.ranks
            for camel in self.camels
        ]
        schema = {"rank": pl.Int64, "camel": pl.String, "count": pl.Int64}
        return pl.DataFrame(rows, schema=schema).with_columns(
            (pl.col("count") / total if total else pl.lit(0.0)).alias("probability"),
        )


def compute_outcomes(
    board: Board,
    dice: Sequence[Die],
    trailing_excluded: int = 0,
    *,
    progress: bool = False,
) -> RankTable:
    """
    Replay every roll sequence on a copy of ``board`` and tally the final ranks.

    ``board`` itself is never modified. A ``BoardConsistencyError`` raised while
    replaying aborts the whole computation.
    """
    table = RankTable(camels=board.racing_order())
    n_sequences = count_sequences(dice, trailing_excluded)
    logger.info(
        f"Aggregating result for {n_sequences} sequences over dice "
        f"{''.join(str(die.id) for die in dice) or '-'}...",
    )

    sequences = generate_sequences(dice, trailing_excluded)
    with tqdm(
        sequences,
        total=n_sequences,
        desc="Enumerating",
        unit="seq",
        disable=not progress,
        dynamic_ncols=True,
    ) as pbar:
        for sequence in pbar:
            active = board.clone()
            for move_and_count in sequence:
                active.apply_move(move_and_count.move)

            weight = math.prod(move_and_count.count for move_and_count in sequence)
            table.add(active.racing_order(), weight)

    logger.info(f"Aggregated {n_sequences} sequences, total weight {table.total}")
    return table
