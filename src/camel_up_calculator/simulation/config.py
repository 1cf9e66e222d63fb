"""Scenario files for the calculator, decoded with msgspec."""

from __future__ import annotations

from pathlib import Path

import msgspec

from camel_up_calculator.engine.board import Board, parse_layout_tokens
from camel_up_calculator.engine.dice import (
    Die,
    get_base_dice_with_only,
    get_base_dice_without,
)

DEFAULT_LAYOUT: tuple[str, ...] = (
    "1:Y",
    "2:P",
    "3:G",
    "4:U",
    "5:R",
    "6:W",
    "7:B",
    "8:<",
    "9:>",
)


class ScenarioConfig(msgspec.Struct):
    """
    One leg to evaluate.

    Example TOML::

        layout = ["1:Y", "2:P", "3:GU", "8:<"]
        used_dice = "gp"
        ignore_trailing = 1

    ``layout`` entries are ``index:camels`` with camels listed top to bottom.
    ``available_dice``, if set, wins over ``used_dice``.
    """

    layout: list[str] = msgspec.field(default_factory=lambda: list(DEFAULT_LAYOUT))
    used_dice: str = "gp"
    available_dice: str | None = None
    # The last pyramid die of a leg is never rolled.
    ignore_trailing: int = 1

    @classmethod
    def from_toml(cls, path: str | Path) -> ScenarioConfig:
        """Load a scenario from a TOML file path."""
        with Path(path).open("rb") as f:
            return msgspec.toml.decode(f.read(), type=cls)

    def build_board(self) -> Board:
        return Board.from_layout(parse_layout_tokens(self.layout))

    def build_dice(self) -> list[Die]:
        if self.available_dice is not None:
            return get_base_dice_with_only(self.available_dice)
        return get_base_dice_without(self.used_dice)
