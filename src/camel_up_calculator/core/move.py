from __future__ import annotations

from typing import NamedTuple

from camel_up_calculator.core.types import DIE_NAMES, Color


class Move(NamedTuple):
    camel: Color
    spaces: int

    def __str__(self) -> str:
        return f"{DIE_NAMES[self.camel]} {self.spaces}"


class MoveAndCount(NamedTuple):
    """A die face and how many physical faces show it."""

    move: Move
    count: int
