from __future__ import annotations

from dataclasses import dataclass, field

from camel_up_calculator.core.move import Move, MoveAndCount
from camel_up_calculator.core.types import Color, DieId


@dataclass(slots=True)
class Die:
    """One pyramid die: an id and its weighted faces."""

    id: DieId | str
    sides: list[MoveAndCount] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        return sum(side.count for side in self.sides)

    def __str__(self) -> str:
        return str(self.sides[0].move)


def _racing_die(die_id: DieId, camel: Color) -> Die:
    # Each value appears on two of the six faces.
    return Die(die_id, [MoveAndCount(Move(camel, spaces), 2) for spaces in (1, 2, 3)])


def _crazy_die() -> Die:
    return Die(
        "c",
        [
            MoveAndCount(Move(camel, spaces), 1)
            for camel in (Color.BLACK, Color.WHITE)
            for spaces in (1, 2, 3)
        ],
    )


def get_base_dice() -> list[Die]:
    """Fresh copy of the standard dice set, one die per racing camel plus the crazy die."""
    return [
        _racing_die("r", Color.RED),
        _racing_die("g", Color.GREEN),
        _racing_die("u", Color.BLUE),
        _racing_die("y", Color.YELLOW),
        _racing_die("p", Color.PURPLE),
        _crazy_die(),
    ]


def get_base_dice_without(used_dice_ids: str) -> list[Die]:
    """Base dice minus the ones already rolled this leg (case-insensitive)."""
    used = used_dice_ids.lower()
    return [die for die in get_base_dice() if die.id not in used]


def get_base_dice_with_only(available_dice_ids: str) -> list[Die]:
    """Base dice restricted to the given ids (case-insensitive)."""
    available = available_dice_ids.lower()
    return [die for die in get_base_dice() if die.id in available]
