from __future__ import annotations

from enum import Enum, IntEnum
from typing import Literal


class Color(IntEnum):
    RED = 0
    YELLOW = 1
    BLUE = 2
    GREEN = 3
    PURPLE = 4
    WHITE = 5
    BLACK = 6


class SpaceKind(Enum):
    CAMEL = "camel"
    BUMP = "bump"


DieId = Literal["r", "g", "u", "y", "p", "c"]
CamelName = Literal["Red", "Yellow", "Blue", "Green", "Purple", "White", "Black"]

CRAZY_CAMELS: frozenset[Color] = frozenset({Color.WHITE, Color.BLACK})

# Layout characters are lowercase; parsing lowercases its input first.
LAYOUT_CHARS: dict[str, Color] = {
    "r": Color.RED,
    "y": Color.YELLOW,
    "u": Color.BLUE,
    "g": Color.GREEN,
    "p": Color.PURPLE,
    "w": Color.WHITE,
    "b": Color.BLACK,
}

SHORT_CHARS: dict[Color, str] = {
    color: char.upper() for char, color in LAYOUT_CHARS.items()
}

DISPLAY_NAMES: dict[Color, CamelName] = {
    Color.RED: "Red",
    Color.YELLOW: "Yellow",
    Color.BLUE: "Blue",
    Color.GREEN: "Green",
    Color.PURPLE: "Purple",
    Color.WHITE: "White",
    Color.BLACK: "Black",
}

# Both crazy camels share one die.
DIE_NAMES: dict[Color, str] = {
    **DISPLAY_NAMES,
    Color.WHITE: "Crazy",
    Color.BLACK: "Crazy",
}


def is_crazy_camel(color: Color) -> bool:
    return color in CRAZY_CAMELS


def direction(color: Color) -> int:
    """+1 for racing camels, -1 for the crazy camels that run the track backwards."""
    return -1 if is_crazy_camel(color) else 1
