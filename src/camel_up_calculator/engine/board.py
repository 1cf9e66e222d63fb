from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from camel_up_calculator.core import LOGGER_NAME
from camel_up_calculator.core.errors import BoardConsistencyError, LayoutParseError
from camel_up_calculator.core.types import (
    DISPLAY_NAMES,
    LAYOUT_CHARS,
    Color,
    SpaceKind,
    direction,
    is_crazy_camel,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from camel_up_calculator.core.move import Move

logger = logging.getLogger(LOGGER_NAME)

BUMP_TOKENS: dict[str, int] = {"<": -1, ">": 1}


@dataclass(slots=True)
class Space:
    """
    A track position. Either a camel stack or a bump (desert) tile.

    ``camels`` is ordered bottom to top: the last entry sits on everyone else.
    ``delta`` is only meaningful for bump spaces.
    """

    index: int
    kind: SpaceKind
    camels: list[Color] = field(default_factory=list)
    delta: int = 0

    @classmethod
    def camel_space(cls, index: int, camels: list[Color]) -> Space:
        return cls(index, SpaceKind.CAMEL, camels)

    @classmethod
    def bump_space(cls, index: int, delta: int) -> Space:
        return cls(index, SpaceKind.BUMP, delta=delta)

    @classmethod
    def parse(cls, index: int, token: str) -> Space:
        """
        Parse a layout token.

        ``"<"``/``">"`` is a bump space, anything else lists a stack top to
        bottom, e.g. ``"RGU"`` is Red on Green on Blue.
        """
        token = token.strip().lower()
        if not token:
            msg = f"Empty layout token at space {index}"
            raise LayoutParseError(msg)

        if token[0] in BUMP_TOKENS:
            if len(token) > 1:
                msg = f"Bump token at space {index} must be a single character, got {token!r}"
                raise LayoutParseError(msg)
            return cls.bump_space(index, BUMP_TOKENS[token[0]])

        camels: list[Color] = []
        for char in reversed(token):
            if char not in LAYOUT_CHARS:
                msg = f"Failed to parse camel. Unrecognized character: {char!r}"
                raise LayoutParseError(msg)
            camel = LAYOUT_CHARS[char]
            if camel in camels:
                msg = f"{DISPLAY_NAMES[camel]} is listed twice at space {index}"
                raise LayoutParseError(msg)
            camels.append(camel)
        return cls.camel_space(index, camels)

    @property
    def height(self) -> int:
        match self.kind:
            case SpaceKind.CAMEL:
                return len(self.camels)
            case SpaceKind.BUMP:
                return 1

    def clone(self) -> Space:
        match self.kind:
            case SpaceKind.CAMEL:
                return Space(self.index, self.kind, list(self.camels))
            case SpaceKind.BUMP:
                return Space(self.index, self.kind, delta=self.delta)


@dataclass(slots=True)
class Board:
    """Sparse track: only occupied spaces and bump tiles are stored."""

    spaces: dict[int, Space] = field(default_factory=dict)

    @classmethod
    def from_spaces(cls, spaces: Iterable[Space]) -> Board:
        board = cls()
        for space in spaces:
            board.add_space(space)
        return board

    @classmethod
    def from_layout(cls, layout: Iterable[tuple[int, str]]) -> Board:
        """
        Build a board from ``(index, token)`` pairs.

        Legend: G Green, P Purple, R Red, U Blue, Y Yellow, B Black, W White,
        ``>`` bump forward, ``<`` bump backward.
        """
        spaces: list[Space] = []
        seen: set[int] = set()
        for index, token in layout:
            if index in seen:
                msg = f"Space {index} is listed more than once"
                raise LayoutParseError(msg)
            seen.add(index)
            spaces.append(Space.parse(index, token))
        return cls.from_spaces(spaces)

    def add_space(self, space: Space) -> None:
        if space.index in self.spaces:
            msg = f"A space already exists at index {space.index}"
            raise BoardConsistencyError(msg)
        if space.kind is SpaceKind.CAMEL and not space.camels:
            return
        if len(set(space.camels)) != len(space.camels):
            msg = f"A camel appears twice in the stack at space {space.index}"
            raise BoardConsistencyError(msg)
        for camel in space.camels:
            existing = self.find_space(camel)
            if existing is not None:
                msg = (
                    f"{DISPLAY_NAMES[camel]} is already on space {existing.index}, "
                    f"cannot place it on {space.index}"
                )
                raise BoardConsistencyError(msg)

        self.spaces[space.index] = space

        if space.kind is SpaceKind.BUMP:
            self._check_bump_target(space)
        for neighbour in (space.index - 1, space.index + 1):
            other = self.spaces.get(neighbour)
            if other is not None and other.kind is SpaceKind.BUMP:
                self._check_bump_target(other)

    def _check_bump_target(self, bump: Space) -> None:
        target = self.spaces.get(bump.index + bump.delta)
        if target is not None and target.kind is SpaceKind.BUMP:
            msg = f"Two adjacent bump spaces are not allowed ({bump.index} -> {target.index})"
            raise BoardConsistencyError(msg)

    def clone(self) -> Board:
        return Board({index: space.clone() for index, space in self.spaces.items()})

    # --- Queries ---
    def space_at(self, index: int) -> Space | None:
        return self.spaces.get(index)

    def find_space(self, camel: Color) -> Space | None:
        for space in self.spaces.values():
            if space.kind is SpaceKind.CAMEL and camel in space.camels:
                return space
        return None

    def riders(self, camel: Color) -> list[Color]:
        """Camels stacked above ``camel``, bottom to top. Empty if it is not on the board."""
        space = self.find_space(camel)
        if space is None:
            return []
        return space.camels[space.camels.index(camel) + 1 :]

    def sorted_spaces(self) -> list[Space]:
        return [self.spaces[index] for index in sorted(self.spaces)]

    @property
    def camels(self) -> list[Color]:
        return [
            camel
            for space in self.sorted_spaces()
            if space.kind is SpaceKind.CAMEL
            for camel in space.camels
        ]

    @property
    def min_index(self) -> int:
        return min(self.spaces)

    @property
    def max_index(self) -> int:
        return max(self.spaces)

    @property
    def tallest_stack(self) -> int:
        return max((space.height for space in self.spaces.values()), default=0)

    def racing_order(self) -> list[Color]:
        """Racing camels from first to last place. Crazy camels never rank."""
        order: list[Color] = []
        for index in sorted(self.spaces, reverse=True):
            space = self.spaces[index]
            if space.kind is not SpaceKind.CAMEL:
                continue
            order.extend(
                camel for camel in reversed(space.camels) if not is_crazy_camel(camel)
            )
        return order

    # --- Mutation ---
    def resolve_crazy_camel(self, camel: Color) -> Color:
        """
        Pick which crazy camel actually moves when the crazy die shows ``camel``.

        1. If only one crazy camel is carrying camels on its back, move that one.
        2. If one crazy camel sits directly on the other, move the one on top.
        """
        white_riders = self.riders(Color.WHITE)
        black_riders = self.riders(Color.BLACK)

        if white_riders and not black_riders:
            camel = Color.WHITE
        if black_riders and not white_riders:
            camel = Color.BLACK

        if white_riders and white_riders[0] is Color.BLACK:
            camel = Color.BLACK
        if black_riders and black_riders[0] is Color.WHITE:
            camel = Color.WHITE

        return camel

    def apply_move(self, move: Move) -> None:
        camel = move.camel
        if is_crazy_camel(camel):
            camel = self.resolve_crazy_camel(camel)

        from_space = self.find_space(camel)
        if from_space is None:
            msg = f"No camel found of color {DISPLAY_NAMES[camel]}"
            raise BoardConsistencyError(msg)

        camel_idx = from_space.camels.index(camel)
        moving = from_space.camels[camel_idx:]
        del from_space.camels[camel_idx:]

        if not from_space.camels:
            # Everyone left, no need to keep the space around
            del self.spaces[from_space.index]

        step = direction(camel)
        destination = from_space.index + step * move.spaces
        destination_space = self.spaces.get(destination)
        bumped_from: int | None = None

        if destination_space is not None and destination_space.kind is SpaceKind.BUMP:
            bumped_from = destination
            destination += step * destination_space.delta
            destination_space = self.spaces.get(destination)
            if (
                destination_space is not None
                and destination_space.kind is SpaceKind.BUMP
            ):
                msg = f"Two adjacent bump spaces are not allowed ({bumped_from} -> {destination})"
                raise BoardConsistencyError(msg)

        if destination_space is None:
            self.spaces[destination] = Space.camel_space(destination, moving)
        elif destination_space.kind is SpaceKind.CAMEL:
            destination_space.camels.extend(moving)
        else:
            msg = f"Unknown space type at index {destination}"
            raise BoardConsistencyError(msg)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Move: %s %s %s->%s%s",
                DISPLAY_NAMES[camel],
                move.spaces,
                from_space.index,
                destination,
                f" (BUMP from {bumped_from})" if bumped_from is not None else "",
            )


def parse_layout_tokens(tokens: Iterable[str]) -> list[tuple[int, str]]:
    """Turn ``["1:y", "8:<"]`` into ``[(1, "y"), (8, "<")]``."""
    layout: list[tuple[int, str]] = []
    for raw in tokens:
        index_str, sep, token = raw.partition(":")
        if not sep:
            msg = f"Invalid layout entry '{raw}'. Expected 'index:camels'."
            raise LayoutParseError(msg)
        try:
            index = int(index_str.strip())
        except ValueError as e:
            msg = f"Invalid space index in layout entry '{raw}'"
            raise LayoutParseError(msg) from e
        layout.append((index, token))
    return layout
