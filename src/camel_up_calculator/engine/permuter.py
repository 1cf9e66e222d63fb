"""Enumerate every way a leg can be rolled."""

from __future__ import annotations

import itertools
import math
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from camel_up_calculator.core.move import MoveAndCount
    from camel_up_calculator.engine.dice import Die

T = TypeVar("T")

MoveSequence = tuple["MoveAndCount", ...]


def permute(items: Sequence[T], trailing_to_ignore: int = 0) -> Iterator[tuple[T, ...]]:
    """
    Every ordering of ``items``, cut short before the last ``trailing_to_ignore`` positions.

    Orderings that only differ in the ignored tail are yielded once. If there
    are no more items than ignored positions, a single empty ordering is yielded.
    """
    if trailing_to_ignore < 0:
        msg = f"trailing_to_ignore must be >= 0, got {trailing_to_ignore}"
        raise ValueError(msg)
    length = max(len(items) - trailing_to_ignore, 0)
    return itertools.permutations(items, length)


def cartesian_product(groups: Iterable[Iterable[T]]) -> Iterator[tuple[T, ...]]:
    return itertools.product(*groups)


def generate_sequences(
    dice: Sequence[Die],
    trailing_excluded: int = 0,
) -> Iterator[MoveSequence]:
    """
    Every (die order, face choice) pair as a tuple of weighted moves.

    For each ordering of the dice, yields the Cartesian product of the sides of
    each die in that order. The last ``trailing_excluded`` dice of an ordering
    contribute no moves. Multiply the counts inside one sequence to get its
    weight; summed over all sequences the weights give the number of equally
    likely rolls.
    """
    for die_order in permute(dice, trailing_excluded):
        yield from cartesian_product(die.sides for die in die_order)


def count_sequences(dice: Sequence[Die], trailing_excluded: int = 0) -> int:
    """Number of sequences ``generate_sequences`` yields, without generating them."""
    return sum(
        math.prod(len(die.sides) for die in die_order)
        for die_order in permute(dice, trailing_excluded)
    )


def total_weight(dice: Sequence[Die], trailing_excluded: int = 0) -> int:
    """Sum of the weights of every generated sequence."""
    return sum(
        math.prod(die.total_count for die in die_order)
        for die_order in permute(dice, trailing_excluded)
    )
