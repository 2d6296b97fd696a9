"""Sparse Game of Life engine on a bounded grid."""
import logging
from collections import Counter
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

from .neighborhood import Bounds, BoundsLike, Coordinate, as_bounds, as_coordinate, in_bounds, neighbors
from .rules import CONWAY, Rule

logger = logging.getLogger(__name__)

LiveSet = FrozenSet[Coordinate]


def normalize(live: Iterable[Sequence[int]], bounds: Bounds) -> LiveSet:
    """Return ``live`` as Coordinates, without the cells outside ``bounds``."""
    cells = (as_coordinate(cell) for cell in live)
    return frozenset(cell for cell in cells if in_bounds(cell, bounds))


def count_neighbors(live: Iterable[Sequence[int]], bounds: BoundsLike) -> Counter:
    """
    Count live neighbours for every cell adjacent to a live cell.

    Cells with no live neighbour are absent from the result.
    """
    bounds = as_bounds(bounds)
    counts = Counter()
    for cell in normalize(live, bounds):
        counts.update(neighbors(cell, bounds))
    return counts


def step(live: Iterable[Sequence[int]], bounds: BoundsLike, rule: Rule = CONWAY) -> LiveSet:
    """
    Compute the next generation.

    Only live cells and cells with at least one live neighbour are
    evaluated. Live cells are checked explicitly so that an isolated cell
    (absent from the neighbour counts) dies. The input is not modified.

    Args:
        live: Current live cells as ``(x, y)`` pairs
        bounds: Grid ``(width, height)``; cells outside are ignored
        rule: Birth/survival rule, Conway's B3/S23 by default

    Returns:
        Frozen set of live Coordinates for the next generation
    """
    bounds = as_bounds(bounds)
    current = normalize(live, bounds)
    counts = count_neighbors(current, bounds)

    survivors = {cell for cell in current if counts[cell] in rule.survival}
    births = {cell for cell, n in counts.items() if n in rule.birth and cell not in current}
    return frozenset(survivors | births)


class GameOfLife:
    """Game of Life simulator on a fixed, non-wrapping grid."""

    def __init__(self, bounds: BoundsLike = (32, 32), rule: Rule = CONWAY):
        """Create simulator for a ``(width, height)`` grid."""
        self.bounds = as_bounds(bounds)
        self.rule = rule

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    def step(self, live: Iterable[Sequence[int]]) -> LiveSet:
        """Compute the next generation for the provided live cells."""
        return step(live, self.bounds, self.rule)

    def simulate(self, initial: Iterable[Sequence[int]], num_steps: int) -> List[LiveSet]:
        """Simulate ``num_steps`` generations and return all of them, initial included."""
        if num_steps < 0:
            raise ValueError(f"num_steps must be non-negative, got {num_steps}")

        current = normalize(initial, self.bounds)
        generations = [current]
        for t in range(1, num_steps + 1):
            current = self.step(current)
            generations.append(current)
            logger.debug("generation %d: %d live cells", t, len(current))
        return generations

    def run_until_repeat(self, initial: Iterable[Sequence[int]],
                         max_steps: int) -> Tuple[List[LiveSet], Optional[int]]:
        """
        Simulate until a generation repeats or ``max_steps`` is reached.

        Returns:
            Tuple of (history, first_index). ``history`` holds the distinct
            generations seen in order; ``first_index`` is the position in
            ``history`` of the generation the simulation returned to, or
            None if no repeat happened within ``max_steps``.
        """
        if max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")

        seen = {}
        history = []
        current = normalize(initial, self.bounds)
        for t in range(max_steps + 1):
            if current in seen:
                logger.debug("generation %d repeats generation %d", t, seen[current])
                return history, seen[current]
            seen[current] = t
            history.append(current)
            current = self.step(current)
        return history, None
