"""Conversion between live-cell sets and dense grids, plus pattern placement."""
import numpy as np
from typing import Iterable, Optional, Sequence, Tuple

from ..core.engine import LiveSet, normalize
from ..core.neighborhood import BoundsLike, Coordinate, as_bounds


def to_array(live: Iterable[Sequence[int]], bounds: BoundsLike) -> np.ndarray:
    """Render live cells into a ``(height, width)`` uint8 grid indexed ``[y, x]``."""
    bounds = as_bounds(bounds)
    grid = np.zeros((bounds.height, bounds.width), dtype=np.uint8)
    cells = normalize(live, bounds)
    if cells:
        xs, ys = zip(*cells)
        grid[list(ys), list(xs)] = 1
    return grid


def from_array(grid: np.ndarray) -> LiveSet:
    """Return the non-zero cells of a 2D grid as Coordinates."""
    grid = np.asarray(grid)
    if grid.ndim != 2:
        raise ValueError(f"Expected a 2D grid, got shape {grid.shape}")
    ys, xs = np.nonzero(grid)
    return frozenset(Coordinate(int(x), int(y)) for x, y in zip(xs, ys))


def clip(live: Iterable[Sequence[int]], bounds: BoundsLike) -> LiveSet:
    """Drop the cells that fall outside ``bounds`` (e.g. after a resize)."""
    return normalize(live, as_bounds(bounds))


def spawn(live: Iterable[Sequence[int]],
          cells: Iterable[Sequence[int]],
          bounds: BoundsLike) -> LiveSet:
    """Return a new live set with the in-bounds ``cells`` added."""
    bounds = as_bounds(bounds)
    return normalize(live, bounds) | normalize(cells, bounds)


def place_pattern(bounds: BoundsLike,
                  pattern: np.ndarray,
                  position: Optional[Tuple[int, int]] = None) -> LiveSet:
    """
    Place a pattern on the grid, centered by default.

    Args:
        bounds: Grid ``(width, height)``
        pattern: 2D array, non-zero entries are live
        position: ``(x, y)`` of the pattern's top-left corner

    Returns:
        Live cells of the placed pattern, clipped to the grid
    """
    bounds = as_bounds(bounds)
    pattern = np.asarray(pattern)
    ph, pw = pattern.shape
    if position is None:
        start_x = (bounds.width - pw) // 2
        start_y = (bounds.height - ph) // 2
    else:
        start_x, start_y = position

    cells = ((x + start_x, y + start_y) for x, y in from_array(pattern))
    return normalize(cells, bounds)
