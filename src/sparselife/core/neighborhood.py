"""Grid coordinates and clipped Moore neighbourhoods."""
import operator
from typing import List, NamedTuple, Sequence, Tuple, Union


class Coordinate(NamedTuple):
    """A grid cell. Compares and hashes like the plain ``(x, y)`` tuple."""
    x: int
    y: int


class Bounds(NamedTuple):
    """Valid range is ``0 <= x < width`` and ``0 <= y < height``."""
    width: int
    height: int


# Compass order N, NE, E, SE, S, SW, W, NW (y grows downwards)
COMPASS = {
    'N': (0, -1),
    'NE': (1, -1),
    'E': (1, 0),
    'SE': (1, 1),
    'S': (0, 1),
    'SW': (-1, 1),
    'W': (-1, 0),
    'NW': (-1, -1),
}
OFFSETS: Tuple[Tuple[int, int], ...] = tuple(COMPASS.values())

BoundsLike = Union[Bounds, Sequence[int]]


def as_bounds(bounds: BoundsLike) -> Bounds:
    """Coerce ``bounds`` to :class:`Bounds`, rejecting non-positive sizes."""
    try:
        width, height = bounds
    except (TypeError, ValueError):
        raise ValueError(f"Bounds must be a (width, height) pair, got {bounds!r}") from None

    if isinstance(width, bool) or isinstance(height, bool):
        raise ValueError(f"Bounds must be integers, got ({width!r}, {height!r})")
    try:
        width, height = operator.index(width), operator.index(height)
    except TypeError:
        raise ValueError(f"Bounds must be integers, got ({width!r}, {height!r})") from None

    if width < 1 or height < 1:
        raise ValueError(f"Bounds must be positive, got ({width}, {height})")
    return Bounds(width, height)


def as_coordinate(cell: Sequence[int]) -> Coordinate:
    """Coerce an ``(x, y)`` pair to :class:`Coordinate`, rejecting non-integers."""
    try:
        x, y = cell
    except (TypeError, ValueError):
        raise ValueError(f"Cells must be (x, y) pairs, got {cell!r}") from None
    try:
        return Coordinate(operator.index(x), operator.index(y))
    except TypeError:
        raise ValueError(f"Cell coordinates must be integers, got ({x!r}, {y!r})") from None


def in_bounds(cell: Sequence[int], bounds: Bounds) -> bool:
    """Return True if ``cell`` lies on the grid described by ``bounds``."""
    x, y = cell
    return 0 <= x < bounds.width and 0 <= y < bounds.height


def neighbors(cell: Sequence[int], bounds: BoundsLike) -> List[Coordinate]:
    """
    Return the Moore neighbours of ``cell`` that lie inside ``bounds``.

    Candidates are produced in compass order (N, NE, E, SE, S, SW, W, NW)
    and dropped when they fall off the grid. There is no wraparound, so a
    corner cell has 3 neighbours and an edge cell 5.

    Args:
        cell: ``(x, y)`` pair
        bounds: ``(width, height)`` pair

    Returns:
        List of in-bounds neighbour coordinates
    """
    width, height = as_bounds(bounds)
    x, y = as_coordinate(cell)
    result = []
    for dx, dy in OFFSETS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height:
            result.append(Coordinate(nx, ny))
    return result
