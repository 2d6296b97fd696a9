"""Metrics and pattern classification for live-cell trajectories."""
import numpy as np
from typing import FrozenSet, Iterable, List, Sequence, Tuple

from ..core.engine import GameOfLife, LiveSet, normalize
from ..core.neighborhood import BoundsLike, as_bounds
from ..core.rules import CONWAY, Rule
from ..utils.dense import step_dense
from ..utils.grid import from_array, to_array


def population(live: Iterable[Sequence[int]]) -> int:
    """Return the number of live cells."""
    return len(frozenset(map(tuple, live)))


def density(live: Iterable[Sequence[int]], bounds: BoundsLike) -> float:
    """Return the fraction of in-bounds cells that are alive."""
    bounds = as_bounds(bounds)
    return len(normalize(live, bounds)) / (bounds.width * bounds.height)


def births_and_deaths(previous: LiveSet, current: LiveSet) -> Tuple[LiveSet, LiveSet]:
    """Return (born, died) between two consecutive generations."""
    previous, current = frozenset(previous), frozenset(current)
    return current - previous, previous - current


def hamming_distance(pred: LiveSet, true: LiveSet, bounds: BoundsLike) -> float:
    """Return the fraction of grid cells whose state differs."""
    bounds = as_bounds(bounds)
    diff = normalize(pred, bounds) ^ normalize(true, bounds)
    return len(diff) / (bounds.width * bounds.height)


def cell_accuracy(pred: LiveSet, true: LiveSet, bounds: BoundsLike) -> float:
    """Return cell-wise accuracy over the whole grid."""
    return 1.0 - hamming_distance(pred, true, bounds)


def pattern_preservation_score(pred: LiveSet, true: LiveSet) -> float:
    """Return an F1 score of predicted live cells against the true ones."""
    pred, true = frozenset(pred), frozenset(true)
    if not true:
        return 1.0 if not pred else 0.0
    if not pred:
        return 0.0

    hits = len(pred & true)
    precision = hits / len(pred)
    recall = hits / len(true)
    if precision + recall == 0:
        return 0.0
    return 2 * (precision * recall) / (precision + recall)


def dense_agreement(initial: Iterable[Sequence[int]], bounds: BoundsLike,
                    num_steps: int, rule: Rule = CONWAY) -> np.ndarray:
    """
    Run the sparse engine and the dense reference side by side.

    Returns:
        Per-step cell accuracy of the sparse generations against the dense ones
    """
    bounds = as_bounds(bounds)
    generations = GameOfLife(bounds, rule).simulate(initial, num_steps)
    state = to_array(generations[0], bounds)
    accuracies = np.zeros(num_steps)
    for t in range(num_steps):
        state = step_dense(state, rule)
        accuracies[t] = cell_accuracy(generations[t + 1], from_array(state), bounds)
    return accuracies


def population_curve(generations: List[LiveSet]) -> np.ndarray:
    """Return the population of every generation as an int array."""
    return np.array([len(live) for live in generations], dtype=int)


def canonical_shape(live: LiveSet) -> Tuple[FrozenSet[Tuple[int, int]], Tuple[int, int]]:
    """Translate ``live`` so its bounding box starts at the origin.

    Returns:
        Tuple of (shape, origin) where origin is the ``(x, y)`` shift removed
    """
    if not live:
        return frozenset(), (0, 0)
    min_x = min(x for x, _ in live)
    min_y = min(y for _, y in live)
    return frozenset((x - min_x, y - min_y) for x, y in live), (min_x, min_y)


def find_period(live: Iterable[Sequence[int]], bounds: BoundsLike,
                rule: Rule = CONWAY, max_steps: int = 200):
    """
    Return ``(period, transient)`` of the cycle the pattern falls into, or
    None if no generation repeats within ``max_steps``.
    """
    history, first_index = GameOfLife(bounds, rule).run_until_repeat(live, max_steps)
    if first_index is None:
        return None
    return len(history) - first_index, first_index


def classify(live: Iterable[Sequence[int]], bounds: BoundsLike,
             rule: Rule = CONWAY, max_steps: int = 200) -> dict:
    """
    Classify the long-term behaviour of a pattern on a bounded grid.

    Categories:
        extinct      every cell eventually dies
        still_life   the pattern is its own successor
        oscillator   the pattern returns to itself after period > 1
        spaceship    the pattern reappears translated
        settles      the pattern falls into a different cycle
        unresolved   nothing repeats within ``max_steps``

    Returns:
        Dictionary with category, period, transient and displacement
    """
    history, first_index = GameOfLife(bounds, rule).run_until_repeat(live, max_steps)
    result = {'category': 'unresolved', 'period': None, 'transient': None, 'displacement': (0, 0)}

    shape, origin = canonical_shape(history[0])
    if not shape:
        result.update(category='extinct', period=1, transient=0)
        return result

    # Spaceships leave the grid or crash into the edge before repeating exactly
    for t, generation in enumerate(history[1:], start=1):
        other_shape, other_origin = canonical_shape(generation)
        if other_shape == shape and other_origin != origin:
            displacement = (other_origin[0] - origin[0], other_origin[1] - origin[1])
            result.update(category='spaceship', period=t, transient=0, displacement=displacement)
            return result

    if first_index is None:
        return result

    period = len(history) - first_index
    result.update(period=period, transient=first_index)
    if first_index == 0:
        result['category'] = 'still_life' if period == 1 else 'oscillator'
    elif not history[first_index]:
        result['category'] = 'extinct'
    else:
        result['category'] = 'settles'
    return result
