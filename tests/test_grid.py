import numpy as np
import pytest

from sparselife.utils.grid import clip, from_array, place_pattern, spawn, to_array
from sparselife.utils.patterns import BLOCK, GLIDER


def test_to_array_indexes_by_row_then_column():
    grid = to_array({(3, 0), (0, 1)}, (4, 2))

    assert grid.shape == (2, 4)
    assert grid.dtype == np.uint8
    assert grid[0, 3] == 1
    assert grid[1, 0] == 1
    assert grid.sum() == 2


def test_to_array_ignores_out_of_bounds():
    grid = to_array({(0, 0), (5, 5)}, (2, 2))

    assert grid.sum() == 1


def test_to_array_empty():
    assert to_array(set(), (3, 3)).sum() == 0


def test_from_array():
    grid = np.array([
        [0, 1, 0],
        [0, 0, 2],
    ])

    assert from_array(grid) == {(1, 0), (2, 1)}


def test_from_array_rejects_non_2d():
    with pytest.raises(ValueError):
        from_array(np.zeros((2, 2, 2)))


def test_place_pattern_centered():
    assert place_pattern((5, 5), BLOCK) == {(1, 1), (2, 1), (1, 2), (2, 2)}


def test_place_pattern_at_position():
    live = place_pattern((10, 10), GLIDER, position=(4, 2))

    assert live == {(5, 2), (6, 3), (4, 4), (5, 4), (6, 4)}


def test_place_pattern_clips_to_grid():
    assert place_pattern((5, 5), BLOCK, position=(4, 4)) == {(4, 4)}
    assert place_pattern((5, 5), BLOCK, position=(-1, -1)) == {(0, 0)}


def test_clip_drops_cells_after_shrink():
    live = {(0, 0), (3, 1), (1, 4)}

    assert clip(live, (2, 2)) == {(0, 0)}
    assert live == {(0, 0), (3, 1), (1, 4)}


def test_spawn_merges_without_duplicates():
    live = frozenset({(0, 0), (1, 1)})
    result = spawn(live, [(1, 1), (2, 2), (9, 9)], (3, 3))

    assert result == {(0, 0), (1, 1), (2, 2)}
    assert len(result) == 3
    assert live == {(0, 0), (1, 1)}
