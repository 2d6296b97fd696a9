import numpy as np
import pytest

from sparselife.evaluation.metrics import (
    births_and_deaths,
    canonical_shape,
    cell_accuracy,
    classify,
    dense_agreement,
    density,
    find_period,
    hamming_distance,
    pattern_preservation_score,
    population,
    population_curve,
)
from sparselife.utils.grid import place_pattern
from sparselife.utils.patterns import get_pattern


def test_population_and_density(block):
    assert population(block) == 4
    assert population([(0, 0), (0, 0)]) == 1
    assert density(block, (4, 4)) == pytest.approx(0.25)
    assert density(block | {(9, 9)}, (4, 4)) == pytest.approx(0.25)


def test_births_and_deaths(blinker):
    vertical = {(2, 1), (2, 2), (2, 3)}
    born, died = births_and_deaths(blinker, vertical)

    assert born == {(2, 1), (2, 3)}
    assert died == {(1, 2), (3, 2)}


def test_hamming_and_accuracy():
    pred = {(0, 0), (1, 0)}
    true = {(0, 0), (1, 1)}

    assert hamming_distance(pred, true, (2, 2)) == pytest.approx(0.5)
    assert cell_accuracy(pred, true, (2, 2)) == pytest.approx(0.5)
    assert cell_accuracy(true, true, (2, 2)) == 1.0


@pytest.mark.parametrize("pred,true,expected", [
    (set(), set(), 1.0),
    ({(0, 0)}, set(), 0.0),
    (set(), {(0, 0)}, 0.0),
    ({(0, 0)}, {(1, 1)}, 0.0),
    ({(0, 0), (1, 1)}, {(0, 0)}, 2 / 3),
])
def test_pattern_preservation_score(pred, true, expected):
    assert pattern_preservation_score(pred, true) == pytest.approx(expected)


def test_dense_agreement_is_perfect(rng):
    grid = rng.random((9, 14)) < 0.35
    live = {(int(x), int(y)) for y, x in zip(*np.nonzero(grid))}
    accuracies = dense_agreement(live, (14, 9), 10)

    assert accuracies.shape == (10,)
    assert np.all(accuracies == 1.0)


def test_population_curve(blinker):
    assert population_curve([blinker, {(0, 0)}, set()]).tolist() == [3, 1, 0]


def test_canonical_shape():
    shape, origin = canonical_shape(frozenset({(3, 4), (4, 5)}))

    assert shape == {(0, 0), (1, 1)}
    assert origin == (3, 4)
    assert canonical_shape(frozenset()) == (frozenset(), (0, 0))


def test_find_period(block, blinker):
    assert find_period(block, (4, 4)) == (1, 0)
    assert find_period(blinker, (5, 5)) == (2, 0)
    assert find_period({(2, 2)}, (5, 5)) == (1, 1)


def test_find_period_gives_up(glider):
    assert find_period(glider, (30, 30), max_steps=5) is None


class TestClassify:
    def test_still_life(self, block):
        result = classify(block, (4, 4))

        assert result['category'] == 'still_life'
        assert result['period'] == 1
        assert result['transient'] == 0

    def test_oscillator(self, blinker):
        result = classify(blinker, (5, 5))

        assert result['category'] == 'oscillator'
        assert result['period'] == 2

    def test_extinct(self):
        assert classify({(2, 2)}, (5, 5))['category'] == 'extinct'
        assert classify(set(), (5, 5))['category'] == 'extinct'

    def test_settles(self):
        result = classify({(0, 0), (1, 0), (0, 1)}, (5, 5))

        assert result['category'] == 'settles'
        assert result['period'] == 1
        assert result['transient'] == 1

    def test_spaceship(self):
        live = place_pattern((20, 20), get_pattern('glider'))
        result = classify(live, (20, 20))

        assert result['category'] == 'spaceship'
        assert result['period'] == 4
        assert result['displacement'] == (1, 1)

    def test_unresolved(self, glider):
        result = classify(glider, (20, 20), max_steps=2)

        assert result['category'] == 'unresolved'
        assert result['period'] is None


def test_classify_rejects_negative_steps(block):
    with pytest.raises(ValueError):
        classify(block, (4, 4), max_steps=-1)


def test_find_period_rejects_negative_steps(block):
    with pytest.raises(ValueError):
        find_period(block, (4, 4), max_steps=-1)
