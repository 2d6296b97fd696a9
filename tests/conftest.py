import numpy as np
import pytest


@pytest.fixture
def block():
    return {(1, 1), (2, 1), (1, 2), (2, 2)}


@pytest.fixture
def blinker():
    """Horizontal blinker centred in a 5x5 grid."""
    return {(1, 2), (2, 2), (3, 2)}


@pytest.fixture
def glider():
    """Glider heading down-right, top-left corner at (1, 1)."""
    return {(2, 1), (3, 2), (1, 3), (2, 3), (3, 3)}


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
