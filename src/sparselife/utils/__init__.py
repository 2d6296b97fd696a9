"""Utility functions for grid conversion, patterns and trajectory storage"""

from .grid import to_array, from_array, clip, spawn, place_pattern
from .dense import step_dense, simulate_dense
from .patterns import get_pattern, get_category, get_all_patterns, parse_plaintext, PATTERN_CATEGORIES
from .recording import save_trajectory, load_trajectory, TrajectoryDataset

__all__ = [
    'to_array',
    'from_array',
    'clip',
    'spawn',
    'place_pattern',
    'step_dense',
    'simulate_dense',
    'get_pattern',
    'get_category',
    'get_all_patterns',
    'parse_plaintext',
    'PATTERN_CATEGORIES',
    'save_trajectory',
    'load_trajectory',
    'TrajectoryDataset',
]
