"""Sparse Game of Life core: neighbourhoods, rules and the generation engine."""

from .neighborhood import Coordinate, Bounds, COMPASS, neighbors, in_bounds, as_bounds, as_coordinate
from .rules import Rule, CONWAY, HIGHLIFE, make_rule, parse_rule
from .engine import GameOfLife, LiveSet, count_neighbors, normalize, step

__all__ = [
    'Coordinate',
    'Bounds',
    'COMPASS',
    'neighbors',
    'in_bounds',
    'as_bounds',
    'as_coordinate',
    'Rule',
    'CONWAY',
    'HIGHLIFE',
    'make_rule',
    'parse_rule',
    'GameOfLife',
    'LiveSet',
    'count_neighbors',
    'normalize',
    'step',
]
