"""Sparse, bounded Conway's Game of Life."""

from .core import (
    Bounds,
    Coordinate,
    CONWAY,
    HIGHLIFE,
    GameOfLife,
    Rule,
    neighbors,
    parse_rule,
    step,
)

__version__ = '0.1.0'

__all__ = [
    'Bounds',
    'Coordinate',
    'CONWAY',
    'HIGHLIFE',
    'GameOfLife',
    'Rule',
    'neighbors',
    'parse_rule',
    'step',
]
