"""Evaluation metrics and pattern classification."""

from .metrics import (
    population,
    density,
    births_and_deaths,
    hamming_distance,
    cell_accuracy,
    pattern_preservation_score,
    dense_agreement,
    population_curve,
    find_period,
    classify
)

__all__ = [
    'population',
    'density',
    'births_and_deaths',
    'hamming_distance',
    'cell_accuracy',
    'pattern_preservation_score',
    'dense_agreement',
    'population_curve',
    'find_period',
    'classify'
]
