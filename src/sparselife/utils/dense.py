"""Dense numpy reference stepper with dead cells beyond the edges."""
import numpy as np

from ..core.rules import CONWAY, Rule


def count_neighbors_dense(state: np.ndarray) -> np.ndarray:
    """Count live neighbours of every cell, treating off-grid cells as dead."""
    h, w = state.shape
    padded = np.pad(state.astype(int), 1, mode='constant', constant_values=0)
    neighbors = np.zeros((h, w), dtype=int)
    for dy in [-1, 0, 1]:
        for dx in [-1, 0, 1]:
            if dy == 0 and dx == 0:
                continue
            neighbors += padded[1 + dy:1 + dy + h, 1 + dx:1 + dx + w]
    return neighbors


def step_dense(state: np.ndarray, rule: Rule = CONWAY) -> np.ndarray:
    """Compute the next state of a full ``(H, W)`` grid."""
    neighbors = count_neighbors_dense(state)
    survive = np.isin(neighbors, sorted(rule.survival))
    birth = np.isin(neighbors, sorted(rule.birth))
    next_state = ((state == 1) & survive) | ((state == 0) & birth)
    return next_state.astype(np.uint8)


def simulate_dense(initial_state: np.ndarray, num_steps: int, rule: Rule = CONWAY) -> np.ndarray:
    """Simulate on a dense grid and return the trajectory ``(T + 1, H, W)``."""
    h, w = initial_state.shape
    trajectory = np.zeros((num_steps + 1, h, w), dtype=np.uint8)
    trajectory[0] = initial_state
    current_state = initial_state.copy()
    for t in range(1, num_steps + 1):
        current_state = step_dense(current_state, rule)
        trajectory[t] = current_state
    return trajectory
