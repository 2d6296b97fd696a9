"""
Default settings for simulations and dataset generation.

Scripts read these values and let command-line arguments override them.
"""
from pathlib import Path


class SimulationConfig:
    """Configuration class for simulation and dataset parameters"""

    # ==========================================================================
    # GRID SETTINGS
    # ==========================================================================
    GRID_SIZE = (32, 32)  # (width, height), no wraparound at the edges
    RULE = 'B3/S23'

    # ==========================================================================
    # SIMULATION
    # ==========================================================================
    NUM_STEPS = 50
    MAX_PERIOD_SEARCH = 200  # Generations searched before a pattern counts as unresolved

    # ==========================================================================
    # DATASET GENERATION
    # ==========================================================================
    DENSITY = 0.3  # Probability a cell starts alive in random seeds
    NUM_TRAJECTORIES = 100
    SEED = 42

    # ==========================================================================
    # PATHS
    # ==========================================================================
    PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
    DATA_DIR = PROJECT_ROOT / 'data' / 'processed'
