"""
Generate trajectory datasets with the sparse Game of Life engine
"""
import sys
import argparse
from pathlib import Path
import numpy as np
from tqdm import tqdm

sys.path.append(str(Path(__file__).parent.parent / "src"))

from sparselife.config import SimulationConfig
from sparselife.core import GameOfLife, parse_rule
from sparselife.utils.grid import from_array, place_pattern
from sparselife.utils.patterns import get_pattern
from sparselife.utils.recording import save_trajectory


def generate_random_seeds(num_samples, grid_size=(32, 32), density=0.3, seed=None):
    """
    Generate random initial live sets.

    Args:
        num_samples: Number of seeds to generate
        grid_size: Grid (width, height)
        density: Probability of alive cell
        seed: Random seed

    Returns:
        List of live sets
    """
    rng = np.random.default_rng(seed)
    width, height = grid_size
    grids = rng.random((num_samples, height, width)) < density
    return [from_array(grid) for grid in grids]


def generate_pattern_seeds(pattern_names, grid_size=(32, 32), samples_per_pattern=10, seed=None):
    """
    Place named patterns at random positions away from the edges.

    Returns:
        List of (pattern_name, live set) pairs
    """
    rng = np.random.default_rng(seed)
    width, height = grid_size
    seeds = []
    for pattern_name in pattern_names:
        pattern = get_pattern(pattern_name)
        ph, pw = pattern.shape
        max_x = width - pw - 1
        max_y = height - ph - 1
        for _ in range(samples_per_pattern):
            if max_x > 1 and max_y > 1:
                pos = (int(rng.integers(1, max_x)), int(rng.integers(1, max_y)))
            else:
                pos = None
            seeds.append((pattern_name, place_pattern(grid_size, pattern, position=pos)))
    return seeds


def main():
    """Generate random and pattern trajectory files."""
    parser = argparse.ArgumentParser(description='Generate Game of Life trajectory datasets')
    parser.add_argument('--width', type=int, default=SimulationConfig.GRID_SIZE[0])
    parser.add_argument('--height', type=int, default=SimulationConfig.GRID_SIZE[1])
    parser.add_argument('--density', type=float, default=SimulationConfig.DENSITY)
    parser.add_argument('--num-trajectories', type=int, default=SimulationConfig.NUM_TRAJECTORIES)
    parser.add_argument('--num-steps', type=int, default=SimulationConfig.NUM_STEPS)
    parser.add_argument('--rule', type=str, default=SimulationConfig.RULE,
                        help='Rule in B/S notation, e.g. B36/S23')
    parser.add_argument('--seed', type=int, default=SimulationConfig.SEED)
    parser.add_argument('--output-dir', type=str, default=str(SimulationConfig.DATA_DIR))
    args = parser.parse_args()

    grid_size = (args.width, args.height)
    rule = parse_rule(args.rule)
    output_dir = Path(args.output_dir)
    random_dir = output_dir / "random"
    pattern_dir = output_dir / "patterns"
    random_dir.mkdir(parents=True, exist_ok=True)
    pattern_dir.mkdir(parents=True, exist_ok=True)

    gol = GameOfLife(grid_size, rule)

    print("=" * 60)
    print("Game of Life Dataset Generation")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  Grid size: {grid_size}")
    print(f"  Rule: {rule.notation}")
    print(f"  Density: {args.density}")
    print(f"  Trajectories: {args.num_trajectories}")
    print(f"  Steps: {args.num_steps}")

    print("\n" + "=" * 60)
    print("1. Random seeds...")
    print("=" * 60)
    seeds = generate_random_seeds(args.num_trajectories, grid_size, args.density, seed=args.seed)
    for i, live in enumerate(tqdm(seeds, desc="Evolving seeds")):
        generations = gol.simulate(live, args.num_steps)
        save_trajectory(
            random_dir / f"trajectory_{i:05d}.h5",
            generations,
            grid_size,
            metadata={
                'rule': rule.notation,
                'density': args.density,
                'seed': args.seed,
                'description': 'Random initial state',
            }
        )

    print("\n" + "=" * 60)
    print("2. Pattern seeds...")
    print("=" * 60)
    pattern_names = ['block', 'beehive', 'boat', 'blinker', 'toad', 'beacon', 'glider', 'lwss']
    pattern_seeds = generate_pattern_seeds(pattern_names, grid_size, seed=args.seed + 1)
    for i, (pattern_name, live) in enumerate(tqdm(pattern_seeds, desc="Evolving patterns")):
        generations = gol.simulate(live, args.num_steps)
        save_trajectory(
            pattern_dir / f"{pattern_name}_{i:04d}.h5",
            generations,
            grid_size,
            metadata={'rule': rule.notation, 'pattern': pattern_name}
        )

    print("\n" + "=" * 60)
    print("Dataset Generation Complete!")
    print("=" * 60)
    print(f"\nGenerated files in {output_dir.absolute()}:")
    print(f"  - random/: {len(seeds)} trajectories")
    print(f"  - patterns/: {len(pattern_seeds)} trajectories")


if __name__ == "__main__":
    main()
