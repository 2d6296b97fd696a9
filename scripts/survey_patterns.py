"""
Run every predefined pattern and report how it behaves on a bounded grid
"""
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent / "src"))

from sparselife.config import SimulationConfig
from sparselife.evaluation.metrics import classify, dense_agreement
from sparselife.utils.grid import place_pattern
from sparselife.utils.patterns import PATTERN_CATEGORIES, CATEGORY_PERIODS


def main():
    """Classify each pattern and cross-check it against the dense reference."""
    print("Surveying patterns...")
    print("=" * 60)

    for category_name, patterns in PATTERN_CATEGORIES.items():
        print(f"\nCategory: {category_name} (expected period: {CATEGORY_PERIODS[category_name]})")
        print("-" * 60)

        for pattern_name, pattern in patterns.items():
            # Guns need room to emit gliders before they hit the edge
            if pattern_name == 'glider_gun':
                grid_size = (80, 50)
                num_steps = 150
            elif pattern_name == 'pulsar':
                grid_size = (30, 30)
                num_steps = SimulationConfig.NUM_STEPS
            else:
                grid_size = (20, 20)
                num_steps = SimulationConfig.NUM_STEPS

            initial = place_pattern(grid_size, pattern, position=None)
            result = classify(initial, grid_size, max_steps=SimulationConfig.MAX_PERIOD_SEARCH)
            accuracy = dense_agreement(initial, grid_size, num_steps)

            print(f"  {pattern_name:<12} {result['category']:<11} "
                  f"period={result['period']} transient={result['transient']} "
                  f"displacement={result['displacement']} "
                  f"dense agreement={accuracy.min():.2%}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
