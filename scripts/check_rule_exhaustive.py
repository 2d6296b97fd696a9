"""
Check the sparse engine on ALL possible 3x3 neighbourhoods (exhaustive test).
The next state of a cell only depends on its 3x3 neighbourhood, so the
2^9 = 512 patterns cover every case the rule can see.
"""
import sys
import argparse
from pathlib import Path
from itertools import product

sys.path.append(str(Path(__file__).parent.parent / "src"))

from sparselife.core import Coordinate, parse_rule, step

CENTER = Coordinate(1, 1)


def expected_center(bits, rule):
    """Apply the rule directly to the center of a 3x3 pattern."""
    alive = bits[4] == 1
    alive_neighbors = sum(bits) - bits[4]
    return rule.next_state(alive, alive_neighbors)


def check_all_patterns(rule):
    """
    Run every 3x3 pattern through the engine.

    Returns:
        List of error dicts, empty when the engine agrees everywhere
    """
    errors = []
    for bits in product([0, 1], repeat=9):
        live = {Coordinate(i % 3, i // 3) for i, bit in enumerate(bits) if bit}
        predicted = CENTER in step(live, (3, 3), rule)
        expected = expected_center(bits, rule)
        if predicted != expected:
            errors.append({
                'pattern': bits,
                'neighbors': sum(bits) - bits[4],
                'center_alive': bool(bits[4]),
                'predicted': predicted,
                'expected': expected,
            })
    return errors


def main():
    parser = argparse.ArgumentParser(description='Check the engine on all possible 3x3 patterns')
    parser.add_argument('--rule', type=str, default='B3/S23',
                        help='Rule in B/S notation')
    args = parser.parse_args()

    rule = parse_rule(args.rule)

    print("=" * 70)
    print(f"EXHAUSTIVE 3x3 CHECK ({rule.notation})")
    print("=" * 70)

    errors = check_all_patterns(rule)

    print(f"Total patterns: 512")
    print(f"Correct: {512 - len(errors)}")
    print(f"Errors: {len(errors)}")

    for error in errors[:10]:
        print(f"  pattern={error['pattern']} neighbors={error['neighbors']} "
              f"alive={error['center_alive']} pred={error['predicted']} expected={error['expected']}")

    if errors:
        sys.exit(1)
    print("\n✓ PERFECT - No errors!")


if __name__ == "__main__":
    main()
