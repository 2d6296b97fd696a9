"""Predefined Game of Life patterns in plaintext notation ('O' alive, '.' dead)."""
import numpy as np


def parse_plaintext(text: str) -> np.ndarray:
    """
    Parse a pattern in plaintext format into a uint8 array.

    Lines starting with '!' are comments. Short rows are padded with dead
    cells on the right.
    """
    rows = [line.strip() for line in text.strip().splitlines()]
    rows = [row for row in rows if row and not row.startswith('!')]
    if not rows:
        raise ValueError("Pattern contains no rows")

    width = max(len(row) for row in rows)
    grid = np.zeros((len(rows), width), dtype=np.uint8)
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char in 'O*':
                grid[y, x] = 1
            elif char != '.':
                raise ValueError(f"Unexpected character {char!r} in row {y}")
    return grid


# Still lifes (period 1)
BLOCK = parse_plaintext("""
OO
OO
""")

BEEHIVE = parse_plaintext("""
.OO.
O..O
.OO.
""")

BOAT = parse_plaintext("""
OO.
O.O
.O.
""")

LOAF = parse_plaintext("""
.OO.
O..O
.O.O
..O.
""")

# Oscillators (period 2)
BLINKER = parse_plaintext("OOO")

TOAD = parse_plaintext("""
.OOO
OOO.
""")

BEACON = parse_plaintext("""
OO..
OO..
..OO
..OO
""")

# Oscillators (period 3)
PULSAR = parse_plaintext("""
..OOO...OOO..
.............
O....O.O....O
O....O.O....O
O....O.O....O
..OOO...OOO..
.............
..OOO...OOO..
O....O.O....O
O....O.O....O
O....O.O....O
.............
..OOO...OOO..
""")

# Spaceships (period 4)
GLIDER = parse_plaintext("""
.O.
..O
OOO
""")

LWSS = parse_plaintext("""
.O..O
O....
O...O
OOOO.
""")

# Gosper glider gun, one glider every 30 generations
GLIDER_GUN = parse_plaintext("""
........................O...........
......................O.O...........
............OO......OO............OO
...........O...O....OO............OO
OO........O.....O...OO..............
OO........O...O.OO....O.O...........
..........O.....O.......O...........
...........O...O....................
............OO......................
""")


PATTERN_CATEGORIES = {
    'still_lifes': {
        'block': BLOCK,
        'beehive': BEEHIVE,
        'boat': BOAT,
        'loaf': LOAF,
    },
    'oscillators_p2': {
        'blinker': BLINKER,
        'toad': TOAD,
        'beacon': BEACON,
    },
    'oscillators_p3': {
        'pulsar': PULSAR,
    },
    'spaceships': {
        'glider': GLIDER,
        'lwss': LWSS,
    },
    'guns': {
        'glider_gun': GLIDER_GUN,
    },
}

# Expected period of each category, None where the pattern grows
CATEGORY_PERIODS = {
    'still_lifes': 1,
    'oscillators_p2': 2,
    'oscillators_p3': 3,
    'spaceships': 4,
    'guns': None,
}


def get_pattern(name: str) -> np.ndarray:
    """Return a copy of the requested pattern array by name."""
    for category in PATTERN_CATEGORIES.values():
        if name in category:
            return category[name].copy()

    available = [pattern for cat in PATTERN_CATEGORIES.values() for pattern in cat.keys()]
    raise ValueError(f"Pattern '{name}' not found. Available patterns: {available}")


def get_category(name: str) -> str:
    """Return the category a pattern belongs to."""
    for category_name, category in PATTERN_CATEGORIES.items():
        if name in category:
            return category_name
    raise ValueError(f"Pattern '{name}' not found")


def get_all_patterns():
    """Return all available patterns organized by category."""
    return PATTERN_CATEGORIES
