"""Life-like birth/survival rules."""
import re
from typing import FrozenSet, Iterable, NamedTuple


_RULE_PATTERN = re.compile(r'^\s*([BS])(\d*)\s*/\s*([BS])(\d*)\s*$', re.IGNORECASE)


class Rule(NamedTuple):
    """
    Outer-totalistic rule on the Moore neighbourhood.

    A dead cell is born when its live-neighbour count is in ``birth``; a
    live cell survives when its count is in ``survival``.
    """
    birth: FrozenSet[int]
    survival: FrozenSet[int]

    def next_state(self, alive: bool, count: int) -> bool:
        """Return the next state of a single cell."""
        if alive:
            return count in self.survival
        return count in self.birth

    @property
    def notation(self) -> str:
        """Rule in B/S notation, e.g. ``B3/S23``."""
        birth = ''.join(str(n) for n in sorted(self.birth))
        survival = ''.join(str(n) for n in sorted(self.survival))
        return f"B{birth}/S{survival}"


def make_rule(birth: Iterable[int], survival: Iterable[int]) -> Rule:
    """Build a validated :class:`Rule` from neighbour counts."""
    birth = frozenset(int(n) for n in birth)
    survival = frozenset(int(n) for n in survival)

    for n in birth | survival:
        if not 0 <= n <= 8:
            raise ValueError(f"Neighbour counts must be in 0-8, got {n}")
    # Cells with no live neighbours are never enumerated
    if 0 in birth:
        raise ValueError("Birth on 0 neighbours is not supported by sparse evaluation")
    return Rule(birth, survival)


def parse_rule(notation: str) -> Rule:
    """
    Parse a rule string in B/S notation.

    Args:
        notation: e.g. ``"B3/S23"`` or ``"s23/b36"``

    Returns:
        The parsed Rule
    """
    match = _RULE_PATTERN.match(notation)
    if not match or match.group(1).upper() == match.group(3).upper():
        raise ValueError(f"Invalid rule '{notation}'. Expected the form 'B3/S23'")

    parts = {
        match.group(1).upper(): match.group(2),
        match.group(3).upper(): match.group(4),
    }
    return make_rule((int(c) for c in parts['B']), (int(c) for c in parts['S']))


CONWAY = make_rule({3}, {2, 3})
HIGHLIFE = make_rule({3, 6}, {2, 3})
