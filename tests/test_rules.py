import pytest

from sparselife.core.rules import CONWAY, HIGHLIFE, make_rule, parse_rule


def test_conway_rule():
    assert CONWAY.birth == {3}
    assert CONWAY.survival == {2, 3}
    assert CONWAY.notation == 'B3/S23'


def test_highlife_rule():
    assert HIGHLIFE.notation == 'B36/S23'


@pytest.mark.parametrize("notation,expected", [
    ('B3/S23', CONWAY),
    ('b3/s23', CONWAY),
    ('S23/B3', CONWAY),
    (' B36 / S23 ', HIGHLIFE),
])
def test_parse_rule(notation, expected):
    assert parse_rule(notation) == expected


def test_parse_empty_sets():
    rule = parse_rule('B/S')

    assert rule.birth == frozenset()
    assert rule.survival == frozenset()


@pytest.mark.parametrize("notation", ['B3S23', 'B9/S23', 'B3/B3', 'S23/S3', 'B03/S23', 'X3/S23', ''])
def test_parse_rule_rejects_invalid(notation):
    with pytest.raises(ValueError):
        parse_rule(notation)


def test_make_rule_rejects_out_of_range_counts():
    with pytest.raises(ValueError):
        make_rule({3}, {2, 9})


@pytest.mark.parametrize("alive,count,expected", [
    (True, 0, False),
    (True, 1, False),
    (True, 2, True),
    (True, 3, True),
    (True, 4, False),
    (True, 8, False),
    (False, 2, False),
    (False, 3, True),
    (False, 6, False),
])
def test_conway_next_state(alive, count, expected):
    assert CONWAY.next_state(alive, count) is expected


def test_highlife_birth_on_six():
    assert HIGHLIFE.next_state(False, 6)
    assert not HIGHLIFE.next_state(True, 6)
