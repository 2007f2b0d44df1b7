import pytest

from plagueshooter.claymore import (
    claymore_fragment_count_at,
    is_facing,
    is_in_fragment_area,
)
from plagueshooter.constants import Direction, ExplosiveType
from plagueshooter.mathutils import Position
from plagueshooter.weapons import Explosive

ORIGIN = Position(10, 10)

_AHEAD = {
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
}


def _claymore(direction):
    claymore = Explosive(ExplosiveType.M18A1_CLAYMORE)
    claymore.position = ORIGIN
    claymore.facing_direction = direction
    return claymore


def _offset(direction, steps):
    dc, dr = _AHEAD[direction]
    return Position(ORIGIN.column + dc * steps, ORIGIN.row + dr * steps)


@pytest.mark.parametrize("direction", list(Direction))
def test_is_facing_ahead_and_behind(direction):
    claymore = _claymore(direction)
    assert is_facing(claymore, _offset(direction, 3)) is True
    assert is_facing(claymore, _offset(direction, -3)) is False
    assert is_facing(claymore, ORIGIN) is False


def test_without_direction_nothing_is_reached():
    claymore = Explosive(ExplosiveType.M18A1_CLAYMORE)
    claymore.position = ORIGIN
    target = Position(12, 10)
    assert is_facing(claymore, target) is False
    assert is_in_fragment_area(claymore, target) is False
    assert claymore_fragment_count_at(claymore, target) == 0


def test_fragment_area_straight_ahead_and_far_to_the_side():
    claymore = _claymore(Direction.EAST)
    assert is_in_fragment_area(claymore, Position(14, 10)) is True
    assert is_in_fragment_area(claymore, Position(14, 20)) is False


@pytest.mark.parametrize("direction", list(Direction))
def test_adjacent_cell_gets_every_fragment(direction):
    claymore = _claymore(direction)
    assert claymore_fragment_count_at(claymore, _offset(direction, 1)) == claymore.fragment_count


@pytest.mark.parametrize("direction", list(Direction))
def test_behind_gets_no_fragments(direction):
    claymore = _claymore(direction)
    assert claymore_fragment_count_at(claymore, _offset(direction, -2)) == 0


def test_fragment_count_does_not_grow_with_distance():
    claymore = _claymore(Direction.SOUTH)
    counts = [claymore_fragment_count_at(claymore, _offset(Direction.SOUTH, d)) for d in range(1, 11)]
    assert all(a >= b for a, b in zip(counts, counts[1:]))
    assert counts[-1] < counts[0]
    assert all(c > 0 for c in counts)


def test_outside_fan_gets_no_fragments():
    claymore = _claymore(Direction.EAST)
    assert claymore_fragment_count_at(claymore, Position(14, 20)) == 0