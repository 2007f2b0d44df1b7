"""Which cells a claymore's fragments reach, and how many fragments arrive."""

from plagueshooter.constants import CLAYMORE_FRAGMENT_DEGREES, Direction
from plagueshooter.mathutils import (
    compute_position_change,
    compute_sector_area_from_distance,
    sector_width_at_distance,
)
from plagueshooter.randomness import check_probability


def _is_horizontal(direction):
    return direction in (Direction.EAST, Direction.WEST)


def is_facing(claymore, position):
    """True if ``position`` lies on the side the claymore faces."""
    direction = claymore.facing_direction
    if direction is None:
        return False
    own = claymore.position
    if direction == Direction.EAST:
        return position.column > own.column
    if direction == Direction.WEST:
        return position.column < own.column
    if direction == Direction.NORTH:
        return position.row < own.row
    return position.row > own.row


def is_in_fragment_area(claymore, position):
    """True if ``position`` lies within the claymore's fan of fragments."""
    direction = claymore.facing_direction
    if direction is None:
        return False
    horizontal = _is_horizontal(direction)
    along = compute_position_change(position, claymore.position, horizontal)
    across = compute_position_change(position, claymore.position, not horizontal)
    width = int(sector_width_at_distance(along, CLAYMORE_FRAGMENT_DEGREES))
    return across <= width // 2


def claymore_fragment_count_at(claymore, position):
    """Number of claymore fragments that reach ``position``.

    Far away, where fewer than one fragment per cell arrives, one hits by chance.
    """
    if not is_facing(claymore, position) or not is_in_fragment_area(claymore, position):
        return 0

    horizontal = _is_horizontal(claymore.facing_direction)
    distance = compute_position_change(claymore.position, position, horizontal)
    sector_area = int(compute_sector_area_from_distance(distance, CLAYMORE_FRAGMENT_DEGREES))

    if sector_area == 0:
        return claymore.fragment_count
    count = claymore.fragment_count // sector_area
    if count == 0:
        p = 1 - (1 - 1.0 / sector_area) ** claymore.fragment_count
        count = 1 if check_probability(p) else 0
    return count