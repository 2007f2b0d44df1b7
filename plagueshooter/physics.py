"""Bullet paths, hit locations, thrown-object paths and blood splatter."""

from plagueshooter.constants import P_HEADSHOT_MULTIPLIER, Direction, HitLocation
from plagueshooter.constants import HEADSHOT_SPATTER_REQUIRED_FORCE
from plagueshooter.mathutils import Position, calculate_exp_decay
from plagueshooter.randomness import check_probability, rand_int_in_range

# Change in column or row for one step forward in each direction.
_FORWARD_STEP = {
    Direction.NORTH: -1,
    Direction.SOUTH: 1,
    Direction.EAST: 1,
    Direction.WEST: -1,
}


def _is_vertical(direction):
    return direction in (Direction.NORTH, Direction.SOUTH)


def _clamp(value, limits):
    low, high = limits
    return max(low, min(value, high))


def bullet_projectile_positions(world, position, direction):
    """Cells a bullet passes through from ``position`` until it leaves the map.

    The last cell listed is the first one outside the map.
    """
    vertical = _is_vertical(direction)
    step = _FORWARD_STEP[direction]
    positions = []
    while world.contains(position):
        if vertical:
            position = Position(position.column, position.row + step)
        else:
            position = Position(position.column + step, position.row)
        positions.append(position)
    return positions


def bullet_hit_location(distance, firearm):
    """Where a bullet fired over ``distance`` strikes, or None on a miss."""
    hit_probability = calculate_exp_decay(
        firearm.accuracy_scale_factor, firearm.accuracy_decay, distance
    )
    if not check_probability(hit_probability):
        return None
    if check_probability(hit_probability * P_HEADSHOT_MULTIPLIER):
        return HitLocation.HEAD
    if check_probability(hit_probability):
        return HitLocation.THORAX
    if check_probability(hit_probability):
        return HitLocation.ABDOMEN
    return HitLocation.LIMBS


def throw_position(world, explosive, distance):
    """Where a thrown explosive lands, clamped to the map; None if it faces nowhere."""
    direction = explosive.facing_direction
    if direction is None:
        return None
    start = explosive.position
    offset = distance if direction in (Direction.SOUTH, Direction.EAST) else -distance
    if _is_vertical(direction):
        return Position(start.column, _clamp(start.row + offset, world.map_row_limits))
    return Position(_clamp(start.column + offset, world.map_column_limits), start.row)


def throw_path_positions(start, direction, end):
    """Cells strictly between ``start`` and ``end`` along ``direction``."""
    step = _FORWARD_STEP[direction]
    if _is_vertical(direction):
        return [Position(start.column, row) for row in range(start.row + step, end.row, step)]
    return [
        Position(column, start.row) for column in range(start.column + step, end.column, step)
    ]


def splatter_positions(start, location, direction, joules, muzzle_distance):
    """Cells behind a wound at ``start`` covered by splatter from a shot along ``direction``."""
    horizontal = not _is_vertical(direction)
    forward = _FORWARD_STEP[direction]
    positions = []

    def add(along, across):
        if along == 0 and across == 0:
            return
        if horizontal:
            positions.append(Position(start.column + along * forward, start.row + across))
        else:
            positions.append(Position(start.column + across, start.row + along * forward))

    add(1, 0)

    if muzzle_distance < 1 or (
        location == HitLocation.HEAD and joules >= HEADSHOT_SPATTER_REQUIRED_FORCE
    ):
        add(2, rand_int_in_range(1, 2))
        add(2, -rand_int_in_range(1, 2))
        return positions

    for along in (2, 3):
        add(along, 0)
    return positions