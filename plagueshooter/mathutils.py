"""Map positions and the geometry and ballistics helpers built on them."""

import math
from dataclasses import dataclass, field

from plagueshooter.constants import GRAVITY_ACCELERATION, PI


@dataclass(frozen=True)
class Position:
    """A cell on the map, addressed by column and row."""

    column: int = 0
    row: int = 0


@dataclass
class SplatterEffect:
    """Cells covered by blood splatter around a wound."""

    positions: list = field(default_factory=list)
    splatter_char: str = "*"


def compute_inverse_square_law(value, distance):
    """Spread ``value`` over a sphere of radius ``distance``."""
    denominator = 4 * PI * distance**2
    return value if denominator == 0 else value / denominator


def compute_area_from_distance(distance):
    """Surface area of a sphere of radius ``distance``."""
    return 4 * PI * distance**2


def compute_sector_area_from_distance(distance, degrees):
    """Area of a circular sector of the given radius and angle."""
    radians = degrees * PI / 180
    return radians / 2 * distance**2


def sector_width_at_distance(distance, degrees):
    """Chord width of a sector of the given angle at ``distance``."""
    radians = degrees * PI / 180
    return math.sin(radians / 2) * 2 * distance


def thrown_object_velocity_at_time(velocity, degrees, seconds):
    """Speed of a projectile launched at ``degrees`` after ``seconds``."""
    radians = degrees * PI / 180.0
    vx = velocity * math.cos(radians)
    vy = velocity * math.sin(radians) - GRAVITY_ACCELERATION * seconds
    return math.hypot(vx, vy)


def compute_thrown_object_range(velocity, degrees):
    """Horizontal range of a projectile on flat ground."""
    radians = degrees * PI / 180.0
    return velocity**2 * math.sin(radians * 2) / GRAVITY_ACCELERATION


def position_distance(p1, p2):
    """Euclidean distance between two map positions."""
    return math.hypot(p2.column - p1.column, p2.row - p1.row)


def calculate_exp_decay(value, decay, events):
    """Apply an exponential decay of rate ``decay`` over ``events`` steps."""
    return value * (1 - decay) ** events


def compute_position_change(pos1, pos2, horizontal):
    """Absolute column (if ``horizontal``) or row difference of two positions."""
    if horizontal:
        return abs(pos1.column - pos2.column)
    return abs(pos1.row - pos2.row)