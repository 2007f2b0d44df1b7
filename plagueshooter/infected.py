"""Infected enemies, their movement timing and their spawn timing."""

from dataclasses import dataclass, field
from typing import Optional

from plagueshooter.constants import (
    DELAYED_DEATH_COUNTER_MAX,
    INFECTED_CHAR,
    INFECTED_CHAR_DEAD,
    INFECTED_HINDER_DELAY_MS,
    INFECTED_MOVEMENT_INTERVAL_MS,
)
from plagueshooter.mathutils import Position, SplatterEffect
from plagueshooter.timeutils import epoch_now


@dataclass
class Infected:
    """A single infected enemy on the map."""

    position: Position = field(default_factory=Position)
    infected_char: str = INFECTED_CHAR
    alive: bool = True
    is_hindered: bool = False
    delayed_death_start_epoch: Optional[float] = None
    epoch_at_death: Optional[float] = None
    delayed_death_counter: int = DELAYED_DEATH_COUNTER_MAX
    delayed_death_loss_rate: int = 0
    splatter: Optional[SplatterEffect] = None
    last_movement_epoch: float = 0.0
    movement_interval_ms: int = INFECTED_MOVEMENT_INTERVAL_MS

    def mark_as_dead(self):
        """Kill the infected and record when it died."""
        self.alive = False
        self.infected_char = INFECTED_CHAR_DEAD
        self.epoch_at_death = epoch_now()

    def make_hindered(self):
        """Slow the infected down; a second wound does not slow it further."""
        if not self.is_hindered:
            self.is_hindered = True
            self.movement_interval_ms += INFECTED_HINDER_DELAY_MS

    def update_movement(self):
        """Record that the infected has just moved."""
        self.last_movement_epoch = epoch_now()


@dataclass
class InfectedMovement:
    """Timer deciding when the infected take their next step."""

    next_movement_epoch: float = field(default_factory=epoch_now)
    movement_interval_ms: int = INFECTED_MOVEMENT_INTERVAL_MS

    def should_move(self):
        """True once the next movement time has been reached."""
        return epoch_now() >= self.next_movement_epoch


@dataclass
class InfectedSpawner:
    """Timer deciding when the next group of infected appears."""

    next_spawn_epoch: float = 0.0

    def should_spawn(self):
        """True once the next spawn time has been reached."""
        return epoch_now() >= self.next_spawn_epoch


def _step_towards(current, target):
    return current + (target > current) - (target < current)


def next_infected_position(position, target):
    """The cell one step from ``position`` towards ``target``, diagonals allowed."""
    return Position(
        _step_towards(position.column, target.column),
        _step_towards(position.row, target.row),
    )