"""The game world: map bounds, timers, supply drops and the rescue."""

import copy
import shutil
from dataclasses import dataclass, field

from plagueshooter.constants import (
    BULLET_KE_223_REMINGTON_HP,
    CARTRIDGE_9MM_HP_COST,
    CARTRIDGE_30_06_COST,
    CARTRIDGE_223_REMINGTON_COST,
    CARTRIDGE_223_REMINGTON_HP_COST,
    FIRST_INFECTED_SPAWN_DELAY,
    FIRST_SUPPLY_DROP_DELAY,
    RESCUE_ARRIVAL_ETA,
    RESCUE_ESCAPE_DURATION,
    CartridgeType,
    ExplosiveType,
    FirearmType,
)
from plagueshooter.infected import InfectedMovement, InfectedSpawner
from plagueshooter.inventory import random_supply_drop
from plagueshooter.mathutils import Position
from plagueshooter.randomness import check_probability, rand_int_in_range
from plagueshooter.settings import GameSettings
from plagueshooter.timeutils import epoch_now
from plagueshooter.weapons import Explosive, Firearm, Magazine


@dataclass
class Rescue:
    """The aircraft that can carry the player away."""

    rescue_char: str = "\u2708"
    position: Position = field(default_factory=Position)
    has_arrived: bool = False
    can_board: bool = False
    is_rescue_finished: bool = False
    arrival_epoch: float = 0.0
    escape_epoch: float = 0.0

    def trigger_arrival(self, world):
        """Land the rescue at a random place on the map and open boarding."""
        self.has_arrived = True
        self.position = world.random_position()
        self.can_board = True

    def has_arrival_time_passed(self):
        """True once the rescue is due to arrive."""
        return epoch_now() >= self.arrival_epoch

    def has_escape_time_passed(self):
        """True once the rescue is due to leave."""
        return epoch_now() >= self.escape_epoch


def map_limits(terminal_size):
    """Column and row limits where characters may move, as two ``(low, high)`` pairs.

    The map is at most 80 by 24 cells, centred, and kept clear of the borders.
    """
    columns, rows = terminal_size
    center_col, center_row = columns // 2, rows // 2

    col_left = max(center_col - 80 // 2, 3)
    col_right = min(center_col + 80 // 2, columns - 2)
    row_top = max(center_row - 24 // 2, 7)
    row_bottom = min(center_row + 24 // 2, rows - 2)

    return (col_left - 1, col_right - 1), (row_top - 1, row_bottom - 1)


def get_terminal_size():
    """The terminal size as ``(columns, rows)``."""
    size = shutil.get_terminal_size()
    return size.columns, size.lines


class World:
    """Everything on the map besides the player, and the game's timers."""

    def __init__(self, terminal_size=None, settings=None):
        if terminal_size is None:
            terminal_size = get_terminal_size()
        self.map_column_limits, self.map_row_limits = map_limits(terminal_size)

        self.start_time = epoch_now()
        self.next_supply_drop_epoch = self.start_time + FIRST_SUPPLY_DROP_DELAY

        arrival = epoch_now() + RESCUE_ARRIVAL_ETA
        self.rescue = Rescue(
            arrival_epoch=arrival, escape_epoch=arrival + RESCUE_ESCAPE_DURATION
        )

        self.infected_spawner = InfectedSpawner(epoch_now() + FIRST_INFECTED_SPAWN_DELAY)
        self.infected_movement = InfectedMovement()

        self.infected = []
        self.supply_drops = []
        self.active_explosives = []
        self.settings = GameSettings() if settings is None else settings
        self.active = True

    def contains(self, position):
        """True if ``position`` lies inside the map limits."""
        col_low, col_high = self.map_column_limits
        row_low, row_high = self.map_row_limits
        return col_low <= position.column <= col_high and row_low <= position.row <= row_high

    def random_position(self):
        """A random position on the map, kept away from the infected spawn row."""
        column = rand_int_in_range(*self.map_column_limits)
        row = rand_int_in_range(*self.map_row_limits)
        if not self.contains(Position(column, row - 2)):
            row += 2
        return Position(column, row)

    def drop_supplies(self):
        """Place a supply drop on the map and schedule the next one.

        The more valuable the drop, the longer until the next one.
        """
        drop = random_supply_drop(self.map_column_limits, self.map_row_limits)

        choices = [kind for kind in FirearmType if kind != FirearmType.RUGER_MK_IV]
        firearm = Firearm(choices[rand_int_in_range(0, len(choices) - 1)])

        magazine = None
        magazine_count = 0
        next_drop_time = 0

        if firearm.firearm_type == FirearmType.SIG_M17:
            magazine = Magazine(CartridgeType.CARTRIDGE_9MM, 17, 17)
            magazine.is_hollow_point = True
            firearm.magazine.is_hollow_point = True
            magazine_count = 2
            next_drop_time = int(
                next_drop_time
                + magazine.capacity * (magazine_count + 1) * CARTRIDGE_9MM_HP_COST
            )
        elif firearm.firearm_type == FirearmType.AR15:
            magazine = Magazine(CartridgeType.CARTRIDGE_223_REMINGTON, 20, 20)
            magazine.is_hollow_point = check_probability(0.5)
            if magazine.is_hollow_point:
                magazine.kinetic_energy = BULLET_KE_223_REMINGTON_HP
            firearm.magazine = copy.copy(magazine)
            magazine_count = rand_int_in_range(1, 3)
            cost = (
                CARTRIDGE_223_REMINGTON_HP_COST
                if magazine.is_hollow_point
                else CARTRIDGE_223_REMINGTON_COST
            )
            next_drop_time = int(
                next_drop_time + magazine.capacity * (magazine_count + 1) * cost
            )
        elif firearm.firearm_type == FirearmType.REMINGTON_700:
            rounds = firearm.magazine.capacity * rand_int_in_range(1, 3)
            drop.items.ammunition[CartridgeType.CARTRIDGE_30_06] = rounds
            next_drop_time += rounds
            next_drop_time += firearm.magazine.capacity
            next_drop_time = int(next_drop_time * CARTRIDGE_30_06_COST)

        drop.items.firearms.append(firearm)

        if magazine is not None:
            drop.items.magazines.extend(copy.copy(magazine) for _ in range(magazine_count))

        # The bound is rolled again on each pass, so between two and four grenades.
        grenades = 0
        while grenades < rand_int_in_range(2, 4):
            drop.items.explosives.append(Explosive(ExplosiveType.M67_GRENADE))
            next_drop_time += 4
            grenades += 1

        if rand_int_in_range(0, 1):
            drop.items.explosives.append(Explosive(ExplosiveType.M18A1_CLAYMORE))
            next_drop_time += 8

        self.supply_drops.append(drop)
        self.next_supply_drop_epoch = epoch_now() + next_drop_time