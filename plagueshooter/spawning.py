"""Spawning, removing and moving the infected."""

from plagueshooter.constants import (
    EARLY_GAME_SPAWN_DELAY_MULTIPLIER,
    EARLY_GAME_TIME_THRESHOLD,
    INFECTED_DEAD_TIME,
    INFECTED_SPAWN_INTERVAL_MAX,
    INFECTED_SPAWN_INTERVAL_MEAN,
    INFECTED_SPAWN_INTERVAL_SD,
    INFECTED_SPAWN_SIZE_MAX,
    INFECTED_SPAWN_SIZE_MEAN,
    INFECTED_SPAWN_SIZE_SD,
)
from plagueshooter.infected import Infected, next_infected_position
from plagueshooter.mathutils import Position
from plagueshooter.randomness import rand_int_in_range, rand_normal_dist
from plagueshooter.timeutils import epoch_now, has_time_elapsed


def infected_spawn_position(world):
    """A random cell on the top row of the map."""
    col_low, col_high = world.map_column_limits
    column = rand_int_in_range(0, col_high - col_low) + col_low
    return Position(column, world.map_row_limits[0])


def remove_dead_infected(world):
    """Remove infected that have lain dead for long enough."""
    world.infected[:] = [
        inf
        for inf in world.infected
        if inf.alive
        or inf.epoch_at_death is None
        or not has_time_elapsed(inf.epoch_at_death, INFECTED_DEAD_TIME)
    ]


def spawn_infected(world, count):
    """Add ``count`` infected along the top row, ready to move at once."""
    for _ in range(count):
        world.infected.append(
            Infected(position=infected_spawn_position(world), last_movement_epoch=0.0)
        )


def spawn_infected_group(world):
    """Spawn a randomly sized group and schedule the next one; return the group size.

    Early in the game groups come more slowly and stop while more than two infected
    are about; when the next group is due within two seconds only one spawns.
    """
    playtime = epoch_now() - world.start_time
    is_early = playtime < EARLY_GAME_TIME_THRESHOLD

    spawn_delay = rand_normal_dist(INFECTED_SPAWN_INTERVAL_MEAN, INFECTED_SPAWN_INTERVAL_SD)
    spawn_size = int(rand_normal_dist(INFECTED_SPAWN_SIZE_MEAN, INFECTED_SPAWN_SIZE_SD))

    spawn_delay = max(1.0, min(spawn_delay, INFECTED_SPAWN_INTERVAL_MAX))
    spawn_size = max(1, min(spawn_size, INFECTED_SPAWN_SIZE_MAX))

    if is_early:
        spawn_delay *= EARLY_GAME_SPAWN_DELAY_MULTIPLIER
        if len(world.infected) > 2:
            spawn_size = 0

    if spawn_delay < 2.0:
        spawn_size = 1

    spawn_infected(world, spawn_size)
    world.infected_spawner.next_spawn_epoch = epoch_now() + spawn_delay
    return spawn_size


def update_infected_positions(world, player):
    """Step each infected whose movement interval has passed towards the player.

    An infected does not step onto a cell held by another living infected.
    """
    if not player.alive:
        return

    for infected in world.infected:
        if not has_time_elapsed(
            infected.last_movement_epoch, infected.movement_interval_ms / 1000
        ):
            continue
        infected.update_movement()

        if not infected.alive or infected.position == player.position:
            continue

        target = next_infected_position(infected.position, player.position)
        blocked = any(
            other.alive and other.position == target for other in world.infected
        )
        if not blocked:
            infected.position = target