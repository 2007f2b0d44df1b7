"""Player actions that run in the background: shooting, reloading and explosives."""

import threading
import time

from plagueshooter.combat import (
    handle_claymore_explosion,
    handle_firearm_shot,
    handle_grenade_explosion,
)
from plagueshooter.constants import (
    PLAYER_THROW_ANGLE_DEGREES_MAX,
    PLAYER_THROW_ANGLE_DEGREES_MIN,
    PLAYER_THROW_VELOCITY_MAX,
    PLAYER_THROW_VELOCITY_MIN,
    ExplosiveType,
)
from plagueshooter.mathutils import compute_thrown_object_range, thrown_object_velocity_at_time
from plagueshooter.physics import throw_path_positions, throw_position
from plagueshooter.randomness import rand_int_in_range


def _start(target, *args):
    thread = threading.Thread(target=target, args=args, daemon=True)
    thread.start()
    return thread


def _explosive_index(world, explosive_id):
    index = None
    for i, explosive in enumerate(world.active_explosives):
        if explosive.explosive_id is not None and explosive.explosive_id == explosive_id:
            index = i
    if index is None:
        raise LookupError(f"no active explosive with id {explosive_id}")
    return index


def process_grenade_throw(world, grenade):
    """Move a thrown grenade through the air cell by cell, in real time.

    Returns where it lands, or None if it faces no direction.
    Raises LookupError if the grenade is not among the world's active explosives.
    """
    velocity = rand_int_in_range(PLAYER_THROW_VELOCITY_MIN, PLAYER_THROW_VELOCITY_MAX)
    angle = rand_int_in_range(PLAYER_THROW_ANGLE_DEGREES_MIN, PLAYER_THROW_ANGLE_DEGREES_MAX)
    distance = int(compute_thrown_object_range(velocity, angle))

    landing = throw_position(world, grenade, distance)
    if landing is None:
        return None
    path = throw_path_positions(grenade.position, grenade.facing_direction, landing)

    airtime = 0.0
    for cell in path:
        world.active_explosives[_explosive_index(world, grenade.explosive_id)].position = cell
        step_time = 1.0 / thrown_object_velocity_at_time(velocity, angle, airtime)
        time.sleep(step_time)
        airtime += step_time
    world.active_explosives[_explosive_index(world, grenade.explosive_id)].position = landing
    return landing


def throw_grenade(world, player):
    """Throw a grenade from the player's inventory; return it, or None if none was thrown."""
    grenade = player.throw_grenade()
    if grenade is None:
        return None
    world.active_explosives.append(grenade)
    _start(process_grenade_throw, world, grenade)
    _start(handle_grenade_explosion, world, player, grenade.explosive_id)
    return grenade


def plant_claymore(world, player):
    """Plant a claymore, or detonate the one already planted.

    Returns the detonation thread when one was started, otherwise None.
    """
    if not player.has_planted_claymore:
        player.plant_claymore(world)
        return None
    claymore = next(
        (
            explosive
            for explosive in world.active_explosives
            if explosive.explosive_type == ExplosiveType.M18A1_CLAYMORE
        ),
        None,
    )
    if claymore is None:
        return None
    return _start(handle_claymore_explosion, world, player, claymore)


def shoot_firearm(world, player):
    """Fire the active weapon and resolve the shot; return the firing thread."""
    thread = _start(player.shoot_firearm)
    handle_firearm_shot(world, player)
    return thread


def reload_firearm(player):
    """Reload the active weapon in the background; return the reloading thread."""
    return _start(player.reload_firearm)


def fast_reload_firearm(player):
    """Fast-reload the active weapon in the background; return the reloading thread."""
    return _start(player.fast_reload_firearm)