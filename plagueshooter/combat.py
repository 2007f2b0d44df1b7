"""How gunshots, explosions and lingering wounds affect the infected and the player."""

import threading
import time

from plagueshooter.audio import play_audio
from plagueshooter.claymore import claymore_fragment_count_at
from plagueshooter.constants import (
    BULLET_PENETRATE_KE_FACTOR,
    BULLET_PENETRATE_KE_FACTOR_HP,
    DELAYED_DEATH_COUNTER_FATAL,
    DELAYED_DEATH_COUNTER_HINDER,
    DELAYED_DEATH_COUNTER_MAX,
    GAME_END_MSG_CLAYMORE,
    GAME_END_MSG_GRENADE,
    MAX_PERFORATE_COUNT,
    HitLocation,
)
from plagueshooter.injury import (
    bullet_exit_probability,
    check_bullet_was_fatal,
    check_explosion_ruptured_ear,
    check_explosion_was_fatal,
    check_explosion_was_hindering,
    check_should_delayed_death,
    check_should_hinder,
    check_should_splatter,
    delayed_death_loss_rate,
    rand_hit_location,
)
from plagueshooter.mathutils import (
    SplatterEffect,
    compute_area_from_distance,
    compute_inverse_square_law,
    position_distance,
)
from plagueshooter.physics import (
    bullet_hit_location,
    bullet_projectile_positions,
    splatter_positions,
)
from plagueshooter.probability import (
    ear_rupture_probability,
    explosion_fatal_probability,
    fragment_fatal_probability,
)
from plagueshooter.randomness import check_probability
from plagueshooter.timeutils import epoch_now


def _play_in_background(filename):
    threading.Thread(target=play_audio, args=(filename,), daemon=True).start()


def _find_explosive(world, explosive_id):
    for explosive in world.active_explosives:
        if explosive.explosive_id is not None and explosive.explosive_id == explosive_id:
            return explosive
    raise LookupError(f"no active explosive with id {explosive_id}")


def _remove_explosive(world, explosive_id):
    for index, explosive in enumerate(world.active_explosives):
        if explosive.explosive_id == explosive_id:
            del world.active_explosives[index]
            return


def _apply_bullet_wound(player, infected, location, impact_ke, hollow_point,
                        high_velocity, muzzle_distance):
    fatal = check_bullet_was_fatal(location, impact_ke)
    if not fatal and (hollow_point or high_velocity) and location == HitLocation.HEAD:
        fatal = True

    if fatal:
        infected.mark_as_dead()
        player.game_stats.add_kill()
        if location == HitLocation.HEAD:
            player.game_stats.add_headshot()
    elif check_should_delayed_death(location, hollow_point) or high_velocity:
        if infected.delayed_death_start_epoch is None:
            infected.delayed_death_start_epoch = epoch_now()
        infected.delayed_death_loss_rate += delayed_death_loss_rate(
            location, high_velocity, impact_ke
        )

    if check_should_hinder(location):
        infected.make_hindered()

    if check_should_splatter(location, high_velocity, impact_ke, muzzle_distance):
        cells = splatter_positions(
            infected.position, location, player.facing_direction, impact_ke, muzzle_distance
        )
        if infected.splatter is None:
            infected.splatter = SplatterEffect(positions=cells)
        else:
            infected.splatter.positions.extend(cells)


def handle_firearm_shot(world, player):
    """Trace a bullet from the player's weapon and wound the infected in its path.

    The bullet loses energy with distance and with every body it passes through,
    and stops after perforating the maximum number of bodies.
    """
    magazine = player.active_weapon.magazine
    bullet_ke = magazine.kinetic_energy
    ke_loss = int(magazine.kinetic_energy_loss_per_meter)
    hollow_point = magazine.is_hollow_point
    high_velocity = magazine.is_high_velocity
    threshold = magazine.penetrate_energy_threshold
    factor = BULLET_PENETRATE_KE_FACTOR_HP if hollow_point else BULLET_PENETRATE_KE_FACTOR
    exit_probability = bullet_exit_probability(magazine.cartridge_type)

    path = bullet_projectile_positions(
        world, player.weapon_position, player.facing_direction
    )

    hit_location = None
    perforations = 0
    for cell in path:
        if bullet_ke < threshold or perforations >= MAX_PERFORATE_COUNT:
            break

        for infected in world.infected:
            if not infected.alive or infected.position != cell:
                continue

            player_distance = position_distance(player.position, infected.position)
            muzzle_distance = position_distance(path[0], infected.position)

            # The first body struck decides where every later body is struck.
            if hit_location is None:
                hit_location = bullet_hit_location(player_distance, player.active_weapon)
                if hit_location is None:
                    return

            impact_ke = bullet_ke
            bullet_ke = int(bullet_ke * factor)
            if not check_probability(exit_probability):
                bullet_ke = 0
            impact_ke -= bullet_ke

            if bullet_ke > 0:
                perforations += 1

            _apply_bullet_wound(
                player, infected, hit_location, impact_ke,
                hollow_point, high_velocity, muzzle_distance,
            )
        bullet_ke -= ke_loss


def handle_grenade_explosion(world, player, explosive_id):
    """Wait out the grenade's fuse, then apply its blast to the player and infected.

    Raises LookupError if no active explosive has ``explosive_id``.
    """
    grenade = _find_explosive(world, explosive_id)
    fragment_count = grenade.fragment_count

    time.sleep(grenade.explosion_delay)

    grenade = _find_explosive(world, explosive_id)
    player_distance = position_distance(player.position, grenade.position)

    if compute_area_from_distance(player_distance) <= fragment_count and (
        check_explosion_was_fatal(grenade, player_distance)
    ):
        player.game_stats.end_game_message = GAME_END_MSG_GRENADE
        player.alive = False
        return

    _play_in_background(
        grenade.explode_close_audio_file
        if check_explosion_ruptured_ear(grenade, player_distance)
        else grenade.explode_audio_file
    )

    for infected in world.infected:
        distance = int(position_distance(infected.position, grenade.position))
        if check_explosion_was_fatal(grenade, distance):
            infected.mark_as_dead()
            player.game_stats.add_kill()
            player.game_stats.add_grenade_kill()
            continue
        if check_explosion_was_hindering(grenade, distance):
            infected.make_hindered()

    _remove_explosive(world, explosive_id)


def handle_claymore_explosion(world, player, explosive):
    """Detonate a planted claymore and apply its fragments and blast.

    Raises ValueError if the claymore faces no direction.
    """
    if explosive.facing_direction is None:
        raise ValueError("a claymore must face a direction to detonate")

    claymore_position = explosive.position
    kinetic_energy = explosive.fragment_kinetic_energy
    energy_loss = int(explosive.fragment_kinetic_energy_loss_per_meter)

    def is_fatal(position):
        fragments = claymore_fragment_count_at(explosive, position)
        distance = int(position_distance(position, claymore_position))
        energy = kinetic_energy - energy_loss * distance
        pascals = int(compute_inverse_square_law(explosive.explosion_pascals, distance))
        return check_probability(
            fragment_fatal_probability(energy, fragments)
        ) or check_probability(explosion_fatal_probability(pascals))

    player.has_planted_claymore = False
    time.sleep(explosive.explosion_delay)

    if is_fatal(player.position):
        player.alive = False
        player.game_stats.end_game_message = GAME_END_MSG_CLAYMORE
        return

    pascals_at_player = compute_inverse_square_law(
        explosive.explosion_pascals, position_distance(player.position, claymore_position)
    )
    is_close = check_probability(ear_rupture_probability(int(pascals_at_player)))
    _play_in_background(
        explosive.explode_close_audio_file if is_close else explosive.explode_audio_file
    )

    _remove_explosive(world, explosive.explosive_id)

    for infected in world.infected:
        if is_fatal(infected.position):
            infected.mark_as_dead()
            player.game_stats.add_kill()
            player.game_stats.add_claymore_kill()
            continue

        fragments = claymore_fragment_count_at(explosive, infected.position)
        for _ in range(fragments):
            if infected.is_hindered:
                break
            if check_should_hinder(rand_hit_location()):
                infected.make_hindered()


def handle_delayed_death_infected(world, player):
    """Advance lingering wounds: kill or slow infected as their wounds worsen."""
    for infected in world.infected:
        if not infected.alive or infected.delayed_death_start_epoch is None:
            continue

        elapsed = epoch_now() - infected.delayed_death_start_epoch
        if elapsed == 0.0:
            continue

        infected.delayed_death_counter = int(
            DELAYED_DEATH_COUNTER_MAX - infected.delayed_death_loss_rate * elapsed
        )

        if infected.delayed_death_counter <= DELAYED_DEATH_COUNTER_FATAL:
            infected.mark_as_dead()
            player.game_stats.add_kill()
        elif infected.delayed_death_counter <= DELAYED_DEATH_COUNTER_HINDER:
            infected.make_hindered()