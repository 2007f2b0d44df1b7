"""Keyboard handling, the rescue outcome and the main game loop."""

import curses
import sys
import threading
from enum import IntEnum

from plagueshooter.actions import (
    fast_reload_firearm,
    plant_claymore,
    reload_firearm,
    shoot_firearm,
    throw_grenade,
)
from plagueshooter.audio import cleanup_audio, initialize_audio
from plagueshooter.combat import handle_delayed_death_infected
from plagueshooter.constants import (
    GAME_END_MSG_RESCUE_FAILED,
    GAME_END_MSG_RESCUED,
    INFECTED_MOVEMENT_INTERVAL_MS,
    CartridgeType,
    Direction,
)
from plagueshooter.graphics import (
    clear_map,
    display_end_game,
    draw_game_status,
    draw_infected,
    draw_map_limit_borders,
    draw_player,
    draw_rescue,
    draw_rescue_countdown,
    draw_world_items,
    initialize_screen,
)
from plagueshooter.mathutils import position_distance
from plagueshooter.player import Player, player_is_dead, set_player_spawn_position
from plagueshooter.randomness import check_probability
from plagueshooter.settings import GameSettings, parse_cmd_args
from plagueshooter.spawning import (
    remove_dead_infected,
    spawn_infected,
    spawn_infected_group,
    update_infected_positions,
)
from plagueshooter.timeutils import epoch_now
from plagueshooter.weapons import Magazine
from plagueshooter.world import World

_PROGRAM_NAME = "plague-shooter"
_FRAME_MS = 16
_QUIT_POLL_MS = 25
# Chance that a loud gunshot draws another infected.
_GUNSHOT_SPAWN_PROBABILITY = 0.04


class GameControls(IntEnum):
    """Key codes of the game's controls."""

    QUIT = curses.KEY_BACKSPACE
    FORWARD = ord("w")
    BACKWARD = ord("s")
    LEFT = ord("a")
    RIGHT = ord("d")
    SHOOT = ord(" ")
    RELOAD = ord("r")
    FAST_RELOAD = ord("R")
    GRENADE = ord("g")
    PICKUP = ord("e")
    SWITCH_WEAPON = ord("q")
    CLAYMORE = ord("c")


_MOVE_KEYS = {
    GameControls.FORWARD: Direction.NORTH,
    curses.KEY_UP: Direction.NORTH,
    GameControls.BACKWARD: Direction.SOUTH,
    curses.KEY_DOWN: Direction.SOUTH,
    GameControls.LEFT: Direction.WEST,
    curses.KEY_LEFT: Direction.WEST,
    GameControls.RIGHT: Direction.EAST,
    curses.KEY_RIGHT: Direction.EAST,
}


def _shoot(world, player):
    if not player.active_weapon.can_shoot:
        return
    shoot_firearm(world, player)
    if (
        player.active_weapon.magazine.cartridge_type != CartridgeType.CARTRIDGE_22LR
        and check_probability(_GUNSHOT_SPAWN_PROBABILITY)
    ):
        spawn_infected(world, 1)


_ACTION_KEYS = {
    GameControls.SHOOT: _shoot,
    GameControls.RELOAD: lambda world, player: reload_firearm(player),
    GameControls.FAST_RELOAD: lambda world, player: fast_reload_firearm(player),
    GameControls.GRENADE: throw_grenade,
    GameControls.CLAYMORE: plant_claymore,
    GameControls.PICKUP: lambda world, player: player.pickup_item(world),
    GameControls.SWITCH_WEAPON: lambda world, player: player.switch_firearm(),
}


def respond_to_key_press(world, player, key):
    """Carry out whatever the pressed key asks for; unknown keys do nothing."""
    if key == GameControls.QUIT:
        world.active = False
        return
    direction = _MOVE_KEYS.get(key)
    if direction is not None:
        player.move(world, direction)
        return
    action = _ACTION_KEYS.get(key)
    if action is not None:
        action(world, player)


def handle_rescue_game_loop(world, player):
    """Advance the rescue for one frame and end the game on rescue or failure.

    Returns True while the rescue is on the map and should be drawn.
    """
    rescue = world.rescue
    if not rescue.has_arrived and rescue.has_arrival_time_passed():
        rescue.trigger_arrival(world)
        return False
    if rescue.has_arrived and rescue.can_board and not rescue.is_rescue_finished:
        if position_distance(player.position, rescue.position) <= 2:
            player.is_rescued = True
            player.game_stats.end_game_message = GAME_END_MSG_RESCUED
            world.active = False
        rescue.is_rescue_finished = rescue.has_escape_time_passed()
        return True
    if rescue.is_rescue_finished and not player.is_rescued:
        rescue.can_board = False
        player.game_stats.end_game_message = GAME_END_MSG_RESCUE_FAILED
        world.active = False
    return False


def _run_frames(screen, world, player):
    while world.active:
        clear_map(screen, world)
        respond_to_key_press(world, player, screen.getch())

        if world.infected_spawner.should_spawn():
            spawn_infected_group(world)
        if world.next_supply_drop_epoch <= epoch_now():
            world.drop_supplies()
        if player_is_dead(world, player):
            world.active = False

        handle_delayed_death_infected(world, player)
        if world.infected_movement.should_move():
            world.infected_movement.next_movement_epoch = (
                epoch_now() + INFECTED_MOVEMENT_INTERVAL_MS / 1e3
            )
            update_infected_positions(world, player)

        remove_dead_infected(world)
        draw_world_items(screen, world)
        draw_infected(screen, world)
        draw_player(screen, player)
        draw_game_status(screen, world, player)
        draw_rescue_countdown(screen, world)
        if handle_rescue_game_loop(world, player):
            draw_rescue(screen, world)

        screen.refresh()
        curses.napms(_FRAME_MS)

        if not player.alive:
            world.active = False


def _wait_for_quit(screen):
    while screen.getch() != GameControls.QUIT:
        curses.napms(_QUIT_POLL_MS)


def _cleanup_screen(screen):
    try:
        screen.clear()
        screen.refresh()
    finally:
        curses.endwin()


def play_game(world):
    """Run a whole game on the terminal until the player quits; return the player."""
    initialize_audio()
    player = Player()
    player.inventory.magazines.append(Magazine(CartridgeType.CARTRIDGE_22LR, 10, 10))
    set_player_spawn_position(world, player)
    player.fix_weapon_appearance()

    screen = curses.initscr()
    try:
        initialize_screen(screen)
        screen.erase()
        draw_map_limit_borders(screen, world)
        _run_frames(screen, world, player)

        threading.Thread(target=cleanup_audio, daemon=True).start()
        display_end_game(screen, world, player)
        _wait_for_quit(screen)
    finally:
        _cleanup_screen(screen)
    return player


def main(argv=None):
    """Start the game; options are read from ``argv`` or the command line."""
    args = sys.argv if argv is None else [_PROGRAM_NAME, *argv]
    settings = GameSettings()
    settings.apply_args(parse_cmd_args(args))
    world = World(settings=settings)
    try:
        play_game(world)
    except Exception as err:
        cleanup_audio()
        print(f"\nexception: {err}")
        print("Press enter to exit.")
        input()
    return 0