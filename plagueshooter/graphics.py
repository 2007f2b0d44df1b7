"""Drawing the map, the characters and the status text on a curses screen."""

import curses

from plagueshooter.constants import COLOR_ID_SPLATTER, COLOR_PAIR_SPLATTER
from plagueshooter.timeutils import epoch_now, make_clock_string

# Rows above the map border that hold the heads-up display.
_STATUS_ROWS = 4


def _put(screen, row, column, text):
    """Write ``text`` at a cell, ignoring writes that fall off the screen."""
    try:
        screen.addstr(row, column, text)
    except curses.error:
        pass


def initialize_screen(screen):
    """Put the terminal into game mode: no echo, hidden cursor, non-blocking keys."""
    curses.noecho()
    screen.keypad(True)
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.start_color()
    try:
        curses.use_default_colors()
    except curses.error:
        pass
    screen.nodelay(True)
    try:
        curses.init_pair(COLOR_PAIR_SPLATTER, COLOR_ID_SPLATTER, -1)
    except curses.error:
        pass


def draw_infected(screen, world):
    """Draw splatter, then dead infected, then living infected on top."""
    colored = world.settings.colors
    for infected in world.infected:
        splatter = infected.splatter
        if splatter is None:
            continue
        for position in splatter.positions:
            _put(screen, position.row, position.column, splatter.splatter_char)
            if colored:
                try:
                    screen.chgat(
                        position.row,
                        position.column,
                        1,
                        curses.A_NORMAL | curses.color_pair(COLOR_PAIR_SPLATTER),
                    )
                except curses.error:
                    pass

    for alive in (False, True):
        for infected in world.infected:
            if infected.alive == alive:
                _put(
                    screen,
                    infected.position.row,
                    infected.position.column,
                    infected.infected_char,
                )


def draw_world_items(screen, world):
    """Draw supply drops and active explosives."""
    for drop in world.supply_drops:
        _put(screen, drop.position.row, drop.position.column, drop.item_char)
    for explosive in world.active_explosives:
        _put(
            screen,
            explosive.position.row,
            explosive.position.column,
            explosive.explosive_char,
        )


def draw_rescue(screen, world):
    """Draw the rescue aircraft."""
    rescue = world.rescue
    _put(screen, rescue.position.row, rescue.position.column, rescue.rescue_char)


def draw_map_limit_borders(screen, world):
    """Draw a '#' frame two cells outside the map limits."""
    col_low, col_high = world.map_column_limits
    row_low, row_high = world.map_row_limits
    horizontal = "#" * ((col_high + 2) - (col_low - 2))
    _put(screen, row_low - 2, col_low - 2, horizontal)
    _put(screen, row_high + 2, col_low - 2, horizontal)
    for row in range(row_low - 2, row_high + 3):
        _put(screen, row, col_low - 2, "#")
        _put(screen, row, col_high + 2, "#")


def clear_map(screen, world):
    """Blank the map and the one-cell margin inside the border."""
    col_low, col_high = world.map_column_limits
    row_low, row_high = world.map_row_limits
    blank = " " * (col_high - col_low + 3)
    for row in range(row_low - 1, row_high + 2):
        _put(screen, row, col_low - 1, blank)


def draw_player(screen, player):
    """Draw the player and the weapon in front of them."""
    _put(screen, player.position.row, player.position.column, player.player_char)
    _put(
        screen,
        player.weapon_position.row,
        player.weapon_position.column,
        player.weapon_char,
    )


def draw_game_status(screen, world, player):
    """Clear the status area above the map and draw the player's HUD text."""
    for row in range(_STATUS_ROWS):
        try:
            screen.move(row, 0)
            screen.clrtoeol()
        except curses.error:
            pass
    _put(screen, 0, 0, player.update_hud_text())


def rescue_countdown_text(world):
    """Time left until the rescue arrives, or until it leaves once it has arrived."""
    rescue = world.rescue
    if rescue.has_arrived:
        label, target = "Escape: ", rescue.escape_epoch
    else:
        label, target = "Rescue Arrival: ", rescue.arrival_epoch
    return label + make_clock_string(int(target - epoch_now()))


def draw_rescue_countdown(screen, world):
    """Draw the rescue countdown centred above the map border."""
    text = rescue_countdown_text(world)
    col_low, col_high = world.map_column_limits
    column = (col_high - col_low) // 2 - len(text) // 2
    row = world.map_row_limits[0] - 3
    try:
        screen.move(row, column)
        screen.clrtoeol()
    except curses.error:
        pass
    _put(screen, row, column, text)


def end_game_text(world, player):
    """The closing summary: end message, non-zero tallies and playtime."""
    stats = player.game_stats
    playtime = int(epoch_now() - int(world.start_time))

    parts = []
    if stats.end_game_message:
        parts.append(f"{stats.end_game_message}\n\n")
    tallies = (
        ("kills: ", stats.kills),
        ("headshot kills: ", stats.headshots),
        ("grenade kills: ", stats.grenade_kills),
        ("claymore kills: ", stats.claymore_kills),
    )
    parts.extend(f"{label}{count}\n" for label, count in tallies if count > 0)
    parts.append(f"playtime: {make_clock_string(playtime)}")
    return "".join(parts)


def display_end_game(screen, world, player):
    """Clear the screen and show the closing summary."""
    screen.clear()
    screen.refresh()
    _put(screen, 0, 0, end_game_text(world, player))
    screen.refresh()