from unittest import mock

import pytest

from plagueshooter.constants import (
    COLOR_ID_SPLATTER,
    COLOR_PAIR_SPLATTER,
    GAME_END_MSG_RESCUED,
    INFECTED_CHAR,
    PLAYER_CHAR,
    ExplosiveType,
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
    end_game_text,
    initialize_screen,
    rescue_countdown_text,
)
from plagueshooter.infected import Infected
from plagueshooter.inventory import SupplyDrop
from plagueshooter.mathutils import Position, SplatterEffect
from plagueshooter.player import Player
from plagueshooter.timeutils import epoch_now, make_clock_string
from plagueshooter.weapons import Explosive
from plagueshooter.world import World


class FakeScreen:
    def __init__(self):
        self.cells = {}
        self.colored = {}
        self.cursor = (0, 0)
        self.refreshes = 0
        self.keypad_enabled = False
        self.nodelay_enabled = False

    def addstr(self, row, column, text):
        for char in text:
            if char == "\n":
                row, column = row + 1, 0
            else:
                self.cells[(row, column)] = char
                column += 1
        self.cursor = (row, column)

    def move(self, row, column):
        self.cursor = (row, column)

    def clrtoeol(self):
        row, column = self.cursor
        for key in [k for k in self.cells if k[0] == row and k[1] >= column]:
            del self.cells[key]

    def chgat(self, row, column, count, attr):
        for offset in range(count):
            self.colored[(row, column + offset)] = attr

    def erase(self):
        self.cells.clear()

    def clear(self):
        self.cells.clear()

    def refresh(self):
        self.refreshes += 1

    def keypad(self, flag):
        self.keypad_enabled = flag

    def nodelay(self, flag):
        self.nodelay_enabled = flag

    def line(self, row):
        columns = [c for (r, c) in self.cells if r == row]
        if not columns:
            return ""
        return "".join(self.cells.get((row, c), " ") for c in range(max(columns) + 1))


@pytest.fixture
def world():
    return World(terminal_size=(100, 40))


@pytest.fixture
def screen():
    return FakeScreen()


def test_initialize_screen_sets_up_splatter_colour(screen):
    with mock.patch("plagueshooter.graphics.curses") as fake_curses:
        initialize_screen(screen)
    fake_curses.init_pair.assert_called_once_with(COLOR_PAIR_SPLATTER, COLOR_ID_SPLATTER, -1)
    assert screen.keypad_enabled is True
    assert screen.nodelay_enabled is True


def test_draw_player_shows_player_and_weapon(screen):
    player = Player(position=Position(30, 12))
    player.fix_weapon_appearance()
    draw_player(screen, player)
    assert screen.cells[(12, 30)] == PLAYER_CHAR
    weapon = player.weapon_position
    assert screen.cells[(weapon.row, weapon.column)] == player.weapon_char


def test_living_infected_drawn_over_dead(screen, world):
    dead = Infected(position=Position(20, 10))
    dead.mark_as_dead()
    alive = Infected(position=Position(20, 10))
    world.infected.extend([alive, dead])
    draw_infected(screen, world)
    assert screen.cells[(10, 20)] == INFECTED_CHAR


def test_splatter_drawn_without_colour(screen, world):
    infected = Infected(position=Position(20, 10))
    infected.splatter = SplatterEffect(positions=[Position(21, 10), Position(22, 10)])
    world.infected.append(infected)
    draw_infected(screen, world)
    assert screen.cells[(10, 21)] == "*"
    assert screen.cells[(10, 22)] == "*"
    assert screen.colored == {}


def test_splatter_coloured_when_enabled(screen, world):
    world.settings.colors = True
    infected = Infected(position=Position(20, 10))
    infected.splatter = SplatterEffect(positions=[Position(21, 10)])
    world.infected.append(infected)
    with mock.patch("curses.color_pair", return_value=512):
        draw_infected(screen, world)
    assert screen.colored[(10, 21)] == 512


def test_draw_world_items(screen, world):
    world.supply_drops.append(SupplyDrop(position=Position(15, 9)))
    grenade = Explosive(ExplosiveType.M67_GRENADE)
    grenade.position = Position(16, 11)
    world.active_explosives.append(grenade)
    draw_world_items(screen, world)
    assert screen.cells[(9, 15)] == "$"
    assert screen.cells[(11, 16)] == grenade.explosive_char


def test_draw_rescue(screen, world):
    world.rescue.position = Position(40, 20)
    draw_rescue(screen, world)
    assert screen.cells[(20, 40)] == world.rescue.rescue_char


def test_map_borders_frame_the_map(screen, world):
    draw_map_limit_borders(screen, world)
    col_low, col_high = world.map_column_limits
    row_low, row_high = world.map_row_limits
    for column in range(col_low - 2, col_high + 3):
        assert screen.cells[(row_low - 2, column)] == "#"
        assert screen.cells[(row_high + 2, column)] == "#"
    for row in range(row_low - 2, row_high + 3):
        assert screen.cells[(row, col_low - 2)] == "#"
        assert screen.cells[(row, col_high + 2)] == "#"
    assert (row_low, col_low) not in screen.cells


def test_clear_map_blanks_inside_but_keeps_border(screen, world):
    draw_map_limit_borders(screen, world)
    col_low, col_high = world.map_column_limits
    row_low, row_high = world.map_row_limits
    screen.addstr(row_low + 3, col_low + 3, "Z")
    clear_map(screen, world)
    assert screen.cells[(row_low + 3, col_low + 3)] == " "
    assert screen.cells[(row_low - 1, col_low - 1)] == " "
    assert screen.cells[(row_high + 1, col_high + 1)] == " "
    assert screen.cells[(row_low - 2, col_low - 2)] == "#"


def test_game_status_replaces_old_text(screen, world):
    screen.addstr(3, 50, "stale")
    player = Player()
    draw_game_status(screen, world, player)
    assert screen.line(0).startswith("Active firearm: " + player.active_weapon.name)
    assert "stale" not in screen.line(3)
    assert player.hud_text.startswith("Active firearm: ")


def test_countdown_text_before_arrival(world):
    world.rescue.arrival_epoch = epoch_now() + 65.5
    assert rescue_countdown_text(world) == "Rescue Arrival: " + make_clock_string(65)


def test_countdown_text_after_arrival(world):
    world.rescue.has_arrived = True
    world.rescue.escape_epoch = epoch_now() + 10.5
    assert rescue_countdown_text(world) == "Escape: " + make_clock_string(10)


def test_draw_rescue_countdown_above_map(screen, world):
    world.rescue.arrival_epoch = epoch_now() + 100.5
    draw_rescue_countdown(screen, world)
    row = world.map_row_limits[0] - 3
    assert screen.line(row).strip() == rescue_countdown_text(world)


def test_end_game_text_lists_message_and_nonzero_tallies(world):
    player = Player()
    player.game_stats.end_game_message = GAME_END_MSG_RESCUED
    player.game_stats.kills = 3
    world.start_time = float(int(epoch_now()) - 125)
    text = end_game_text(world, player)
    assert text.startswith(GAME_END_MSG_RESCUED + "\n\n")
    assert "kills: 3\n" in text
    assert "headshot kills" not in text
    assert "grenade kills" not in text
    last = text.splitlines()[-1]
    assert last in {"playtime: " + make_clock_string(s) for s in (125, 126)}


def test_end_game_text_without_message_starts_with_playtime(world):
    player = Player()
    text = end_game_text(world, player)
    assert text.startswith("playtime: ")


def test_display_end_game_writes_summary(screen, world):
    screen.addstr(5, 5, "old")
    player = Player()
    player.game_stats.end_game_message = GAME_END_MSG_RESCUED
    display_end_game(screen, world, player)
    assert screen.line(0) == GAME_END_MSG_RESCUED
    assert (5, 5) not in screen.cells
    assert screen.refreshes == 2