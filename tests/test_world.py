import os
from unittest import mock

import pytest

from plagueshooter.constants import (
    BULLET_KE_223_REMINGTON_HP,
    FIRST_INFECTED_SPAWN_DELAY,
    FIRST_SUPPLY_DROP_DELAY,
    RESCUE_ARRIVAL_ETA,
    RESCUE_ESCAPE_DURATION,
    CartridgeType,
    ExplosiveType,
    FirearmType,
)
from plagueshooter.mathutils import Position
from plagueshooter.settings import GameSettings
from plagueshooter.timeutils import epoch_now
from plagueshooter.world import Rescue, World, get_terminal_size, map_limits


@pytest.fixture
def world():
    return World(terminal_size=(100, 40))


def test_map_limits_pinned():
    assert map_limits((100, 40)) == ((9, 89), (7, 31))


@pytest.mark.parametrize("size", [(20, 10), (80, 24), (100, 40), (300, 120)])
def test_map_limits_invariants(size):
    columns, rows = size
    (col_low, col_high), (row_low, row_high) = map_limits(size)
    assert col_low >= 2
    assert col_high <= columns - 3
    assert row_low >= 6
    assert row_high <= rows - 3
    assert col_high - col_low <= 80
    assert row_high - row_low <= 24


def test_get_terminal_size_reads_shutil():
    with mock.patch("shutil.get_terminal_size", return_value=os.terminal_size((120, 50))):
        assert get_terminal_size() == (120, 50)


def test_world_uses_terminal_size_when_none_given():
    with mock.patch("shutil.get_terminal_size", return_value=os.terminal_size((100, 40))):
        w = World()
    assert (w.map_column_limits, w.map_row_limits) == map_limits((100, 40))


def test_world_initial_timers(world):
    assert world.active is True
    assert world.next_supply_drop_epoch - world.start_time == pytest.approx(
        FIRST_SUPPLY_DROP_DELAY
    )
    assert world.rescue.arrival_epoch - world.start_time == pytest.approx(
        RESCUE_ARRIVAL_ETA, abs=1
    )
    assert world.rescue.escape_epoch - world.rescue.arrival_epoch == pytest.approx(
        RESCUE_ESCAPE_DURATION
    )
    assert world.infected_spawner.next_spawn_epoch - world.start_time == pytest.approx(
        FIRST_INFECTED_SPAWN_DELAY, abs=1
    )
    assert world.infected == [] and world.supply_drops == [] and world.active_explosives == []


def test_world_keeps_given_settings():
    settings = GameSettings(colors=True)
    w = World(terminal_size=(100, 40), settings=settings)
    assert w.settings is settings


def test_contains_corners(world):
    (col_low, col_high), (row_low, row_high) = world.map_column_limits, world.map_row_limits
    assert world.contains(Position(col_low, row_low)) is True
    assert world.contains(Position(col_high, row_high)) is True
    assert world.contains(Position(col_low - 1, row_low)) is False
    assert world.contains(Position(col_high + 1, row_low)) is False
    assert world.contains(Position(col_low, row_low - 1)) is False
    assert world.contains(Position(col_low, row_high + 1)) is False


def test_random_position_avoids_spawn_row(world):
    (col_low, col_high), (row_low, _) = world.map_column_limits, world.map_row_limits
    for _ in range(300):
        pos = world.random_position()
        assert col_low <= pos.column <= col_high
        assert pos.row >= row_low + 2


def test_drop_supplies_contents(world):
    for _ in range(150):
        world.supply_drops.clear()
        before = epoch_now()
        world.drop_supplies()
        assert len(world.supply_drops) == 1
        drop = world.supply_drops[0]
        assert world.contains(drop.position)
        assert len(drop.items.firearms) == 1
        firearm = drop.items.firearms[0]
        assert firearm.firearm_type != FirearmType.RUGER_MK_IV

        counts = drop.items.explosive_counts()
        assert 2 <= counts[ExplosiveType.M67_GRENADE] <= 4
        assert counts.get(ExplosiveType.M18A1_CLAYMORE, 0) in (0, 1)
        assert world.next_supply_drop_epoch >= before + 8

        mags = drop.items.magazines
        if firearm.firearm_type == FirearmType.SIG_M17:
            assert len(mags) == 2
            assert all(m.is_hollow_point for m in mags)
            assert all(m.cartridge_type == CartridgeType.CARTRIDGE_9MM for m in mags)
            assert firearm.magazine.is_hollow_point is True
        elif firearm.firearm_type == FirearmType.AR15:
            assert 1 <= len(mags) <= 3
            assert all(m.is_hollow_point == firearm.magazine.is_hollow_point for m in mags)
            assert all(m is not firearm.magazine for m in mags)
            assert len({id(m) for m in mags}) == len(mags)
            if firearm.magazine.is_hollow_point:
                assert firearm.magazine.kinetic_energy == BULLET_KE_223_REMINGTON_HP
        else:
            assert mags == []
            rounds = drop.items.ammunition[CartridgeType.CARTRIDGE_30_06]
            capacity = firearm.magazine.capacity
            assert rounds % capacity == 0
            assert 1 <= rounds // capacity <= 3


def test_rescue_timers():
    now = epoch_now()
    rescue = Rescue(arrival_epoch=now - 1, escape_epoch=now + 100)
    assert rescue.has_arrival_time_passed() is True
    assert rescue.has_escape_time_passed() is False
    rescue.escape_epoch = now - 1
    assert rescue.has_escape_time_passed() is True


def test_rescue_trigger_arrival(world):
    rescue = world.rescue
    rescue.trigger_arrival(world)
    assert rescue.has_arrived is True
    assert rescue.can_board is True
    low, high = world.map_column_limits
    assert low <= rescue.position.column <= high
    assert rescue.position.row >= world.map_row_limits[0] + 2