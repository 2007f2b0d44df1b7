import pytest

from plagueshooter.constants import (
    DELAYED_DEATH_COUNTER_MAX,
    INFECTED_CHAR,
    INFECTED_CHAR_DEAD,
    INFECTED_HINDER_DELAY_MS,
    INFECTED_MOVEMENT_INTERVAL_MS,
)
from plagueshooter.infected import (
    Infected,
    InfectedMovement,
    InfectedSpawner,
    next_infected_position,
)
from plagueshooter.mathutils import Position, position_distance
from plagueshooter.timeutils import epoch_now


def test_new_infected_defaults():
    inf = Infected()
    assert inf.alive is True
    assert inf.is_hindered is False
    assert inf.infected_char == INFECTED_CHAR
    assert inf.delayed_death_counter == DELAYED_DEATH_COUNTER_MAX
    assert inf.movement_interval_ms == INFECTED_MOVEMENT_INTERVAL_MS
    assert inf.delayed_death_start_epoch is None


def test_mark_as_dead_records_time_and_char():
    inf = Infected()
    before = epoch_now()
    inf.mark_as_dead()
    assert inf.alive is False
    assert inf.infected_char == INFECTED_CHAR_DEAD
    assert before <= inf.epoch_at_death <= epoch_now()


def test_make_hindered_applies_only_once():
    inf = Infected()
    inf.make_hindered()
    inf.make_hindered()
    assert inf.is_hindered is True
    assert inf.movement_interval_ms == INFECTED_MOVEMENT_INTERVAL_MS + INFECTED_HINDER_DELAY_MS


def test_update_movement_sets_last_epoch():
    inf = Infected()
    before = epoch_now()
    inf.update_movement()
    assert before <= inf.last_movement_epoch <= epoch_now()


def test_movement_timer():
    movement = InfectedMovement(next_movement_epoch=epoch_now() - 1)
    assert movement.should_move() is True
    movement.next_movement_epoch = epoch_now() + 100
    assert movement.should_move() is False


def test_spawner_timer():
    spawner = InfectedSpawner(next_spawn_epoch=epoch_now() - 1)
    assert spawner.should_spawn() is True
    spawner.next_spawn_epoch = epoch_now() + 100
    assert spawner.should_spawn() is False


def test_next_position_pinned_diagonal():
    assert next_infected_position(Position(0, 0), Position(3, -3)) == Position(1, -1)


def test_next_position_at_target_stays():
    pos = Position(4, 7)
    assert next_infected_position(pos, pos) == pos


@pytest.mark.parametrize(
    "target",
    [Position(10, 10), Position(0, 5), Position(5, 0), Position(5, 12), Position(-3, 9)],
)
def test_next_position_moves_closer_by_one_step(target):
    start = Position(5, 5)
    nxt = next_infected_position(start, target)
    assert abs(nxt.column - start.column) <= 1
    assert abs(nxt.row - start.row) <= 1
    assert position_distance(nxt, target) < position_distance(start, target)
    if target.column == start.column:
        assert nxt.column == start.column
    if target.row == start.row:
        assert nxt.row == start.row