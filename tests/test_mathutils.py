import math

import pytest

from plagueshooter.mathutils import (
    Position,
    SplatterEffect,
    calculate_exp_decay,
    compute_area_from_distance,
    compute_inverse_square_law,
    compute_position_change,
    compute_sector_area_from_distance,
    compute_thrown_object_range,
    position_distance,
    sector_width_at_distance,
    thrown_object_velocity_at_time,
)


def test_position_equality():
    assert Position(3, 4) == Position(column=3, row=4)
    assert Position(3, 4) != Position(4, 3)


def test_splatter_effect_defaults():
    effect = SplatterEffect()
    assert effect.positions == []
    assert effect.splatter_char == "*"


def test_inverse_square_law_at_zero_distance_returns_value():
    assert compute_inverse_square_law(962000, 0) == 962000


@pytest.mark.parametrize("distance", [0.5, 1.0, 3.0, 10.0])
def test_inverse_square_law_times_area_is_value(distance):
    value = 4556000
    spread = compute_inverse_square_law(value, distance)
    assert spread * compute_area_from_distance(distance) == pytest.approx(value)


def test_area_grows_with_distance():
    assert compute_area_from_distance(2) > compute_area_from_distance(1)
    assert compute_area_from_distance(0) == 0


def test_position_distance():
    assert position_distance(Position(0, 0), Position(3, 4)) == 5.0
    assert position_distance(Position(7, 2), Position(7, 2)) == 0.0


def test_position_distance_is_symmetric():
    a, b = Position(-2, 5), Position(6, -1)
    assert position_distance(a, b) == position_distance(b, a)


@pytest.mark.parametrize("distance", [1.0, 2.5, 7.0])
def test_full_circle_sector_is_quarter_sphere_area(distance):
    sector = compute_sector_area_from_distance(distance, 360)
    assert sector == pytest.approx(compute_area_from_distance(distance) / 4)


@pytest.mark.parametrize("distance", [1.0, 4.0, 9.0])
def test_half_circle_sector_width_is_diameter(distance):
    assert sector_width_at_distance(distance, 180) == pytest.approx(2 * distance)


def test_velocity_at_launch_is_launch_speed():
    assert thrown_object_velocity_at_time(18, 45, 0.0) == pytest.approx(18)


def test_velocity_at_apex_is_horizontal_component():
    velocity, degrees = 20, 40
    vy = velocity * math.sin(math.radians(degrees))
    apex = vy / 9.80665
    expected = velocity * math.cos(math.radians(degrees))
    assert thrown_object_velocity_at_time(velocity, degrees, apex) == pytest.approx(expected)


def test_range_is_symmetric_and_peaks_at_45_degrees():
    assert compute_thrown_object_range(15, 40) == pytest.approx(
        compute_thrown_object_range(15, 50)
    )
    assert compute_thrown_object_range(15, 45) > compute_thrown_object_range(15, 40)


def test_exp_decay_no_events_keeps_value():
    assert calculate_exp_decay(1.74, 0.054, 0) == 1.74


def test_exp_decay_decreases_with_events():
    assert calculate_exp_decay(1.7, 0.0135, 10) < calculate_exp_decay(1.7, 0.0135, 5)


def test_position_change():
    a, b = Position(2, 10), Position(7, 4)
    assert compute_position_change(a, b, True) == 5
    assert compute_position_change(a, b, False) == 6