import math

import numpy as np
import pytest

from eye import Eye, heading_vector, torus_delta, wrap
from exceptions import ConfigError
from world import Food


def look(eye, position, rotation, *food_positions):
    return eye.process_vision(np.array(position), rotation,
                              [Food(p) for p in food_positions])


@pytest.fixture
def eye():
    return Eye(fov_range=0.25, fov_angle=math.pi + math.pi / 4, cells=9)


# ─── Geometry helpers ─────────────────────────────────────────────────────────

def test_wrap_into_unit_range():
    assert wrap(1.2, 0.0, 1.0) == pytest.approx(0.2)
    assert wrap(-0.1, 0.0, 1.0) == pytest.approx(0.9)
    assert wrap(0.5, 0.0, 1.0) == 0.5
    assert wrap(2.5 * math.pi, -math.pi, math.pi) == pytest.approx(0.5 * math.pi)


def test_wrap_never_returns_upper_bound():
    value = wrap(-1e-20, 0.0, 1.0)
    assert 0.0 <= value < 1.0


def test_torus_delta_takes_short_way_round():
    dx, dy = torus_delta((0.95, 0.5), (0.05, 0.5))
    assert dx == pytest.approx(0.1)
    assert dy == 0.0


def test_heading_vector():
    assert heading_vector(0.0) == pytest.approx([0.0, 1.0])
    assert heading_vector(math.pi / 2) == pytest.approx([-1.0, 0.0])


# ─── Vision ───────────────────────────────────────────────────────────────────

def test_nothing_to_see(eye):
    vision = look(eye, (0.5, 0.5), 0.0)
    assert vision.shape == (9,)
    assert np.all(vision == 0.0)


def test_coincident_food_gives_full_intensity(eye):
    vision = look(eye, (0.5, 0.5), 0.0, (0.5, 0.5))

    assert vision.max() == 1.0
    assert vision.sum() == 1.0


def test_food_straight_ahead_lands_in_middle_cell(eye):
    vision = look(eye, (0.5, 0.5), 0.0, (0.5, 0.6))

    assert vision[4] == pytest.approx((0.25 - 0.1) / 0.25)
    assert vision.sum() == pytest.approx(vision[4])


def test_food_on_range_boundary_contributes_nothing(eye):
    vision = look(eye, (0.5, 0.5), 0.0, (0.5, 0.75))
    assert np.all(vision == 0.0)


def test_food_beyond_range_is_ignored(eye):
    vision = look(eye, (0.5, 0.5), 0.0, (0.5, 0.8))
    assert np.all(vision == 0.0)


def test_food_behind_is_outside_field_of_view(eye):
    vision = look(eye, (0.5, 0.5), 0.0, (0.5, 0.4))
    assert np.all(vision == 0.0)


def test_right_side_maps_to_first_cell_left_side_to_last(eye):
    right = look(eye, (0.5, 0.5), 0.0, (0.6, 0.5))
    left = look(eye, (0.5, 0.5), 0.0, (0.4, 0.5))

    assert right[0] > 0.0 and right[1:].sum() == 0.0
    assert left[8] > 0.0 and left[:8].sum() == 0.0


def test_vision_follows_heading(eye):
    # facing -x, so food to the west is straight ahead
    vision = look(eye, (0.5, 0.5), math.pi / 2, (0.4, 0.5))
    assert vision[4] == pytest.approx(0.6)


def test_vision_heading_is_taken_modulo_full_turn(eye):
    a = look(eye, (0.5, 0.5), math.pi / 2, (0.4, 0.5), (0.45, 0.6))
    b = look(eye, (0.5, 0.5), math.pi / 2 + 4 * math.pi, (0.4, 0.5), (0.45, 0.6))
    assert a == pytest.approx(b)


def test_vision_sees_across_torus_edge(eye):
    vision = look(eye, (0.02, 0.5), math.pi / 2, (0.92, 0.5))
    assert vision[4] == pytest.approx(0.6)


def test_food_in_same_cell_adds_up(eye):
    vision = look(eye, (0.5, 0.5), 0.0, (0.5, 0.6), (0.5, 0.6), (0.5, 0.5))
    assert vision[4] == pytest.approx(0.6 + 0.6 + 1.0)


def test_from_config():
    from config import SimulationConfig

    eye = Eye.from_config(SimulationConfig(fov_range=0.1, eye_cells=3))
    assert eye.fov_range == 0.1
    assert eye.cells == 3


@pytest.mark.parametrize("kwargs", [
    {"fov_range": 0.0},
    {"fov_range": -0.1},
    {"fov_angle": 0.0},
    {"fov_angle": 7.0},
    {"cells": 0},
])
def test_eye_rejects_bad_settings(kwargs):
    with pytest.raises(ConfigError):
        Eye(**kwargs)
