import math

import pytest

from core.param_builder import build_spiral_params
from builders.build_modules.sweep_helpers import (
    calculate_step_count,
    sample_sweep_steps,
    cross_section_points,
    create_spiral_ribbon,
)
import builders.build_modules.general_helpers as helpers


@pytest.mark.parametrize("half_turns, step_inc, expected", [
    (3, 0.01, 300),
    (6, 0.1, 60),
    (1.0, 0.3, 4),
    (0.001, 0.5, 1),
])
def test_step_count(half_turns, step_inc, expected):
    assert calculate_step_count(half_turns, step_inc) == expected


def test_sweep_steps_cover_all_half_turns():
    params = build_spiral_params(30, 36, 10, 5, 18)
    steps = sample_sweep_steps(params, 0.5)

    assert len(steps) == 7
    assert steps[0].t == 0
    assert steps[0].angle == pytest.approx(30)
    assert steps[0].height == pytest.approx(0)
    assert steps[-1].t == pytest.approx(3)
    assert steps[-1].angle == pytest.approx(30 + 540)
    assert steps[-1].height == pytest.approx(54)


def test_sweep_steps_rise_one_color_height_per_half_turn():
    params = build_spiral_params(0, 20, 4, 1, 5)
    steps = sample_sweep_steps(params, 0.25)
    for a, b in zip(steps, steps[1:]):
        assert b.angle - a.angle == pytest.approx(180 * 0.25)
        assert b.height - a.height == pytest.approx(5 * 0.25)


def test_cross_section_is_radial_rectangle():
    params = build_spiral_params(0, 20, 4, 1, 5)
    step = sample_sweep_steps(params, 0.5)[1]      # t = 0.5, angle 90
    pts = cross_section_points(step, 1, 4, 5)

    radii = [math.hypot(x, y) for x, y, _ in pts]
    heights = [z for _, _, z in pts]
    assert min(radii) == pytest.approx(1)
    assert max(radii) == pytest.approx(4)
    assert min(heights) == pytest.approx(2.5)
    assert max(heights) == pytest.approx(7.5)
    # all in the plane at 90 deg
    for x, y, z in pts:
        assert x == pytest.approx(0, abs=1e-9)
        assert y > 0


def test_ribbon_is_valid_solid():
    params = build_spiral_params(0, 18, 5, 2, 9)
    ribbon = create_spiral_ribbon(params, 0.1)
    solid = ribbon.val()
    assert solid.isValid()
    assert solid.Volume() > 0


def test_ribbon_keeps_axis_clearance():
    params = build_spiral_params(0, 18, 5, 0, 9)
    ribbon = create_spiral_ribbon(params, 0.1, axis_clearance=0.01)
    assert ribbon.val().isValid()
    assert not helpers.contains_point(ribbon, (0, 0, 9))
