"""Lightness solver: monotone Y(L), accuracy at the configured precision."""

import pytest

from ribbon_solver import RibbonConfig
from ribbon_solver.color_space import hsl_to_rgb
from ribbon_solver.contrast import relative_luminance
from ribbon_solver.lightness_solver import (
    solve_color_for_y,
    solve_color_like,
    solve_lightness_for_y,
)

HUES = [0, 8, 60, 145, 221, 300]
SATURATIONS = [0.0, 0.35, 0.83, 1.0]


@pytest.mark.parametrize("hue", HUES)
@pytest.mark.parametrize("sat", SATURATIONS)
def test_luminance_non_decreasing_in_lightness(hue, sat):
    ys = [relative_luminance(hsl_to_rgb(hue, sat, i / 100)) for i in range(101)]
    assert all(a <= b for a, b in zip(ys, ys[1:]))
    assert ys[0] == 0.0
    assert ys[-1] == pytest.approx(1.0)


@pytest.mark.parametrize("hue", HUES)
@pytest.mark.parametrize("sat", SATURATIONS)
def test_solved_color_within_precision(hue, sat):
    cfg = RibbonConfig.default()
    for i in range(21):
        target = i / 20
        color = solve_color_for_y(hue, sat, target, cfg)
        assert abs(relative_luminance(color) - target) <= 10 ** -cfg.y_target_decimals


def test_out_of_range_targets_clamp_to_extremes():
    assert solve_lightness_for_y(221, 0.83, -0.5) == 0.0
    assert solve_lightness_for_y(221, 0.83, 1.5) == 1.0
    assert solve_color_for_y(221, 0.83, 2.0).hex == "#FFFFFF"
    assert solve_color_for_y(221, 0.83, -1.0).hex == "#000000"


def test_achromatic_solution_is_gray():
    color = solve_color_for_y(0, 0.0, 0.18)
    assert color.r == color.g == color.b
    assert abs(relative_luminance(color) - 0.18) <= 0.01


def test_solver_is_deterministic():
    assert solve_lightness_for_y(145, 0.62, 0.3) == solve_lightness_for_y(145, 0.62, 0.3)


def test_solve_color_like_keeps_hue():
    color = solve_color_like("#2563EB", 0.6)
    assert abs(relative_luminance(color) - 0.6) <= 0.01
    assert color.b > color.r
