from ribbon_solver import Inks, RibbonConfig
from ribbon_solver.contrast import (
    DARKEN_OVERLAY,
    LIGHTEN_OVERLAY,
    contrast_level,
    contrast_ratio,
    contrast_ratio_for_y,
    ensure_aaa_text,
    relative_luminance,
)


def test_relative_luminance_monotonic():
    # White > Gray > Black
    assert relative_luminance("#ffffff") > relative_luminance("#777777") > relative_luminance("#000000")


def test_relative_luminance_endpoints():
    assert relative_luminance("#000000") == 0.0
    assert abs(relative_luminance("#FFFFFF") - 1.0) < 1e-9


def test_contrast_ratio_basic():
    ratio = contrast_ratio("#ffffff", "#000000")
    assert abs(ratio - 21.0) < 0.1


def test_contrast_ratio_is_symmetric_and_at_least_one():
    assert contrast_ratio("#2563EB", "#FAFAFA") == contrast_ratio("#FAFAFA", "#2563EB")
    assert contrast_ratio("#2563EB", "#2563EB") == 1.0
    assert contrast_ratio_for_y(0.2, 0.2) == 1.0


def test_contrast_level_thresholds():
    cfg = RibbonConfig.default()
    assert contrast_level(7.05, cfg) == "AAA"
    assert contrast_level(7.0, cfg) == "AA"
    assert contrast_level(4.5, cfg) == "AA"
    assert contrast_level(4.49) == "FAIL"


def test_ensure_aaa_text_prefers_ink_that_clears_aaa():
    inks = Inks.default()
    on_black = ensure_aaa_text("#000000", inks)
    assert on_black.text_color == inks.text_on_dark
    assert on_black.meets_aaa and on_black.overlay is None
    on_white = ensure_aaa_text("#FFFFFF", inks)
    assert on_white.text_color == inks.text_on_light
    assert on_white.meets_aaa


def test_ensure_aaa_text_midtone_suggests_overlay():
    solution = ensure_aaa_text("#777777")
    assert not solution.meets_aaa
    # Near-black reads slightly better on this gray, so the background gets lightened
    assert solution.text_color == "#0A0A0A"
    assert solution.overlay == LIGHTEN_OVERLAY
    assert solution.overlay != DARKEN_OVERLAY
