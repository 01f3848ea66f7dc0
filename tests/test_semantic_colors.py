"""Semantic defaults and saturation-matched band colours."""

from ribbon_solver import (
    Band,
    Inks,
    match_band_from_primary_by_s,
    match_semantic_picks,
    most_eye_catching,
    semantic_defaults,
    with_semantic_defaults,
)
from ribbon_solver.color_space import hsl_to_rgb, hue_distance, rgb_to_hsl
from ribbon_solver.contrast import relative_luminance
from ribbon_solver.ribbons import build_family_ribbons
from ribbon_solver.selection import pick_from_ribbon


def test_match_band_keeps_saturation_and_target_y():
    ref_s = rgb_to_hsl("#2563EB").s
    color = match_band_from_primary_by_s("#2563EB", 8, 0.3)
    h, s, _ = rgb_to_hsl(color)
    assert abs(relative_luminance(color) - 0.3) <= 0.01
    assert hue_distance(h, 8) < 3
    assert abs(s - ref_s) < 0.05


def test_semantic_defaults_use_target_hues_when_clear():
    out = semantic_defaults({"primary": "#2563EB"})
    assert out["error"] == hsl_to_rgb(8, 0.86, 0.44).hex
    assert out["warning"] == hsl_to_rgb(48, 0.92, 0.58).hex
    assert out["success"] == hsl_to_rgb(145, 0.62, 0.40).hex


def test_semantic_defaults_avoid_palette_hues():
    primary = hsl_to_rgb(10, 0.8, 0.5).hex
    out = semantic_defaults({"primary": primary})
    assert hue_distance(rgb_to_hsl(out["error"]).h, 10) >= 18


def test_with_semantic_defaults_keeps_valid_and_replaces_malformed():
    out = with_semantic_defaults({"primary": "#2563eb", "warning": "#FFAA00", "error": "bad"})
    assert out["primary"] == "#2563EB"
    assert out["warning"] == "#FFAA00"
    assert out["error"] == semantic_defaults({"primary": "#2563EB"})["error"]
    assert set(out) == {"primary", "error", "warning", "success"}


def test_match_semantic_picks_follow_reference_luminance():
    inks = Inks("#111111", "#FAFAFA")
    ribbons = build_family_ribbons("#2563EB", inks, family="primary")
    picks = {band: pick_from_ribbon(r, len(r) // 2) for band, r in ribbons.items()}
    matched = match_semantic_picks(picks, {"success": "#16A34A"}, inks)
    assert set(matched["success"]) == set(Band)
    for band, m in matched["success"].items():
        assert m.family == "success"
        assert abs(m.y - picks[band].y) <= 0.01
        assert m.contrast >= 1.0


def test_most_eye_catching_picks_highest_saturation():
    assert most_eye_catching({"primary": "#808080", "accent": "#FF0000"}) == "accent"
    # ties keep the earlier family
    assert most_eye_catching({"primary": "#FF0000", "secondary": "#00FF00"}) == "primary"
