"""Ribbon generation: contrast window, ordering, sampling and gap filters."""

import pytest

from ribbon_solver import Band, Inks, build_family_ribbons, build_ribbon, build_ribbons
from ribbon_solver.contrast import contrast_ratio

BLUE = "#2563EB"


def test_every_candidate_meets_contrast_window(blue_ribbons, inks, config):
    for band, ribbon in blue_ribbons.items():
        cap = config.max_contrast_for(band)
        ink = inks.for_band(band)
        assert ribbon.ink_hex == ink
        for c in ribbon:
            ratio = contrast_ratio(c.hex, ink)
            assert config.aaa_min <= ratio <= cap
            assert c.contrast_for(band) == pytest.approx(ratio)


def test_candidates_stay_inside_band_window(blue_ribbons, config):
    for band, ribbon in blue_ribbons.items():
        rng = config.band_range(band)
        for c in ribbon:
            assert rng.min_y - 0.01 <= c.y <= rng.max_y + 0.01


def test_ribbon_order_and_indices(blue_ribbons):
    for band, ribbon in blue_ribbons.items():
        ys = ribbon.ys
        if band.is_tint:
            assert ys == sorted(ys)
        else:
            assert ys == sorted(ys, reverse=True)
        assert [c.index for c in ribbon] == list(range(len(ribbon)))
        assert len(set(ribbon.hexes)) == len(ribbon)


def test_ribbon_length_bounded_by_target(blue_ribbons, config):
    for band, ribbon in blue_ribbons.items():
        assert 1 <= len(ribbon) <= config.band_range(band).target_count


def test_dark_band_reference_scenario(blue_ribbons):
    dark = blue_ribbons[Band.DARK]
    assert not dark.is_empty
    assert max(c.contrast_vs_dark_ink for c in dark) > 7.05


def test_tint_bands_are_mutually_matchable(blue_ribbons, config):
    lighter, light = blue_ribbons[Band.LIGHTER], blue_ribbons[Band.LIGHT]
    for c in lighter:
        assert any(abs(c.y - o.y) >= config.tint_gap for o in light)
    for c in light:
        assert any(abs(c.y - o.y) >= config.tint_gap for o in lighter)


def test_wider_tint_gap_drops_unmatched_candidates(inks, config):
    loose = build_family_ribbons(BLUE, inks, config.replace(tint_gap=0.0))
    strict = build_family_ribbons(BLUE, inks, config.replace(tint_gap=0.35))
    assert len(strict[Band.LIGHTER]) < len(loose[Band.LIGHTER])
    for c in strict[Band.LIGHTER]:
        assert any(abs(c.y - o.y) >= 0.35 for o in strict[Band.LIGHT])


def test_impossible_tint_gap_empties_both_tint_bands(inks, config):
    ribbons = build_family_ribbons(BLUE, inks, config.replace(tint_gap=1.0))
    assert ribbons[Band.LIGHTER].is_empty
    assert ribbons[Band.LIGHT].is_empty
    assert not ribbons[Band.DARK].is_empty


def test_shade_gap_applied_only_when_enabled(inks, config):
    ribbons = build_family_ribbons(BLUE, inks, config.replace(enforce_shade_gap=True))
    dark, darker = ribbons[Band.DARK], ribbons[Band.DARKER]
    assert not dark.is_empty and not darker.is_empty
    for c in dark:
        assert any(abs(c.y - o.y) >= config.shade_gap for o in darker)
    for c in darker:
        assert any(abs(c.y - o.y) >= config.shade_gap for o in dark)


def test_midtone_ink_leaves_tints_empty(midtone_inks, config):
    ribbons = build_family_ribbons(BLUE, midtone_inks, config)
    assert ribbons[Band.LIGHTER].is_empty
    assert ribbons[Band.LIGHT].is_empty
    assert not ribbons[Band.DARK].is_empty
    assert not ribbons[Band.DARKER].is_empty


def test_build_ribbon_matches_family_build(blue_ribbons):
    single = build_ribbon(BLUE, "light", "#111111", "#FAFAFA", family="primary")
    assert single == blue_ribbons[Band.LIGHT]


def test_build_is_deterministic(inks, config):
    assert build_family_ribbons(BLUE, inks, config) == build_family_ribbons(BLUE, inks, config)


def test_build_ribbons_per_family(palette, inks):
    ribbons = build_ribbons(palette, inks)
    assert set(ribbons) == set(palette)
    for family, bands in ribbons.items():
        assert set(bands) == set(Band)
        assert all(r.family == family for r in bands.values())


def test_only_hue_and_saturation_of_base_matter(inks):
    # Same hue/saturation at a different lightness
    a = build_family_ribbons("#808080", inks)
    b = build_family_ribbons("#404040", inks)
    assert a == b


def test_inks_normalized():
    assert Inks("#fafafa", "111111").text_on_dark == "#111111"
