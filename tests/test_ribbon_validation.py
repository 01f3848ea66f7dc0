"""Validation of generated ribbons."""

from ribbon_solver import Band, build_ribbons, validate
from ribbon_solver.ribbons import Ribbon

BLUE = "#2563EB"
MIDTONE_INK = "#BCBCBC"


def test_reference_inks_produce_valid_report(palette, inks, config):
    report = validate(build_ribbons(palette, inks, config), config)
    assert report.valid
    assert report.issues == []
    assert report.summary == "All 4 colors have usable ribbons"


def test_midtone_ink_flags_exactly_tint_bands(midtone_inks, config):
    report = validate(build_ribbons({"primary": BLUE}, midtone_inks, config), config)
    assert not report.valid
    assert {(i.family, i.band) for i in report.issues} == {("primary", "lighter"), ("primary", "light")}
    assert all(i.kind == "empty" and i.ink_hex == MIDTONE_INK for i in report.issues)
    assert "decrease its lightness" in report.errors[0]
    assert report.summary.startswith("1 of 1 color cannot produce AAA-compliant lighter/light tints")
    assert "(primary)" in report.summary


def test_summary_lists_both_sides():
    empty = {
        band: Ribbon(family="accent", band=band, ink_hex="#777777")
        for band in Band
    }
    report = validate({"accent": empty})
    assert len(report.issues) == 4
    assert "lighter/light tints" in report.summary
    assert "dark/darker shades" in report.summary
    assert "; " in report.summary
    assert "increase its lightness" in report.issues_for("accent")[-1].message


def test_minimum_length_reports_too_few(inks, config):
    strict = config.replace(min_ribbon_length=50)
    report = validate(build_ribbons({"primary": BLUE}, inks, strict), strict)
    assert not report.valid
    assert {i.kind for i in report.issues} == {"too_few"}
    assert all(0 < i.count < 50 for i in report.issues)


def test_missing_band_is_ignored(blue_ribbons):
    partial = {"primary": {Band.DARK: blue_ribbons[Band.DARK]}}
    assert validate(partial).valid
