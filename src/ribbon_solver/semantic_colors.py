"""Semantic (error / warning / success) colours tied to a reference family.

Semantic defaults are picked by target hue while steering clear of the
palette's own hues. Matched semantic picks reuse the reference colour's
saturation and luminance at a band so the derived colour carries the same
visual weight under a different hue.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from .color_space import Color, ColorLike, as_color, hsl_to_rgb, hue_distance, rgb_to_hsl
from .contrast import contrast_ratio, relative_luminance
from .errors import InvalidColorFormat
from .lightness_solver import solve_color_for_y
from .ribbon_config import Band, Inks, RibbonConfig
from .selection import SwatchPick

__all__ = [
    "BASE_FAMILIES",
    "SEMANTIC_FAMILIES",
    "MatchedColor",
    "match_band_from_primary_by_s",
    "semantic_defaults",
    "with_semantic_defaults",
    "match_semantic_picks",
    "most_eye_catching",
]

BASE_FAMILIES = ("primary", "secondary", "tertiary", "accent")
SEMANTIC_FAMILIES = ("error", "warning", "success")

# target hue, saturation, lightness
_SEMANTIC_TARGETS = {
    "error": (8.0, 0.86, 0.44),
    "warning": (48.0, 0.92, 0.58),
    "success": (145.0, 0.62, 0.40),
}
_MIN_HUE_DISTANCE = 18.0
_FALLBACK_OFFSETS = (60.0, 120.0, 240.0, 300.0)


def match_band_from_primary_by_s(
    reference: ColorLike,
    new_hue: float,
    target_y: float,
    config: Optional[RibbonConfig] = None,
) -> Color:
    """Colour at ``new_hue`` with the reference's saturation, solved for ``target_y``."""
    s = rgb_to_hsl(as_color(reference)).s
    return solve_color_for_y(new_hue % 360.0, s, target_y, config)


def _choose_hue(target: float, existing: Sequence[float], primary_hue: float) -> float:
    if not any(hue_distance(h, target) < _MIN_HUE_DISTANCE for h in existing):
        return target % 360.0
    best, best_score = (primary_hue + _FALLBACK_OFFSETS[0]) % 360.0, -1.0
    for offset in _FALLBACK_OFFSETS:
        cand = (primary_hue + offset) % 360.0
        score = min((hue_distance(h, cand) for h in existing), default=180.0)
        if score > best_score:
            best, best_score = cand, score
    return best


def _palette_hues(palette: Mapping[str, ColorLike]) -> List[float]:
    return [rgb_to_hsl(as_color(palette[k])).h for k in BASE_FAMILIES if k in palette]


def semantic_defaults(palette: Mapping[str, ColorLike]) -> Dict[str, str]:
    """Generated error/warning/success hexes for ``palette``."""
    hues = _palette_hues(palette)
    primary_hue = hues[0] if hues else 0.0
    out = {}
    for family in SEMANTIC_FAMILIES:
        hue, sat, light = _SEMANTIC_TARGETS[family]
        out[family] = hsl_to_rgb(_choose_hue(hue, hues, primary_hue), sat, light).hex
    return out


def with_semantic_defaults(palette: Mapping[str, ColorLike]) -> Dict[str, str]:
    """Copy of ``palette`` with missing or malformed semantic entries filled in."""
    out = {k: as_color(v).hex for k, v in palette.items() if k not in SEMANTIC_FAMILIES}
    generated = semantic_defaults(palette)
    for family in SEMANTIC_FAMILIES:
        value = palette.get(family)
        try:
            out[family] = as_color(value).hex if value is not None else generated[family]
        except InvalidColorFormat:
            out[family] = generated[family]
    return out


@dataclass(frozen=True)
class MatchedColor:
    family: str
    band: Band
    hex: str
    y: float
    contrast: float
    meets_aaa: bool


def match_semantic_picks(
    reference_picks: Mapping[Band, SwatchPick],
    semantic_bases: Mapping[str, ColorLike],
    inks: Optional[Inks] = None,
    config: Optional[RibbonConfig] = None,
) -> Dict[str, Dict[Band, MatchedColor]]:
    """Derive each semantic family's band colour from the reference picks.

    The result is checked against the band's ink; ``meets_aaa`` is False when
    the new hue cannot hold the comfort window at that luminance.
    """
    cfg = config or RibbonConfig.default()
    pair = inks or Inks.default()
    out: Dict[str, Dict[Band, MatchedColor]] = {}
    for family, base in semantic_bases.items():
        hue = rgb_to_hsl(as_color(base)).h
        bands: Dict[Band, MatchedColor] = {}
        for band, pick in reference_picks.items():
            color = match_band_from_primary_by_s(pick.hex, hue, pick.y, cfg)
            ratio = contrast_ratio(color, pair.for_band(band))
            bands[band] = MatchedColor(
                family=family,
                band=band,
                hex=color.hex,
                y=relative_luminance(color),
                contrast=ratio,
                meets_aaa=cfg.aaa_min <= ratio <= cfg.max_contrast_for(band),
            )
        out[family] = bands
    return out


def most_eye_catching(palette: Mapping[str, ColorLike]) -> str:
    """Base family with the highest HSL saturation (first wins on ties)."""
    best, best_s = "accent", -1.0
    for family in BASE_FAMILIES:
        if family not in palette:
            continue
        s = rgb_to_hsl(as_color(palette[family])).s
        if s > best_s:
            best, best_s = family, s
    return best
