"""Ribbon builder: contrast-constrained candidate colours per luminance band.

For a base colour only hue and saturation are kept. Each band sweeps its
configured Y window, solves a lightness for every swept Y, keeps the
colours whose contrast against the band's ink lies within
[aaa_min, comfort cap], and samples the survivors down to the band's
target count. Paired bands (lighter/light, optionally dark/darker) are then
filtered so every remaining candidate has at least one partner in the
other band separated by the configured gap.

An empty ribbon is a valid result meaning "infeasible with these inks".

Public API:
- RibbonColor, Ribbon
- build_ribbon(base, band, ink_light, ink_dark, config=None, family="base")
- build_family_ribbons(base, inks, config=None, family="base")
- build_ribbons(palette, inks, config=None)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, NamedTuple, Optional, Sequence, Tuple

from .color_space import ColorLike, HSL, as_color, rgb_to_hsl
from .contrast import relative_luminance, contrast_ratio_for_y
from .lightness_solver import solve_color_for_y
from .ribbon_config import BANDS, Band, BandRange, Inks, RibbonConfig

__all__ = [
    "RibbonColor",
    "Ribbon",
    "Ribbons",
    "build_ribbon",
    "build_family_ribbons",
    "build_ribbons",
]

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RibbonColor:
    hex: str
    y: float
    contrast_vs_light_ink: float
    contrast_vs_dark_ink: float
    index: int
    target_y: float

    def contrast_for(self, band: Band) -> float:
        return self.contrast_vs_light_ink if band.is_tint else self.contrast_vs_dark_ink

    @property
    def hsl(self) -> HSL:
        return rgb_to_hsl(self.hex)


@dataclass(frozen=True)
class Ribbon:
    """Ordered candidates for one (family, band) pair."""

    family: str
    band: Band
    ink_hex: str
    colors: Tuple[RibbonColor, ...] = ()

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[RibbonColor]:
        return iter(self.colors)

    def __getitem__(self, index: int) -> RibbonColor:
        return self.colors[index]

    @property
    def is_empty(self) -> bool:
        return not self.colors

    @property
    def ys(self) -> List[float]:
        return [c.y for c in self.colors]

    @property
    def hexes(self) -> List[str]:
        return [c.hex for c in self.colors]


Ribbons = Dict[str, Dict[Band, Ribbon]]


class _Candidate(NamedTuple):
    target_y: float
    hex: str
    y: float
    c_light: float
    c_dark: float


def _sweep(rng: BandRange, step: float) -> List[float]:
    n = int(math.floor((rng.max_y - rng.min_y) / step + 1e-9))
    return [round(rng.min_y + i * step, 6) for i in range(n + 1)]


def _evaluate(
    hsl: HSL,
    band: Band,
    targets: Sequence[float],
    y_light_ink: float,
    y_dark_ink: float,
    config: RibbonConfig,
) -> List[_Candidate]:
    cap = config.max_contrast_for(band)
    seen = set()
    out: List[_Candidate] = []
    for t in targets:
        color = solve_color_for_y(hsl.h, hsl.s, t, config)
        if color.hex in seen:
            continue
        seen.add(color.hex)
        y = relative_luminance(color)
        c_light = contrast_ratio_for_y(y, y_light_ink)
        c_dark = contrast_ratio_for_y(y, y_dark_ink)
        ratio = c_light if band.is_tint else c_dark
        if config.aaa_min <= ratio <= cap:
            out.append(_Candidate(t, color.hex, y, c_light, c_dark))
    out.sort(key=lambda c: c.y)
    return out


def _dedupe(cands: Sequence[_Candidate]) -> List[_Candidate]:
    seen = set()
    out: List[_Candidate] = []
    for c in cands:
        if c.hex not in seen:
            seen.add(c.hex)
            out.append(c)
    return out


def _subsample(cands: List[_Candidate], count: int) -> List[_Candidate]:
    n = len(cands)
    if count == 1:
        return [cands[n // 2]]
    step = (n - 1) / (count - 1)
    return _dedupe([cands[int(round(i * step))] for i in range(count)])


def _even(cands: List[_Candidate], count: int) -> List[_Candidate]:
    lo, hi = cands[0].y, cands[-1].y
    if count == 1:
        targets = [(lo + hi) / 2]
    else:
        targets = [lo + i * (hi - lo) / (count - 1) for i in range(count)]
    picks = []
    for t in targets:
        # min() keeps the first (lowest Y) candidate on ties
        picks.append(min(cands, key=lambda c: abs(c.y - t)))
    return _dedupe(picks)


def _sample(cands: List[_Candidate], rng: BandRange) -> List[_Candidate]:
    if len(cands) <= rng.target_count:
        return list(cands)
    if rng.sampling == "even":
        return _even(cands, rng.target_count)
    return _subsample(cands, rng.target_count)


def _has_partner(c: _Candidate, others: Sequence[_Candidate], gap: float) -> bool:
    return any(abs(c.y - o.y) >= gap for o in others)


def _apply_gap(
    first: List[_Candidate], second: List[_Candidate], gap: float
) -> Tuple[List[_Candidate], List[_Candidate]]:
    while True:
        kept_first = [c for c in first if _has_partner(c, second, gap)]
        kept_second = [c for c in second if _has_partner(c, kept_first, gap)]
        if len(kept_first) == len(first) and len(kept_second) == len(second):
            return kept_first, kept_second
        first, second = kept_first, kept_second


def _to_ribbon(family: str, rng: BandRange, ink_hex: str, cands: List[_Candidate]) -> Ribbon:
    ordered = sorted(cands, key=lambda c: c.y, reverse=not rng.ascending)
    colors = tuple(
        RibbonColor(
            hex=c.hex,
            y=c.y,
            contrast_vs_light_ink=c.c_light,
            contrast_vs_dark_ink=c.c_dark,
            index=i,
            target_y=c.target_y,
        )
        for i, c in enumerate(ordered)
    )
    return Ribbon(family=family, band=rng.band, ink_hex=ink_hex, colors=colors)


def build_family_ribbons(
    base: ColorLike,
    inks: Optional[Inks] = None,
    config: Optional[RibbonConfig] = None,
    family: str = "base",
) -> Dict[Band, Ribbon]:
    """Build all four ribbons for one base colour."""
    cfg = config or RibbonConfig.default()
    pair = inks or Inks.default()
    hsl = rgb_to_hsl(as_color(base))
    y_light_ink = relative_luminance(pair.text_on_light)
    y_dark_ink = relative_luminance(pair.text_on_dark)

    sampled: Dict[Band, List[_Candidate]] = {}
    for band in BANDS:
        rng = cfg.band_range(band)
        valid = _evaluate(hsl, band, _sweep(rng, cfg.sweep_step), y_light_ink, y_dark_ink, cfg)
        sampled[band] = _sample(valid, rng) if valid else []
        _logger.debug(
            "%s-%s: %d contrast-valid, %d sampled", family, band.value, len(valid), len(sampled[band])
        )

    sampled[Band.LIGHTER], sampled[Band.LIGHT] = _apply_gap(
        sampled[Band.LIGHTER], sampled[Band.LIGHT], cfg.tint_gap
    )
    if cfg.enforce_shade_gap:
        sampled[Band.DARK], sampled[Band.DARKER] = _apply_gap(
            sampled[Band.DARK], sampled[Band.DARKER], cfg.shade_gap
        )

    return {
        band: _to_ribbon(family, cfg.band_range(band), pair.for_band(band), sampled[band])
        for band in BANDS
    }


def build_ribbon(
    base: ColorLike,
    band: "Band | str",
    ink_light: ColorLike,
    ink_dark: ColorLike,
    config: Optional[RibbonConfig] = None,
    family: str = "base",
) -> Ribbon:
    """Build the ribbon for a single band.

    The partner band is generated as well because the gap filter needs both
    sides; only the requested ribbon is returned.
    """
    inks = Inks(as_color(ink_light).hex, as_color(ink_dark).hex)
    return build_family_ribbons(base, inks, config, family)[Band.parse(band)]


def build_ribbons(
    palette: Mapping[str, ColorLike],
    inks: Optional[Inks] = None,
    config: Optional[RibbonConfig] = None,
) -> Ribbons:
    return {family: build_family_ribbons(base, inks, config, family) for family, base in palette.items()}
