"""Invert luminance: find the HSL lightness that reproduces a target Y.

With hue and saturation fixed every RGB channel produced by the standard
HSL construction is non-decreasing in lightness, so Y(L) runs monotonically
from 0 (black) to 1 (white). The solver bisects L over [0,1] on the
quantized 8-bit colour and keeps the closest evaluation seen. If the
bisection still misses the tolerance (8-bit steps near a gamut edge), a
fixed linear scan over L is used instead.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .color_space import Color, ColorLike, as_color, hsl_to_rgb, rgb_to_hsl
from .contrast import relative_luminance
from .ribbon_config import RibbonConfig

__all__ = [
    "MAX_BISECTION_STEPS",
    "solve_lightness_for_y",
    "solve_color_for_y",
    "solve_color_like",
]

_logger = logging.getLogger(__name__)

MAX_BISECTION_STEPS = 40
_SCAN_POINTS = 1024


def _clamp01(v: float) -> float:
    return 0.0 if v < 0.0 else 1.0 if v > 1.0 else v


def _y_at(hue: float, saturation: float, lightness: float) -> float:
    return relative_luminance(hsl_to_rgb(hue, saturation, lightness))


def _bisect(hue: float, saturation: float, target: float, tol: float) -> Tuple[float, float]:
    low, high = 0.0, 1.0
    best_l = 0.0
    best_diff = abs(_y_at(hue, saturation, 0.0) - target)
    top_diff = abs(_y_at(hue, saturation, 1.0) - target)
    if top_diff < best_diff:
        best_l, best_diff = 1.0, top_diff
    for _ in range(MAX_BISECTION_STEPS):
        if best_diff <= tol:
            break
        mid = (low + high) / 2
        y = _y_at(hue, saturation, mid)
        diff = abs(y - target)
        if diff < best_diff:
            best_l, best_diff = mid, diff
        if y < target:
            low = mid
        else:
            high = mid
    return best_l, best_diff


def _scan(hue: float, saturation: float, target: float) -> Tuple[float, float]:
    best_l, best_diff = 0.0, float("inf")
    for i in range(_SCAN_POINTS + 1):
        lightness = i / _SCAN_POINTS
        diff = abs(_y_at(hue, saturation, lightness) - target)
        if diff < best_diff:
            best_l, best_diff = lightness, diff
    return best_l, best_diff


def solve_lightness_for_y(
    hue: float,
    saturation: float,
    target_y: float,
    config: Optional[RibbonConfig] = None,
) -> float:
    """Return the lightness L such that Y(hsl(hue, saturation, L)) ~= target_y.

    ``target_y`` is clamped to [0,1]. Convergence aims at half of the
    configured decimal precision (``y_target_decimals``).
    """
    cfg = config or RibbonConfig.default()
    tol = cfg.solver_tolerance
    target = _clamp01(target_y)
    sat = _clamp01(saturation)
    best_l, best_diff = _bisect(hue, sat, target, tol)
    if best_diff > tol:
        scan_l, scan_diff = _scan(hue, sat, target)
        _logger.debug(
            "bisection missed tolerance (h=%.1f s=%.3f y=%.4f diff=%.5f); scan diff=%.5f",
            hue,
            sat,
            target,
            best_diff,
            scan_diff,
        )
        if scan_diff < best_diff:
            best_l = scan_l
    return best_l


def solve_color_for_y(
    hue: float,
    saturation: float,
    target_y: float,
    config: Optional[RibbonConfig] = None,
) -> Color:
    lightness = solve_lightness_for_y(hue, saturation, target_y, config)
    return hsl_to_rgb(hue, saturation, lightness)


def solve_color_like(base: ColorLike, target_y: float, config: Optional[RibbonConfig] = None) -> Color:
    """Keep the hue and saturation of ``base`` and solve for ``target_y``."""
    h, s, _ = rgb_to_hsl(as_color(base))
    return solve_color_for_y(h, s, target_y, config)
