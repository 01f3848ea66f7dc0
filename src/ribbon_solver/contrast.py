"""WCAG 2.1 luminance and contrast helpers.

Public API:
- relative_luminance(color) -> float
- contrast_ratio(a, b) -> float
- contrast_ratio_for_y(y1, y2) -> float
- contrast_level(ratio, config=None) -> "AAA" | "AA" | "FAIL"
- ensure_aaa_text(background, inks=None, config=None) -> TextSolution

Colours may be passed as hex strings or ``Color`` instances.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .color_space import ColorLike, as_color
from .ribbon_config import Inks, RibbonConfig

__all__ = [
    "TextSolution",
    "linear_channel",
    "relative_luminance",
    "contrast_ratio",
    "contrast_ratio_for_y",
    "contrast_level",
    "ensure_aaa_text",
]

DARKEN_OVERLAY = "rgba(0, 0, 0, 0.55)"
LIGHTEN_OVERLAY = "rgba(255, 255, 255, 0.55)"


def linear_channel(c: int) -> float:
    v = c / 255.0
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorLike) -> float:
    c = as_color(color)
    # Rec. 709 coefficients used by WCAG
    return 0.2126 * linear_channel(c.r) + 0.7152 * linear_channel(c.g) + 0.0722 * linear_channel(c.b)


def contrast_ratio_for_y(y1: float, y2: float) -> float:
    lighter = max(y1, y2)
    darker = min(y1, y2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(a: ColorLike, b: ColorLike) -> float:
    return contrast_ratio_for_y(relative_luminance(a), relative_luminance(b))


def contrast_level(ratio: float, config: Optional[RibbonConfig] = None) -> str:
    cfg = config or RibbonConfig.default()
    if ratio >= cfg.aaa_min:
        return "AAA"
    if ratio >= cfg.aa_small_min:
        return "AA"
    return "FAIL"


@dataclass(frozen=True)
class TextSolution:
    text_color: str
    contrast: float
    meets_aaa: bool
    overlay: Optional[str] = None


def ensure_aaa_text(
    background: ColorLike,
    inks: Optional[Inks] = None,
    config: Optional[RibbonConfig] = None,
) -> TextSolution:
    """Pick the reference ink that reads best on ``background``.

    The text-on-dark ink wins when it clears AAA, then the text-on-light ink.
    When neither does, the higher-contrast ink is returned together with an
    overlay that pushes the background away from it.
    """
    cfg = config or RibbonConfig.default()
    pair = inks or Inks.default()
    on_dark = contrast_ratio(background, pair.text_on_dark)
    on_light = contrast_ratio(background, pair.text_on_light)
    if on_dark >= cfg.aaa_min:
        return TextSolution(pair.text_on_dark, on_dark, True)
    if on_light >= cfg.aaa_min:
        return TextSolution(pair.text_on_light, on_light, True)
    if on_light > on_dark:
        return TextSolution(pair.text_on_light, on_light, False, LIGHTEN_OVERLAY)
    return TextSolution(pair.text_on_dark, on_dark, False, DARKEN_OVERLAY)
