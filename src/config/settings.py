"""Default constants for ribbon generation and contrast checks.

Every numeric value may be overridden through a ``RIBBON_SOLVER_<NAME>``
environment variable. Overrides are parsed once at import time and clamped
to the documented range; unparsable values fall back to the default.
"""

from __future__ import annotations

import math
import os
from typing import Final, Optional

_ENV_PREFIX: Final = "RIBBON_SOLVER_"


def _num_from_env(
    name: str, fallback: float, lo: Optional[float] = None, hi: Optional[float] = None
) -> float:
    raw = os.environ.get(_ENV_PREFIX + name)
    try:
        value = float(raw) if raw is not None else math.nan
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        return fallback
    if lo is not None:
        value = max(lo, value)
    if hi is not None:
        value = min(hi, value)
    return value


def _int_from_env(name: str, fallback: int, lo: int = 0, hi: int = 1000) -> int:
    return int(_num_from_env(name, float(fallback), lo, hi))


# Reference inks used when the caller supplies none
NEAR_BLACK_HEX: Final = "#0A0A0A"
NEAR_WHITE_HEX: Final = "#F9FAFB"

Y_TARGET_DECIMALS: Final = _int_from_env("Y_TARGET_DECIMALS", 2, 1, 6)
Y_DISPLAY_DECIMALS: Final = _int_from_env("Y_DISPLAY_DECIMALS", 3, 1, 6)

TINT_TARGET_COUNT: Final = _int_from_env("TINT_TARGET_COUNT", 10, 1, 100)
SHADE_TARGET_COUNT: Final = _int_from_env("SHADE_TARGET_COUNT", 10, 1, 100)

# Luminance ranges per band
LIGHTER_MIN_Y: Final = _num_from_env("LIGHTER_MIN_Y", 0.50, 0, 1)
LIGHTER_MAX_Y: Final = _num_from_env("LIGHTER_MAX_Y", 0.95, 0, 1)
LIGHT_MIN_Y_BASE: Final = _num_from_env("LIGHT_MIN_Y_BASE", 0.30, 0, 1)
LIGHT_MAX_Y_CAP: Final = _num_from_env("LIGHT_MAX_Y_CAP", 0.90, 0, 1)
DARK_MIN_Y_BASE: Final = _num_from_env("DARK_MIN_Y_BASE", 0.08, 0, 1)
DARK_MAX_Y: Final = _num_from_env("DARK_MAX_Y", 0.20, 0, 1)
DARKER_MIN_Y: Final = _num_from_env("DARKER_MIN_Y", 0.02, 0, 1)
DARKER_MAX_Y: Final = _num_from_env("DARKER_MAX_Y", 0.12, 0, 1)

# WCAG thresholds; the comfort caps are a UX guideline (WCAG has no maximum)
AAA_OFFICIAL_SMALL: Final = 7.0
AAA_MIN: Final = _num_from_env("AAA_MIN", 7.05, 1, 21)
AA_SMALL_MIN: Final = _num_from_env("AA_SMALL_MIN", 4.5, 1, 21)
MAX_CONTRAST_TINTS: Final = _num_from_env("MAX_CONTRAST_TINTS", 18, 1, 50)
MAX_CONTRAST_SHADES: Final = _num_from_env("MAX_CONTRAST_SHADES", 18, 1, 50)

# Visual separation between paired bands
RECOMMENDED_TINT_Y_GAP: Final = _num_from_env("RECOMMENDED_TINT_Y_GAP", 0.20, 0, 1)
RECOMMENDED_SHADE_Y_GAP: Final = _num_from_env("RECOMMENDED_SHADE_Y_GAP", 0.035, 0, 1)
HARD_MIN_SHADE_Y_GAP: Final = _num_from_env("HARD_MIN_SHADE_Y_GAP", 0.02, 0, 1)

SWEEP_STEP: Final = _num_from_env("SWEEP_STEP", 0.005, 0.0005, 0.1)
MIN_VARIATIONS_PER_BAND: Final = _int_from_env("MIN_VARIATIONS_PER_BAND", 1, 0, 100)
