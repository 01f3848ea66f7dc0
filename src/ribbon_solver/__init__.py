"""Luminance-targeted colour solver and contrast-constrained ribbon builder.

Given base brand colours and two reference inks (text on light and text on
dark backgrounds) the package builds four luminance bands of AAA-compliant
candidates per colour, validates them, and keeps user picks stable when the
inputs change.
"""

from .errors import (  # noqa: F401
    RibbonSolverError,
    InvalidColorFormat,
    InfeasibleBand,
    NoSelectionAvailable,
)
from .color_space import Color, HSL, parse_hex, normalize_hex, rgb_to_hsl, hsl_to_rgb  # noqa: F401
from .contrast import (  # noqa: F401
    relative_luminance,
    contrast_ratio,
    contrast_level,
    ensure_aaa_text,
    TextSolution,
)
from .ribbon_config import Band, BANDS, BandRange, Inks, RibbonConfig  # noqa: F401
from .lightness_solver import solve_lightness_for_y, solve_color_for_y  # noqa: F401
from .ribbons import Ribbon, RibbonColor, build_ribbon, build_family_ribbons, build_ribbons  # noqa: F401
from .ribbon_validation import RibbonValidationReport, validate  # noqa: F401
from .selection import (  # noqa: F401
    SwatchPick,
    ExactPick,
    ExactHex,
    LegacyIndex,
    LegacyY,
    TargetY,
    resolve_target_y,
    adopt_closest,
    resolve_pick,
    resolve_family,
    selections_from_dict,
    selections_to_dict,
)
from .semantic_colors import (  # noqa: F401
    MatchedColor,
    match_band_from_primary_by_s,
    match_semantic_picks,
    semantic_defaults,
    with_semantic_defaults,
    most_eye_catching,
)
from .recompute import RecomputeResult, recompute  # noqa: F401
