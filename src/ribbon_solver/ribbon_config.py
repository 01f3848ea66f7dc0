"""Immutable configuration for ribbon generation.

``RibbonConfig`` carries every threshold the solver uses; it is passed
explicitly into each entry point so results depend on inputs alone.
``RibbonConfig.default()`` snapshots the constants from ``config.settings``.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from config import settings

from .color_space import normalize_hex

__all__ = [
    "Band",
    "BANDS",
    "TINT_BANDS",
    "SHADE_BANDS",
    "BandRange",
    "RibbonConfig",
    "Inks",
]


class Band(str, Enum):  # str subclass keeps JSON output plain
    LIGHTER = "lighter"
    LIGHT = "light"
    DARK = "dark"
    DARKER = "darker"

    @property
    def is_tint(self) -> bool:
        return self in (Band.LIGHTER, Band.LIGHT)

    @property
    def text_tone(self) -> str:
        """Tone of the ink a swatch in this band is validated against."""
        return "dark" if self.is_tint else "light"

    @classmethod
    def parse(cls, value: "str | Band") -> "Band":
        if isinstance(value, Band):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown band: {value!r}") from None


BANDS: Tuple[Band, ...] = (Band.LIGHTER, Band.LIGHT, Band.DARK, Band.DARKER)
TINT_BANDS: Tuple[Band, ...] = (Band.LIGHTER, Band.LIGHT)
SHADE_BANDS: Tuple[Band, ...] = (Band.DARK, Band.DARKER)


@dataclass(frozen=True)
class BandRange:
    """Target luminance window and sampling policy for one band.

    Attributes
    ----------
    min_y / max_y : float
        Inclusive luminance bounds of the sweep.
    target_count : int
        Upper bound on the number of candidates kept.
    sampling : str
        ``"even"`` spaces targets evenly in Y across the usable span;
        ``"subsample"`` picks evenly spaced indices of the dense sweep.
    ascending : bool
        Ribbon order by Y (tints grow toward white, shades toward black).
    """

    band: Band
    min_y: float
    max_y: float
    target_count: int
    sampling: str = "subsample"
    ascending: bool = True

    def __post_init__(self) -> None:
        if not 0.0 <= self.min_y <= self.max_y <= 1.0:
            raise ValueError(f"Invalid Y range for {self.band.value}: {self.min_y}..{self.max_y}")
        if self.target_count < 1:
            raise ValueError("target_count must be >= 1")
        if self.sampling not in ("even", "subsample"):
            raise ValueError(f"Unknown sampling mode: {self.sampling}")


def _default_bands() -> Tuple[BandRange, ...]:
    return (
        BandRange(Band.LIGHTER, settings.LIGHTER_MIN_Y, settings.LIGHTER_MAX_Y,
                  settings.TINT_TARGET_COUNT, "even", True),
        BandRange(Band.LIGHT, settings.LIGHT_MIN_Y_BASE, settings.LIGHT_MAX_Y_CAP,
                  settings.TINT_TARGET_COUNT, "subsample", True),
        BandRange(Band.DARK, settings.DARK_MIN_Y_BASE, settings.DARK_MAX_Y,
                  settings.SHADE_TARGET_COUNT, "subsample", False),
        BandRange(Band.DARKER, settings.DARKER_MIN_Y, settings.DARKER_MAX_Y,
                  settings.SHADE_TARGET_COUNT, "even", False),
    )


@dataclass(frozen=True)
class RibbonConfig:
    bands: Tuple[BandRange, ...] = field(default_factory=_default_bands)
    aaa_min: float = settings.AAA_MIN
    aa_small_min: float = settings.AA_SMALL_MIN
    max_contrast_tints: float = settings.MAX_CONTRAST_TINTS
    max_contrast_shades: float = settings.MAX_CONTRAST_SHADES
    tint_gap: float = settings.RECOMMENDED_TINT_Y_GAP
    shade_gap: float = settings.RECOMMENDED_SHADE_Y_GAP
    hard_min_shade_gap: float = settings.HARD_MIN_SHADE_Y_GAP
    enforce_shade_gap: bool = False
    sweep_step: float = settings.SWEEP_STEP
    y_target_decimals: int = settings.Y_TARGET_DECIMALS
    y_display_decimals: int = settings.Y_DISPLAY_DECIMALS
    min_ribbon_length: int = settings.MIN_VARIATIONS_PER_BAND

    def __post_init__(self) -> None:
        seen = {r.band for r in self.bands}
        if seen != set(BANDS):
            raise ValueError("RibbonConfig.bands must define each band exactly once")
        if len(self.bands) != len(BANDS):
            raise ValueError("RibbonConfig.bands must define each band exactly once")
        if self.sweep_step <= 0:
            raise ValueError("sweep_step must be positive")
        if self.aaa_min > min(self.max_contrast_tints, self.max_contrast_shades):
            raise ValueError("aaa_min exceeds a comfort contrast cap")

    @classmethod
    def default(cls) -> "RibbonConfig":
        return cls()

    def replace(self, **overrides) -> "RibbonConfig":
        return dataclasses.replace(self, **overrides)

    def with_band(self, band: "Band | str", **overrides) -> "RibbonConfig":
        b = Band.parse(band)
        bands = tuple(dataclasses.replace(r, **overrides) if r.band is b else r for r in self.bands)
        return dataclasses.replace(self, bands=bands)

    def band_range(self, band: "Band | str") -> BandRange:
        b = Band.parse(band)
        for r in self.bands:
            if r.band is b:
                return r
        raise KeyError(b)  # pragma: no cover - guarded by __post_init__

    def max_contrast_for(self, band: "Band | str") -> float:
        return self.max_contrast_tints if Band.parse(band).is_tint else self.max_contrast_shades

    @property
    def solver_tolerance(self) -> float:
        return 0.5 * 10 ** (-self.y_target_decimals)


@dataclass(frozen=True)
class Inks:
    """Reference text colours: one for light backgrounds, one for dark."""

    text_on_light: str = settings.NEAR_BLACK_HEX
    text_on_dark: str = settings.NEAR_WHITE_HEX

    def __post_init__(self) -> None:
        object.__setattr__(self, "text_on_light", normalize_hex(self.text_on_light))
        object.__setattr__(self, "text_on_dark", normalize_hex(self.text_on_dark))

    @classmethod
    def default(cls) -> "Inks":
        return cls()

    def for_band(self, band: "Band | str") -> str:
        return self.text_on_light if Band.parse(band).is_tint else self.text_on_dark
