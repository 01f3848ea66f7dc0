"""Selection resolver: keep a user's pick stable across ribbon regeneration.

A prior choice for a (family, band) slot is stored as one or more selection
records. Resolution turns them into a target luminance with a fixed
priority, then adopts the ribbon entry closest to that luminance:

  1. ExactPick with a finite Y          -> source "exact.y"
  2. hex of ExactPick / ExactHex        -> source "exact.hex"
  3. LegacyY                            -> source "legacy.y"
  4. LegacyIndex inside current ribbon  -> source "legacy.index"
  5. nothing                            -> gap-aware default ("default")

An empty ribbon never yields a pick. Resolving twice against the same
ribbon and records returns equal picks.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .color_space import HSL, parse_hex, rgb_to_hsl
from .contrast import relative_luminance
from .errors import InvalidColorFormat, NoSelectionAvailable
from .ribbon_config import Band, RibbonConfig
from .ribbons import Ribbon

__all__ = [
    "SwatchPick",
    "ExactPick",
    "ExactHex",
    "LegacyIndex",
    "LegacyY",
    "Selection",
    "SelectionState",
    "TargetY",
    "FamilyResolution",
    "parse_swatch_pick",
    "resolve_target_y",
    "pick_from_ribbon",
    "adopt_closest",
    "default_index",
    "resolve_pick",
    "resolve_family",
    "selections_from_dict",
    "selections_to_dict",
]

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SwatchPick:
    """A fully resolved colour choice for one family and band."""

    family: str
    band: Band
    index_displayed: int
    hex: str
    hsl: HSL
    y: float
    contrast_vs_light_ink: float
    contrast_vs_dark_ink: float
    text_tone_used: str  # "dark" for tints, "light" for shades

    def to_dict(self) -> Dict[str, Any]:
        return {
            "colorKey": self.family,
            "step": self.band.value,
            "indexDisplayed": self.index_displayed,
            "hex": self.hex,
            "hsl": {"h": self.hsl.h, "s": self.hsl.s, "l": self.hsl.l},
            "y": self.y,
            "contrastVsTextOnLight": self.contrast_vs_light_ink,
            "contrastVsTextOnDark": self.contrast_vs_dark_ink,
            "textToneUsed": self.text_tone_used,
        }


@dataclass(frozen=True)
class ExactPick:
    pick: SwatchPick

    @property
    def band(self) -> Band:
        return self.pick.band


@dataclass(frozen=True)
class ExactHex:
    band: Band
    hex: str


@dataclass(frozen=True)
class LegacyIndex:
    band: Band
    index: int


@dataclass(frozen=True)
class LegacyY:
    band: Band
    y: float


Selection = Union[ExactPick, ExactHex, LegacyIndex, LegacyY]
SelectionState = Dict[str, Dict[Band, Tuple[Selection, ...]]]


@dataclass(frozen=True)
class TargetY:
    y: float
    source: str
    hex: Optional[str] = None


def _finite_in(value: Any, lo: float, hi: float) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
        and lo <= value <= hi
    )


def parse_swatch_pick(data: Any) -> Optional[SwatchPick]:
    """Validate a persisted pick mapping; returns None when any field is off."""
    if not isinstance(data, Mapping):
        return None
    family = data.get("colorKey")
    if not isinstance(family, str) or not family:
        return None
    try:
        band = Band.parse(data.get("step"))
        hex_value = parse_hex(data.get("hex")).hex
    except (ValueError, InvalidColorFormat):
        return None
    index = data.get("indexDisplayed")
    if not isinstance(index, int) or isinstance(index, bool) or index < 0:
        return None
    hsl = data.get("hsl")
    if not isinstance(hsl, Mapping):
        return None
    h, s, l = hsl.get("h"), hsl.get("s"), hsl.get("l")  # noqa: E741
    if not (_finite_in(h, 0, 360) and _finite_in(s, 0, 1) and _finite_in(l, 0, 1)):
        return None
    y = data.get("y")
    c_light = data.get("contrastVsTextOnLight")
    c_dark = data.get("contrastVsTextOnDark")
    if not (_finite_in(y, 0, 1) and _finite_in(c_light, 1, 21) and _finite_in(c_dark, 1, 21)):
        return None
    tone = data.get("textToneUsed")
    if tone not in ("light", "dark"):
        return None
    return SwatchPick(
        family=family,
        band=band,
        index_displayed=index,
        hex=hex_value,
        hsl=HSL(float(h), float(s), float(l)),
        y=float(y),
        contrast_vs_light_ink=float(c_light),
        contrast_vs_dark_ink=float(c_dark),
        text_tone_used=tone,
    )


def _records(value: Union[None, Selection, Iterable[Selection]]) -> Tuple[Selection, ...]:
    if value is None:
        return ()
    if isinstance(value, (ExactPick, ExactHex, LegacyIndex, LegacyY)):
        return (value,)
    return tuple(value)


def resolve_target_y(
    records: Union[None, Selection, Iterable[Selection]],
    ribbon: Optional[Ribbon] = None,
) -> Optional[TargetY]:
    recs = _records(records)
    exact = [r for r in recs if isinstance(r, ExactPick)]
    for r in exact:
        if _finite_in(r.pick.y, 0, 1):
            return TargetY(r.pick.y, "exact.y", r.pick.hex)
    hexes = [r.pick.hex for r in exact] + [r.hex for r in recs if isinstance(r, ExactHex)]
    for hex_value in hexes:
        try:
            return TargetY(relative_luminance(hex_value), "exact.hex", parse_hex(hex_value).hex)
        except InvalidColorFormat:
            continue
    for r in recs:
        if isinstance(r, LegacyY) and _finite_in(r.y, 0, 1):
            return TargetY(float(r.y), "legacy.y")
    if ribbon is not None:
        for r in recs:
            if isinstance(r, LegacyIndex) and 0 <= r.index < len(ribbon):
                return TargetY(ribbon[r.index].y, "legacy.index", ribbon[r.index].hex)
    return None


def pick_from_ribbon(ribbon: Ribbon, index: int) -> SwatchPick:
    rc = ribbon[index]
    return SwatchPick(
        family=ribbon.family,
        band=ribbon.band,
        index_displayed=rc.index,
        hex=rc.hex,
        hsl=rgb_to_hsl(rc.hex),
        y=rc.y,
        contrast_vs_light_ink=rc.contrast_vs_light_ink,
        contrast_vs_dark_ink=rc.contrast_vs_dark_ink,
        text_tone_used=ribbon.band.text_tone,
    )


def adopt_closest(ribbon: Ribbon, target_y: float) -> Optional[SwatchPick]:
    """Pick the candidate nearest ``target_y``; ties go to the lowest index."""
    if ribbon.is_empty:
        return None
    best = min(range(len(ribbon)), key=lambda i: (abs(ribbon[i].y - target_y), i))
    return pick_from_ribbon(ribbon, best)


def default_index(
    ribbon: Ribbon,
    partner_y: Optional[float] = None,
    config: Optional[RibbonConfig] = None,
) -> Optional[int]:
    """Default slot when no prior target exists.

    ``lighter`` and ``darker`` take the middle entry. ``light`` takes the
    brightest entry at least ``tint_gap`` below the lighter pick; ``dark``
    the first entry (ascending Y) at least ``shade_gap`` above the darker
    pick, then ``hard_min_shade_gap``; both fall back to the brightest.
    """
    if ribbon.is_empty:
        return None
    cfg = config or RibbonConfig.default()
    n = len(ribbon)
    if ribbon.band in (Band.LIGHTER, Band.DARKER) or partner_y is None:
        return n // 2
    by_y = sorted(range(n), key=lambda i: ribbon[i].y)
    brightest = by_y[-1]
    if ribbon.band is Band.LIGHT:
        for i in reversed(by_y):
            if partner_y - ribbon[i].y >= cfg.tint_gap:
                return i
        return brightest
    for gap in (cfg.shade_gap, cfg.hard_min_shade_gap):
        for i in by_y:
            if ribbon[i].y >= partner_y + gap:
                return i
    return brightest


def resolve_pick(
    ribbon: Ribbon,
    records: Union[None, Selection, Iterable[Selection]] = None,
    partner_y: Optional[float] = None,
    config: Optional[RibbonConfig] = None,
) -> Tuple[Optional[SwatchPick], str]:
    """Resolve one slot; returns (pick or None, source)."""
    if ribbon.is_empty:
        return None, "unavailable"
    target = resolve_target_y(records, ribbon)
    if target is not None:
        pick = adopt_closest(ribbon, target.y)
        source = target.source
    else:
        idx = default_index(ribbon, partner_y, config)
        pick = pick_from_ribbon(ribbon, idx) if idx is not None else None
        source = "default"
    _logger.debug(
        "%s-%s resolved via %s -> index %s",
        ribbon.family,
        ribbon.band.value,
        source,
        pick.index_displayed if pick else None,
    )
    return pick, source


@dataclass
class FamilyResolution:
    picks: Dict[Band, SwatchPick] = field(default_factory=dict)
    sources: Dict[Band, str] = field(default_factory=dict)
    unavailable: List[NoSelectionAvailable] = field(default_factory=list)


# Anchor bands resolve before the bands whose defaults depend on them
_RESOLUTION_ORDER = (
    (Band.LIGHTER, None),
    (Band.LIGHT, Band.LIGHTER),
    (Band.DARKER, None),
    (Band.DARK, Band.DARKER),
)


def resolve_family(
    family: str,
    ribbons: Mapping[Band, Ribbon],
    prior: Optional[Mapping[Band, Union[Selection, Iterable[Selection]]]] = None,
    config: Optional[RibbonConfig] = None,
) -> FamilyResolution:
    out = FamilyResolution()
    prior = prior or {}
    for band, anchor in _RESOLUTION_ORDER:
        ribbon = ribbons.get(band)
        if ribbon is None:
            continue
        anchor_pick = out.picks.get(anchor) if anchor is not None else None
        partner_y = anchor_pick.y if anchor_pick is not None else None
        pick, source = resolve_pick(ribbon, prior.get(band), partner_y, config)
        out.sources[band] = source
        if pick is None:
            out.unavailable.append(
                NoSelectionAvailable(family, band.value, "ribbon is empty under the current inks")
            )
        else:
            out.picks[band] = pick
    return out


_LEGACY_INDEX_KEYS = {"lighterIndex": Band.LIGHTER, "lightIndex": Band.LIGHT}
_LEGACY_Y_KEYS = {
    "lighterY": Band.LIGHTER,
    "lightY": Band.LIGHT,
    "darkY": Band.DARK,
    "darkerY": Band.DARKER,
}


def _exact_record(band: Band, data: Any) -> Optional[Selection]:
    pick = parse_swatch_pick(data)
    if pick is not None and pick.band is band:
        return ExactPick(pick)
    if isinstance(data, Mapping):
        try:
            return ExactHex(band, parse_hex(data.get("hex")).hex)
        except InvalidColorFormat:
            return None
    if isinstance(data, str):
        try:
            return ExactHex(band, parse_hex(data).hex)
        except InvalidColorFormat:
            return None
    return None


def selections_from_dict(raw: Any) -> SelectionState:
    """Parse persisted selection maps into selection records.

    Accepts ``{family: {band: pick}}`` exact maps and the legacy
    ``{family: {"lighterIndex": .., "darkY": ..}}`` form, also mixed within a
    family. Malformed entries are dropped.
    """
    state: SelectionState = {}
    if not isinstance(raw, Mapping):
        return state
    for family, entries in raw.items():
        if not isinstance(family, str) or not isinstance(entries, Mapping):
            continue
        slots: Dict[Band, List[Selection]] = {}
        for key, value in entries.items():
            rec: Optional[Selection] = None
            if key in _LEGACY_INDEX_KEYS:
                if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
                    rec = LegacyIndex(_LEGACY_INDEX_KEYS[key], value)
            elif key in _LEGACY_Y_KEYS:
                if _finite_in(value, 0, 1):
                    rec = LegacyY(_LEGACY_Y_KEYS[key], float(value))
            else:
                try:
                    band = Band.parse(key)
                except ValueError:
                    band = None
                if band is not None:
                    rec = _exact_record(band, value)
            if rec is None:
                _logger.debug("dropping malformed selection %s.%s", family, key)
                continue
            slots.setdefault(rec.band, []).append(rec)
        if slots:
            state[family] = {band: tuple(recs) for band, recs in slots.items()}
    return state


def selections_to_dict(picks: Mapping[str, Mapping[Band, SwatchPick]]) -> Dict[str, Dict[str, Any]]:
    return {
        family: {band.value: pick.to_dict() for band, pick in bands.items()}
        for family, bands in picks.items()
    }
