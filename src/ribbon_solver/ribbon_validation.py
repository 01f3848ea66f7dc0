"""Ribbon validation: flag families and bands with no usable candidates.

API:
    report = validate(ribbons)
    if not report.valid:
        for issue in report.issues: ...

The check is advisory. It never blocks ribbon or selection computation; it
tells the host application which reference ink needs adjusting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from .contrast import relative_luminance
from .errors import InfeasibleBand
from .ribbon_config import BANDS, Band, RibbonConfig
from .ribbons import Ribbon

__all__ = ["RibbonValidationReport", "validate"]

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RibbonValidationReport:
    valid: bool
    issues: List[InfeasibleBand] = field(default_factory=list)
    summary: str = ""

    @property
    def errors(self) -> List[str]:
        return [iss.message for iss in self.issues]

    def issues_for(self, family: str) -> List[InfeasibleBand]:
        return [iss for iss in self.issues if iss.family == family]


def _cause(band: Band, ink_hex: str) -> str:
    y = relative_luminance(ink_hex)
    if band.is_tint:
        return (
            f"text-on-light ink {ink_hex} (Y={y:.3f}) is too close to midtone; "
            "decrease its lightness"
        )
    return (
        f"text-on-dark ink {ink_hex} (Y={y:.3f}) is too close to midtone; "
        "increase its lightness"
    )


def _issue(family: str, ribbon: Ribbon, min_len: int) -> Optional[InfeasibleBand]:
    n = len(ribbon)
    if n == 0:
        return InfeasibleBand(
            family=family,
            band=ribbon.band.value,
            kind="empty",
            count=0,
            ink_hex=ribbon.ink_hex,
            message=f"{family}-{ribbon.band.value}: no AAA-compliant colors; {_cause(ribbon.band, ribbon.ink_hex)}",
        )
    if n < min_len:
        return InfeasibleBand(
            family=family,
            band=ribbon.band.value,
            kind="too_few",
            count=n,
            ink_hex=ribbon.ink_hex,
            message=f"{family}-{ribbon.band.value}: {n} colors (minimum {min_len})",
        )
    return None


def _side_summary(families: List[str], total: int, tint: bool) -> str:
    noun = "color" if total == 1 else "colors"
    what = "lighter/light tints" if tint else "dark/darker shades"
    ink = "light-background" if tint else "dark-background"
    return (
        f"{len(families)} of {total} {noun} cannot produce AAA-compliant {what} "
        f"with the current {ink} ink ({', '.join(families)})"
    )


def validate(
    ribbons: Mapping[str, Mapping[Band, Ribbon]],
    config: Optional[RibbonConfig] = None,
) -> RibbonValidationReport:
    cfg = config or RibbonConfig.default()
    issues: List[InfeasibleBand] = []
    tint_families: List[str] = []
    shade_families: List[str] = []
    for family, bands in ribbons.items():
        for band in BANDS:
            ribbon = bands.get(band)
            if ribbon is None:
                continue
            issue = _issue(family, ribbon, cfg.min_ribbon_length)
            if issue is None:
                continue
            issues.append(issue)
            side = tint_families if band.is_tint else shade_families
            if family not in side:
                side.append(family)

    if not issues:
        return RibbonValidationReport(valid=True, issues=[], summary=f"All {len(ribbons)} colors have usable ribbons")

    total = len(ribbons)
    parts = []
    if tint_families:
        parts.append(_side_summary(tint_families, total, tint=True))
    if shade_families:
        parts.append(_side_summary(shade_families, total, tint=False))
    summary = "; ".join(parts)
    _logger.warning("ribbon validation failed: %s", summary)
    return RibbonValidationReport(valid=False, issues=issues, summary=summary)
