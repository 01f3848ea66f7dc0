"""Single deterministic entry point for the host application.

``recompute`` is called whenever a base colour or either reference ink
changes. It rebuilds every ribbon, validates them, and re-resolves the
prior selections against the fresh ribbons. Nothing is cached between
calls, so fixing an ink and recomputing leaves no stale picks behind.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .color_space import ColorLike
from .errors import NoSelectionAvailable
from .ribbon_config import Band, Inks, RibbonConfig
from .ribbon_validation import RibbonValidationReport, validate
from .ribbons import Ribbons, build_ribbons
from .selection import SelectionState, SwatchPick, resolve_family, selections_from_dict

__all__ = ["RecomputeResult", "recompute"]


@dataclass(frozen=True)
class RecomputeResult:
    ribbons: Ribbons
    validation: RibbonValidationReport
    picks: Dict[str, Dict[Band, SwatchPick]]
    sources: Dict[str, Dict[Band, str]] = field(default_factory=dict)
    unavailable: List[NoSelectionAvailable] = field(default_factory=list)

    def pick(self, family: str, band: "Band | str") -> Optional[SwatchPick]:
        return self.picks.get(family, {}).get(Band.parse(band))


def recompute(
    palette: Mapping[str, ColorLike],
    inks: Optional[Inks] = None,
    prior: Optional[Any] = None,
    config: Optional[RibbonConfig] = None,
) -> RecomputeResult:
    """Rebuild ribbons, validation and picks from inputs alone.

    ``prior`` may be a parsed ``SelectionState`` or the raw persisted mapping
    accepted by ``selections_from_dict``.
    """
    cfg = config or RibbonConfig.default()
    pair = inks or Inks.default()
    state: SelectionState = _as_state(prior)

    ribbons = build_ribbons(palette, pair, cfg)
    report = validate(ribbons, cfg)

    picks: Dict[str, Dict[Band, SwatchPick]] = {}
    sources: Dict[str, Dict[Band, str]] = {}
    unavailable: List[NoSelectionAvailable] = []
    for family, bands in ribbons.items():
        res = resolve_family(family, bands, state.get(family), cfg)
        picks[family] = res.picks
        sources[family] = res.sources
        unavailable.extend(res.unavailable)

    return RecomputeResult(
        ribbons=ribbons,
        validation=report,
        picks=picks,
        sources=sources,
        unavailable=unavailable,
    )


def _as_state(prior: Optional[Any]) -> SelectionState:
    """Normalise ``prior`` family by family.

    Entries already keyed by ``Band`` are kept as parsed records; any other
    entry is run through ``selections_from_dict`` on its own. Anything that
    is not a mapping yields no prior selections.
    """
    if not isinstance(prior, Mapping):
        return {}
    state: SelectionState = {}
    for family, bands in prior.items():
        if isinstance(bands, Mapping) and bands and all(isinstance(k, Band) for k in bands):
            state[family] = dict(bands)
        else:
            state.update(selections_from_dict({family: bands}))
    return state
