"""Ribbon report CLI

Builds the four luminance ribbons for each given colour, validates them
against the reference inks and resolves one pick per family and band.

Features:
 - Colours given as repeated ``--color family=#RRGGBB`` options.
 - Optional prior selections loaded from a JSON file (exact or legacy form).
 - ``--semantic`` fills in error / warning / success defaults.
 - Emits either a human-readable summary or JSON (via ``--json``).
 - Exit code 0 when every band is feasible, 1 when validation flags a band,
   2 on invalid input.

Example:
  ribbon-report --color primary=#2563EB --text-on-light #111111 --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List

from ribbon_solver import (
    Inks,
    InvalidColorFormat,
    RecomputeResult,
    RibbonConfig,
    recompute,
    selections_to_dict,
    with_semantic_defaults,
)
from ribbon_solver.ribbon_config import BANDS

_logger = logging.getLogger("ribbon_report")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    defaults = Inks.default()
    p = argparse.ArgumentParser(description="Build AAA-compliant luminance ribbons for brand colors")
    p.add_argument(
        "--color",
        action="append",
        default=[],
        metavar="FAMILY=HEX",
        help="Base color for a family, e.g. primary=#2563EB (repeatable)",
    )
    p.add_argument("--text-on-light", default=defaults.text_on_light, help="Ink used on light backgrounds")
    p.add_argument("--text-on-dark", default=defaults.text_on_dark, help="Ink used on dark backgrounds")
    p.add_argument("--selections", help="JSON file with previously stored selections")
    p.add_argument("--semantic", action="store_true", help="Add error/warning/success defaults")
    p.add_argument("--shade-gap", action="store_true", help="Enforce the dark/darker separation gap")
    p.add_argument("--json", action="store_true", help="Emit JSON instead of human-readable text")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _parse_palette(items: List[str]) -> Dict[str, str]:
    palette: Dict[str, str] = {}
    for item in items:
        family, sep, value = item.partition("=")
        if not sep or not family.strip():
            raise InvalidColorFormat(f"Expected FAMILY=HEX, got {item!r}", context={"value": item})
        palette[family.strip()] = value.strip()
    return palette


def result_to_dict(result: RecomputeResult) -> Dict[str, Any]:
    ribbons = {
        family: {
            band.value: [
                {
                    "index": c.index,
                    "hex": c.hex,
                    "y": round(c.y, 4),
                    "contrastVsTextOnLight": round(c.contrast_vs_light_ink, 2),
                    "contrastVsTextOnDark": round(c.contrast_vs_dark_ink, 2),
                }
                for c in bands[band]
            ]
            for band in BANDS
        }
        for family, bands in result.ribbons.items()
    }
    return {
        "ribbons": ribbons,
        "validation": {
            "valid": result.validation.valid,
            "errors": result.validation.errors,
            "summary": result.validation.summary,
        },
        "picks": selections_to_dict(result.picks),
        "unavailable": [{"family": u.family, "band": u.band, "reason": u.reason} for u in result.unavailable],
    }


def _print_text(result: RecomputeResult, decimals: int) -> None:
    for family, bands in result.ribbons.items():
        print(f"{family}:")
        for band in BANDS:
            ribbon = bands[band]
            pick = result.pick(family, band)
            chosen = f"{pick.hex} (Y={pick.y:.{decimals}f}, #{pick.index_displayed})" if pick else "-"
            print(f"  {band.value:<8} {len(ribbon):>2} candidates  pick: {chosen}")
    status = "OK" if result.validation.valid else "INFEASIBLE"
    print(f"Validation: {status} - {result.validation.summary}")
    for err in result.validation.errors:
        print(f"  ! {err}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    config = RibbonConfig.default().replace(enforce_shade_gap=args.shade_gap)
    try:
        palette = _parse_palette(args.color)
        if args.semantic:
            palette = with_semantic_defaults(palette)
        if not palette:
            print("At least one --color FAMILY=HEX is required", file=sys.stderr)
            return 2
        inks = Inks(args.text_on_light, args.text_on_dark)
        prior = None
        if args.selections:
            with open(args.selections, "r", encoding="utf-8") as fh:
                prior = json.load(fh)
            if not isinstance(prior, dict):
                print("Could not read selections: expected a JSON object keyed by family", file=sys.stderr)
                return 2
        result = recompute(palette, inks, prior, config)
    except InvalidColorFormat as exc:
        print(f"Invalid color: {exc}", file=sys.stderr)
        return 2
    except (OSError, json.JSONDecodeError) as exc:
        print(f"Could not read selections: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result_to_dict(result), ensure_ascii=False, indent=2))
    else:
        _print_text(result, config.y_display_decimals)
    _logger.debug("families=%d valid=%s", len(result.ribbons), result.validation.valid)
    return 0 if result.validation.valid else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
