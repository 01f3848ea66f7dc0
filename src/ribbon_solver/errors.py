"""Error taxonomy for the ribbon solver.

Only malformed colour input raises. Infeasible bands and missing picks are
expected outcomes and travel as plain records so callers can show them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class RibbonSolverError(Exception):
    """Base class for solver errors."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class InvalidColorFormat(RibbonSolverError, ValueError):
    """Raised when a colour is not a 6-digit hex string."""


@dataclass(frozen=True)
class InfeasibleBand:
    family: str
    band: str
    kind: str  # "empty" | "too_few"
    count: int
    ink_hex: str
    message: str


@dataclass(frozen=True)
class NoSelectionAvailable:
    family: str
    band: str
    reason: str


__all__ = [
    "RibbonSolverError",
    "InvalidColorFormat",
    "InfeasibleBand",
    "NoSelectionAvailable",
]
