"""Surface derivation from terrain geometry and deduction rules.

Each level is derived on its own, purely from its kind and the project
parameters:

- **Foundation / basement** — the whole terrain.
- **Ground floor (RDC)** — terrain minus the façade setback deduction.
- **Upper floor** (terrace included) — RDC surface plus the overhang
  (encorbellement).

The sellable surface removes stairwell and wall deductions, either as fixed
m² amounts or as percentages of the gross surface, and is floored at zero.
Foundations are never sellable. The gross surface itself is not clamped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from skyara.models.enums import LevelKind
from skyara.models.project import PercentDeduction

if TYPE_CHECKING:
    from collections.abc import Iterable

    from skyara.models.project import Level, ProjectParameters


@dataclass(frozen=True)
class LevelSurface:
    """Built and sellable surface of one level, in m²."""

    gross_surface: float
    sellable_surface: float


def gross_surface(params: ProjectParameters, kind: LevelKind) -> float:
    """Built surface of a level of the given kind."""
    if kind == LevelKind.GROUND_FLOOR:
        return params.terrain_area - params.facade_deduction
    if kind == LevelKind.UPPER_FLOOR:
        return (params.terrain_area - params.facade_deduction) + params.overhang_surface
    return params.terrain_area


def sellable_surface(params: ProjectParameters, kind: LevelKind, gross: float) -> float:
    """Sellable surface left after stairwell and wall deductions."""
    if kind == LevelKind.FOUNDATION:
        return 0.0

    deduction = params.deduction
    if isinstance(deduction, PercentDeduction):
        sellable = gross * (1 - deduction.total_percent / 100)
    else:
        sellable = gross - deduction.stairs_m2 - deduction.walls_m2
    return max(0.0, sellable)


def derive_surface(params: ProjectParameters, level: Level) -> LevelSurface:
    gross = gross_surface(params, level.kind)
    return LevelSurface(gross, sellable_surface(params, level.kind, gross))


def derive_surfaces(params: ProjectParameters, levels: Iterable[Level]) -> list[LevelSurface]:
    """Derive the surfaces of every level, in input order."""
    return [derive_surface(params, level) for level in levels]
