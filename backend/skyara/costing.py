"""Per-level cost estimation.

Two pricing modes share the same CostBreakdown output:

- **Detailed** — the reference cost table (defined for 100 m²) is scaled by
  ``terrain_area / reference_surface``. Every line item is linear in that
  ratio.
- **Flat** — the level's gross surface times its per-m² unit prices; the
  foundation uses a fixed rate per m² of terrain.

Reported categories only include strictly positive amounts, always in the
order labor, materials, equipment, finishing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from skyara.exceptions import CostEstimationError
from skyara.models.enums import LevelKind
from skyara.models.estimate import CostBreakdown, CostCategory, CostDetails

if TYPE_CHECKING:
    from skyara.data.repository import CostReferenceRepository
    from skyara.models.project import Level, ProjectParameters

LABOR = "Main d'œuvre"
FOUNDATION_MATERIALS = "Matériaux (Ciment, Fer, Pierres...)"
GROSS_WORKS_MATERIALS = "Matériaux Gros Œuvre"
BASEMENT_MATERIALS = "Matériaux"
UTILITIES = "Eau & Électricité"
FINISHING = "Finitions (Zellige, Peinture...)"
TERRACE_FINISHING = "Finitions Terrasse"
CONNECTION = "Raccordement Eau/Élec"
FLAT_GROSS_WORKS = "Gros Œuvre"
FLAT_FINISHING = "Finition"


def _positive_categories(*items: tuple[str, float]) -> list[CostCategory]:
    return [CostCategory(name=name, amount=amount) for name, amount in items if amount > 0]


def _breakdown(
    labor: float = 0.0,
    materials: float = 0.0,
    equipment: float = 0.0,
    finishing: float = 0.0,
    finishing_labor: float = 0.0,
    categories: list[CostCategory] | None = None,
) -> CostBreakdown:
    gross_works = labor + materials + equipment
    return CostBreakdown(
        gross_works_cost=gross_works,
        finishing_cost=finishing,
        total=gross_works + finishing,
        details=CostDetails(
            labor=labor,
            materials=materials,
            equipment=equipment,
            finishing=finishing,
            finishing_labor=finishing_labor,
        ),
        categories=categories or [],
    )


# ---------------------------------------------------------------------------
# Detailed reference mode
# ---------------------------------------------------------------------------


def detailed_level_cost(
    level: Level,
    terrain_area: float,
    repository: CostReferenceRepository,
) -> CostBreakdown:
    """Price a level by scaling the reference cost table to the terrain area."""
    reference = repository.reference
    ratio = terrain_area / reference.reference_surface

    if level.is_terrace:
        terrace = reference.terrace
        labor = terrace.labor * ratio
        materials = terrace.materials * ratio
        finishing = terrace.finishing * ratio
        return _breakdown(
            labor=labor,
            materials=materials,
            finishing=finishing,
            categories=_positive_categories(
                (LABOR, labor),
                (GROSS_WORKS_MATERIALS, materials),
                (TERRACE_FINISHING, finishing),
            ),
        )

    if level.kind == LevelKind.FOUNDATION:
        foundation = reference.foundation
        labor = foundation.labor * ratio
        materials = foundation.materials * ratio
        return _breakdown(
            labor=labor,
            materials=materials,
            categories=_positive_categories(
                (LABOR, labor),
                (FOUNDATION_MATERIALS, materials),
            ),
        )

    if level.kind == LevelKind.BASEMENT:
        gross_works = repository.get_storey_reference(level.kind).gross_works
        multiplier = reference.basement_multiplier
        labor = gross_works.labor * multiplier * ratio
        materials = gross_works.materials * multiplier * ratio
        return _breakdown(
            labor=labor,
            materials=materials,
            categories=_positive_categories(
                (LABOR, labor),
                (BASEMENT_MATERIALS, materials),
            ),
        )

    if level.kind in (LevelKind.GROUND_FLOOR, LevelKind.UPPER_FLOOR):
        storey = repository.get_storey_reference(level.kind)
        labor = storey.gross_works.labor * ratio
        materials = storey.gross_works.materials * ratio
        equipment = storey.gross_works.utilities * ratio
        finishing = storey.finishing.total * ratio
        finishing_labor = reference.finishing_labor_shares.labor_of(storey.finishing) * ratio
        return _breakdown(
            labor=labor,
            materials=materials,
            equipment=equipment,
            finishing=finishing,
            finishing_labor=finishing_labor,
            categories=_positive_categories(
                (LABOR, labor),
                (GROSS_WORKS_MATERIALS, materials),
                (UTILITIES, equipment),
                (FINISHING, finishing),
            ),
        )

    msg = f"Cannot price level '{level.id}' of kind '{level.kind}'"
    raise CostEstimationError(msg)


# ---------------------------------------------------------------------------
# Flat unit-price mode
# ---------------------------------------------------------------------------


def flat_level_cost(level: Level, gross_surface: float, params: ProjectParameters) -> CostBreakdown:
    """Price a level from its gross surface and per-m² unit prices.

    The foundation ignores the level's own prices and is charged at
    ``foundation_flat_rate`` per m² of terrain. Unit prices carry no labor
    split, so gross works are reported under materials.
    """
    if level.kind == LevelKind.FOUNDATION:
        gross_works = params.terrain_area * params.foundation_flat_rate
        finishing = 0.0
    else:
        gross_works = gross_surface * level.gross_works_unit_price
        finishing = gross_surface * level.finishing_unit_price

    return _breakdown(
        materials=gross_works,
        finishing=finishing,
        categories=_positive_categories(
            (FLAT_GROSS_WORKS, gross_works),
            (FLAT_FINISHING, finishing),
        ),
    )
