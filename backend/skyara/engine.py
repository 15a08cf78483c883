"""Core feasibility engine for the Skyara project estimator.

The FeasibilityEngine turns a project snapshot into a ProjectEstimate:

1. **Validation** — the level list must contain a foundation and a ground
   floor, with unique ids.
2. **Surface derivation** — gross and sellable surface of every level from
   the terrain area, façade count and deduction rules.
3. **Level pricing** — each level is priced on its own, either by scaling the
   reference cost table (detailed mode) or from per-m² unit prices (flat
   mode).
4. **Aggregation** — construction cost, land cost, fees, investment,
   revenue, state tax, net profit, margin and the informational material
   quantities.

The engine holds no mutable state: calling ``estimate`` twice with the same
input returns equal estimates. Amounts are never rounded here; rounding is a
presentation concern.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING

from skyara.costing import CONNECTION, detailed_level_cost, flat_level_cost
from skyara.data.material_ratios import (
    BRICKS_PER_M2,
    CEMENT_BAGS_PER_M2,
    CONCRETE_M3_PER_M2,
    STEEL_KG_PER_M2,
)
from skyara.exceptions import ConfigurationError
from skyara.models.enums import CalculationMode, LevelKind
from skyara.models.estimate import (
    CostCategory,
    EstimateMetadata,
    LevelEstimate,
    MaterialEstimate,
    ProjectEstimate,
    Totals,
)
from skyara.surfaces import derive_surfaces

if TYPE_CHECKING:
    from collections.abc import Iterable

    from skyara.data.repository import CostReferenceRepository
    from skyara.models.estimate import CostBreakdown
    from skyara.models.project import Level, ProjectParameters
    from skyara.surfaces import LevelSurface

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"

# Kinds whose built surface counts toward the COS check and material quantities
_HABITABLE_KINDS = frozenset({LevelKind.GROUND_FLOOR, LevelKind.UPPER_FLOOR})


class FeasibilityEngine:
    """Converts project parameters and levels into a ProjectEstimate.

    Args:
        repository: The cost reference repository used in detailed mode.

    Example::

        from skyara.data.repository import CostReferenceRepository
        from skyara.data.seed import DEFAULT_COST_REFERENCE

        engine = FeasibilityEngine(CostReferenceRepository(DEFAULT_COST_REFERENCE))
        estimate = engine.estimate(params, levels, "Lotissement Al Amal")
    """

    def __init__(self, repository: CostReferenceRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> CostReferenceRepository:
        return self._repository

    def estimate(
        self,
        params: ProjectParameters,
        levels: Iterable[Level],
        project_name: str = "Projet",
    ) -> ProjectEstimate:
        """Produce the feasibility estimate of a project.

        Args:
            params: Immutable project-wide parameters.
            levels: Building levels in insertion order.
            project_name: A human-readable name for the project.

        Returns:
            A ProjectEstimate with per-level surfaces and costs and the
            aggregated totals.

        Raises:
            ConfigurationError: If the level list breaks the input contract.
        """
        levels = list(levels)
        self._validate_levels(levels)

        surfaces = derive_surfaces(params, levels)
        level_estimates = [
            self._estimate_level(params, level, surface)
            for level, surface in zip(levels, surfaces, strict=True)
        ]

        totals = self._aggregate(params, level_estimates)
        category_totals = self._aggregate_categories(params, level_estimates)

        if totals.is_over_cos:
            logger.info(
                "Project '%s' exceeds COS: %.1f m² built > %.1f m² allowed",
                project_name,
                totals.total_surface,
                totals.max_allowed_surface,
            )
        logger.info(
            "Estimated '%s' (%s): investment=%.0f revenue=%.0f net_profit=%.0f",
            project_name,
            params.calculation_mode.value,
            totals.total_investment,
            totals.total_revenue,
            totals.net_profit,
        )

        detailed = params.calculation_mode == CalculationMode.DETAILED
        metadata = EstimateMetadata(
            engine_version=ENGINE_VERSION,
            cost_data_version=self._repository.version if detailed else "unit-prices",
            calculation_mode=params.calculation_mode,
            reference_surface=self._repository.reference.reference_surface if detailed else None,
        )

        return ProjectEstimate(
            project_name=project_name,
            calculation_mode=params.calculation_mode,
            parameters=params,
            levels=level_estimates,
            totals=totals,
            category_totals=category_totals,
            metadata=metadata,
        )

    @staticmethod
    def _validate_levels(levels: list[Level]) -> None:
        kinds = {level.kind for level in levels}
        if LevelKind.FOUNDATION not in kinds:
            msg = "A project needs at least one foundation level"
            raise ConfigurationError(msg)
        if LevelKind.GROUND_FLOOR not in kinds:
            msg = "A project needs at least one ground floor (RDC) level"
            raise ConfigurationError(msg)

        counts = Counter(level.id for level in levels)
        duplicates = sorted(level_id for level_id, n in counts.items() if n > 1)
        if duplicates:
            msg = f"Level ids must be unique, duplicated: {', '.join(duplicates)}"
            raise ConfigurationError(msg)

    def _price_level(
        self,
        params: ProjectParameters,
        level: Level,
        surface: LevelSurface,
    ) -> CostBreakdown:
        if params.calculation_mode == CalculationMode.DETAILED:
            return detailed_level_cost(level, params.terrain_area, self._repository)
        return flat_level_cost(level, surface.gross_surface, params)

    def _estimate_level(
        self,
        params: ProjectParameters,
        level: Level,
        surface: LevelSurface,
    ) -> LevelEstimate:
        cost = self._price_level(params, level, surface)
        logger.debug(
            "Level %s (%s): gross=%.2f m² sellable=%.2f m² gros_oeuvre=%.2f finition=%.2f",
            level.id,
            level.kind.value,
            surface.gross_surface,
            surface.sellable_surface,
            cost.gross_works_cost,
            cost.finishing_cost,
        )
        return LevelEstimate(
            id=level.id,
            name=level.name,
            kind=level.kind,
            is_terrace=level.is_terrace,
            gross_surface=surface.gross_surface,
            sellable_surface=surface.sellable_surface,
            revenue=surface.sellable_surface * params.sale_price_per_m2,
            cost=cost,
        )

    def _connection_in_construction(self, params: ProjectParameters) -> float:
        """Hookup fee folded into gross works (detailed mode only)."""
        if params.calculation_mode == CalculationMode.DETAILED:
            return self._repository.reference.connection_fees_fixed
        return 0.0

    def _aggregate(
        self,
        params: ProjectParameters,
        levels: list[LevelEstimate],
    ) -> Totals:
        """Reduce the per-level estimates into project totals."""
        connection_in_construction = self._connection_in_construction(params)
        # Flat mode charges the caller's hookup fee on the investment instead
        connection_in_investment = (
            params.connection_fees if params.calculation_mode == CalculationMode.FLAT else 0.0
        )

        gross_works_total = sum(lv.cost.gross_works_cost for lv in levels)
        gross_works_total += connection_in_construction
        finishing_total = sum(lv.cost.finishing_cost for lv in levels)
        construction_cost = gross_works_total + finishing_total

        land_cost = params.terrain_area * params.land_price_per_m2
        misc_fees_percent_value = construction_cost * params.misc_fees_percent / 100
        fees_total = (
            params.notary_fees
            + misc_fees_percent_value
            + params.misc_fees_fixed
            + connection_in_investment
        )
        total_investment = (
            land_cost
            + params.notary_fees
            + construction_cost
            + misc_fees_percent_value
            + params.misc_fees_fixed
            + connection_in_investment
        )

        total_sellable_surface = sum(lv.sellable_surface for lv in levels)
        total_revenue = total_sellable_surface * params.sale_price_per_m2
        gross_profit = total_revenue - total_investment
        # Never taxed on a loss
        state_tax = gross_profit * params.state_tax_percent / 100 if gross_profit > 0 else 0.0
        net_profit = gross_profit - state_tax

        total_surface = sum(
            lv.gross_surface
            for lv in levels
            if lv.kind in _HABITABLE_KINDS and not lv.is_terrace
        )
        max_allowed_surface = params.max_allowed_surface

        labor_total: float | None = None
        materials_total: float | None = None
        if params.calculation_mode == CalculationMode.DETAILED:
            labor_total = sum(lv.cost.details.labor + lv.cost.details.finishing_labor for lv in levels)
            materials_total = construction_cost - labor_total - connection_in_construction

        return Totals(
            gross_works_total=gross_works_total,
            finishing_total=finishing_total,
            construction_cost=construction_cost,
            connection_fees_in_construction=connection_in_construction,
            land_cost=land_cost,
            misc_fees_percent_value=misc_fees_percent_value,
            fees_total=fees_total,
            total_investment=total_investment,
            total_surface=total_surface,
            total_sellable_surface=total_sellable_surface,
            total_revenue=total_revenue,
            gross_profit=gross_profit,
            state_tax=state_tax,
            net_profit=net_profit,
            margin_percentage=_percent(net_profit, total_revenue),
            roi_percentage=_percent(net_profit, total_investment),
            cost_per_built_m2=_safe_ratio(construction_cost, total_surface),
            profit_per_sellable_m2=_safe_ratio(net_profit, total_sellable_surface),
            materials=MaterialEstimate(
                steel_kg=total_surface * STEEL_KG_PER_M2,
                cement_bags=total_surface * CEMENT_BAGS_PER_M2,
                bricks_units=total_surface * BRICKS_PER_M2,
                concrete_m3=total_surface * CONCRETE_M3_PER_M2,
            ),
            max_allowed_surface=max_allowed_surface,
            is_over_cos=total_surface > max_allowed_surface,
            labor_total=labor_total,
            materials_total=materials_total,
        )

    def _aggregate_categories(
        self,
        params: ProjectParameters,
        levels: list[LevelEstimate],
    ) -> list[CostCategory]:
        """Sum reporting categories across levels, in first-seen order."""
        amounts: dict[str, float] = {}
        for lv in levels:
            for category in lv.cost.categories:
                amounts[category.name] = amounts.get(category.name, 0.0) + category.amount

        connection = self._connection_in_construction(params)
        if connection > 0:
            amounts[CONNECTION] = connection

        return [CostCategory(name=name, amount=amount) for name, amount in amounts.items()]


def _safe_ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0.0


def _percent(numerator: float, denominator: float) -> float:
    return numerator / denominator * 100 if denominator > 0 else 0.0
