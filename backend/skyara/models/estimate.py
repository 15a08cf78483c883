"""Estimate output models for the Skyara feasibility engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from skyara.models.enums import CalculationMode, LevelKind
from skyara.models.project import ProjectParameters


class CostCategory(BaseModel):
    """A named cost amount used for reporting."""

    name: str
    amount: float


class CostDetails(BaseModel):
    """Structured split of a level's cost.

    ``finishing_labor`` is the workmanship share already contained in
    ``finishing``; it is informational and never added on top.
    """

    labor: float = 0.0
    materials: float = 0.0
    equipment: float = 0.0
    finishing: float = 0.0
    finishing_labor: float = 0.0


class CostBreakdown(BaseModel):
    """Cost of one level, or of the whole project once aggregated."""

    gross_works_cost: float
    finishing_cost: float
    total: float
    details: CostDetails = Field(default_factory=CostDetails)
    categories: list[CostCategory] = Field(default_factory=list)


class LevelEstimate(BaseModel):
    """Surfaces, revenue and cost of a single level."""

    id: str
    name: str
    kind: LevelKind
    is_terrace: bool
    gross_surface: float
    sellable_surface: float
    revenue: float
    cost: CostBreakdown


class MaterialEstimate(BaseModel):
    """Informational quantities of the main structural materials."""

    steel_kg: float
    cement_bags: float
    bricks_units: float
    concrete_m3: float


class Totals(BaseModel):
    """Project-wide financial result."""

    gross_works_total: float
    finishing_total: float
    construction_cost: float
    connection_fees_in_construction: float
    land_cost: float
    misc_fees_percent_value: float
    fees_total: float
    total_investment: float
    total_surface: float
    total_sellable_surface: float
    total_revenue: float
    gross_profit: float
    state_tax: float
    net_profit: float
    margin_percentage: float
    roi_percentage: float
    cost_per_built_m2: float
    profit_per_sellable_m2: float
    materials: MaterialEstimate
    max_allowed_surface: float
    is_over_cos: bool
    labor_total: float | None = None
    materials_total: float | None = None


class EstimateMetadata(BaseModel):
    """Metadata about the estimation run."""

    engine_version: str
    cost_data_version: str
    calculation_mode: CalculationMode
    reference_surface: float | None = None


class ProjectEstimate(BaseModel):
    """Complete feasibility estimate for one project.

    Carries no timestamp: identical input always produces an identical
    estimate. Report dates are chosen by the report builder.
    """

    project_name: str
    calculation_mode: CalculationMode
    parameters: ProjectParameters
    levels: list[LevelEstimate]
    totals: Totals
    category_totals: list[CostCategory]
    metadata: EstimateMetadata

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with display strings for the dashboard cards."""
        from skyara.formatting import (
            format_currency,
            format_million_centimes,
            format_percent,
            format_surface,
        )

        t = self.totals
        return {
            "project_name": self.project_name,
            "calculation_mode": self.calculation_mode.value,
            "terrain_area_formatted": format_surface(self.parameters.terrain_area),
            "num_levels": len(self.levels),
            "total_investment_formatted": format_currency(t.total_investment),
            "total_investment_mcts": format_million_centimes(t.total_investment),
            "total_revenue_formatted": format_currency(t.total_revenue),
            "total_revenue_mcts": format_million_centimes(t.total_revenue),
            "net_profit_formatted": format_currency(t.net_profit),
            "net_profit_mcts": format_million_centimes(t.net_profit),
            "margin_formatted": format_percent(t.margin_percentage),
            "roi_formatted": format_percent(t.roi_percentage),
            "construction_cost_formatted": format_currency(t.construction_cost),
            "cost_per_built_m2_formatted": f"{t.cost_per_built_m2:,.0f} DH/m²",
            "sellable_surface_formatted": format_surface(t.total_sellable_surface),
            "max_allowed_surface_formatted": format_surface(t.max_allowed_surface),
            "is_over_cos": t.is_over_cos,
            "top_cost_categories": [
                {"name": c.name, "amount_formatted": format_currency(c.amount)}
                for c in sorted(self.category_totals, key=lambda c: c.amount, reverse=True)[:3]
            ],
        }

    def to_export_dict(self) -> dict[str, Any]:
        """Produce a detailed dict for report export."""
        return {
            "project_name": self.project_name,
            "calculation_mode": self.calculation_mode.value,
            "parameters": self.parameters.model_dump(mode="json"),
            "levels": [
                {
                    "id": lv.id,
                    "name": lv.name,
                    "kind": lv.kind.value,
                    "is_terrace": lv.is_terrace,
                    "gross_surface": lv.gross_surface,
                    "sellable_surface": lv.sellable_surface,
                    "revenue": lv.revenue,
                    "gross_works_cost": lv.cost.gross_works_cost,
                    "finishing_cost": lv.cost.finishing_cost,
                    "categories": [c.model_dump() for c in lv.cost.categories],
                }
                for lv in self.levels
            ],
            "totals": self.totals.model_dump(),
            "category_totals": [c.model_dump() for c in self.category_totals],
            "metadata": self.metadata.model_dump(mode="json"),
        }
