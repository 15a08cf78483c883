"""Feasibility report builder.

Turns a ProjectEstimate into report sections in a fixed order:

1. summary table (one row per level),
2. financial recap,
3. material estimate,
4. detailed breakdown per level, grouped by level kind.

Every number comes from the estimate; amounts are only rounded when
formatted here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from skyara.formatting import (
    format_count,
    format_currency,
    format_percent,
    format_surface,
    format_tonnes,
)
from skyara.models.enums import CalculationMode, LevelKind

if TYPE_CHECKING:
    from skyara.models.estimate import LevelEstimate, ProjectEstimate

REPORT_TITLE = "Skyara icl - Expertise Immobilière"
SUMMARY_HEADERS = ["Niveau", "Surface", "Gros Œuvre", "Finition", "Vendable", "Revenu Est."]
BREAKDOWN_HEADERS = ["Niveau", "Poste", "Montant"]
DISCLAIMER = (
    "Note: Ce devis est une estimation basée sur des standards moyens. "
    "Les prix réels peuvent varier."
)

# Group order and titles of the detailed breakdown
_GROUPS: list[tuple[str, str]] = [
    ("foundation", "Fondations"),
    ("basement", "Sous-sol"),
    ("ground_floor", "Rez-de-chaussée"),
    ("upper_floor", "Étages"),
    ("terrace", "Terrasse"),
]


@dataclass(frozen=True)
class ReportTable:
    headers: list[str]
    rows: list[list[str]] = field(default_factory=list)


@dataclass(frozen=True)
class ReportSection:
    """A titled report section holding label/value items, a table, or both."""

    title: str
    items: list[tuple[str, str]] = field(default_factory=list)
    table: ReportTable | None = None
    note: str | None = None


@dataclass(frozen=True)
class FeasibilityReport:
    title: str
    generated_on: date
    header_lines: list[str]
    sections: list[ReportSection]

    def to_text(self) -> str:
        """Render the report as plain text."""
        lines = [self.title, f"Date: {self.generated_on.strftime('%d/%m/%Y')}"]
        lines.extend(self.header_lines)
        for section in self.sections:
            lines.append("")
            lines.append(section.title)
            lines.append("-" * len(section.title))
            if section.table is not None:
                lines.append(" | ".join(section.table.headers))
                lines.extend(" | ".join(row) for row in section.table.rows)
            lines.extend(f"{label}: {value}" for label, value in section.items)
            if section.note:
                lines.append(section.note)
        return "\n".join(lines)


def _group_key(level: LevelEstimate) -> str:
    return "terrace" if level.is_terrace else level.kind.value


def _summary_section(estimate: ProjectEstimate) -> ReportSection:
    rows: list[list[str]] = []
    for level in estimate.levels:
        is_foundation = level.kind == LevelKind.FOUNDATION
        rows.append([
            level.name or level.id,
            format_surface(level.gross_surface),
            format_currency(level.cost.gross_works_cost),
            format_currency(level.cost.finishing_cost),
            "-" if is_foundation else format_surface(level.sellable_surface),
            "-" if is_foundation else format_currency(level.revenue),
        ])

    totals = estimate.totals
    if totals.connection_fees_in_construction > 0:
        rows.append([
            "Raccordement",
            "-",
            format_currency(totals.connection_fees_in_construction),
            format_currency(0),
            "-",
            "-",
        ])
    rows.append([
        "Total",
        "-",
        format_currency(totals.gross_works_total),
        format_currency(totals.finishing_total),
        format_surface(totals.total_sellable_surface),
        format_currency(totals.total_revenue),
    ])
    return ReportSection(
        title="Tableau récapitulatif",
        table=ReportTable(headers=list(SUMMARY_HEADERS), rows=rows),
    )


def _financial_section(estimate: ProjectEstimate) -> ReportSection:
    params = estimate.parameters
    totals = estimate.totals

    items = [
        ("Coût Terrain", format_currency(totals.land_cost)),
        ("Coût Construction", format_currency(totals.construction_cost)),
        ("Frais Notaire", format_currency(params.notary_fees)),
        (
            f"Frais Divers ({params.misc_fees_percent:g}%)",
            format_currency(totals.misc_fees_percent_value),
        ),
        ("Frais Divers (Fixe)", format_currency(params.misc_fees_fixed)),
    ]
    if estimate.calculation_mode == CalculationMode.FLAT and params.connection_fees > 0:
        items.append(("Frais de Raccordement", format_currency(params.connection_fees)))
    items.extend([
        ("INVESTISSEMENT TOTAL", format_currency(totals.total_investment)),
        ("CHIFFRE D'AFFAIRES", format_currency(totals.total_revenue)),
        ("Bénéfice Brut", format_currency(totals.gross_profit)),
        (f"Taxe État ({params.state_tax_percent:g}%)", format_currency(totals.state_tax)),
        ("BÉNÉFICE NET", format_currency(totals.net_profit)),
        ("Marge Nette", format_percent(totals.margin_percentage)),
        ("ROI Net", format_percent(totals.roi_percentage)),
    ])
    return ReportSection(title="Récapitulatif Financier Global", items=items)


def _materials_section(estimate: ProjectEstimate) -> ReportSection:
    materials = estimate.totals.materials
    return ReportSection(
        title="Estimation des Matériaux Principaux",
        items=[
            ("Acier (Fer)", format_tonnes(materials.steel_kg)),
            ("Ciment", format_count(materials.cement_bags, "Sacs")),
            ("Briques", format_count(materials.bricks_units, "Unités")),
            ("Béton", format_count(materials.concrete_m3, "m³")),
        ],
        note=DISCLAIMER,
    )


def _breakdown_section(estimate: ProjectEstimate) -> ReportSection:
    rows: list[list[str]] = []
    for key, group_title in _GROUPS:
        group = [level for level in estimate.levels if _group_key(level) == key]
        if not group:
            continue
        rows.append([group_title.upper(), "", ""])
        for level in group:
            name = level.name or level.id
            rows.extend(
                [name, category.name, format_currency(category.amount)]
                for category in level.cost.categories
            )
            rows.append([name, "Total niveau", format_currency(level.cost.total)])
    return ReportSection(
        title="Détail par niveau",
        table=ReportTable(headers=list(BREAKDOWN_HEADERS), rows=rows),
    )


def build_report(estimate: ProjectEstimate, generated_on: date | None = None) -> FeasibilityReport:
    """Build the feasibility report of an estimate.

    Args:
        estimate: The estimate to report on.
        generated_on: Date printed on the report; defaults to today.
    """
    params = estimate.parameters
    header_lines = [
        f"Projet: {estimate.project_name}",
        (
            f"Terrain: {params.terrain_area:g} m² | Façades: {params.facade_count} "
            f"| COS: {params.cos:g}"
        ),
        (
            f"Prix Terrain: {params.land_price_per_m2:,.0f} DH/m² "
            f"| Prix Vente: {params.sale_price_per_m2:,.0f} DH/m²"
        ),
    ]
    if estimate.totals.is_over_cos:
        header_lines.append(
            f"Attention: surface bâtie {format_surface(estimate.totals.total_surface)} "
            f"> surface autorisée {format_surface(estimate.totals.max_allowed_surface)}"
        )

    return FeasibilityReport(
        title=REPORT_TITLE,
        generated_on=generated_on or date.today(),
        header_lines=header_lines,
        sections=[
            _summary_section(estimate),
            _financial_section(estimate),
            _materials_section(estimate),
            _breakdown_section(estimate),
        ],
    )
