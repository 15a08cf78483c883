"""Schema for the detailed per-100 m² reference cost table.

Every amount is in DH for a ``reference_surface`` baseline and scales
linearly with the terrain area. The models are frozen: a loaded reference
is a read-only constant.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class FoundationReference(_FrozenModel):
    """Foundation line items."""

    labor: float = Field(ge=0)
    stone: float = Field(ge=0)
    gravel: float = Field(ge=0)
    sand: float = Field(ge=0)
    cement: float = Field(ge=0)
    rebar: float = Field(ge=0)
    misc: float = Field(ge=0)

    @property
    def materials(self) -> float:
        return self.stone + self.gravel + self.sand + self.cement + self.rebar + self.misc


class GrossWorksReference(_FrozenModel):
    """Structural line items of a habitable storey."""

    labor: float = Field(ge=0)
    bricks: float = Field(ge=0)
    gravel: float = Field(ge=0)
    sand: float = Field(ge=0)
    cement: float = Field(ge=0)
    rebar: float = Field(ge=0)
    flooring_base: float = Field(ge=0)
    utilities: float = Field(ge=0)

    @property
    def materials(self) -> float:
        return (
            self.bricks + self.gravel + self.sand + self.cement + self.rebar + self.flooring_base
        )

    @property
    def total(self) -> float:
        return self.labor + self.materials + self.utilities


class FinishingReference(_FrozenModel):
    """Finishing line items of a habitable storey."""

    plaster: float = Field(ge=0)
    tiling: float = Field(ge=0)
    marble: float = Field(ge=0)
    paint: float = Field(ge=0)
    aluminum: float = Field(ge=0)
    sanitary: float = Field(ge=0)
    wood: float = Field(ge=0)
    ironwork: float = Field(ge=0)
    kitchen: float = Field(ge=0)

    @property
    def total(self) -> float:
        return (
            self.plaster
            + self.tiling
            + self.marble
            + self.paint
            + self.aluminum
            + self.sanitary
            + self.wood
            + self.ironwork
            + self.kitchen
        )


class StoreyReference(_FrozenModel):
    """Gross works and finishing of a ground floor or an upper floor."""

    gross_works: GrossWorksReference
    finishing: FinishingReference


class TerraceReference(_FrozenModel):
    """Reduced line-item set of a roof terrace."""

    labor: float = Field(ge=0)
    bricks: float = Field(ge=0)
    cement: float = Field(ge=0)
    rebar: float = Field(ge=0)
    sand: float = Field(ge=0)
    tiling: float = Field(ge=0)
    paint: float = Field(ge=0)
    ironwork: float = Field(ge=0)

    @property
    def materials(self) -> float:
        return self.bricks + self.cement + self.rebar + self.sand

    @property
    def finishing(self) -> float:
        return self.tiling + self.paint + self.ironwork


class FinishingLaborShares(_FrozenModel):
    """Workmanship share of the finishing items that are mostly labor."""

    plaster: float = Field(default=0.4, ge=0, le=1)
    tiling: float = Field(default=0.4, ge=0, le=1)
    paint: float = Field(default=0.5, ge=0, le=1)

    def labor_of(self, finishing: FinishingReference) -> float:
        return (
            finishing.plaster * self.plaster
            + finishing.tiling * self.tiling
            + finishing.paint * self.paint
        )


class DetailedCostReference(_FrozenModel):
    """Complete reference cost table keyed by level kind."""

    version: str
    reference_surface: float = Field(default=100.0, gt=0)
    foundation: FoundationReference
    ground_floor: StoreyReference
    upper_floor: StoreyReference
    terrace: TerraceReference
    basement_multiplier: float = Field(default=1.2, gt=0)
    connection_fees_fixed: float = Field(default=0.0, ge=0)
    finishing_labor_shares: FinishingLaborShares = Field(default_factory=FinishingLaborShares)
