"""Project input models for the Skyara feasibility engine."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, model_validator

from skyara.models.enums import CalculationMode, LevelKind


class Level(BaseModel):
    """One structural tier of the building.

    ``declared_surface`` is only a seed value coming from the input form; the
    surface deriver always recomputes the built surface from the terrain.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    kind: LevelKind
    name: str = ""
    is_terrace: bool = False
    declared_surface: float = Field(default=0.0, ge=0)
    gross_works_unit_price: float = Field(default=1100.0, ge=0)
    finishing_unit_price: float = Field(default=1100.0, ge=0)

    @model_validator(mode="after")
    def terrace_must_be_upper_floor(self) -> Level:
        if self.is_terrace and self.kind != LevelKind.UPPER_FLOOR:
            msg = f"Level '{self.id}': only upper floors can be flagged as terrace, got {self.kind}"
            raise ValueError(msg)
        return self


class FixedDeduction(BaseModel):
    """Stairwell and wall deductions as fixed m² amounts per level."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["fixed_m2"] = "fixed_m2"
    stairs_m2: float = Field(default=12.0, ge=0)
    walls_m2: float = Field(default=8.0, ge=0)


class PercentDeduction(BaseModel):
    """Stairwell and wall deductions as percentages of the gross surface."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["percent"] = "percent"
    stairs_percent: float = Field(ge=0, le=100)
    walls_percent: float = Field(ge=0, le=100)

    @model_validator(mode="after")
    def total_must_not_exceed_100(self) -> PercentDeduction:
        if self.stairs_percent + self.walls_percent > 100:
            msg = (
                "stairs_percent + walls_percent must not exceed 100, "
                f"got {self.stairs_percent} + {self.walls_percent}"
            )
            raise ValueError(msg)
        return self

    @property
    def total_percent(self) -> float:
        return self.stairs_percent + self.walls_percent


def _deduction_mode(value: Any) -> str:
    # Payloads without a mode are fixed-m² deductions
    if isinstance(value, dict):
        return value.get("mode", "fixed_m2")
    return getattr(value, "mode", "fixed_m2")


Deduction = Annotated[
    Annotated[FixedDeduction, Tag("fixed_m2")] | Annotated[PercentDeduction, Tag("percent")],
    Discriminator(_deduction_mode),
]


class ProjectParameters(BaseModel):
    """Project-wide configuration, immutable for one calculation.

    Defaults reproduce a typical R+2 project on a 100 m² parcel in the
    Moroccan market (prices in DH).
    """

    model_config = ConfigDict(frozen=True)

    # Terrain and regulation
    terrain_area: float = Field(default=100.0, ge=0)
    facade_count: Literal[1, 2] = 1
    cos: float = Field(default=2.1, gt=0)

    # Surface rules (m²)
    overhang_surface: float = Field(default=6.5, ge=0)
    facade_deduction_1: float = Field(default=16.0, ge=0)
    facade_deduction_2: float = Field(default=9.0, ge=0)
    deduction: Deduction = Field(default_factory=FixedDeduction)

    # Prices (DH/m²)
    calculation_mode: CalculationMode = CalculationMode.DETAILED
    land_price_per_m2: float = Field(default=5000.0, ge=0)
    sale_price_per_m2: float = Field(default=12000.0, ge=0)
    foundation_flat_rate: float = Field(default=500.0, ge=0)

    # Fees and taxes
    notary_fees: float = Field(default=50_000.0, ge=0)
    misc_fees_percent: float = Field(default=5.0, ge=0, le=100)
    misc_fees_fixed: float = Field(default=5000.0, ge=0)
    connection_fees: float = Field(default=0.0, ge=0)
    state_tax_percent: float = Field(default=20.0, ge=0, le=100)

    @property
    def facade_deduction(self) -> float:
        """Deduction applied to RDC and floors for the configured façade count."""
        return self.facade_deduction_1 if self.facade_count == 1 else self.facade_deduction_2

    @property
    def max_allowed_surface(self) -> float:
        return self.terrain_area * self.cos
